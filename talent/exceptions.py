"""Exception hierarchy raised by repositories, services and routers.

Each exception carries the HTTP status it maps to; the handlers registered
in ``main.py`` turn them into the uniform error envelope.
"""

from fastapi import status


class TalentError(Exception):
    """Base application exception."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(TalentError):
    """Raised when a requested resource does not exist."""

    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, message: str):
        super().__init__(f"Error: {message} was not found!")


class JobNotFoundError(NotFoundError):
    """Raised when a job id is absent."""


class RecruiterNotFoundError(NotFoundError):
    """Raised when a recruiter id is absent."""


class ConflictError(TalentError):
    """Raised when a business rule forbids a duplicate."""

    status_code = status.HTTP_409_CONFLICT


class ValidationFailure(TalentError):
    """Raised when a field value violates its constraint."""

    status_code = status.HTTP_400_BAD_REQUEST


class ExternalServiceError(TalentError):
    """Raised when an upstream HTTP dependency fails."""

    status_code = status.HTTP_502_BAD_GATEWAY


class RandomUserError(ExternalServiceError):
    """The random user API failed or returned no usable identity."""


class RandomUserTimeoutError(RandomUserError):
    """The random user API did not answer in time."""

    status_code = status.HTTP_504_GATEWAY_TIMEOUT


__all__ = [
    "ConflictError",
    "ExternalServiceError",
    "JobNotFoundError",
    "NotFoundError",
    "RandomUserError",
    "RandomUserTimeoutError",
    "RecruiterNotFoundError",
    "TalentError",
    "ValidationFailure",
]
