"""Field constraints shared by create payloads and partial updates."""

import re

from email_validator import EmailNotValidError, validate_email
from pydantic_core import PydanticCustomError

TITLE_MIN_LENGTH = 2
TITLE_MESSAGE = "Title should have at least 2 characters"
SALARY_PATTERN = re.compile(r"[0-9]+K")
SALARY_MESSAGE = "Salary should be in the format 'numK'"
EMAIL_MESSAGE = "Invalid email address"


def check_title(value: str) -> str:
    if len(value) < TITLE_MIN_LENGTH:
        raise PydanticCustomError("title_too_short", TITLE_MESSAGE)
    return value


def check_salary(value: str) -> str:
    if not SALARY_PATTERN.fullmatch(value):
        raise PydanticCustomError("salary_format", SALARY_MESSAGE)
    return value


def check_email(value: str) -> str:
    """Validate email syntax only; the value is stored exactly as given."""
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        raise PydanticCustomError("email_format", EMAIL_MESSAGE) from None
    return value


def first_error_message(exc) -> str:
    """Message of the first failing field of a pydantic or request validation error."""
    errors = exc.errors()
    if not errors:
        return str(exc)
    return errors[0]["msg"]
