"""Uniform error envelope returned by every exception handler."""

from datetime import datetime

from pydantic import BaseModel


class ErrorDetails(BaseModel):
    """Error response body: when, what, and which request."""

    timestamp: datetime
    message: str
    details: str
