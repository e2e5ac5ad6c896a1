"""Database models for the Talent API."""

from .base import Base
from .company import Company, company_recruiter
from .job import Job
from .recruiter import Recruiter

__all__ = [
    "Base",
    "Company",
    "Recruiter",
    "Job",
    "company_recruiter",
]
