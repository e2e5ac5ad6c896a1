"""Repositories wrapping the async session, one per entity."""

from .company import CompanyRepository
from .job import JobRepository
from .recruiter import RecruiterRepository

__all__ = [
    "CompanyRepository",
    "JobRepository",
    "RecruiterRepository",
]
