"""Recruiter request/response schemas.

Entity projections (``RecruiterResponse``) expose the surrogate id; info
projections (``RecruiterInfo``) hide it and add the recruiter's companies
and jobs.
"""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, Field, ValidationError, field_validator

from talent.exceptions import ValidationFailure
from talent.schemas.company import CompanyName
from talent.schemas.links import RepresentationModel
from talent.schemas.validators import check_email, first_error_message


class RecruiterCreate(BaseModel):
    """Schema for creating a recruiter (also embedded in job payloads)."""

    name: str = Field(..., max_length=255)
    email: str = Field(..., max_length=320)

    @field_validator("email")
    @classmethod
    def _valid_email(cls, value: str) -> str:
        return check_email(value)


class RecruiterPatch(BaseModel):
    """Partial update limited to the recognized recruiter fields."""

    name: str | None = Field(None, max_length=255)
    email: str | None = Field(None, max_length=320)

    @field_validator("email")
    @classmethod
    def _valid_email(cls, value: str | None) -> str | None:
        return check_email(value) if value is not None else value

    @classmethod
    def from_field_map(cls, data: Mapping[str, Any]) -> "RecruiterPatch":
        """Build a patch from an arbitrary field map.

        Unknown keys and non-string values are dropped silently. Recognized
        string values must satisfy the create-time constraints.

        Raises:
            ValidationFailure: If a recognized value is invalid
        """
        recognized = {
            field: value
            for field, value in data.items()
            if field in cls.model_fields and isinstance(value, str)
        }
        try:
            return cls.model_validate(recognized)
        except ValidationError as e:
            raise ValidationFailure(first_error_message(e)) from e

    def apply_to(self, recruiter) -> list[str]:
        """Set every patched field on the recruiter; returns the field names."""
        changes = self.model_dump(exclude_unset=True)
        for field, value in changes.items():
            setattr(recruiter, field, value)
        return list(changes)


class RecruiterContact(BaseModel):
    """Recruiter as embedded in a job DTO."""

    name: str
    email: str

    class Config:
        from_attributes = True


class RecruiterRef(RecruiterContact):
    """Recruiter as embedded in a job entity projection."""

    id: int


class RecruiterResponse(RepresentationModel):
    """Recruiter entity projection."""

    id: int
    name: str
    email: str

    @classmethod
    def from_orm_model(cls, recruiter, links) -> "RecruiterResponse":
        return cls(id=recruiter.id, name=recruiter.name, email=recruiter.email, links=links)


class RecruiterJobInfo(BaseModel):
    """A job listed under a recruiter DTO."""

    title: str
    salary: str
    location: str | None = None
    company: CompanyName


class RecruiterInfo(RepresentationModel):
    """Recruiter DTO: no surrogate ids, companies and jobs by value."""

    name: str
    email: str
    companies: list[CompanyName]
    jobs: list[RecruiterJobInfo]

    @classmethod
    def from_orm_model(cls, recruiter, links) -> "RecruiterInfo":
        """Create the DTO from a Recruiter with companies and jobs loaded.

        Args:
            recruiter: Recruiter ORM instance
            links: Hypermedia links for the representation

        Returns:
            RecruiterInfo instance
        """
        return cls(
            name=recruiter.name,
            email=recruiter.email,
            companies=[
                CompanyName(name=company.name)
                for company in sorted(recruiter.companies, key=lambda c: c.name)
            ],
            jobs=[
                RecruiterJobInfo(
                    title=job.title,
                    salary=job.salary,
                    location=job.location,
                    company=CompanyName(name=job.company.name),
                )
                for job in recruiter.jobs
            ],
            links=links,
        )
