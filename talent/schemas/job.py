"""Job-related Pydantic schemas.

This module defines request and response schemas for Job endpoints: the
creation payload with embedded company/recruiter, the partial-update patch,
and the entity and DTO projections.
"""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, Field, ValidationError, field_validator

from talent.exceptions import ValidationFailure
from talent.schemas.company import CompanyName, CompanyResponse
from talent.schemas.links import RepresentationModel
from talent.schemas.recruiter import RecruiterContact, RecruiterCreate, RecruiterRef
from talent.schemas.validators import check_salary, check_title, first_error_message


class JobCreate(BaseModel):
    """Schema for creating a new job.

    Example:
        {
            "title": "BackEnd Developer",
            "salary": "28K",
            "location": "Tel-Aviv",
            "company": {"name": "Facebook"},
            "recruiter": {"name": "Zlatan Ibrahimovic", "email": "zlatan@walla.com"}
        }
    """

    title: str = Field(..., max_length=255)
    salary: str = Field(..., max_length=32)
    location: str | None = Field(None, max_length=255)
    company: CompanyName
    recruiter: RecruiterCreate

    @field_validator("title")
    @classmethod
    def _valid_title(cls, value: str) -> str:
        return check_title(value)

    @field_validator("salary")
    @classmethod
    def _valid_salary(cls, value: str) -> str:
        return check_salary(value)


class JobPatch(BaseModel):
    """Partial update limited to title, salary and location."""

    title: str | None = Field(None, max_length=255)
    salary: str | None = Field(None, max_length=32)
    location: str | None = Field(None, max_length=255)

    @field_validator("title")
    @classmethod
    def _valid_title(cls, value: str | None) -> str | None:
        return check_title(value) if value is not None else value

    @field_validator("salary")
    @classmethod
    def _valid_salary(cls, value: str | None) -> str | None:
        return check_salary(value) if value is not None else value

    @classmethod
    def from_field_map(cls, data: Mapping[str, Any]) -> "JobPatch":
        """Build a patch from an arbitrary field map.

        Unknown keys and non-string values are dropped silently.

        Raises:
            ValidationFailure: If a recognized string value is invalid
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

    def apply_to(self, job) -> list[str]:
        """Set every patched field on the job; returns the field names."""
        changes = self.model_dump(exclude_unset=True)
        for field, value in changes.items():
            setattr(job, field, value)
        return list(changes)


class JobResponse(RepresentationModel):
    """Job entity projection with ids and nested entities."""

    id: int
    title: str
    salary: str
    location: str | None = None
    company: CompanyResponse
    recruiter: RecruiterRef

    @classmethod
    def from_orm_model(cls, job, links) -> "JobResponse":
        return cls(
            id=job.id,
            title=job.title,
            salary=job.salary,
            location=job.location,
            company=CompanyResponse.model_validate(job.company),
            recruiter=RecruiterRef.model_validate(job.recruiter),
            links=links,
        )


class JobInfo(RepresentationModel):
    """Job DTO exposing only the client-facing fields."""

    title: str
    salary: str
    company: CompanyName
    recruiter: RecruiterContact
    location: str | None = None

    @classmethod
    def from_orm_model(cls, job, links) -> "JobInfo":
        """Create the DTO from a Job ORM instance.

        Args:
            job: Job with company and recruiter loaded
            links: Hypermedia links for the representation

        Returns:
            JobInfo instance
        """
        return cls(
            title=job.title,
            salary=job.salary,
            company=CompanyName(name=job.company.name),
            recruiter=RecruiterContact(name=job.recruiter.name, email=job.recruiter.email),
            location=job.location,
            links=links,
        )
