"""Recruiter model."""

from typing import TYPE_CHECKING, List, Set

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, TimestampMixin
from .company import company_recruiter

if TYPE_CHECKING:
    from .company import Company
    from .job import Job


class Recruiter(Base, TimestampMixin):
    """Recruiter, identified naturally by email.

    Email uniqueness is enforced by the service layer rather than the schema.
    """

    __tablename__ = "recruiters"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(320), nullable=False, index=True)

    # Inverse side of Company.recruiters
    companies: Mapped[Set["Company"]] = relationship(
        secondary=company_recruiter,
        back_populates="recruiters",
        collection_class=set,
        lazy="selectin",
    )

    # Deleting a recruiter deletes every job it posted
    jobs: Mapped[List["Job"]] = relationship(
        back_populates="recruiter",
        cascade="all, delete-orphan",
        order_by="Job.id",
        lazy="selectin",
    )

    def add_company(self, company: "Company") -> None:
        """Mirror of Company.add_recruiter."""
        company.add_recruiter(self)

    def remove_company(self, company: "Company") -> None:
        """Mirror of Company.remove_recruiter."""
        company.remove_recruiter(self)

    def __repr__(self) -> str:
        return f"<Recruiter(id={self.id}, name='{self.name}', email='{self.email}')>"
