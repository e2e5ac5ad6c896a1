"""Job model for open positions."""

from typing import TYPE_CHECKING, Optional

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, TimestampMixin

if TYPE_CHECKING:
    from .company import Company
    from .recruiter import Recruiter


class Job(Base, TimestampMixin):
    """Open position posted by a recruiter on behalf of a company."""

    __tablename__ = "jobs"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)

    # Job Information
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    salary: Mapped[str] = mapped_column(String(32), nullable=False)
    location: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    company_id: Mapped[int] = mapped_column(
        ForeignKey("companies.id"),
        nullable=False,
        index=True,
    )
    recruiter_id: Mapped[int] = mapped_column(
        ForeignKey("recruiters.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    # Relationships
    company: Mapped["Company"] = relationship(back_populates="jobs", lazy="selectin")
    recruiter: Mapped["Recruiter"] = relationship(back_populates="jobs", lazy="selectin")

    def __repr__(self) -> str:
        return f"<Job(id={self.id}, title='{self.title}', salary='{self.salary}')>"
