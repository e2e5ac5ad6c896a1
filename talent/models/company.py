"""Company model and the company/recruiter association table."""

from typing import TYPE_CHECKING, List, Set

from sqlalchemy import Column, ForeignKey, String, Table
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, TimestampMixin

if TYPE_CHECKING:
    from .job import Job
    from .recruiter import Recruiter


company_recruiter = Table(
    "company_recruiter",
    Base.metadata,
    Column(
        "company_id",
        ForeignKey("companies.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "recruiter_id",
        ForeignKey("recruiters.id", ondelete="CASCADE"),
        primary_key=True,
    ),
)


class Company(Base, TimestampMixin):
    """Hiring company, identified naturally by its unique name."""

    __tablename__ = "companies"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
        index=True,
    )

    # Owning side of the many-to-many with Recruiter
    recruiters: Mapped[Set["Recruiter"]] = relationship(
        secondary=company_recruiter,
        back_populates="companies",
        collection_class=set,
        lazy="selectin",
    )

    # Jobs are attached through Job.company; no cascade from the company side
    jobs: Mapped[List["Job"]] = relationship(
        back_populates="company",
        order_by="Job.id",
        lazy="selectin",
    )

    def add_recruiter(self, recruiter: "Recruiter") -> None:
        """Associate a recruiter with this company on both sides.

        Adding a pair that is already associated is a no-op. Both
        ``self.recruiters`` and ``recruiter.companies`` must be loaded.
        """
        if recruiter not in self.recruiters:
            self.recruiters.add(recruiter)
        if self not in recruiter.companies:
            recruiter.companies.add(self)

    def remove_recruiter(self, recruiter: "Recruiter") -> None:
        """Dissociate a recruiter from this company on both sides.

        Removing a pair that is not associated is a no-op.
        """
        self.recruiters.discard(recruiter)
        recruiter.companies.discard(self)

    def __repr__(self) -> str:
        return f"<Company(id={self.id}, name='{self.name}')>"
