"""Recruiter persistence."""

from collections.abc import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from talent.models import Company, Recruiter


class RecruiterRepository:
    """Lookup, substring search and CRUD for recruiters."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get(self, recruiter_id: int) -> Recruiter | None:
        result = await self.db.execute(select(Recruiter).where(Recruiter.id == recruiter_id))
        return result.scalar_one_or_none()

    async def find_all(self) -> Sequence[Recruiter]:
        result = await self.db.execute(select(Recruiter).order_by(Recruiter.id))
        return result.scalars().all()

    async def find_by_email(self, email: str) -> Recruiter | None:
        """Exact email match. Returns the oldest row if legacy duplicates exist."""
        result = await self.db.execute(
            select(Recruiter).where(Recruiter.email == email).order_by(Recruiter.id)
        )
        return result.scalars().first()

    async def find_by_company_name_containing(self, name: str) -> Sequence[Recruiter]:
        """Recruiters linked to any company whose name contains ``name``.

        Matching is case-insensitive; ``%`` and ``_`` are matched literally.
        """
        query = (
            select(Recruiter)
            .where(Recruiter.companies.any(Company.name.icontains(name, autoescape=True)))
            .order_by(Recruiter.id)
        )
        result = await self.db.execute(query)
        return result.scalars().all()

    async def save(self, recruiter: Recruiter) -> Recruiter:
        """Stage the recruiter and flush so it gets an id."""
        self.db.add(recruiter)
        await self.db.flush()
        return recruiter

    async def delete(self, recruiter: Recruiter) -> None:
        """Delete the recruiter; the ORM cascade removes its jobs."""
        await self.db.delete(recruiter)
        await self.db.flush()
