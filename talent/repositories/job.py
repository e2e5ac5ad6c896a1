"""Job persistence and substring search."""

from collections.abc import Sequence

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from talent.models import Company, Job, Recruiter


class JobRepository:
    """Lookup, substring search and CRUD for jobs.

    All ``*_containing`` searches are case-insensitive and escape LIKE
    wildcards, so ``"java"`` matches ``"Java Developer"`` and ``"50%"``
    only matches a literal percent sign.
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get(self, job_id: int) -> Job | None:
        result = await self.db.execute(select(Job).where(Job.id == job_id))
        return result.scalar_one_or_none()

    async def exists(self, job_id: int) -> bool:
        result = await self.db.execute(select(Job.id).where(Job.id == job_id))
        return result.first() is not None

    async def find_all(self) -> Sequence[Job]:
        result = await self.db.execute(select(Job).order_by(Job.id))
        return result.scalars().all()

    async def find_by_title_containing(self, title: str) -> Sequence[Job]:
        query = (
            select(Job)
            .where(Job.title.icontains(title, autoescape=True))
            .order_by(Job.id)
        )
        result = await self.db.execute(query)
        return result.scalars().all()

    async def find_by_recruiter_name_containing(self, name: str) -> Sequence[Job]:
        query = (
            select(Job)
            .where(Job.recruiter.has(Recruiter.name.icontains(name, autoescape=True)))
            .order_by(Job.id)
        )
        result = await self.db.execute(query)
        return result.scalars().all()

    async def find_by_company_name_containing(self, name: str) -> Sequence[Job]:
        query = (
            select(Job)
            .where(Job.company.has(Company.name.icontains(name, autoescape=True)))
            .order_by(Job.id)
        )
        result = await self.db.execute(query)
        return result.scalars().all()

    async def save(self, job: Job) -> Job:
        """Stage the job and flush so it gets an id."""
        self.db.add(job)
        await self.db.flush()
        return job

    async def delete_by_id(self, job_id: int) -> None:
        """Delete a job row; its company and recruiter are untouched."""
        await self.db.execute(delete(Job).where(Job.id == job_id))
