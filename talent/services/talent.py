"""Talent service facade handed to routers."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from talent.database import get_db
from talent.models import Company, Recruiter
from talent.repositories import CompanyRepository, JobRepository, RecruiterRepository


class TalentService:
    """Bundles the three repositories over a single request session."""

    def __init__(self, db: AsyncSession):
        self.db = db
        self.jobs = JobRepository(db)
        self.companies = CompanyRepository(db)
        self.recruiters = RecruiterRepository(db)

    async def recruiter_exists(self, email: str) -> bool:
        return await self.recruiters.find_by_email(email) is not None

    async def save_company(self, company: Company) -> Company:
        return await self.companies.save(company)

    async def save_recruiter(self, recruiter: Recruiter) -> Recruiter:
        return await self.recruiters.save(recruiter)

    async def commit(self) -> None:
        await self.db.commit()

    async def refresh(self, instance) -> None:
        """Reload columns and eagerly loaded relationships after a commit."""
        await self.db.refresh(instance)


async def get_talent_service(db: AsyncSession = Depends(get_db)) -> TalentService:
    """FastAPI dependency providing a TalentService for the request."""
    return TalentService(db)
