"""Company persistence."""

from collections.abc import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from talent.models import Company


class CompanyRepository:
    """Lookup by natural key plus basic CRUD for companies."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_all(self) -> Sequence[Company]:
        result = await self.db.execute(select(Company).order_by(Company.id))
        return result.scalars().all()

    async def find_by_name(self, name: str) -> Company | None:
        """Exact, case-sensitive name match."""
        result = await self.db.execute(select(Company).where(Company.name == name))
        return result.scalar_one_or_none()

    async def save(self, company: Company) -> Company:
        """Stage the company and flush so it gets an id."""
        self.db.add(company)
        await self.db.flush()
        return company
