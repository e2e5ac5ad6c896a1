"""Demo data inserted on startup when the store is empty."""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from talent.models import Company, Job, Recruiter
from talent.repositories import CompanyRepository

logger = logging.getLogger(__name__)


async def seed_database(db: AsyncSession) -> bool:
    """Insert two companies, two recruiters and five jobs.

    Does nothing when at least one company already exists.

    Args:
        db: Database session

    Returns:
        True if the seed data was inserted
    """
    if await CompanyRepository(db).find_all():
        logger.info("Database already populated, skipping seed")
        return False

    facebook = Company(name="Facebook")
    twitter = Company(name="Twitter")
    barak = Recruiter(name="Barak Itzhaki", email="barakItzhaki@gmail.com")
    pogba = Recruiter(name="Paul Pogba", email="paulPogba@hotmail.co.il")

    # Transient objects: collections start empty, no load needed
    barak.add_company(facebook)
    pogba.add_company(twitter)

    db.add_all([facebook, twitter, barak, pogba])
    db.add_all(
        [
            Job(title="Java Developer", salary="15K", location="Tel-Aviv", company=facebook, recruiter=barak),
            Job(title="Java Developer", salary="20K", location="Holon", company=twitter, recruiter=pogba),
            Job(title="CPP Developer", salary="12K", location="Ness-Ziona", company=twitter, recruiter=pogba),
            Job(title="Front-end Developer", salary="25K", location="Haifa", company=twitter, recruiter=pogba),
            Job(title="Devops", salary="10K", location="Jerusalem", company=facebook, recruiter=barak),
        ]
    )
    await db.commit()

    logger.info("Seeded 2 companies, 2 recruiters and 5 jobs")
    return True
