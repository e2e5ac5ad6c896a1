"""Jobs API router.

Listing, substring search, creation with resolve-or-create of the embedded
company and recruiter, partial update and deletion of jobs.
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, Response, status

from talent.exceptions import JobNotFoundError
from talent.models import Company, Job, Recruiter
from talent.schemas.job import JobCreate, JobInfo, JobPatch, JobResponse
from talent.schemas.links import CollectionModel
from talent.services.assembler import JobAssembler, get_job_assembler
from talent.services.talent import TalentService, get_talent_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/jobs", tags=["jobs"])


@router.get(
    "",
    response_model=CollectionModel[JobResponse],
    summary="List all jobs (entity projection)"
)
async def all_jobs(
    talent: TalentService = Depends(get_talent_service),
    assembler: JobAssembler = Depends(get_job_assembler),
) -> CollectionModel[JobResponse]:
    """Every job with its ids, company and recruiter, each linked to itself."""
    jobs = await talent.jobs.find_all()
    return assembler.to_collection_model(jobs)


@router.get(
    "/info",
    response_model=CollectionModel[JobInfo],
    summary="List all jobs (DTO projection)"
)
async def all_jobs_info(
    talent: TalentService = Depends(get_talent_service),
    assembler: JobAssembler = Depends(get_job_assembler),
) -> CollectionModel[JobInfo]:
    """Every job as a DTO, hiding surrogate ids."""
    jobs = await talent.jobs.find_all()
    return assembler.to_info_collection_model(jobs)


@router.get(
    "/byrecruiter/{name}",
    response_model=CollectionModel[JobInfo],
    summary="Search jobs by recruiter name"
)
async def jobs_by_recruiter(
    name: str,
    talent: TalentService = Depends(get_talent_service),
    assembler: JobAssembler = Depends(get_job_assembler),
) -> CollectionModel[JobInfo]:
    """Jobs whose recruiter name contains ``name`` (case-insensitive)."""
    jobs = await talent.jobs.find_by_recruiter_name_containing(name)
    return assembler.to_info_collection_model(jobs)


@router.get(
    "/bycompany/{name}",
    response_model=CollectionModel[JobInfo],
    summary="Search jobs by company name"
)
async def jobs_by_company(
    name: str,
    talent: TalentService = Depends(get_talent_service),
    assembler: JobAssembler = Depends(get_job_assembler),
) -> CollectionModel[JobInfo]:
    """Jobs whose company name contains ``name`` (case-insensitive)."""
    jobs = await talent.jobs.find_by_company_name_containing(name)
    return assembler.to_info_collection_model(jobs)


@router.get(
    "/{job_id}/info",
    response_model=JobInfo,
    summary="Get a specific job"
)
async def single_job_info(
    job_id: int,
    talent: TalentService = Depends(get_talent_service),
    assembler: JobAssembler = Depends(get_job_assembler),
) -> JobInfo:
    """Get a single job DTO by id.

    Raises:
        JobNotFoundError: 404 if no job has this id
    """
    job = await talent.jobs.get(job_id)
    if job is None:
        raise JobNotFoundError(f"job id {job_id}")
    return assembler.to_info_model(job)


# Registered after every other GET so fixed segments like /info win
@router.get(
    "/{title}",
    response_model=CollectionModel[JobInfo],
    summary="Search jobs by title"
)
async def jobs_by_partial_title(
    title: str,
    talent: TalentService = Depends(get_talent_service),
    assembler: JobAssembler = Depends(get_job_assembler),
) -> CollectionModel[JobInfo]:
    """Jobs whose title contains ``title`` (case-insensitive).

    No match is an empty collection, not an error.
    """
    jobs = await talent.jobs.find_by_title_containing(title)
    return assembler.to_info_collection_model(jobs)


@router.post(
    "",
    response_model=JobInfo,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new job"
)
async def create_job(
    job_data: JobCreate,
    response: Response,
    talent: TalentService = Depends(get_talent_service),
    assembler: JobAssembler = Depends(get_job_assembler),
) -> JobInfo:
    """Create a job, reusing or creating its company and recruiter.

    The company is resolved by exact name and the recruiter by exact email;
    missing ones are created from the payload. The pair is always
    associated (a no-op when it already is) before the job is persisted.

    Args:
        job_data: Validated job payload with embedded company and recruiter
        response: Used to set the Location header

    Returns:
        The created job DTO; Location points at its info URL
    """
    company = await talent.companies.find_by_name(job_data.company.name)
    if company is None:
        company = await talent.save_company(Company(name=job_data.company.name))
        logger.info(f"Created company {company.id}: {company.name}")

    recruiter = await talent.recruiters.find_by_email(job_data.recruiter.email)
    if recruiter is None:
        recruiter = await talent.save_recruiter(
            Recruiter(name=job_data.recruiter.name, email=job_data.recruiter.email)
        )
        logger.info(f"Created recruiter {recruiter.id}: {recruiter.email}")

    # Both sides must be loaded before the association is mirrored
    await company.awaitable_attrs.recruiters
    await recruiter.awaitable_attrs.companies
    recruiter.add_company(company)

    job = await talent.jobs.save(
        Job(
            title=job_data.title,
            salary=job_data.salary,
            location=job_data.location,
            company=company,
            recruiter=recruiter,
        )
    )
    await talent.commit()
    await talent.refresh(job)

    logger.info(f"Created job {job.id}: {job.title} at {company.name}")
    response.headers["Location"] = assembler.info_url(job.id)
    return assembler.to_info_model(job)


@router.put(
    "/{job_id}",
    response_model=JobInfo,
    summary="Partially update a job"
)
async def update_job(
    job_id: int,
    fields: dict[str, Any] = Body(..., examples=[{"salary": "25K", "location": "Yokneam"}]),
    talent: TalentService = Depends(get_talent_service),
    assembler: JobAssembler = Depends(get_job_assembler),
) -> JobInfo:
    """Apply a field map to a job.

    Only ``title``, ``salary`` and ``location`` with string values are
    applied; anything else in the body is ignored.

    Raises:
        JobNotFoundError: 404 if no job has this id
        ValidationFailure: 400 if a recognized value breaks its constraint
    """
    job = await talent.jobs.get(job_id)
    if job is None:
        raise JobNotFoundError(f"job id {job_id}")

    patch = JobPatch.from_field_map(fields)
    changed = patch.apply_to(job)
    await talent.commit()
    await talent.refresh(job)

    logger.info(f"Updated job {job_id}: {changed or 'no recognized fields'}")
    return assembler.to_info_model(job)


@router.delete(
    "/{job_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a job"
)
async def delete_job(
    job_id: int,
    talent: TalentService = Depends(get_talent_service),
) -> None:
    """Delete a single job; company and recruiter are left untouched.

    Raises:
        JobNotFoundError: 404 if no job has this id
    """
    if not await talent.jobs.exists(job_id):
        raise JobNotFoundError(f"job id {job_id}")

    await talent.jobs.delete_by_id(job_id)
    await talent.commit()
    logger.info(f"Deleted job {job_id}")
