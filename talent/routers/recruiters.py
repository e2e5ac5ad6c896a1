"""Recruiters API router.

Listing, search by company, manual and random-user creation, partial
update and deletion of recruiters.
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, Response, status

from talent.exceptions import ConflictError, RecruiterNotFoundError
from talent.models import Recruiter
from talent.schemas.links import CollectionModel
from talent.schemas.recruiter import (
    RecruiterCreate,
    RecruiterInfo,
    RecruiterPatch,
    RecruiterResponse,
)
from talent.services.assembler import RecruiterAssembler, get_recruiter_assembler
from talent.services.random_user import RandomUserClient, get_random_user_client
from talent.services.talent import TalentService, get_talent_service

router = APIRouter(prefix="/recruiters", tags=["recruiters"])
logger = logging.getLogger(__name__)


def _email_taken(email: str) -> ConflictError:
    return ConflictError(f"Recruiter with email {email} already exists.")


async def _create_recruiter(
    talent: TalentService,
    assembler: RecruiterAssembler,
    response: Response,
    name: str,
    email: str,
) -> RecruiterInfo:
    """Persist a recruiter unless the email is already used."""
    if await talent.recruiter_exists(email):
        raise _email_taken(email)

    recruiter = await talent.save_recruiter(Recruiter(name=name, email=email))
    await talent.commit()
    await talent.refresh(recruiter)

    logger.info(f"Created recruiter {recruiter.id}: {recruiter.name} <{recruiter.email}>")
    response.headers["Location"] = assembler.info_url(recruiter.id)
    return assembler.to_info_model(recruiter)


@router.get("", response_model=CollectionModel[RecruiterResponse])
async def all_recruiters(
    talent: TalentService = Depends(get_talent_service),
    assembler: RecruiterAssembler = Depends(get_recruiter_assembler),
):
    """List all recruiters (entity projection)."""
    recruiters = await talent.recruiters.find_all()
    return assembler.to_collection_model(recruiters)


@router.get("/info", response_model=CollectionModel[RecruiterInfo])
async def all_recruiters_info(
    talent: TalentService = Depends(get_talent_service),
    assembler: RecruiterAssembler = Depends(get_recruiter_assembler),
):
    """List all recruiters as DTOs with their companies and jobs."""
    recruiters = await talent.recruiters.find_all()
    return assembler.to_info_collection_model(recruiters)


@router.get("/bycompany/{name}", response_model=CollectionModel[RecruiterInfo])
async def recruiters_by_company(
    name: str,
    talent: TalentService = Depends(get_talent_service),
    assembler: RecruiterAssembler = Depends(get_recruiter_assembler),
):
    """Recruiters working with any company whose name contains ``name``."""
    recruiters = await talent.recruiters.find_by_company_name_containing(name)
    return assembler.to_info_collection_model(recruiters)


@router.get("/{recruiter_id}/info", response_model=RecruiterInfo)
async def single_recruiter_info(
    recruiter_id: int,
    talent: TalentService = Depends(get_talent_service),
    assembler: RecruiterAssembler = Depends(get_recruiter_assembler),
):
    """Get a single recruiter DTO by id."""
    recruiter = await talent.recruiters.get(recruiter_id)
    if recruiter is None:
        raise RecruiterNotFoundError(f"recruiter id {recruiter_id}")
    return assembler.to_info_model(recruiter)


@router.post("", response_model=RecruiterInfo, status_code=status.HTTP_201_CREATED)
async def create_recruiter(
    request: RecruiterCreate,
    response: Response,
    talent: TalentService = Depends(get_talent_service),
    assembler: RecruiterAssembler = Depends(get_recruiter_assembler),
):
    """Create a recruiter from a name and email.

    Returns 409 when a recruiter with the same email already exists; the
    store is left unchanged in that case.
    """
    return await _create_recruiter(talent, assembler, response, request.name, request.email)


@router.post("/randomUser", response_model=RecruiterInfo, status_code=status.HTTP_201_CREATED)
async def create_random_recruiter(
    response: Response,
    talent: TalentService = Depends(get_talent_service),
    assembler: RecruiterAssembler = Depends(get_recruiter_assembler),
    random_users: RandomUserClient = Depends(get_random_user_client),
):
    """Create a recruiter from an identity fetched from the random user API.

    The request waits for the fetch to finish. Upstream failures surface as
    502 and timeouts as 504; an email clash is a 409 like manual creation.
    """
    identity = await random_users.fetch_identity()
    logger.info(f"Fetched random identity {identity.full_name} <{identity.email}>")
    return await _create_recruiter(
        talent, assembler, response, identity.full_name, identity.email
    )


@router.put("/{recruiter_id}", response_model=RecruiterInfo)
async def update_recruiter(
    recruiter_id: int,
    fields: dict[str, Any] = Body(..., examples=[{"name": "Paul Pogba"}]),
    talent: TalentService = Depends(get_talent_service),
    assembler: RecruiterAssembler = Depends(get_recruiter_assembler),
):
    """Apply a field map (``name``, ``email``) to a recruiter.

    Unknown keys and non-string values are ignored. Moving to an email that
    another recruiter already uses is a 409.
    """
    recruiter = await talent.recruiters.get(recruiter_id)
    if recruiter is None:
        raise RecruiterNotFoundError(f"recruiter id {recruiter_id}")

    patch = RecruiterPatch.from_field_map(fields)
    if patch.email is not None and patch.email != recruiter.email:
        owner = await talent.recruiters.find_by_email(patch.email)
        if owner is not None and owner.id != recruiter.id:
            raise _email_taken(patch.email)

    changed = patch.apply_to(recruiter)
    await talent.commit()
    await talent.refresh(recruiter)

    logger.info(f"Updated recruiter {recruiter_id}: {changed or 'no recognized fields'}")
    return assembler.to_info_model(recruiter)


@router.delete("/{recruiter_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_recruiter(
    recruiter_id: int,
    talent: TalentService = Depends(get_talent_service),
):
    """Delete a recruiter and every job it posted.

    The recruiter is detached from each of its companies first so both
    sides of the association stay symmetric; detaching and deleting are
    committed together.
    """
    recruiter = await talent.recruiters.get(recruiter_id)
    if recruiter is None:
        raise RecruiterNotFoundError(f"recruiter id {recruiter_id}")

    companies = await recruiter.awaitable_attrs.companies
    for company in list(companies):
        await company.awaitable_attrs.recruiters
        company.remove_recruiter(recruiter)

    jobs = await recruiter.awaitable_attrs.jobs
    job_count = len(jobs)

    await talent.recruiters.delete(recruiter)
    await talent.commit()
    logger.info(f"Deleted recruiter {recruiter_id} and {job_count} jobs")
