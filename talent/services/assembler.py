"""Hypermedia assemblers for jobs and recruiters.

An assembler turns ORM entities into link-carrying representations:

- entity models: raw projection, ``self`` -> info URL, collection rel -> raw list
- info models (DTOs): ``self`` -> info URL, collection rel -> info list
- collections: items under ``_embedded.<rel>``, ``self`` -> the request URL

Links are absolute, built from the route names via ``request.url_for``.
"""

from collections.abc import Iterable

from fastapi import Request

from talent.models import Job, Recruiter
from talent.schemas.job import JobInfo, JobResponse
from talent.schemas.links import CollectionModel, Link
from talent.schemas.recruiter import RecruiterInfo, RecruiterResponse


class _Assembler:
    rel: str
    collection_route: str
    info_collection_route: str
    info_route: str
    info_param: str

    def __init__(self, request: Request):
        self.request = request

    def _url(self, route_name: str, **path_params) -> str:
        return str(self.request.url_for(route_name, **path_params))

    def info_url(self, entity_id: int) -> str:
        return self._url(self.info_route, **{self.info_param: entity_id})

    def entity_links(self, entity_id: int) -> dict[str, Link]:
        return {
            "self": Link(href=self.info_url(entity_id)),
            self.rel: Link(href=self._url(self.collection_route)),
        }

    def info_links(self, entity_id: int) -> dict[str, Link]:
        return {
            "self": Link(href=self.info_url(entity_id)),
            self.rel: Link(href=self._url(self.info_collection_route)),
        }

    def collection_links(self, collection_route: str) -> dict[str, Link]:
        return {
            "self": Link(href=str(self.request.url)),
            self.rel: Link(href=self._url(collection_route)),
        }


class JobAssembler(_Assembler):
    rel = "jobs"
    collection_route = "all_jobs"
    info_collection_route = "all_jobs_info"
    info_route = "single_job_info"
    info_param = "job_id"

    def to_model(self, job: Job) -> JobResponse:
        return JobResponse.from_orm_model(job, self.entity_links(job.id))

    def to_collection_model(self, jobs: Iterable[Job]) -> CollectionModel[JobResponse]:
        return CollectionModel[JobResponse](
            embedded={self.rel: [self.to_model(job) for job in jobs]},
            links=self.collection_links(self.collection_route),
        )

    def to_info_model(self, job: Job) -> JobInfo:
        return JobInfo.from_orm_model(job, self.info_links(job.id))

    def to_info_collection_model(self, jobs: Iterable[Job]) -> CollectionModel[JobInfo]:
        return CollectionModel[JobInfo](
            embedded={self.rel: [self.to_info_model(job) for job in jobs]},
            links=self.collection_links(self.info_collection_route),
        )


class RecruiterAssembler(_Assembler):
    rel = "recruiters"
    collection_route = "all_recruiters"
    info_collection_route = "all_recruiters_info"
    info_route = "single_recruiter_info"
    info_param = "recruiter_id"

    def to_model(self, recruiter: Recruiter) -> RecruiterResponse:
        return RecruiterResponse.from_orm_model(recruiter, self.entity_links(recruiter.id))

    def to_collection_model(
        self, recruiters: Iterable[Recruiter]
    ) -> CollectionModel[RecruiterResponse]:
        return CollectionModel[RecruiterResponse](
            embedded={self.rel: [self.to_model(recruiter) for recruiter in recruiters]},
            links=self.collection_links(self.collection_route),
        )

    def to_info_model(self, recruiter: Recruiter) -> RecruiterInfo:
        return RecruiterInfo.from_orm_model(recruiter, self.info_links(recruiter.id))

    def to_info_collection_model(
        self, recruiters: Iterable[Recruiter]
    ) -> CollectionModel[RecruiterInfo]:
        return CollectionModel[RecruiterInfo](
            embedded={self.rel: [self.to_info_model(recruiter) for recruiter in recruiters]},
            links=self.collection_links(self.info_collection_route),
        )


def get_job_assembler(request: Request) -> JobAssembler:
    return JobAssembler(request)


def get_recruiter_assembler(request: Request) -> RecruiterAssembler:
    return RecruiterAssembler(request)
