from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Optional

from jobboard.core.config import settings
from jobboard.core.errors import CompanyNotFoundError, JobNotFoundError
from jobboard.models.job import JobPosting
from jobboard.repositories.company_repo import CompanyStore
from jobboard.repositories.ids import parse_store_id
from jobboard.repositories.job_repo import JobStore
from jobboard.schemas.job import JobListParams, JobPostIn
from jobboard.services.jobs.query_builder import (
    SIMILAR_ORDER,
    build_job_filters,
    resolve_sort,
    text_match_clause,
)

logger = logging.getLogger("jobs.service")


@dataclass
class JobPage:
    items: list[JobPosting]
    total: int
    page: int
    num_pages: int


def _positive_int(raw: Optional[str], default: int) -> int:
    try:
        value = int(raw) if raw is not None else 0
    except ValueError:
        return default
    return value if value > 0 else default


def _post_fields(payload: JobPostIn) -> dict:
    return dict(
        job_title=payload.job_title,
        job_type=payload.job_type,
        location=payload.location,
        salary=payload.salary,
        vacancies=payload.vacancies,
        experience=payload.experience,
        detail={"desc": payload.desc, "requirements": payload.requirements},
    )


def create_job(jobs: JobStore, companies: CompanyStore, payload: JobPostIn) -> JobPosting:
    """Insert a posting owned by the acting company and append it to the company's list.

    Both writes share one transaction. A company id that is well formed but unknown
    still yields a posting (the append is skipped).
    """
    company_id = parse_store_id(payload.actor_id)
    if company_id is None:
        raise CompanyNotFoundError(payload.actor_id)

    job = jobs.create(**_post_fields(payload), company_id=company_id, commit=False)

    company = companies.get(company_id)
    if company is not None:
        companies.append_job_post(company, job.id, commit=False)
    else:
        logger.warning("Company %s not found; job %s posted without back-reference", company_id, job.id)

    jobs.commit(job)
    logger.info("Job %s posted by company %s", job.id, company_id)
    return job


def update_job(jobs: JobStore, job_id: str, payload: JobPostIn) -> Optional[JobPosting]:
    """Replace the mutable fields of a posting; returns None when no posting has that id."""
    # Only the id shape is checked; ownership of the posting is not verified
    if parse_store_id(payload.actor_id) is None:
        raise CompanyNotFoundError(payload.actor_id)

    key = parse_store_id(job_id)
    if key is None:
        return None
    job = jobs.update(key, **_post_fields(payload))
    if job is None:
        logger.info("Update skipped: job %s does not exist", job_id)
    return job


def list_jobs(jobs: JobStore, params: JobListParams) -> JobPage:
    filters = build_job_filters(
        search=params.search,
        location=params.location,
        jtype=params.jtype,
        exp=params.exp,
    )
    page = _positive_int(params.page, 1)
    limit = _positive_int(params.limit, settings.JOBS_PAGE_LIMIT)

    total = jobs.count(filters)
    items = jobs.find(
        filters,
        order_by=resolve_sort(params.sort),
        offset=(page - 1) * limit,
        limit=limit,
    )
    return JobPage(items=items, total=total, page=page, num_pages=math.ceil(total / limit))


def get_job_with_similar(jobs: JobStore, job_id: str) -> tuple[JobPosting, list[JobPosting]]:
    """Fetch a posting plus up to SIMILAR_JOBS_LIMIT postings sharing its title or type.

    The posting itself is not excluded from its similar list.
    """
    key = parse_store_id(job_id)
    job = jobs.get(key) if key is not None else None
    if job is None:
        raise JobNotFoundError(job_id)

    similar = jobs.find(
        [text_match_clause(job.job_title, job.job_type)],
        order_by=SIMILAR_ORDER,
        limit=settings.SIMILAR_JOBS_LIMIT,
    )
    return job, similar


def delete_job(jobs: JobStore, job_id: str) -> None:
    """Unconditional delete. Absent ids are a no-op; company job lists are left untouched."""
    key = parse_store_id(job_id)
    if key is None:
        return
    jobs.delete(key)
