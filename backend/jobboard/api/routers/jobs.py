# Purpose: Job posting routes. Each route is a failure boundary: domain errors map to
# 400/404, anything else is logged and answered with an opaque 500.

import logging
from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse, PlainTextResponse

from jobboard.api.deps import get_company_store, get_job_store
from jobboard.core.errors import CompanyNotFoundError, JobNotFoundError
from jobboard.repositories.company_repo import CompanyStore
from jobboard.repositories.job_repo import JobStore
from jobboard.schemas.job import (
    JobDetailOut,
    JobListOut,
    JobListParams,
    JobMutationOut,
    JobOut,
    JobPostIn,
    MessageOut,
    NotFoundOut,
    ServerErrorOut,
    ValidationErrorOut,
    check_required,
)
from jobboard.services.jobs import service as job_service

logger = logging.getLogger("jobs.api")

router = APIRouter(
    prefix="/jobs",
    tags=["jobs"],
    responses={500: {"model": ServerErrorOut}},
)


def _validation_failed(payload: JobPostIn):
    errors = check_required(payload)
    if not errors:
        return None
    return JSONResponse(status_code=400, content=ValidationErrorOut(errors=errors).model_dump(mode="json"))


def _server_error() -> JSONResponse:
    return JSONResponse(status_code=500, content=ServerErrorOut().model_dump())


@router.post("", response_model=JobMutationOut, responses={400: {"model": ValidationErrorOut}})
def create_job(
    payload: JobPostIn,
    jobs: JobStore = Depends(get_job_store),
    companies: CompanyStore = Depends(get_company_store),
):
    try:
        invalid = _validation_failed(payload)
        if invalid is not None:
            return invalid
        job = job_service.create_job(jobs, companies, payload)
        return JobMutationOut(message="Job Posted Successfully", job=JobOut.model_validate(job))
    except CompanyNotFoundError as e:
        return PlainTextResponse(str(e), status_code=404)
    except Exception:
        logger.exception("Failed to create job post")
        return _server_error()


@router.put("/{job_id}", response_model=JobMutationOut, responses={400: {"model": ValidationErrorOut}})
def update_job(job_id: str, payload: JobPostIn, jobs: JobStore = Depends(get_job_store)):
    try:
        invalid = _validation_failed(payload)
        if invalid is not None:
            return invalid
        job = job_service.update_job(jobs, job_id, payload)
        return JobMutationOut(
            message="Job Post Updated Successfully",
            job=JobOut.model_validate(job) if job is not None else None,
        )
    except CompanyNotFoundError as e:
        return PlainTextResponse(str(e), status_code=404)
    except Exception:
        logger.exception("Failed to update job post %s", job_id)
        return _server_error()


@router.get("", response_model=JobListOut)
def list_jobs(params: JobListParams = Depends(), jobs: JobStore = Depends(get_job_store)):
    try:
        result = job_service.list_jobs(jobs, params)
        return JobListOut(
            total_jobs=result.total,
            data=[JobOut.model_validate(j) for j in result.items],
            page=result.page,
            num_of_page=result.num_pages,
        )
    except Exception:
        logger.exception("Failed to list job posts")
        return _server_error()


@router.get("/{job_id}", response_model=JobDetailOut, responses={404: {"model": NotFoundOut}})
def get_job(job_id: str, jobs: JobStore = Depends(get_job_store)):
    try:
        job, similar = job_service.get_job_with_similar(jobs, job_id)
        return JobDetailOut(
            data=JobOut.model_validate(job),
            similar_jobs=[JobOut.model_validate(j) for j in similar],
        )
    except JobNotFoundError as e:
        return JSONResponse(status_code=404, content=NotFoundOut(message=str(e)).model_dump())
    except Exception:
        logger.exception("Failed to fetch job post %s", job_id)
        return _server_error()


@router.delete("/{job_id}", response_model=MessageOut)
def delete_job(job_id: str, jobs: JobStore = Depends(get_job_store)):
    try:
        job_service.delete_job(jobs, job_id)
        return MessageOut(message="Job Post Deleted Successfully.")
    except Exception:
        logger.exception("Failed to delete job post %s", job_id)
        return _server_error()
