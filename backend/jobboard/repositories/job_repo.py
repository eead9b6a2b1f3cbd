# path: backend/jobboard/repositories/job_repo.py
# Purpose: Data-access only for job postings. No business rules here.
from __future__ import annotations
from typing import Any, Iterable, Optional, Sequence
from uuid import UUID
from sqlalchemy import select, func, delete
from sqlalchemy.orm import Session
from sqlalchemy.sql import ColumnElement
from jobboard.models.job import JobPosting


class JobStore:
    """Job collection bound to one request-scoped session."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def create(
        self,
        *,
        job_title: str,
        job_type: str,
        location: str,
        salary: int,
        vacancies: Optional[int],
        experience: Optional[int],
        detail: dict[str, Any],
        company_id: UUID,
        commit: bool = True,
    ) -> JobPosting:
        job = JobPosting(
            job_title=job_title,
            job_type=job_type,
            location=location,
            salary=salary,
            vacancies=vacancies,
            experience=experience,
            detail=detail,
            company_id=company_id,
        )
        self.db.add(job)
        if commit:
            self.commit(job)
        else:
            self.db.flush()  # assigns the id so callers can reference it
        return job

    def commit(self, job: Optional[JobPosting] = None) -> None:
        self.db.commit()
        if job is not None:
            self.db.refresh(job)

    def get(self, job_id: UUID) -> Optional[JobPosting]:
        return self.db.get(JobPosting, job_id)

    def find(
        self,
        filters: Iterable[ColumnElement[bool]] = (),
        *,
        order_by: Sequence[Any] = (),
        offset: int = 0,
        limit: Optional[int] = None,
    ) -> list[JobPosting]:
        stmt = select(JobPosting).where(*filters).order_by(*order_by).offset(offset)
        if limit is not None:
            stmt = stmt.limit(limit)
        return list(self.db.execute(stmt).unique().scalars().all())

    def count(self, filters: Iterable[ColumnElement[bool]] = ()) -> int:
        stmt = select(func.count()).select_from(JobPosting).where(*filters)
        return self.db.execute(stmt).scalar_one()

    def update(self, job_id: UUID, **fields) -> Optional[JobPosting]:
        """Find-and-update by id; returns the post-update row or None when absent."""
        job = self.get(job_id)
        if job is None:
            return None
        for k, v in fields.items():
            if v is not None:
                setattr(job, k, v)
        self.db.add(job)
        self.commit(job)
        return job

    def delete(self, job_id: UUID) -> None:
        self.db.execute(delete(JobPosting).where(JobPosting.id == job_id))
        self.db.commit()
