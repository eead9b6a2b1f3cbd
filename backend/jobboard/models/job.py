# jobboard/models/job.py
# Purpose: Job posting rows.
# Notes:
# - `company_id` is a soft reference: no FK constraint, a posting may point at a
#   company row that does not exist (the API only checks the id is well-formed).
# - `detail` holds {"desc": ..., "requirements": ...}.

from __future__ import annotations

import uuid
from sqlalchemy import Column, String, Integer, DateTime, JSON, Uuid
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from jobboard.db.base import Base, utcnow  # IMPORTANT: Base must be imported


class JobPosting(Base):
    """
    A job advertisement owned by a company.
    - `company`: read-time join to the owning company (view only, may resolve to None).
    """
    __tablename__ = "jobs"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    job_title = Column(String(300), nullable=False, index=True)
    job_type = Column(String(64), nullable=False, index=True)
    location = Column(String(256), nullable=False)
    salary = Column(Integer, nullable=False)
    vacancies = Column(Integer, nullable=True)
    experience = Column(Integer, nullable=True)
    detail = Column(JSON().with_variant(JSONB(), "postgresql"), nullable=False)

    company_id = Column(Uuid(as_uuid=True), nullable=False, index=True)

    # Timestamps (python-side default keeps sub-second ordering on every backend)
    created_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now(), nullable=False, index=True)
    updated_at = Column(
        DateTime(timezone=True), default=utcnow, onupdate=utcnow, server_default=func.now(), nullable=False
    )

    company = relationship(
        "Company",
        primaryjoin="foreign(JobPosting.company_id) == Company.id",
        viewonly=True,
        lazy="joined",
    )
