from __future__ import annotations

import uuid
from sqlalchemy import Column, String, Text, DateTime, JSON, Uuid
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.sql import func

from jobboard.db.base import Base, utcnow


class Company(Base):
    """
    Company account that publishes job postings.
    `job_posts` is an ordered list of job id strings, appended on every successful post.
    """
    __tablename__ = "companies"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    name = Column(String(256), nullable=False)
    email = Column(String(256), nullable=False, unique=True)
    password = Column(String(256), nullable=False)  # never serialized
    contact = Column(String(64), nullable=True)
    location = Column(String(256), nullable=True)
    about = Column(Text, nullable=True)
    profile_url = Column(Text, nullable=True)

    job_posts = Column(JSON().with_variant(JSONB(), "postgresql"), nullable=False, default=list)

    # Timestamps
    created_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now(), nullable=False)
    updated_at = Column(
        DateTime(timezone=True), default=utcnow, onupdate=utcnow, server_default=func.now(), nullable=False
    )
