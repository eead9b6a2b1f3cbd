# backend/jobboard/models/__init__.py
from jobboard.models.job import JobPosting
from jobboard.models.company import Company

__all__ = [
    "JobPosting",
    "Company",
]
