from __future__ import annotations
from typing import Optional
from uuid import UUID
from sqlalchemy.orm import Session
from sqlalchemy.orm.attributes import flag_modified
from jobboard.models.company import Company


class CompanyStore:
    """Company collection bound to one request-scoped session."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def get(self, company_id: UUID) -> Optional[Company]:
        return self.db.get(Company, company_id)

    def append_job_post(self, company: Company, job_id: UUID, *, commit: bool = True) -> Company:
        # Assign a new list so the JSON column change is detected
        company.job_posts = [*(company.job_posts or []), str(job_id)]
        flag_modified(company, "job_posts")
        self.db.add(company)
        if commit:
            self.db.commit()
            self.db.refresh(company)
        return company
