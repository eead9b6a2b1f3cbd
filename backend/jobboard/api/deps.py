# jobboard/api/deps.py
from fastapi import Depends
from sqlalchemy.orm import Session
from jobboard.db.base import get_db
from jobboard.repositories.company_repo import CompanyStore
from jobboard.repositories.job_repo import JobStore


def get_job_store(db: Session = Depends(get_db)) -> JobStore:
    return JobStore(db)


def get_company_store(db: Session = Depends(get_db)) -> CompanyStore:
    return CompanyStore(db)
