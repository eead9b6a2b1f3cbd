# Purpose: Pydantic DTOs for the job posting endpoints. Wire names follow the
# camelCase payloads the job board frontend sends and reads.

from typing import Optional, Any
from pydantic import BaseModel, Field, field_validator
from datetime import datetime
from uuid import UUID


# --- Requests ---

class ActingUser(BaseModel):
    """Identity injected into the body by the upstream auth layer."""
    user_id: Optional[str] = Field(default=None, alias="userId")

    class Config:
        populate_by_name = True


class JobPostIn(BaseModel):
    job_title: Optional[str] = Field(default=None, alias="jobTitle")
    job_type: Optional[str] = Field(default=None, alias="jobType")
    location: Optional[str] = None
    salary: Optional[int] = None
    vacancies: Optional[int] = None
    experience: Optional[int] = None
    desc: Optional[str] = None
    requirements: Optional[str] = None
    user: Optional[ActingUser] = None

    class Config:
        populate_by_name = True

    @field_validator("salary", "vacancies", "experience", mode="before")
    @classmethod
    def empty_number_is_missing(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @property
    def actor_id(self) -> Optional[str]:
        return self.user.user_id if self.user else None


class JobListParams(BaseModel):
    """Listing query string. Kept as raw strings; parsing lives in the service."""
    search: Optional[str] = None
    sort: Optional[str] = None
    location: Optional[str] = None
    jtype: Optional[str] = Field(default=None, description="Comma separated job types")
    exp: Optional[str] = Field(default=None, description='Experience range "lo-hi"')
    page: Optional[str] = None
    limit: Optional[str] = None


# --- Validation envelope ---

class FieldError(BaseModel):
    type: str = "field"
    msg: str
    path: str
    location: str = "body"
    value: Any = None


REQUIRED_FIELDS = (
    ("job_title", "jobTitle", "Job title is required"),
    ("job_type", "jobType", "Job type is required"),
    ("location", "location", "Location is required"),
    ("salary", "salary", "Salary is required"),
    ("desc", "desc", "Description is required"),
    ("requirements", "requirements", "Requirements are required"),
)


def check_required(payload: JobPostIn) -> list[FieldError]:
    """Presence check for the fields every job post must carry."""
    errors = []
    for attr, path, msg in REQUIRED_FIELDS:
        value = getattr(payload, attr)
        if value is None or value == "":
            errors.append(FieldError(msg=msg, path=path, value="" if value is None else value))
    return errors


class ValidationErrorOut(BaseModel):
    errors: list[FieldError]


# --- Responses ---

class JobDetail(BaseModel):
    desc: Optional[str] = None
    requirements: Optional[str] = None


class CompanyOut(BaseModel):
    id: UUID
    name: str
    email: str
    contact: Optional[str] = None
    location: Optional[str] = None
    about: Optional[str] = None
    profile_url: Optional[str] = Field(default=None, alias="profileUrl")
    job_posts: list[str] = Field(default_factory=list, alias="jobPosts")
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")

    class Config:
        from_attributes = True
        populate_by_name = True


class JobOut(BaseModel):
    id: UUID
    job_title: str = Field(alias="jobTitle")
    job_type: str = Field(alias="jobType")
    location: str
    salary: int
    vacancies: Optional[int] = None
    experience: Optional[int] = None
    detail: JobDetail
    company: Optional[CompanyOut] = None

    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime = Field(alias="updatedAt")

    class Config:
        from_attributes = True
        populate_by_name = True


class JobListOut(BaseModel):
    success: bool = True
    total_jobs: int = Field(alias="totalJobs")
    data: list[JobOut]
    page: int
    num_of_page: int = Field(alias="numOfPage")

    class Config:
        populate_by_name = True


class JobDetailOut(BaseModel):
    success: bool = True
    data: JobOut
    similar_jobs: list[JobOut] = Field(alias="similarJobs")

    class Config:
        populate_by_name = True


class JobMutationOut(BaseModel):
    success: bool = True
    message: str
    job: Optional[JobOut] = None


class MessageOut(BaseModel):
    success: bool = True
    message: str


class NotFoundOut(BaseModel):
    message: str
    success: bool = False


class ServerErrorOut(BaseModel):
    message: str = "Server Error"
