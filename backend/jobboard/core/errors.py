"""Domain exceptions raised by the job services and mapped to HTTP responses by the routers."""


class JobBoardError(Exception):
    """Base application exception."""


class CompanyNotFoundError(JobBoardError):
    """Raised when the acting company id is not a valid store identifier."""

    def __init__(self, company_id) -> None:
        self.company_id = company_id
        super().__init__(f"No Company with id: {'' if company_id is None else company_id}")


class JobNotFoundError(JobBoardError):
    """Raised when a requested job posting does not exist."""

    def __init__(self, job_id) -> None:
        self.job_id = job_id
        super().__init__("Job Post Not Found")


__all__ = [
    "CompanyNotFoundError",
    "JobBoardError",
    "JobNotFoundError",
]
