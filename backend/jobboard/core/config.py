# jobboard/core/config.py
from __future__ import annotations
from pathlib import Path
from pydantic_settings import BaseSettings
from pydantic import Field

# Resolve the .env alongside the backend package root (adjust if your layout differs)
ENV_PATH = Path(__file__).resolve().parent.parent.parent / ".env"


class Settings(BaseSettings):

    # --- Database ---
    DATABASE_URL: str = Field(..., description="Full database URL (e.g., postgresql+psycopg://... or sqlite:///./jobs.db)")
    AUTO_CREATE_TABLES: bool = Field(
        default=True,
        description="Create tables on startup (development convenience). Use Alembic migrations in production.",
    )

    # --- App info ---
    APP_NAME: str = Field(default="Job Board Backend")
    LOG_LEVEL: str = Field(default="INFO")
    CORS_ALLOW_ORIGINS: str = Field(
        default="http://localhost:3000,http://127.0.0.1:3000,http://localhost:5173,http://127.0.0.1:5173",
        description="Comma separated list of allowed origins",
    )

    # --- Job listing ---
    JOBS_PAGE_LIMIT: int = Field(default=20, ge=1, description="Page size used when the client sends none")
    SIMILAR_JOBS_LIMIT: int = Field(default=6, ge=0, description="Max postings returned in `similarJobs`")

    class Config:
        env_file = str(ENV_PATH)
        case_sensitive = True

    @property
    def cors_origins(self) -> list[str]:
        return [o.strip() for o in self.CORS_ALLOW_ORIGINS.split(",") if o.strip()]


settings = Settings()
