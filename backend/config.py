import os
from pydantic_settings import BaseSettings


def _parse_cors_origins() -> list[str] | None:
    """Parse CORS_ORIGINS env var as comma-separated string or JSON list."""
    raw = os.environ.get("CORS_ORIGINS")
    if not raw:
        return None
    if raw.startswith("["):
        import json
        return json.loads(raw)
    return [o.strip() for o in raw.split(",") if o.strip()]


class Settings(BaseSettings):
    cors_origins: list[str] = [
        "http://localhost:3000",
        "http://localhost:5173",
    ]
    debug: bool = False

    # Job lookup
    strict_job_lookup: bool = False  # if True, unknown jobs are a 404 instead of the fallback job
    job_lookup_timeout_seconds: float = 5.0
    jobs_file: str = ""  # optional JSON file seeding the in-memory job store

    # Pagination and limits
    default_page_limit: int = 10
    max_page_limit: int = 100
    max_helpers_per_request: int = 5000
    rate_limit: str = "60/minute"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


_cors_override = _parse_cors_origins()
settings = Settings(**{"cors_origins": _cors_override} if _cors_override else {})
