from typing import Any

from pydantic import BaseModel, Field

from models.schemas.helper_record import HelperRecord
from models.schemas.job_record import JobRecord


class FindMatchesRequest(BaseModel):
    # Left raw so one malformed helper is skipped instead of rejecting the request
    helpers: list[Any] = Field(default_factory=list, description="Raw helper records")
    page: int = Field(1, ge=1)
    limit: int | None = Field(None, ge=1, description="Page size; server default when omitted")


class SimilarityRequest(BaseModel):
    job: JobRecord
    helper: HelperRecord
