from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from models.schemas.match_result import Match, SimilarityBreakdown


class ResponseModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Pagination(ResponseModel):
    current_page: int = 1
    total_matches: int = 0
    has_more: bool = False
    total_pages: int = 0
    limit: int = 10


class MatchesResponse(ResponseModel):
    job_id: str
    matches: list[Match] = []
    pagination: Pagination = Pagination()


class SimilarityResponse(ResponseModel):
    breakdown: SimilarityBreakdown = SimilarityBreakdown()
    match_reasons: list[str] = []
    matched_skills: list[str] = []
    missing_skills: list[str] = []
