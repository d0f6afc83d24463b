"""Pydantic contracts shared by feature extraction, scoring and matching."""

from models.schemas.job_record import JobRecord
from models.schemas.helper_record import HelperRecord
from models.schemas.job_features import JobFeatures
from models.schemas.helper_features import HelperFeatures
from models.schemas.match_result import Match, MatchPage, SimilarityBreakdown

__all__ = [
    "JobRecord",
    "HelperRecord",
    "JobFeatures",
    "HelperFeatures",
    "Match",
    "MatchPage",
    "SimilarityBreakdown",
]
