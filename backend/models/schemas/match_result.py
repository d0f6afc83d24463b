"""Scoring and match-finding outputs."""

from typing import Any

from models.schemas.job_features import FeatureModel


class SimilarityBreakdown(FeatureModel):
    """Per-factor sub-scores (each 0.0-1.0) and the combined similarity."""
    skills: float = 0.0
    location: float = 0.0
    experience: float = 0.0
    age: float = 0.0
    religion: float = 0.0
    nationality: float = 0.0
    similarity: float = 0.0


class Match(FeatureModel):
    """A helper paired with its similarity to a job and display reasons."""
    helper: dict[str, Any] = {}  # subset of the raw helper record
    similarity: float = 0.0
    match_reasons: list[str] = []


class MatchPage(FeatureModel):
    """One page of matches sorted by similarity, highest first."""
    matches: list[Match] = []
    total_matches: int = 0
    has_more: bool = False
