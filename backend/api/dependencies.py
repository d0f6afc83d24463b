"""Shared dependencies for API routes."""

from functools import lru_cache

from fastapi import Depends

from config import settings
from services.job_lookup import InMemoryJobStore, JobLookup
from services.match_finder import MatchFinder


@lru_cache
def get_job_store() -> InMemoryJobStore:
    if settings.jobs_file:
        return InMemoryJobStore.from_json_file(settings.jobs_file)
    return InMemoryJobStore()


def get_match_finder(job_lookup: JobLookup = Depends(get_job_store)) -> MatchFinder:
    return MatchFinder(
        job_lookup,
        strict_job_lookup=settings.strict_job_lookup,
        lookup_timeout=settings.job_lookup_timeout_seconds,
    )
