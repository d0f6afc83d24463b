"""Match finding: rank helpers against one job.

Flow:
    job_id
      ├─ job_lookup.get_job_by_id(job_id)   → raw job (or fallback job)
      ├─ extract_job_features(job)          → JobFeatures      (once)
      ├─ for each helper:
      │     extract_helper_features(helper) → HelperFeatures
      │     score_breakdown(job, helper)    → similarity
      │     generate_match_reasons(...)     → reasons
      │   → HelperResult (match or error)
      ├─ stable sort by similarity, highest first
      └─ slice [offset : offset + limit]    → MatchPage

A helper that fails to score is logged and left out; it never fails the call.
"""

import asyncio
import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Any

from pydantic.alias_generators import to_camel

from models.schemas.helper_record import HelperRecord
from models.schemas.job_features import JobFeatures
from models.schemas.match_result import Match, MatchPage
from services.exceptions import JobLookupError, JobNotFoundError
from services.experience import ExperienceLevelClassifier
from services.feature_extractor import extract_helper_features, extract_job_features
from services.job_lookup import JobLookup, default_fallback_job
from services.match_reasons import generate_match_reasons
from services.similarity import calculate_similarity

logger = logging.getLogger(__name__)

# Raw helper keys copied into Match.helper; anything else on the record is dropped
_HELPER_SUMMARY_KEYS = frozenset(
    {name for name in HelperRecord.model_fields}
    | {to_camel(name) for name in HelperRecord.model_fields}
)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class HelperResult:
    """Outcome of scoring one helper: exactly one of `match` / `error` is set."""
    index: int
    match: Match | None = None
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def summarize_helper(helper: HelperRecord | dict[str, Any]) -> dict[str, Any]:
    """Copy of the known profile fields of a raw helper record."""
    if isinstance(helper, HelperRecord):
        return helper.model_dump(by_alias=True, exclude_none=True, include=set(HelperRecord.model_fields))
    return {k: v for k, v in helper.items() if k in _HELPER_SUMMARY_KEYS}


class MatchFinder:
    """Ranks helpers for a job.

    Args:
        job_lookup: Async collaborator resolving job ids to raw job records.
        strict_job_lookup: Raise instead of falling back to the default job
            when the lookup fails, times out or finds nothing.
        lookup_timeout: Seconds to wait for the lookup; None waits forever.
        classifier: Experience-level classifier for job text.
        clock: Returns the current time; drives ages and default start dates.
    """

    def __init__(
        self,
        job_lookup: JobLookup,
        *,
        strict_job_lookup: bool = False,
        lookup_timeout: float | None = None,
        classifier: ExperienceLevelClassifier | None = None,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        self._job_lookup = job_lookup
        self._strict = strict_job_lookup
        self._lookup_timeout = lookup_timeout
        self._classifier = classifier
        self._clock = clock

    async def find_matches(
        self,
        job_id: str,
        helpers: Sequence[HelperRecord | dict[str, Any]],
        limit: int = 10,
        offset: int = 0,
    ) -> MatchPage:
        if limit < 0 or offset < 0:
            raise ValueError("limit and offset must be non-negative")

        logger.info("Finding matches for job %s with %d helpers", job_id, len(helpers))
        job = await self._resolve_job(job_id)

        now = self._clock()
        job_features = extract_job_features(job, now=now, classifier=self._classifier)

        results = [
            self._score_helper(i, helper, job_features, now.date())
            for i, helper in enumerate(helpers)
        ]
        matches = [r.match for r in results if r.ok]
        failed = len(results) - len(matches)
        if failed:
            logger.warning("Skipped %d of %d helpers for job %s", failed, len(results), job_id)

        # list.sort is stable, so equal scores keep input order
        matches.sort(key=lambda m: m.similarity, reverse=True)

        total = len(matches)
        return MatchPage(
            matches=matches[offset:offset + limit],
            total_matches=total,
            has_more=offset + limit < total,
        )

    async def _resolve_job(self, job_id: str) -> dict[str, Any]:
        try:
            job = await asyncio.wait_for(
                self._job_lookup.get_job_by_id(job_id), timeout=self._lookup_timeout
            )
        except asyncio.TimeoutError as e:
            return self._fallback(job_id, f"timed out after {self._lookup_timeout}s", e)
        except Exception as e:
            return self._fallback(job_id, str(e) or type(e).__name__, e)

        if job is None:
            if self._strict:
                raise JobNotFoundError(job_id)
            logger.warning("Job %s not found; matching against the default fallback job", job_id)
            return default_fallback_job(job_id)
        return job

    def _fallback(self, job_id: str, reason: str, error: Exception) -> dict[str, Any]:
        if self._strict:
            raise JobLookupError(job_id, reason) from error
        logger.warning(
            "Job lookup for %s failed (%s); matching against the default fallback job",
            job_id,
            reason,
        )
        return default_fallback_job(job_id)

    def _score_helper(
        self,
        index: int,
        helper: HelperRecord | dict[str, Any],
        job_features: JobFeatures,
        today: date,
    ) -> HelperResult:
        try:
            helper_features = extract_helper_features(helper, today=today)
            match = Match(
                helper=summarize_helper(helper),
                similarity=calculate_similarity(job_features, helper_features),
                match_reasons=generate_match_reasons(job_features, helper_features),
            )
        except Exception as e:
            logger.warning("Could not score helper %d: %s", index, e)
            return HelperResult(index=index, error=e)
        return HelperResult(index=index, match=match)
