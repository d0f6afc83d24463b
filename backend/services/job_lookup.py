"""Job lookup collaborators.

The matcher only needs `await lookup.get_job_by_id(job_id)`, returning a raw
job record or None. `InMemoryJobStore` serves jobs from memory and can be
seeded from a JSON file holding either a list of jobs or an id -> job mapping.
"""

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Protocol

logger = logging.getLogger(__name__)


class JobLookup(Protocol):
    async def get_job_by_id(self, job_id: str) -> dict[str, Any] | None:
        """Return the raw job record, None if unknown. May raise on storage errors."""
        ...


class InMemoryJobStore:
    def __init__(self, jobs: dict[str, dict[str, Any]] | None = None) -> None:
        self._jobs: dict[str, dict[str, Any]] = dict(jobs or {})

    async def get_job_by_id(self, job_id: str) -> dict[str, Any] | None:
        job = self._jobs.get(job_id)
        if job is None:
            return None
        return {"id": job_id, **job}

    @classmethod
    def from_json_file(cls, path: str | Path) -> "InMemoryJobStore":
        with open(path, encoding="utf-8") as f:
            data = json.load(f)

        if isinstance(data, list):
            jobs = {str(job["id"]): job for job in data if isinstance(job, dict) and job.get("id")}
        elif isinstance(data, dict):
            jobs = {str(k): v for k, v in data.items() if isinstance(v, dict)}
        else:
            raise ValueError(f"Unsupported jobs file format in {path}")

        logger.info("Loaded %d jobs from %s", len(jobs), path)
        return cls(jobs)


def default_fallback_job(job_id: str) -> dict[str, Any]:
    """Stand-in job used when the real one cannot be resolved in lenient mode."""
    return {
        "id": job_id,
        "jobTitle": "Domestic Helper for Family",
        "jobDescription": "Looking for experienced helper with cooking and childcare skills",
        "location": {"city": "Singapore", "country": "Singapore"},
        "salary": {"amount": 600, "currency": "SGD"},
        "householdInfo": {"adultsCount": 2, "childrenCount": 1, "petsCount": 0},
        "workingConditions": {"workingDays": 6, "restDays": 1},
        "urgency": "flexible",
        "startDate": datetime.now(timezone.utc).isoformat(),
    }
