"""Exceptions raised by the matching services."""


class MatchingError(Exception):
    """Base exception for matching service errors."""


class JobNotFoundError(MatchingError):
    """Raised when a job does not exist and no fallback job is allowed."""

    def __init__(self, job_id: str) -> None:
        super().__init__(f"Job not found: {job_id}")
        self.job_id = job_id


class JobLookupError(MatchingError):
    """Raised when the job lookup fails or times out and no fallback is allowed."""

    def __init__(self, job_id: str, reason: str) -> None:
        super().__init__(f"Job lookup failed for {job_id}: {reason}")
        self.job_id = job_id
        self.reason = reason
