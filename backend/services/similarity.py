"""Weighted job/helper similarity.

Six sub-scores, each in [0, 1], are combined with fixed weights:

    skills 0.30 | experience 0.25 | location 0.20 |
    age 0.10 | nationality 0.10 | religion 0.05

A requirement the job leaves unset counts as fully satisfied (1.0), not as
neutral. Religion and nationality mismatches are soft penalties (0.5 and 0.3).
"""

from models.schemas.helper_features import HelperFeatures
from models.schemas.job_features import AgePreference, FeatureLocation, JobFeatures
from models.schemas.match_result import SimilarityBreakdown
from services.skill_extractor import compute_skills_match

W_SKILLS = 0.3
W_LOCATION = 0.2
W_EXPERIENCE = 0.25
W_AGE = 0.1
W_RELIGION = 0.05
W_NATIONALITY = 0.1

MAX_EXPERIENCE_LEVEL = 5
AGE_DECAY_YEARS = 10


def location_match(job_location: FeatureLocation, helper_location: FeatureLocation) -> float:
    """1.0 for the same city, 0.7 for the same country, 0.5 otherwise."""
    if job_location.city and job_location.city == helper_location.city:
        return 1.0
    if job_location.country and job_location.country == helper_location.country:
        return 0.7
    return 0.5


def experience_match(required_level: int, helper: HelperFeatures) -> float:
    helper_level = min(helper.experience_years, MAX_EXPERIENCE_LEVEL) if helper.has_experience else 0
    if required_level == 0:
        return 1.0
    if helper_level >= required_level:
        return 1.0
    return helper_level / required_level


def age_match(preference: AgePreference, helper_age: int) -> float:
    """1.0 inside the range, decaying linearly to 0 at ten years outside it."""
    if not preference.min and not preference.max:
        return 1.0
    if preference.min <= helper_age <= preference.max:
        return 1.0
    closest = min(abs(helper_age - preference.min), abs(helper_age - preference.max))
    return max(0.0, 1 - closest / AGE_DECAY_YEARS)


def religion_match(preference: str, helper_religion: str) -> float:
    if not preference:
        return 1.0
    return 1.0 if preference == helper_religion else 0.5


def nationality_match(preferences: list[str], helper_nationality: str) -> float:
    if not preferences:
        return 1.0
    return 1.0 if helper_nationality in preferences else 0.3


def score_breakdown(job: JobFeatures, helper: HelperFeatures) -> SimilarityBreakdown:
    """Compute every sub-score and the combined, clamped similarity."""
    weighted = [
        (compute_skills_match(job.required_skills, helper.skills), W_SKILLS),
        (location_match(job.location, helper.location), W_LOCATION),
        (experience_match(job.experience_required, helper), W_EXPERIENCE),
        (age_match(job.age_preference, helper.age), W_AGE),
        (religion_match(job.religion_preference, helper.religion), W_RELIGION),
        (nationality_match(job.nationality_preference, helper.nationality), W_NATIONALITY),
    ]

    total = 0.0
    max_total = 0.0
    for score, weight in weighted:
        total += score * weight
        max_total += weight
    normalized = total / max_total if max_total > 0 else 0.0

    skills, location, experience, age, religion, nationality = (s for s, _ in weighted)
    return SimilarityBreakdown(
        skills=skills,
        location=location,
        experience=experience,
        age=age,
        religion=religion,
        nationality=nationality,
        similarity=min(max(normalized, 0.0), 1.0),
    )


def calculate_similarity(job: JobFeatures, helper: HelperFeatures) -> float:
    """Similarity in [0, 1] between a job and a helper."""
    return score_breakdown(job, helper).similarity
