"""Human-readable reasons shown next to a match.

Reasons recompute the sub-scores they need instead of reading a breakdown, so
they can be generated for any feature pair. Order is fixed: skills,
experience, location, verification, completeness.
"""

import math

from models.schemas.helper_features import HelperFeatures
from models.schemas.job_features import JobFeatures
from services.similarity import location_match
from services.skill_extractor import compute_skills_match

STRONG_SKILLS_THRESHOLD = 0.7
SAME_CITY_THRESHOLD = 0.8
SAME_COUNTRY_THRESHOLD = 0.6
COMPLETE_PROFILE_THRESHOLD = 80


def _percent(value: float) -> int:
    # Half rounds up, e.g. 7/8 -> 88
    return math.floor(value * 100 + 0.5)


def generate_match_reasons(job: JobFeatures, helper: HelperFeatures) -> list[str]:
    reasons: list[str] = []

    skills = compute_skills_match(job.required_skills, helper.skills)
    if skills > STRONG_SKILLS_THRESHOLD:
        reasons.append(f"Strong skills match ({_percent(skills)}%)")

    if helper.has_experience and helper.experience_years > 0:
        reasons.append(f"{helper.experience_years} years of experience")

    location = location_match(job.location, helper.location)
    if location > SAME_CITY_THRESHOLD:
        reasons.append("Same location")
    elif location > SAME_COUNTRY_THRESHOLD:
        reasons.append("Same country")

    if helper.is_verified:
        reasons.append("Verified profile")

    if helper.profile_completeness > COMPLETE_PROFILE_THRESHOLD:
        reasons.append("Complete profile")

    return reasons
