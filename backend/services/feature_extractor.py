"""Feature extraction: raw job/helper records -> normalized feature sets.

Extraction never fails on a missing field; every field has a default. The only
time-dependent values are the job start date (defaults to "now") and the
helper's age and derived experience years (relative to "today"), and both
clocks can be passed in.
"""

from datetime import date, datetime, timezone
from typing import Any

from models.schemas.helper_features import HelperFeatures, LanguageFeature
from models.schemas.helper_record import HelperRecord, LanguageSpoken
from models.schemas.job_features import AgePreference, FeatureLocation, JobFeatures
from models.schemas.job_record import JobRecord
from services.experience import (
    ExperienceLevelClassifier,
    KeywordExperienceClassifier,
    total_experience_years,
)
from services.skill_extractor import extract_skills, normalize_text

DEFAULT_AGE = 25
DEFAULT_MIN_AGE = 18
DEFAULT_MAX_AGE = 65
DEFAULT_WORKING_DAYS = 7
DEFAULT_CURRENCY = "sgd"

URGENCY_LEVELS = {
    "immediate": 4,
    "within_week": 3,
    "within_month": 2,
    "flexible": 1,
}

_default_classifier = KeywordExperienceClassifier()


def calculate_age(date_of_birth: date | datetime | None, today: date | None = None) -> int:
    """Whole years since birth; one less if this year's birthday hasn't come yet."""
    if not date_of_birth:
        return DEFAULT_AGE
    if isinstance(date_of_birth, datetime):
        date_of_birth = date_of_birth.date()
    today = today or date.today()

    age = today.year - date_of_birth.year
    if (today.month, today.day) < (date_of_birth.month, date_of_birth.day):
        age -= 1
    return age


def map_urgency(urgency: str | None) -> int:
    return URGENCY_LEVELS.get(urgency or "", 1)


def extract_languages(languages: list[LanguageSpoken]) -> list[LanguageFeature]:
    return [
        LanguageFeature(
            language=normalize_text(lang.language),
            proficiency=lang.proficiency or "basic",
        )
        for lang in languages
    ]


def extract_job_features(
    job: JobRecord | dict[str, Any],
    *,
    now: datetime | None = None,
    classifier: ExperienceLevelClassifier | None = None,
) -> JobFeatures:
    """Build the comparable feature set for a job posting.

    Required skills and experience level are read from their dedicated fields
    and fall back to the job description when those are empty.
    """
    if not isinstance(job, JobRecord):
        job = JobRecord.model_validate(job)
    classifier = classifier or _default_classifier

    location = job.location
    household = job.household_info
    conditions = job.working_conditions
    salary = job.salary
    prefs = job.preferences
    age_range = prefs.age_range if prefs else None

    return JobFeatures(
        title=normalize_text(job.job_title),
        description=normalize_text(job.job_description),
        location=FeatureLocation(
            city=normalize_text(location.city) if location else "",
            country=normalize_text(location.country) if location else "",
        ),
        required_skills=extract_skills(job.required_skills or job.job_description),
        experience_required=classifier.classify(job.experience_required or job.job_description),
        household_size=(household.adults_count if household else None) or 0,
        children_count=(household.children_count if household else None) or 0,
        pets_count=(household.pets_count if household else None) or 0,
        house_type=normalize_text(household.house_type) if household else "",
        working_days=(conditions.working_days if conditions else None) or DEFAULT_WORKING_DAYS,
        rest_days=(conditions.rest_days if conditions else None) or 0,
        salary_amount=(salary.amount if salary else None) or 0,
        salary_currency=((salary.currency if salary else None) or DEFAULT_CURRENCY).lower(),
        urgency=map_urgency(job.urgency),
        start_date=job.start_date or now or datetime.now(timezone.utc),
        religion_preference=normalize_text(prefs.religion) if prefs else "",
        nationality_preference=[
            n for n in (normalize_text(v) for v in (prefs.nationality if prefs else [])) if n
        ],
        age_preference=AgePreference(
            min=(age_range.min if age_range else None) or DEFAULT_MIN_AGE,
            max=(age_range.max if age_range else None) or DEFAULT_MAX_AGE,
        ),
    )


def extract_helper_features(
    helper: HelperRecord | dict[str, Any],
    *,
    today: date | None = None,
) -> HelperFeatures:
    """Build the comparable feature set for a helper profile."""
    if not isinstance(helper, HelperRecord):
        helper = HelperRecord.model_validate(helper)
    today = today or date.today()
    experience = helper.experience

    return HelperFeatures(
        name=normalize_text(helper.full_name or helper.name),
        age=calculate_age(helper.date_of_birth, today),
        nationality=normalize_text(helper.nationality),
        religion=normalize_text(helper.religion),
        location=FeatureLocation(
            city=normalize_text(helper.city_of_birth),
            country=normalize_text(helper.nationality or helper.country_of_birth),
        ),
        skills=extract_skills(helper.relevant_skills),
        has_experience=helper.has_been_helper_before == "yes",
        experience_years=(
            (experience.total_years if experience else None)
            or total_experience_years(experience, today.year)
        ),
        previous_jobs=experience.previous_jobs if experience else [],
        specializations=experience.specializations if experience else [],
        education_level=normalize_text(helper.education_level),
        marital_status=normalize_text(helper.marital_status),
        number_of_children=helper.number_of_children or 0,
        is_active=helper.is_active is not False,
        is_verified=helper.is_verified is True,
        languages=extract_languages(experience.languages_spoken) if experience else [],
        profile_completeness=helper.profile_completeness or 0,
    )
