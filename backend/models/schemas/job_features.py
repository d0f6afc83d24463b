"""Normalized feature set derived from a job record."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class FeatureModel(BaseModel):
    """Immutable feature set, serialized with camelCase keys."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class FeatureLocation(FeatureModel):
    city: str = ""
    country: str = ""


class AgePreference(FeatureModel):
    min: int = 18
    max: int = 65


class JobFeatures(FeatureModel):
    """Structured output of job feature extraction.

    Text fields are normalized (lowercase, punctuation collapsed to spaces).
    `experience_required` is a level from 0 (none) to 5 (expert).
    """
    title: str = ""
    description: str = ""
    location: FeatureLocation = FeatureLocation()

    required_skills: list[str] = []
    experience_required: int = 1

    household_size: int = 0
    children_count: int = 0
    pets_count: int = 0
    house_type: str = ""

    working_days: int = 7
    rest_days: int = 0

    salary_amount: float = 0
    salary_currency: str = "sgd"

    urgency: int = 1  # 1 flexible .. 4 immediate
    start_date: datetime

    religion_preference: str = ""
    nationality_preference: list[str] = []  # empty = no preference
    age_preference: AgePreference = AgePreference()
