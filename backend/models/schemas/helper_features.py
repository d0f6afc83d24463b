"""Normalized feature set derived from a helper record."""

from typing import Any

from models.schemas.job_features import FeatureLocation, FeatureModel


class LanguageFeature(FeatureModel):
    language: str = ""
    proficiency: str = "basic"


class HelperFeatures(FeatureModel):
    """Structured output of helper feature extraction.

    `location` is derived from city of birth and nationality; profiles carry
    no separate current-residence field.
    """
    name: str = ""
    age: int = 25
    nationality: str = ""
    religion: str = ""
    location: FeatureLocation = FeatureLocation()

    skills: list[str] = []
    has_experience: bool = False
    experience_years: int = 0
    previous_jobs: list[Any] = []
    specializations: list[Any] = []

    education_level: str = ""
    marital_status: str = ""
    number_of_children: int = 0

    is_active: bool = True
    is_verified: bool = False

    languages: list[LanguageFeature] = []
    profile_completeness: int = 0  # 0-100
