"""Raw helper-profile record as submitted through helper registration."""

from datetime import date
from typing import Any

from pydantic import field_validator

from models.schemas.job_record import RecordModel


class CountryExperience(RecordModel):
    """One stint of work in a country for a given care category."""
    country: str | None = None
    start_year: int | None = None
    end_year: int | None = None


class CategoryExperience(RecordModel):
    has_experience: bool = False
    experience_level: str | None = None  # beginner, intermediate, advanced, expert
    start_year: int | None = None  # legacy single-range format
    end_year: int | None = None
    country_experiences: list[CountryExperience] = []
    specific_tasks: list[str] = []


class LanguageSpoken(RecordModel):
    language: str | None = None
    proficiency: str | None = None


class HelperExperience(RecordModel):
    total_years: int | None = None
    previous_jobs: list[Any] = []
    specializations: list[Any] = []
    languages_spoken: list[LanguageSpoken] = []

    care_of_infant: CategoryExperience | None = None
    care_of_children: CategoryExperience | None = None
    care_of_disabled: CategoryExperience | None = None
    care_of_old_age: CategoryExperience | None = None
    general_housework: CategoryExperience | None = None
    cooking: CategoryExperience | None = None

    @field_validator("languages_spoken", mode="before")
    @classmethod
    def _ignore_non_list(cls, value: Any) -> Any:
        return value if isinstance(value, list) else []

    @field_validator("previous_jobs", "specializations", mode="before")
    @classmethod
    def _none_to_empty(cls, value: Any) -> Any:
        return [] if value is None else value


class HelperRecord(RecordModel):
    """A helper profile. Every field is optional and defaulted during extraction."""
    id: str | None = None
    full_name: str | None = None
    name: str | None = None
    date_of_birth: date | None = None
    nationality: str | None = None
    religion: str | None = None
    city_of_birth: str | None = None
    country_of_birth: str | None = None
    relevant_skills: str | None = None
    has_been_helper_before: str | None = None  # "yes" | "no"
    experience: HelperExperience | None = None
    education_level: str | None = None
    marital_status: str | None = None
    number_of_children: int | None = None
    is_active: bool | None = None
    is_verified: bool | None = None
    profile_completeness: int | None = None
