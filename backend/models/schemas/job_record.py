"""Raw job-posting record as stored by the marketplace."""

import logging
from datetime import datetime
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    ValidationError,
    ValidationInfo,
    ValidatorFunctionWrapHandler,
    field_validator,
)
from pydantic.alias_generators import to_camel

logger = logging.getLogger(__name__)


class RecordModel(BaseModel):
    """Base for loosely-typed marketplace records.

    Accepts the camelCase keys written by the web app as well as snake_case,
    and keeps any keys it does not know about. A field that is blank or cannot
    be parsed takes its default instead of rejecting the whole record.
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )

    @field_validator("*", mode="wrap")
    @classmethod
    def _default_unreadable(
        cls, value: Any, handler: ValidatorFunctionWrapHandler, info: ValidationInfo
    ) -> Any:
        if isinstance(value, str) and not value.strip():
            value = None
        try:
            return handler(value)
        except ValidationError as e:
            logger.debug("Defaulting unreadable field %s: %s", info.field_name, e)
            return cls.model_fields[info.field_name].get_default(call_default_factory=True)


class Location(RecordModel):
    city: str | None = None
    country: str | None = None


class HouseholdInfo(RecordModel):
    adults_count: int | None = None
    children_count: int | None = None
    pets_count: int | None = None
    house_type: str | None = None


class WorkingConditions(RecordModel):
    working_days: int | None = None
    rest_days: int | None = None


class Salary(RecordModel):
    amount: float | None = None
    currency: str | None = None


class AgeRange(RecordModel):
    min: int | None = None
    max: int | None = None


class JobPreferences(RecordModel):
    religion: str | None = None
    nationality: list[str] = []
    age_range: AgeRange | None = None

    @field_validator("nationality", mode="before")
    @classmethod
    def _coerce_nationality(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, str):
            return [value] if value.strip() else []
        return value


class JobRecord(RecordModel):
    """A job posting. Every field is optional and defaulted during extraction."""
    id: str | None = None
    job_title: str | None = None
    job_description: str | None = None
    location: Location | None = None
    required_skills: str | None = None  # free text; lists are joined
    experience_required: str | None = None
    household_info: HouseholdInfo | None = None
    working_conditions: WorkingConditions | None = None
    salary: Salary | None = None
    urgency: str | None = None
    start_date: datetime | None = None
    preferences: JobPreferences | None = None

    @field_validator("required_skills", mode="before")
    @classmethod
    def _join_skill_list(cls, value: Any) -> Any:
        if isinstance(value, (list, tuple)):
            return ", ".join(str(v) for v in value)
        return value
