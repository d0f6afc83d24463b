"""Experience heuristics for jobs and helpers.

Jobs: the required experience level (0-5) is inferred from free text with a
keyword ladder. The ladder sits behind `ExperienceLevelClassifier` so a better
classifier can replace it without touching scoring.

Helpers: when a profile has no explicit `totalYears`, years are derived from
the structured per-category experience captured at registration.
"""

from datetime import date
from typing import Protocol

from models.schemas.helper_record import CategoryExperience, HelperExperience
from services.skill_extractor import normalize_text

DEFAULT_EXPERIENCE_LEVEL = 1

# Evaluated top to bottom, first hit wins. Phrases are matched against
# normalized text, where "+" and "-" have already become spaces, so
# "2-3 year", "3+ year" and "5+ year" never match on their own.
EXPERIENCE_LADDER: tuple[tuple[tuple[str, ...], int], ...] = (
    (("no experience", "first time"), 0),
    (("beginner", "1 year"), 1),
    (("intermediate", "2-3 year"), 2),
    (("experienced", "3+ year"), 3),
    (("expert", "5+ year"), 5),
)

EXPERIENCE_CATEGORIES = (
    "care_of_infant",
    "care_of_children",
    "care_of_disabled",
    "care_of_old_age",
    "general_housework",
    "cooking",
)


class ExperienceLevelClassifier(Protocol):
    def classify(self, text: str | None) -> int:
        """Return the required experience level (0-5) for a job text."""
        ...


class KeywordExperienceClassifier:
    """Keyword ladder over normalized text, defaulting to level 1."""

    def __init__(
        self,
        ladder: tuple[tuple[tuple[str, ...], int], ...] = EXPERIENCE_LADDER,
        default: int = DEFAULT_EXPERIENCE_LEVEL,
    ) -> None:
        self._ladder = ladder
        self._default = default

    def classify(self, text: str | None) -> int:
        normalized = normalize_text(text)
        for phrases, level in self._ladder:
            if any(p in normalized for p in phrases):
                return level
        return self._default


def calculate_experience_years(
    start_year: int | None, end_year: int | None = None, current_year: int | None = None
) -> int:
    """Inclusive year count of a range; an open range runs to the current year."""
    if not start_year:
        return 0
    end = end_year or current_year or date.today().year
    return max(0, end - start_year + 1)


def _category_years(category: CategoryExperience, current_year: int) -> int:
    if category.country_experiences:
        return sum(
            calculate_experience_years(c.start_year, c.end_year, current_year)
            for c in category.country_experiences
            if c.start_year
        )
    if category.start_year:
        return calculate_experience_years(category.start_year, category.end_year, current_year)
    return 0


def total_experience_years(
    experience: HelperExperience | None, current_year: int | None = None
) -> int:
    """Longest experience across care categories, in years.

    Each category sums its per-country stints (or its legacy single range).
    Categories are not added together since they usually overlap in time.
    """
    if experience is None:
        return 0
    current_year = current_year or date.today().year

    max_years = 0
    for name in EXPERIENCE_CATEGORIES:
        category: CategoryExperience | None = getattr(experience, name)
        if category is None or not category.has_experience:
            continue
        max_years = max(max_years, _category_years(category, current_year))
    return max_years
