"""Text normalization and vocabulary-based skill extraction.

Skills are found by plain substring search of a normalized text blob against a
fixed vocabulary of household-work phrases. There is no stemming and no
synonym expansion: "cook" does not match "cooking", but "cooking" inside
"cooking and baking" does.
"""

import re

# ASCII word characters only, so accented letters are treated as punctuation
_NON_WORD_RE = re.compile(r"[^\w\s]", re.ASCII)
_WHITESPACE_RE = re.compile(r"\s+")

# Order matters: extracted skills are reported in vocabulary order
SKILLS_VOCABULARY: tuple[str, ...] = (
    "cooking", "cleaning", "childcare", "elderly care", "pet care",
    "laundry", "ironing", "gardening", "driving", "tutoring",
    "first aid", "basic nursing", "housekeeping", "shopping", "organizing",
    "baby care", "toddler care", "meal preparation", "light cleaning",
    "deep cleaning", "car washing", "grocery shopping", "language tutoring",
)


def normalize_text(text: str | None) -> str:
    """Lowercase, turn punctuation into spaces and collapse whitespace runs."""
    if not text:
        return ""
    text = _NON_WORD_RE.sub(" ", str(text).lower())
    return _WHITESPACE_RE.sub(" ", text).strip()


def extract_skills(text: str | None) -> list[str]:
    """Return vocabulary skills that occur as substrings of the normalized text."""
    normalized = normalize_text(text)
    if not normalized:
        return []
    return [skill for skill in SKILLS_VOCABULARY if skill in normalized]


def skill_matches(required: str, helper_skills: list[str]) -> bool:
    """A required skill matches when it contains, or is contained in, a helper skill."""
    return any(h in required or required in h for h in helper_skills)


def compute_skills_match(required_skills: list[str], helper_skills: list[str]) -> float:
    """Fraction of required skills the helper covers. 1.0 when nothing is required."""
    if not required_skills:
        return 1.0
    matched = [s for s in required_skills if skill_matches(s, helper_skills)]
    return len(matched) / len(required_skills)


def get_skill_gap(
    required_skills: list[str], helper_skills: list[str]
) -> tuple[list[str], list[str]]:
    """Split required skills into (matched, missing) for the given helper."""
    matched: list[str] = []
    missing: list[str] = []
    for skill in required_skills:
        (matched if skill_matches(skill, helper_skills) else missing).append(skill)
    return matched, missing
