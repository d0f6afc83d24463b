"""Tests for text normalization and vocabulary skill extraction."""

from services.skill_extractor import (
    SKILLS_VOCABULARY,
    compute_skills_match,
    extract_skills,
    get_skill_gap,
    normalize_text,
)


def test_normalize_text_lowercases_and_collapses_punctuation():
    assert normalize_text("Hello,   World!!") == "hello world"


def test_normalize_text_hyphens_and_plus_become_spaces():
    assert normalize_text("3+ years, first-aid") == "3 years first aid"


def test_normalize_text_keeps_underscores_and_digits():
    assert normalize_text("Within_Week 24/7") == "within_week 24 7"


def test_normalize_text_strips_non_ascii_letters():
    assert normalize_text("Café") == "caf"


def test_normalize_text_empty():
    assert normalize_text("") == ""
    assert normalize_text(None) == ""


def test_vocabulary_has_no_duplicates():
    assert len(SKILLS_VOCABULARY) == len(set(SKILLS_VOCABULARY)) == 23


def test_extract_skills_in_vocabulary_order():
    assert extract_skills("Childcare, cooking, cleaning") == ["cooking", "cleaning", "childcare"]


def test_extract_skills_substring_phrases():
    skills = extract_skills("Deep cleaning and grocery shopping")
    assert skills == ["cleaning", "shopping", "deep cleaning", "grocery shopping"]


def test_extract_skills_after_normalization():
    assert extract_skills("First-Aid certified") == ["first aid"]


def test_extract_skills_no_stemming():
    assert extract_skills("I can cook and drive") == []


def test_extract_skills_empty():
    assert extract_skills("") == []
    assert extract_skills(None) == []


def test_compute_skills_match_no_requirement():
    assert compute_skills_match([], []) == 1.0
    assert compute_skills_match([], ["cooking"]) == 1.0


def test_compute_skills_match_partial():
    assert compute_skills_match(["cooking", "childcare"], ["cooking"]) == 0.5


def test_compute_skills_match_fuzzy_both_directions():
    assert compute_skills_match(["cleaning"], ["deep cleaning"]) == 1.0
    assert compute_skills_match(["deep cleaning"], ["cleaning"]) == 1.0


def test_compute_skills_match_no_helper_skills():
    assert compute_skills_match(["cooking"], []) == 0.0


def test_get_skill_gap():
    matched, missing = get_skill_gap(["cooking", "childcare", "driving"], ["cooking", "driving"])
    assert matched == ["cooking", "driving"]
    assert missing == ["childcare"]
