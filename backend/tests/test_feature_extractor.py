"""Tests for job and helper feature extraction."""

from datetime import date, datetime, timezone

import pytest
from pydantic import ValidationError

from models.schemas.helper_features import HelperFeatures
from models.schemas.helper_record import HelperRecord
from models.schemas.job_features import JobFeatures
from models.schemas.job_record import JobRecord
from services.feature_extractor import (
    calculate_age,
    extract_helper_features,
    extract_job_features,
    map_urgency,
)

NOW = datetime(2024, 6, 1, tzinfo=timezone.utc)
TODAY = date(2024, 6, 1)


class TestCalculateAge:
    def test_day_before_birthday(self):
        assert calculate_age(date(1990, 6, 15), today=date(2024, 6, 14)) == 33

    def test_on_birthday(self):
        assert calculate_age(date(1990, 6, 15), today=date(2024, 6, 15)) == 34

    def test_earlier_month(self):
        assert calculate_age(date(1990, 12, 1), today=date(2024, 6, 1)) == 33

    def test_datetime_input(self):
        assert calculate_age(datetime(1990, 1, 1, 8, 0), today=date(2024, 6, 1)) == 34

    def test_missing_defaults_to_25(self):
        assert calculate_age(None) == 25


class TestMapUrgency:
    @pytest.mark.parametrize(
        "urgency, level",
        [("immediate", 4), ("within_week", 3), ("within_month", 2), ("flexible", 1)],
    )
    def test_known(self, urgency, level):
        assert map_urgency(urgency) == level

    def test_unknown_and_missing(self):
        assert map_urgency("yesterday") == 1
        assert map_urgency(None) == 1


class TestJobFeatures:
    def test_empty_record_gets_defaults(self):
        f = extract_job_features({}, now=NOW)
        assert isinstance(f, JobFeatures)
        assert f.title == ""
        assert f.location.city == "" and f.location.country == ""
        assert f.required_skills == []
        assert f.experience_required == 1
        assert f.household_size == 0
        assert f.working_days == 7
        assert f.rest_days == 0
        assert f.salary_amount == 0
        assert f.salary_currency == "sgd"
        assert f.urgency == 1
        assert f.start_date == NOW
        assert f.religion_preference == ""
        assert f.nationality_preference == []
        assert f.age_preference.min == 18
        assert f.age_preference.max == 65

    def test_family_job(self, family_job):
        f = extract_job_features(family_job, now=NOW)
        assert f.title == "domestic helper for family"
        assert f.location.city == "singapore"
        assert f.required_skills == ["cooking", "childcare"]
        assert f.experience_required == 3
        assert f.household_size == 2
        assert f.children_count == 1
        assert f.working_days == 6
        assert f.rest_days == 1
        assert f.salary_amount == 600
        assert f.salary_currency == "sgd"
        assert f.start_date == datetime(2024, 7, 1, tzinfo=timezone.utc)

    def test_required_skills_field_takes_precedence(self):
        f = extract_job_features(
            {"requiredSkills": "Driving", "jobDescription": "cooking and childcare"}, now=NOW
        )
        assert f.required_skills == ["driving"]

    def test_required_skills_list_is_joined(self):
        f = extract_job_features({"requiredSkills": ["Cooking", "Pet care"]}, now=NOW)
        assert f.required_skills == ["cooking", "pet care"]

    def test_experience_field_takes_precedence(self):
        f = extract_job_features(
            {"experienceRequired": "No experience", "jobDescription": "expert wanted"}, now=NOW
        )
        assert f.experience_required == 0

    def test_falsy_values_take_defaults(self):
        f = extract_job_features(
            {
                "workingConditions": {"workingDays": 0, "restDays": 0},
                "preferences": {"ageRange": {"min": 0, "max": 40}},
            },
            now=NOW,
        )
        assert f.working_days == 7
        assert f.age_preference.min == 18
        assert f.age_preference.max == 40

    def test_preferences_are_normalized(self):
        f = extract_job_features(
            {"preferences": {"religion": "Islam", "nationality": ["Philippines", "Indonesia", ""]}},
            now=NOW,
        )
        assert f.religion_preference == "islam"
        assert f.nationality_preference == ["philippines", "indonesia"]

    def test_single_nationality_string(self):
        f = extract_job_features({"preferences": {"nationality": "Myanmar"}}, now=NOW)
        assert f.nationality_preference == ["myanmar"]

    def test_urgency(self):
        assert extract_job_features({"urgency": "immediate"}, now=NOW).urgency == 4

    def test_accepts_record_model(self, family_job):
        record = JobRecord.model_validate(family_job)
        assert extract_job_features(record, now=NOW) == extract_job_features(family_job, now=NOW)

    def test_deterministic(self, family_job):
        assert extract_job_features(family_job, now=NOW) == extract_job_features(family_job, now=NOW)

    def test_features_are_immutable(self, family_job):
        f = extract_job_features(family_job, now=NOW)
        with pytest.raises(ValidationError):
            f.title = "changed"

    def test_blank_and_malformed_fields_take_defaults(self):
        f = extract_job_features(
            {
                "jobDescription": "Expert cook needed",
                "experienceRequired": 3,
                "startDate": "",
                "location": "Singapore",
                "salary": {"amount": "", "currency": ""},
                "workingConditions": {"workingDays": "six"},
                "preferences": {"ageRange": {"min": "", "max": ""}},
            },
            now=NOW,
        )
        assert f.experience_required == 5
        assert f.start_date == NOW
        assert f.location.city == ""
        assert f.salary_amount == 0
        assert f.salary_currency == "sgd"
        assert f.working_days == 7
        assert f.age_preference.min == 18
        assert f.age_preference.max == 65

    def test_custom_classifier(self):
        class AlwaysExpert:
            def classify(self, text):
                return 5

        f = extract_job_features({"jobDescription": "no experience"}, now=NOW, classifier=AlwaysExpert())
        assert f.experience_required == 5


class TestHelperFeatures:
    def test_full_profile(self, maria):
        f = extract_helper_features(maria, today=TODAY)
        assert isinstance(f, HelperFeatures)
        assert f.name == "maria santos"
        assert f.age == 34
        assert f.nationality == "philippines"
        assert f.religion == "christianity"
        assert f.location.city == "manila"
        assert f.location.country == "philippines"
        assert f.skills == ["cooking", "cleaning", "childcare", "housekeeping"]
        assert f.has_experience is True
        assert f.experience_years == 5
        assert f.is_active is True
        assert f.is_verified is True
        assert f.profile_completeness == 90
        assert [(lang.language, lang.proficiency) for lang in f.languages] == [
            ("english", "fluent"),
            ("tagalog", "basic"),
        ]

    def test_empty_record_gets_defaults(self):
        f = extract_helper_features({}, today=TODAY)
        assert f.name == ""
        assert f.age == 25
        assert f.skills == []
        assert f.has_experience is False
        assert f.experience_years == 0
        assert f.previous_jobs == []
        assert f.number_of_children == 0
        assert f.is_active is True
        assert f.is_verified is False
        assert f.languages == []
        assert f.profile_completeness == 0

    def test_name_fallback(self):
        assert extract_helper_features({"name": "Ana"}, today=TODAY).name == "ana"

    def test_country_falls_back_to_country_of_birth(self):
        f = extract_helper_features({"countryOfBirth": "Indonesia"}, today=TODAY)
        assert f.location.country == "indonesia"
        assert f.nationality == ""

    def test_has_experience_requires_yes(self):
        assert extract_helper_features({"hasBeenHelperBefore": "no"}, today=TODAY).has_experience is False

    def test_inactive_only_when_explicitly_false(self):
        assert extract_helper_features({"isActive": False}, today=TODAY).is_active is False

    def test_languages_must_be_a_list(self):
        f = extract_helper_features({"experience": {"languagesSpoken": "English"}}, today=TODAY)
        assert f.languages == []

    def test_experience_years_from_structured_experience(self):
        helper = {
            "hasBeenHelperBefore": "yes",
            "experience": {
                "careOfChildren": {"hasExperience": True, "startYear": 2019, "endYear": 2024},
            },
        }
        assert extract_helper_features(helper, today=TODAY).experience_years == 6

    def test_pass_through_lists(self):
        f = extract_helper_features(
            {"experience": {"previousJobs": [{"employer": "A"}], "specializations": ["infants"]}},
            today=TODAY,
        )
        assert f.previous_jobs == [{"employer": "A"}]
        assert f.specializations == ["infants"]

    @pytest.mark.parametrize("dob", ["", "   ", "not a date", "1990-13-45"])
    def test_unreadable_date_of_birth_defaults_age(self, dob):
        assert extract_helper_features({"dateOfBirth": dob}, today=TODAY).age == 25

    def test_malformed_fields_take_defaults(self, maria):
        helper = {
            **maria,
            "numberOfChildren": "",
            "profileCompleteness": "high",
            "isVerified": [],
            "experience": {
                "totalYears": "",
                "previousJobs": {"employer": "A"},
                "languagesSpoken": ["English"],
                "careOfChildren": {"hasExperience": True, "startYear": "2019", "endYear": "soon"},
            },
        }
        f = extract_helper_features(helper, today=TODAY)
        assert f.name == "maria santos"
        assert f.number_of_children == 0
        assert f.profile_completeness == 0
        assert f.is_verified is False
        assert f.previous_jobs == []
        assert f.languages == []
        # open range 2019..2024
        assert f.experience_years == 6

    def test_unreadable_record_raises(self):
        with pytest.raises(ValidationError):
            extract_helper_features(None, today=TODAY)
        with pytest.raises(ValidationError):
            extract_helper_features("junk", today=TODAY)

    def test_accepts_snake_case_and_models(self):
        record = HelperRecord(full_name="Maria Santos", relevant_skills="Cooking")
        f = extract_helper_features(record, today=TODAY)
        assert f.name == "maria santos"
        assert f.skills == ["cooking"]

    def test_does_not_mutate_input(self, maria):
        before = {k: v for k, v in maria.items()}
        extract_helper_features(maria, today=TODAY)
        assert maria == before
