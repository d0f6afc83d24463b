"""Shared test configuration, pytest markers and sample records."""

from datetime import datetime, timezone

import pytest

FIXED_NOW = datetime(2024, 6, 1, 9, 30, tzinfo=timezone.utc)


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "api: exercises the FastAPI app through TestClient"
    )


@pytest.fixture
def fixed_clock():
    return lambda: FIXED_NOW


@pytest.fixture
def family_job():
    """Job for a family in Singapore needing cooking and childcare."""
    return {
        "id": "job-1",
        "jobTitle": "Domestic Helper for Family",
        "jobDescription": "Looking for experienced helper with cooking and childcare skills",
        "location": {"city": "Singapore", "country": "Singapore"},
        "salary": {"amount": 600, "currency": "SGD"},
        "householdInfo": {"adultsCount": 2, "childrenCount": 1, "petsCount": 0},
        "workingConditions": {"workingDays": 6, "restDays": 1},
        "urgency": "flexible",
        "startDate": "2024-07-01T00:00:00Z",
    }


@pytest.fixture
def maria():
    return {
        "id": "helper-1",
        "fullName": "Maria Santos",
        "dateOfBirth": "1990-01-01",
        "nationality": "Philippines",
        "religion": "Christianity",
        "cityOfBirth": "Manila",
        "relevantSkills": "Cooking, childcare, cleaning, housekeeping",
        "hasBeenHelperBefore": "yes",
        "experience": {
            "totalYears": 5,
            "languagesSpoken": [
                {"language": "English", "proficiency": "fluent"},
                {"language": "Tagalog"},
            ],
        },
        "isActive": True,
        "isVerified": True,
        "profileCompleteness": 90,
    }


@pytest.fixture
def siti():
    return {
        "id": "helper-2",
        "fullName": "Siti Nurhaliza",
        "dateOfBirth": "1985-05-15",
        "nationality": "Indonesia",
        "religion": "Islam",
        "relevantSkills": "Cleaning, laundry, elderly care",
        "hasBeenHelperBefore": "yes",
        "experience": {"totalYears": 3},
        "isActive": True,
        "isVerified": False,
        "profileCompleteness": 75,
    }
