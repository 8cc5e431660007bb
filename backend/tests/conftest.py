"""Shared test configuration and fixtures."""

import os

# Must be set before config.settings is created by the first app import
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")

import pytest

from models.schemas.career_record import CareerRecord
from models.schemas.user_profile import UserProfile
from services.recommender.engine import RecommendationEngine


def make_career(career_id: str, **overrides) -> CareerRecord:
    fields = {
        "id": career_id,
        "title": career_id.replace("-", " ").title(),
        "description": f"{career_id} description",
        "industry": "it",
        "education": "highschool",
        "interests": [],
        "skills": [],
        "growthOutlook": "Average",
        "salaryRange": "$50,000 - $70,000",
    }
    fields.update(overrides)
    return CareerRecord.model_validate(fields)


@pytest.fixture
def career_factory():
    return make_career


@pytest.fixture
def sample_catalog() -> list[CareerRecord]:
    return [
        make_career(
            "web-developer",
            industry="it",
            education="associate",
            interests=["technology", "design", "innovation"],
            skills=["programming", "logic"],
        ),
        make_career(
            "research-scientist",
            industry="healthcare",
            education="doctorate",
            interests=["science", "research"],
            skills=["laboratory-skills", "analytical-thinking"],
        ),
        make_career(
            "brand-designer",
            industry="media",
            education="bachelor",
            interests=["design", "communication"],
            skills=["creativity", "communication"],
        ),
        make_career(
            "tax-advisor",
            industry="finance",
            education="master",
            interests=["finance", "business"],
            skills=["mathematics"],
        ),
    ]


@pytest.fixture
def engine(sample_catalog) -> RecommendationEngine:
    return RecommendationEngine(sample_catalog)


@pytest.fixture
def bachelor_it_profile() -> UserProfile:
    return UserProfile(
        education_level="bachelor",
        interests=["technology", "design"],
        skills=["programming", "creativity"],
        preferred_industry="it",
    )


@pytest.fixture
def fresh_engine_cache():
    """Drop the cached catalog and engine before and after a test."""
    from services import catalog
    from services.recommender import engine as engine_module

    catalog.clear()
    engine_module.clear()
    yield
    catalog.clear()
    engine_module.clear()
