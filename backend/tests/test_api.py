import pytest
from fastapi.testclient import TestClient

from api.dependencies import get_recommendation_engine
from config import settings
from main import app
from services.catalog import CatalogError

client = TestClient(app)

SAMPLE_PROFILE = {
    "educationLevel": "bachelor",
    "interests": ["technology", "design"],
    "skills": ["programming", "creativity"],
    "preferredIndustry": "it",
}


def test_health():
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["careers_loaded"] > 0


def test_options():
    response = client.get("/api/options")
    assert response.status_code == 200
    data = response.json()
    assert [o["value"] for o in data["educationLevels"]] == [
        "highschool", "associate", "bachelor", "master", "doctorate",
    ]
    assert {"value": "problem-solving", "label": "Problem Solving"} in data["interests"]
    assert {"value": "it", "label": "Information Technology"} in data["industries"]
    assert len(data["skills"]) == 11


def test_recommend():
    response = client.post("/api/recommend", json=SAMPLE_PROFILE)
    assert response.status_code == 200
    data = response.json()
    assert "message" not in data
    careers = data["careers"]
    assert 0 < len(careers) <= 5
    assert "software-developer" in [c["id"] for c in careers]
    for career in careers:
        assert set(career) == {
            "id", "title", "description", "matchPercent", "reason",
            "growthOutlook", "salaryRange",
        }
        assert isinstance(career["matchPercent"], int)
        assert 0 < career["matchPercent"] <= 100
        assert career["reason"].endswith(".")
    percents = [c["matchPercent"] for c in careers]
    assert percents == sorted(percents, reverse=True)


def test_recommend_is_repeatable():
    first = client.post("/api/recommend", json=SAMPLE_PROFILE)
    second = client.post("/api/recommend", json=SAMPLE_PROFILE)
    assert first.content == second.content


def test_recommend_no_match_message():
    response = client.post("/api/recommend", json={**SAMPLE_PROFILE, "educationLevel": "unknown"})
    assert response.status_code == 200
    assert response.json() == {
        "careers": [],
        "message": "No close matches found. Try broadening your interests or skills.",
    }


def test_recommend_missing_education():
    body = {k: v for k, v in SAMPLE_PROFILE.items() if k != "educationLevel"}
    response = client.post("/api/recommend", json=body)
    assert response.status_code == 400
    assert response.json()["detail"] == "Please select your education level."


def test_recommend_empty_interests():
    response = client.post("/api/recommend", json={**SAMPLE_PROFILE, "interests": []})
    assert response.status_code == 400
    assert response.json()["detail"] == "Please select at least one interest."


def test_recommend_empty_skills():
    response = client.post("/api/recommend", json={**SAMPLE_PROFILE, "skills": []})
    assert response.status_code == 400
    assert response.json()["detail"] == "Please select at least one skill."


def test_recommend_missing_industry():
    response = client.post("/api/recommend", json={**SAMPLE_PROFILE, "preferredIndustry": ""})
    assert response.status_code == 400
    assert response.json()["detail"] == "Please select a preferred industry."


def test_recommend_first_missing_field_reported():
    response = client.post("/api/recommend", json={})
    assert response.status_code == 400
    assert response.json()["detail"] == "Please select your education level."


def test_recommend_non_list_interests():
    response = client.post("/api/recommend", json={**SAMPLE_PROFILE, "interests": "technology"})
    assert response.status_code == 400
    assert response.json()["detail"] == "Please select at least one interest."


def test_recommend_non_list_skills():
    response = client.post("/api/recommend", json={**SAMPLE_PROFILE, "skills": {"programming": True}})
    assert response.status_code == 400
    assert response.json()["detail"] == "Please select at least one skill."


def test_recommend_long_education_level_is_unknown():
    response = client.post("/api/recommend", json={**SAMPLE_PROFILE, "educationLevel": "x" * 60})
    assert response.status_code == 200
    assert response.json() == {
        "careers": [],
        "message": "No close matches found. Try broadening your interests or skills.",
    }


def test_long_industry_never_matches():
    body = {**SAMPLE_PROFILE, "preferredIndustry": "y" * 80}
    assert client.post("/api/recommend", json=body).status_code == 200
    response = client.post("/api/careers/software-developer/score", json=body)
    assert response.status_code == 200
    assert response.json()["subScores"]["industry"] == 0


def test_recommend_with_injected_engine(engine):
    app.dependency_overrides[get_recommendation_engine] = lambda: engine
    try:
        response = client.post("/api/recommend", json=SAMPLE_PROFILE)
    finally:
        app.dependency_overrides.clear()
    assert response.status_code == 200
    careers = response.json()["careers"]
    assert [c["id"] for c in careers] == ["web-developer", "brand-designer"]
    assert careers[0]["matchPercent"] == 66


def test_score_career():
    response = client.post("/api/careers/software-developer/score", json=SAMPLE_PROFILE)
    assert response.status_code == 200
    data = response.json()
    assert data["careerId"] == "software-developer"
    assert data["eligible"] is True
    assert data["educationGap"] == 1
    assert data["subScores"]["industry"] == 100
    assert set(data["weights"]) == {"edu", "industry", "interests", "skills"}
    assert 0 < data["matchPercent"] <= 100


def test_score_career_unknown():
    response = client.post("/api/careers/astronaut/score", json=SAMPLE_PROFILE)
    assert response.status_code == 404


def test_score_career_validates_profile():
    response = client.post("/api/careers/software-developer/score", json={**SAMPLE_PROFILE, "skills": []})
    assert response.status_code == 400


def test_startup_loads_catalog(fresh_engine_cache):
    with TestClient(app) as started:
        response = started.get("/api/health")
    assert response.status_code == 200
    assert response.json()["careers_loaded"] > 0


def test_startup_fails_on_missing_catalog(fresh_engine_cache, monkeypatch, tmp_path):
    monkeypatch.setattr(settings, "catalog_path", tmp_path / "missing.json")
    with pytest.raises(CatalogError):
        with TestClient(app):
            pass
