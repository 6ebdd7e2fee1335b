import pytest

from conftest import make_status_error
from pet_profile import PetProfile
from plan_templates import render_fallback_plan

CORS_ORIGIN = "*"
CORS_ALLOWED_HEADERS = "authorization, x-client-info, apikey, content-type"

LABRADOR_PAYLOAD = {
    "petType": "Dog",
    "breed": "Labrador",
    "age": "3",
    "weight": "60",
    "activityLevel": "High",
}

ENDPOINTS = ["/api/generate-diet-plan", "/api/generate-pet-care-plan"]


def assert_cors(response):
    assert response.headers["Access-Control-Allow-Origin"] == CORS_ORIGIN
    assert response.headers["Access-Control-Allow-Headers"] == CORS_ALLOWED_HEADERS


@pytest.mark.parametrize("url", ENDPOINTS)
def test_preflight(client, url):
    response = client.options(url)

    assert response.status_code == 200
    assert response.data == b""
    assert_cors(response)


@pytest.mark.parametrize("url", ENDPOINTS)
def test_missing_key_returns_500(client, url):
    response = client.post(url, json={**LABRADOR_PAYLOAD, "planType": "health"})

    assert response.status_code == 500
    assert response.get_json() == {"error": "OpenAI API key not configured"}
    assert_cors(response)


def test_missing_key_fallback_flag(client, monkeypatch):
    monkeypatch.setenv("FALLBACK_ON_MISSING_KEY", "true")

    response = client.post("/api/generate-pet-care-plan", json={**LABRADOR_PAYLOAD, "planType": "training"})

    assert response.status_code == 200
    body = response.get_json()
    assert body["generatedBy"] == "fallback"
    assert body["carePlan"].startswith("# 🐕 Personalized Training Plan for Labrador Dog")


@pytest.mark.parametrize("url", ENDPOINTS)
def test_invalid_json_returns_500(client, api_key, url):
    response = client.post(url, data="{not json", content_type="application/json")

    assert response.status_code == 500
    assert "error" in response.get_json()
    assert_cors(response)


@pytest.mark.parametrize("url", ENDPOINTS)
def test_non_object_body_returns_500(client, api_key, url):
    response = client.post(url, json=["Dog", "Labrador"])

    assert response.status_code == 500
    assert response.get_json() == {"error": "Request body must be a JSON object"}


def test_diet_plan_from_remote(client, api_key, fake_client):
    completions = fake_client(content="# Remote diet plan").completions

    response = client.post("/api/generate-diet-plan", json={**LABRADOR_PAYLOAD, "dietaryRestrictions": "no beef"})

    assert response.status_code == 200
    body = response.get_json()
    assert body == {
        "dietPlan": "# Remote diet plan",
        "metadata": LABRADOR_PAYLOAD,
    }
    assert_cors(response)
    user_prompt = completions.calls[0]["messages"][1]["content"]
    assert user_prompt == (
        "Create a diet plan for a 3 year old Labrador Dog that weighs 60 pounds with High activity level. "
        "Note these dietary restrictions: no beef."
    )


def test_diet_plan_falls_back_on_remote_failure(client, api_key, fake_client):
    fake_client(error=make_status_error(503))

    response = client.post("/api/generate-diet-plan", json=LABRADOR_PAYLOAD)

    assert response.status_code == 200
    body = response.get_json()
    assert body["generatedBy"] == "fallback"
    assert "- Main meal: 9 oz" in body["dietPlan"]
    assert "- Total daily food: 18 oz" in body["dietPlan"]


def test_care_plan_rate_limited(client, api_key, fake_client):
    fake_client(error=make_status_error(429, {"error": {"message": "Rate limit reached"}}))
    payload = {**LABRADOR_PAYLOAD, "notes": "", "planType": "health"}

    response = client.post("/api/generate-pet-care-plan", json=payload)

    assert response.status_code == 200
    body = response.get_json()
    assert body["generatedBy"] == "fallback"
    assert body["carePlan"] == render_fallback_plan(PetProfile.model_validate(payload), "health")
    assert body["metadata"] == payload
    assert_cors(response)


def test_care_plan_from_remote(client, api_key, fake_client):
    completions = fake_client(content="# Remote grooming plan").completions
    payload = {**LABRADOR_PAYLOAD, "notes": "hates baths", "planType": "grooming"}

    response = client.post("/api/generate-pet-care-plan", json=payload)

    body = response.get_json()
    assert body["carePlan"] == "# Remote grooming plan"
    assert "generatedBy" not in body
    messages = completions.calls[0]["messages"]
    assert "groomer" in messages[0]["content"]
    assert messages[1]["content"].endswith("Additional notes: hates baths.")


def test_care_plan_unknown_type_metadata_echoes_raw_values(client, api_key, fake_client):
    fake_client(error=RuntimeError("boom"))
    payload = {"petType": "Cat", "breed": "", "age": 4, "weight": "abc", "planType": "dental"}

    response = client.post("/api/generate-pet-care-plan", json=payload)

    body = response.get_json()
    assert body["metadata"] == {
        "petType": "Cat",
        "breed": "",
        "age": 4,
        "weight": "abc",
        "activityLevel": None,
        "notes": None,
        "planType": "dental",
    }
    assert body["carePlan"].startswith("# 📋 dental Care Plan for Mixed Breed cat")


def test_plan_types(client):
    response = client.get("/api/plan-types")

    assert response.status_code == 200
    plan_types = response.get_json()
    assert [p["key"] for p in plan_types] == [
        "nutrition", "training", "health", "activities", "grooming", "social",
    ]
    health = plan_types[2]
    assert health == {
        "key": "health",
        "title": "Healthcare Plan",
        "description": "Wellness and preventative care routine",
        "name": "healthcare",
    }


def test_health_check(client, api_key):
    response = client.get("/api/health")

    body = response.get_json()
    assert body["status"] == "healthy"
    assert body["openai_configured"] is True
    assert body["model"] == "gpt-4o-mini"
    assert "timestamp" in body


@pytest.mark.parametrize("url", ENDPOINTS)
def test_huge_weight_still_falls_back_on_rate_limit(client, api_key, fake_client, url):
    fake_client(error=make_status_error(429))
    payload = {**LABRADOR_PAYLOAD, "weight": "9" * 5000, "age": "1" + "0" * 400, "planType": "activities"}

    response = client.post(url, json=payload)

    assert response.status_code == 200
    body = response.get_json()
    assert body["generatedBy"] == "fallback"
    assert body["metadata"]["weight"] == payload["weight"]
