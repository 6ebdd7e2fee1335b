import pytest

import llm_client
import plan_orchestrator
from app_settings import Settings
from conftest import make_status_error
from pet_profile import PetProfile, PlanCategory
from plan_orchestrator import (
    DIET_NOTES_LABEL,
    SYSTEM_PROMPTS,
    MissingCredentialError,
    PlanResult,
    build_system_prompt,
    build_user_prompt,
    generate_plan,
)
from plan_templates import render_fallback_plan


def test_user_prompt_without_notes(labrador):
    assert build_user_prompt(labrador, "healthcare") == (
        "Create a healthcare plan for a 3 year old Labrador Dog that weighs 60 pounds with High activity level."
    )


def test_user_prompt_with_notes(labrador):
    profile = labrador.model_copy(update={"notes": "chicken allergy"})
    assert build_user_prompt(profile, "diet", DIET_NOTES_LABEL).endswith(
        "activity level. Note these dietary restrictions: chicken allergy."
    )
    assert build_user_prompt(profile, "training").endswith("Additional notes: chicken allergy.")


def test_system_prompts():
    assert build_system_prompt("nutrition").startswith("You are a professional pet nutritionist.")
    assert "veterinary care specialist" in build_system_prompt("health")
    assert "behavior specialist" in build_system_prompt("social")
    assert build_system_prompt("unknown-category") == SYSTEM_PROMPTS[PlanCategory.NUTRITION]
    assert build_system_prompt(None) == SYSTEM_PROMPTS[PlanCategory.NUTRITION]


@pytest.mark.parametrize("category", list(PlanCategory))
def test_system_prompts_list_what_to_include(category):
    prompt = build_system_prompt(category.value)

    assert prompt.startswith("You are a professional pet ")
    assert "\nInclude:\n1. " in prompt
    assert "\n6. Special considerations based on " in prompt
    assert prompt.endswith("Format your response with clear sections with emoji icons where appropriate.")


def test_scheduled_prompts_name_time_windows():
    assert "(morning 6-9am, midday 11am-1pm, afternoon 3-5pm, evening 6-8pm, night 9-11pm)" in (
        build_system_prompt("nutrition")
    )
    assert "(morning 6-9am, midday 11am-1pm, afternoon 3-5pm, evening 6-8pm)" in build_system_prompt("training")


def test_unknown_category_uses_nutrition_prompt_with_care_label(labrador, settings, fake_client):
    client = fake_client(content="plan")

    generate_plan(labrador, "dental", settings)

    messages = client.completions.calls[0]["messages"]
    assert messages[0]["content"] == SYSTEM_PROMPTS[PlanCategory.NUTRITION]
    assert messages[1]["content"].startswith("Create a care plan for a 3 year old Labrador Dog")


def test_missing_credential_raises_before_any_call(labrador, monkeypatch):
    def fail(settings):
        raise AssertionError("client must not be created")

    monkeypatch.setattr(llm_client, "create_chat_client", fail)

    with pytest.raises(MissingCredentialError, match="OpenAI API key not configured"):
        generate_plan(labrador, "nutrition", Settings())


def test_missing_credential_can_fall_back(labrador):
    result = generate_plan(labrador, "grooming", Settings(fallback_on_missing_key=True))

    assert result.is_fallback
    assert result.reason == "missing_credential"
    assert result.text == render_fallback_plan(labrador, "grooming")


def test_remote_success(labrador, settings, fake_client):
    client = fake_client(content="# Remote plan")

    result = generate_plan(labrador, "health", settings)

    assert result == PlanResult(text="# Remote plan", generated_by="remote")
    assert not result.is_fallback

    call = client.completions.calls[0]
    assert call["model"] == "gpt-4o-mini"
    assert [m["role"] for m in call["messages"]] == ["system", "user"]
    assert "veterinary care specialist" in call["messages"][0]["content"]
    assert call["messages"][1]["content"].startswith("Create a healthcare plan for a 3 year old Labrador Dog")


def test_explicit_client_is_used(labrador, settings):
    from conftest import FakeChatClient

    client = FakeChatClient(content="ok")
    assert generate_plan(labrador, "training", settings, client=client).text == "ok"
    assert len(client.completions.calls) == 1


def test_diet_overrides(labrador, settings, fake_client):
    client = fake_client(content="diet")

    generate_plan(
        labrador,
        "nutrition",
        settings,
        category_label="diet",
        notes_label=DIET_NOTES_LABEL,
        system_prompt=plan_orchestrator.DIET_SYSTEM_PROMPT,
    )

    messages = client.completions.calls[0]["messages"]
    assert "personalized diet plan" in messages[0]["content"]
    assert messages[1]["content"].startswith("Create a diet plan for")


def test_missing_plan_type_is_nutrition(labrador, settings, fake_client):
    client = fake_client(error=RuntimeError("boom"))

    result = generate_plan(labrador, None, settings)

    assert client.completions.calls[0]["messages"][1]["content"].startswith("Create a nutrition plan")
    assert result.text == render_fallback_plan(labrador, "nutrition")


def test_rate_limited_call_falls_back(labrador, settings, fake_client):
    fake_client(error=make_status_error(429, {"error": {"message": "Rate limit reached"}}))

    result = generate_plan(labrador, "activities", settings)

    assert result.is_fallback
    assert result.reason == "http_429"
    assert result.text == render_fallback_plan(labrador, "activities")


def test_client_exception_falls_back(labrador, settings, fake_client):
    fake_client(error=ConnectionError("network down"))

    result = generate_plan(labrador, "social", settings)

    assert result.generated_by == "fallback"
    assert result.reason == "exception"


@pytest.mark.parametrize("content", [None, "", "   "])
def test_empty_completion_falls_back(labrador, settings, fake_client, content):
    fake_client(content=content)

    result = generate_plan(labrador, "training", settings)

    assert result.reason == "exception"
    assert result.text == render_fallback_plan(labrador, "training")


def test_unknown_category_falls_back_to_generic(settings, fake_client):
    fake_client(error=make_status_error(500))
    profile = PetProfile(petType="Cat", breed="Ragdoll")

    result = generate_plan(profile, "dental", settings)

    assert result.reason == "http_500"
    assert result.text.startswith("# 📋 dental Care Plan for Ragdoll cat")
