"""
Plan generation orchestrator
============================
Asks the chat completion service for a plan and falls back to the deterministic
templates in plan_templates whenever the remote call cannot produce one.

Flow per request:
  1. credential check (before any network call)
  2. one chat.completions.create call with [system, user] messages
  3. non-2xx responses -> fallback (reason "http_<status>")
  4. any other failure or empty completion -> fallback (reason "exception")
"""

import logging
import traceback
from dataclasses import dataclass
from typing import Optional

import openai

import llm_client
from app_settings import Settings
from pet_profile import PetProfile, PlanCategory
from plan_templates import render_fallback_plan

logger = logging.getLogger(__name__)

GENERATED_BY_REMOTE = "remote"
GENERATED_BY_FALLBACK = "fallback"

MISSING_CREDENTIAL_MESSAGE = "OpenAI API key not configured"

DIET_NOTES_LABEL = "Note these dietary restrictions"
CARE_NOTES_LABEL = "Additional notes"

DIET_SYSTEM_PROMPT = (
    "You are a professional pet nutritionist. Create a detailed, personalized diet plan for pets "
    "based on the information provided. Include daily feeding schedules, portion sizes, recommended "
    "foods, and any supplements if needed. Format your response with clear sections."
)

SCHEDULE_WINDOWS = "morning 6-9am, midday 11am-1pm, afternoon 3-5pm, evening 6-8pm"
FORMAT_INSTRUCTION = "Format your response with clear sections with emoji icons where appropriate."

SYSTEM_PROMPTS = {
    PlanCategory.NUTRITION: f"""You are a professional pet nutritionist. Create a detailed, personalized diet plan for pets based on the information provided.
Include:
1. Daily feeding schedule with specific times ({SCHEDULE_WINDOWS}, night 9-11pm)
2. Portion sizes tailored to the pet's weight and activity level
3. Recommended foods with specific brands if applicable
4. Supplement recommendations
5. Hydration guidance
6. Special considerations based on breed-specific needs

{FORMAT_INSTRUCTION}""",
    PlanCategory.TRAINING: f"""You are a professional pet trainer. Create a detailed, personalized training plan for pets based on the information provided.
Include:
1. Daily training schedule with specific times ({SCHEDULE_WINDOWS})
2. Beginner to advanced techniques appropriate for the pet's age and breed
3. Recommended training tools and treats
4. Training milestones by week
5. Tips for common behavioral challenges specific to this breed
6. Special considerations based on breed-specific traits

{FORMAT_INSTRUCTION}""",
    PlanCategory.HEALTH: f"""You are a professional veterinary care specialist. Create a detailed, personalized healthcare plan for pets based on the information provided.
Include:
1. Daily care routine with specific times ({SCHEDULE_WINDOWS})
2. Preventative care schedule (vaccinations, check-ups)
3. Grooming and hygiene recommendations
4. Common health issues to watch for in this breed
5. Exercise requirements for optimal health
6. Special considerations based on breed-specific health needs

{FORMAT_INSTRUCTION}""",
    PlanCategory.ACTIVITIES: f"""You are a professional pet activity and enrichment specialist. Create a detailed, personalized activity plan for pets based on the information provided.
Include:
1. Daily activity schedule with specific times ({SCHEDULE_WINDOWS})
2. Age and breed-appropriate exercise recommendations
3. Mental stimulation activities and games
4. Indoor vs outdoor activity balance
5. Socialization opportunities
6. Special considerations based on breed-specific energy levels and instincts

{FORMAT_INSTRUCTION}""",
    PlanCategory.GROOMING: f"""You are a professional pet groomer. Create a detailed, personalized grooming plan for pets based on the information provided.
Include:
1. Daily, weekly, and monthly grooming schedule with specific times
2. Coat care specific to the breed (brushing, bathing frequency)
3. Nail, ear, teeth, and eye care routines
4. Recommended grooming tools and products
5. Professional grooming visit frequency
6. Special considerations based on breed-specific coat type and skin needs

{FORMAT_INSTRUCTION}""",
    PlanCategory.SOCIAL: f"""You are a professional pet behavior specialist. Create a detailed, personalized socialization plan for pets based on the information provided.
Include:
1. Daily socialization schedule with specific times
2. Age-appropriate socialization activities
3. Techniques for introducing to new people, animals, and environments
4. Signs of stress to watch for and how to address them
5. Breed-specific social tendencies and how to work with them
6. Special considerations based on the pet's history and personality traits

{FORMAT_INSTRUCTION}""",
}

# Wording used in the user prompt, e.g. "Create a healthcare plan for ..."
PLAN_LABELS = {
    PlanCategory.NUTRITION: "nutrition",
    PlanCategory.TRAINING: "training",
    PlanCategory.HEALTH: "healthcare",
    PlanCategory.ACTIVITIES: "activity",
    PlanCategory.GROOMING: "grooming",
    PlanCategory.SOCIAL: "socialization",
}
DEFAULT_PLAN_LABEL = "care"

# Catalogue shown by the plan picker
PLAN_CATALOGUE = [
    {"key": PlanCategory.NUTRITION, "title": "Nutrition Plan", "description": "Personalized diet and feeding schedule"},
    {"key": PlanCategory.TRAINING, "title": "Training Plan", "description": "Behavior training and tricks"},
    {"key": PlanCategory.HEALTH, "title": "Healthcare Plan", "description": "Wellness and preventative care routine"},
    {"key": PlanCategory.ACTIVITIES, "title": "Activities Plan", "description": "Exercise and play recommendations"},
    {"key": PlanCategory.GROOMING, "title": "Grooming Plan", "description": "Cleaning and maintenance guide"},
    {"key": PlanCategory.SOCIAL, "title": "Socialization Plan",
     "description": "Interaction strategies with humans and other animals"},
]


class PlanServiceError(Exception):
    """Base class for errors surfaced to API callers."""


class MissingCredentialError(PlanServiceError):
    def __init__(self, message: str = MISSING_CREDENTIAL_MESSAGE):
        super().__init__(message)


@dataclass(frozen=True)
class PlanResult:
    text: str
    generated_by: str
    reason: Optional[str] = None

    @property
    def is_fallback(self) -> bool:
        return self.generated_by == GENERATED_BY_FALLBACK


def plan_label(plan_type) -> str:
    category = PlanCategory.parse(plan_type)
    return PLAN_LABELS.get(category, DEFAULT_PLAN_LABEL)


def build_system_prompt(plan_type) -> str:
    """Persona prompt for the category; unknown or missing categories get the nutrition prompt."""
    return SYSTEM_PROMPTS.get(PlanCategory.parse(plan_type), SYSTEM_PROMPTS[PlanCategory.NUTRITION])


def build_user_prompt(profile: PetProfile, category_label: str, notes_label: str = CARE_NOTES_LABEL) -> str:
    """Compose the user message from the raw profile fields as entered."""
    prompt = (
        f"Create a {category_label} plan for a {profile.age} year old {profile.breed} {profile.pet_type} "
        f"that weighs {profile.weight} pounds with {profile.activity_level} activity level."
    )
    if profile.has_notes:
        prompt += f" {notes_label}: {profile.notes}."
    return prompt


def _fallback(profile: PetProfile, plan_type, reason: str) -> PlanResult:
    logger.info(f"🔄 Using fallback template plan (reason: {reason})")
    return PlanResult(text=render_fallback_plan(profile, plan_type), generated_by=GENERATED_BY_FALLBACK, reason=reason)


def generate_plan(
    profile: PetProfile,
    plan_type,
    settings: Settings,
    client=None,
    *,
    category_label: Optional[str] = None,
    notes_label: str = CARE_NOTES_LABEL,
    system_prompt: Optional[str] = None,
) -> PlanResult:
    """
    Produce a plan for the profile, preferring the remote model.

    Raises MissingCredentialError when no API key is configured (unless
    settings.fallback_on_missing_key is set). Remote failures never raise;
    they return a fallback PlanResult instead.
    """
    if not settings.openai_configured:
        if settings.fallback_on_missing_key:
            logger.warning("⚠️ OpenAI API key not configured, serving template plan")
            return _fallback(profile, plan_type, "missing_credential")
        logger.error("❌ OpenAI API key not configured")
        raise MissingCredentialError()

    if plan_type is None or not str(plan_type).strip():
        plan_type = PlanCategory.NUTRITION.value

    system_content = system_prompt or build_system_prompt(plan_type)
    user_content = build_user_prompt(profile, category_label or plan_label(plan_type), notes_label)

    try:
        if client is None:
            client = llm_client.create_chat_client(settings)

        logger.info(f"🤖 Requesting {plan_type} plan from {settings.model_name}")
        response = client.chat.completions.create(
            model=settings.model_name,
            messages=[
                {"role": "system", "content": system_content},
                {"role": "user", "content": user_content},
            ],
        )
        text = response.choices[0].message.content
    except openai.APIStatusError as e:
        logger.error(f"❌ OpenAI API error {e.status_code}: {e.body or e.message}")
        return _fallback(profile, plan_type, f"http_{e.status_code}")
    except Exception as e:
        logger.error(f"❌ Error calling OpenAI: {e}")
        logger.error(f"Traceback: {traceback.format_exc()}")
        return _fallback(profile, plan_type, "exception")

    if not text or not text.strip():
        logger.error("❌ OpenAI returned an empty completion")
        return _fallback(profile, plan_type, "exception")

    logger.info(f"✅ Plan generated by {settings.model_name} ({len(text)} chars)")
    return PlanResult(text=text, generated_by=GENERATED_BY_REMOTE)
