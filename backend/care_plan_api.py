"""
Care Plan API Blueprint
Pet diet and care plan endpoints, registered on the main Flask app in backend.py

CORS:
- flask-cors is configured on the main app for /api/*
- The two plan endpoints also answer their own preflight (OPTIONS) requests and
  attach the same headers to every JSON response, so browser clients calling
  them directly always see the expected headers
"""

from flask import Blueprint, jsonify, request
from datetime import datetime, timezone
import logging
import traceback

from app_settings import Settings
from pet_profile import PetProfile
import plan_orchestrator
from plan_orchestrator import (
    DIET_NOTES_LABEL,
    DIET_SYSTEM_PROMPT,
    CARE_NOTES_LABEL,
    PLAN_CATALOGUE,
    PLAN_LABELS,
    PlanServiceError,
)

logger = logging.getLogger(__name__)

care_plan_bp = Blueprint('care_plan_api', __name__, url_prefix='/api')

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
}

PROFILE_FIELDS = ("petType", "breed", "age", "weight", "activityLevel")


def _json_response(payload, status=200):
    response = jsonify(payload)
    response.status_code = status
    response.headers.update(CORS_HEADERS)
    return response


def _preflight():
    return "", 200, CORS_HEADERS


def _read_payload() -> dict:
    """Parse the request body; anything other than a JSON object is rejected."""
    payload = request.get_json(force=True)
    if not isinstance(payload, dict):
        raise PlanServiceError("Request body must be a JSON object")
    return payload


def _profile_metadata(payload: dict, *extra_fields) -> dict:
    return {field: payload.get(field) for field in PROFILE_FIELDS + extra_fields}


# ==================== PLAN ENDPOINTS ====================

@care_plan_bp.route("/generate-diet-plan", methods=["POST", "OPTIONS"])
def generate_diet_plan():
    """Nutrition plan for a pet; dietaryRestrictions are passed on as notes"""
    if request.method == "OPTIONS":
        return _preflight()

    try:
        payload = _read_payload()
        settings = Settings.from_env()

        profile = PetProfile.model_validate({
            "petType": payload.get("petType"),
            "breed": payload.get("breed"),
            "age": payload.get("age"),
            "weight": payload.get("weight"),
            "activityLevel": payload.get("activityLevel"),
            "notes": payload.get("dietaryRestrictions"),
        })
        logger.info(f"🍖 Diet plan requested for {profile.breed_label} {profile.species_label}")

        result = plan_orchestrator.generate_plan(
            profile,
            "nutrition",
            settings,
            category_label="diet",
            notes_label=DIET_NOTES_LABEL,
            system_prompt=DIET_SYSTEM_PROMPT,
        )

        body = {
            "dietPlan": result.text,
            "metadata": _profile_metadata(payload),
        }
        if result.is_fallback:
            body["generatedBy"] = result.generated_by
        return _json_response(body)

    except Exception as e:
        logger.error(f"❌ Error generating diet plan: {e}")
        if not isinstance(e, PlanServiceError):
            logger.error(f"Traceback: {traceback.format_exc()}")
        return _json_response({"error": str(e)}, 500)


@care_plan_bp.route("/generate-pet-care-plan", methods=["POST", "OPTIONS"])
def generate_pet_care_plan():
    """Care plan for one of the plan categories (planType), defaults to nutrition"""
    if request.method == "OPTIONS":
        return _preflight()

    try:
        payload = _read_payload()
        settings = Settings.from_env()

        profile = PetProfile.model_validate({
            "petType": payload.get("petType"),
            "breed": payload.get("breed"),
            "age": payload.get("age"),
            "weight": payload.get("weight"),
            "activityLevel": payload.get("activityLevel"),
            "notes": payload.get("notes"),
        })
        plan_type = payload.get("planType")
        logger.info(f"📋 {plan_type or 'nutrition'} plan requested for {profile.breed_label} {profile.species_label}")

        result = plan_orchestrator.generate_plan(profile, plan_type, settings, notes_label=CARE_NOTES_LABEL)

        body = {
            "carePlan": result.text,
            "metadata": _profile_metadata(payload, "notes", "planType"),
        }
        if result.is_fallback:
            body["generatedBy"] = result.generated_by
        return _json_response(body)

    except Exception as e:
        logger.error(f"❌ Error generating care plan: {e}")
        if not isinstance(e, PlanServiceError):
            logger.error(f"Traceback: {traceback.format_exc()}")
        return _json_response({"error": str(e)}, 500)


# ==================== CATALOGUE & HEALTH ====================

@care_plan_bp.route("/plan-types", methods=["GET"])
def list_plan_types():
    """Plan categories offered by the plan picker"""
    return jsonify([
        {
            "key": entry["key"].value,
            "title": entry["title"],
            "description": entry["description"],
            "name": PLAN_LABELS[entry["key"]],
        }
        for entry in PLAN_CATALOGUE
    ]), 200


@care_plan_bp.route("/health", methods=["GET"])
def api_health_check():
    """API health check"""
    settings = Settings.from_env()
    return jsonify({
        "status": "healthy",
        "service": "Care Plan API Blueprint",
        "openai_configured": settings.openai_configured,
        "model": settings.model_name,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }), 200
