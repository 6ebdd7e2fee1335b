import pytest

from pet_profile import ACTIVITY_LEVELS, MAX_PARSED_VALUE, PetProfile, PlanCategory, Species, parse_leading_int
from size_classifier import SizeCategory


@pytest.mark.parametrize("value, expected", [
    ("3", 3),
    ("3 years", 3),
    ("12.9", 12),
    ("  7", 7),
    ("-2", -2),
    (5, 5),
    ("abc", 10),
    ("", 10),
    (None, 10),
    ("0", 10),
])
def test_parse_leading_int(value, expected):
    assert parse_leading_int(value, 10) == expected


def test_profile_accepts_request_field_names():
    profile = PetProfile.model_validate({
        "petType": "Dog",
        "breed": "Labrador",
        "age": "3",
        "weight": "60",
        "activityLevel": "High",
        "notes": "  grain-free  ",
        "planType": "health",
    })
    assert profile.pet_type == "Dog"
    assert profile.species is Species.DOG
    assert profile.age_years == 3
    assert profile.weight_units == 60
    assert profile.activity_tier == "high"
    assert profile.notes == "grain-free"
    assert profile.size == SizeCategory.LARGE


def test_numbers_and_nulls_are_coerced():
    profile = PetProfile.model_validate({"petType": None, "age": 4, "weight": None, "activityLevel": None})
    assert profile.age == "4"
    assert profile.weight == ""
    assert profile.weight_units == 10
    assert profile.activity_level == "Moderate"
    assert profile.species is Species.OTHER
    assert profile.species_label == "pet"


def test_empty_object_uses_defaults():
    profile = PetProfile.model_validate({})
    assert profile.age_years == 1
    assert profile.weight_units == 10
    assert profile.breed_label == "Mixed Breed"
    assert not profile.has_notes


@pytest.mark.parametrize("level, tier", [
    ("High", "high"),
    ("very high", "high"),
    ("LOW", "low"),
    ("Moderate", "moderate"),
    ("sleepy", "moderate"),
])
def test_activity_tier(level, tier):
    assert PetProfile(activityLevel=level).activity_tier == tier


@pytest.mark.parametrize("pet_type, age, category", [
    ("Dog", "1", "puppy"),
    ("Dog", "2", "adult dog"),
    ("Dog", "8", "senior dog"),
    ("Cat", "1", "adult cat"),
    ("Cat", "11", "senior cat"),
    ("Cat", "-1", "kitten"),
    ("Rabbit", "3", "pet"),
])
def test_age_category(pet_type, age, category):
    assert PetProfile(petType=pet_type, age=age).age_category == category


def test_whitespace_notes_count_as_empty():
    assert not PetProfile(notes="   ").has_notes
    assert PetProfile(notes=None) == PetProfile(notes="")


def test_plan_category_parse():
    assert PlanCategory.parse("health") is PlanCategory.HEALTH
    assert PlanCategory.parse(" social ") is PlanCategory.SOCIAL
    assert PlanCategory.parse("unknown-category") is None
    assert PlanCategory.parse(None) is None


@pytest.mark.parametrize("value, expected", [
    ("1" + "0" * 400, MAX_PARSED_VALUE),
    ("9" * 5000, MAX_PARSED_VALUE),
    ("-" + "9" * 5000, -MAX_PARSED_VALUE),
    ("0000000000000000000042", 42),
    ("2000000 lbs", MAX_PARSED_VALUE),
])
def test_huge_numbers_are_clamped(value, expected):
    assert parse_leading_int(value, 10) == expected


def test_form_activity_levels_cover_every_tier():
    tiers = [PetProfile(activityLevel=level).activity_tier for level in ACTIVITY_LEVELS]
    assert tiers == ["low", "moderate", "high", "high"]
