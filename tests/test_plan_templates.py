import pytest

from pet_profile import PetProfile, PlanCategory
from plan_templates import dog_daily_activity_minutes, render_fallback_plan, round_half_up

ALL_CATEGORIES = [category.value for category in PlanCategory]


def _profile(**fields):
    return PetProfile.model_validate(fields)


@pytest.mark.parametrize("value, expected", [(0.5, 1), (1.49, 1), (2.5, 3), (9.0, 9), (17.99, 18)])
def test_round_half_up(value, expected):
    assert round_half_up(value) == expected


def test_labrador_nutrition_portions(labrador):
    plan = render_fallback_plan(labrador, "nutrition")

    assert plan.startswith("# 🐕 Personalized Diet Plan for Labrador Dog")
    assert "- Main meal: 9 oz of high-quality dog food" in plan
    assert "- Second main meal: 9 oz of high-quality dog food" in plan
    assert "- Total daily food: 18 oz" in plan
    assert "increase portions by 15-20%" in plan
    assert "- **Size:** Large" in plan
    assert "- **Activity Level:** High 🏃" in plan
    assert "Labrador-Specific Considerations" in plan


def test_low_activity_dog_decreases_portions():
    plan = render_fallback_plan(_profile(petType="dog", breed="Pug", age="4", weight="20", activityLevel="Low"))
    assert "decrease portions by 10-15%" in plan
    assert "- Total daily food: 6 oz" in plan
    assert "😴" in plan


def test_cat_with_unparseable_age():
    profile = _profile(petType="Cat", breed="Siamese", age="abc", weight="8", activityLevel="Moderate")
    plan = render_fallback_plan(profile, "nutrition")

    assert plan.startswith("# 🐱 Personalized Diet Plan for Siamese Cat")
    assert "- **Age:** 1 years (adult cat)" in plan
    assert "- First meal: 1 oz of high-quality cat food" in plan
    assert "- Total daily food: 2 oz" in plan
    assert "- **Size:** Medium" in plan


def test_missing_plan_type_renders_nutrition(labrador):
    assert render_fallback_plan(labrador) == render_fallback_plan(labrador, "nutrition")
    assert render_fallback_plan(labrador, "") == render_fallback_plan(labrador, "nutrition")


@pytest.mark.parametrize("plan_type", ALL_CATEGORIES)
def test_rendering_is_deterministic(labrador, plan_type):
    assert render_fallback_plan(labrador, plan_type) == render_fallback_plan(labrador, plan_type)


@pytest.mark.parametrize("plan_type", ALL_CATEGORIES)
@pytest.mark.parametrize("pet_type", ["Dog", "Cat", "Bird", "Hamster", ""])
def test_every_category_renders_for_every_species(pet_type, plan_type):
    plan = render_fallback_plan(_profile(petType=pet_type, age="x", weight=""), plan_type)
    assert plan.startswith("# ")
    assert "## Pet Profile" in plan


@pytest.mark.parametrize("plan_type", ALL_CATEGORIES)
def test_other_species_template_names_the_species(plan_type):
    plan = render_fallback_plan(_profile(petType="Bird", breed="Cockatiel", age="2"), plan_type)
    assert plan.startswith("# 🐦 ")
    assert "Cockatiel bird" in plan.splitlines()[0]
    assert "- **Species:** bird" in plan


@pytest.mark.parametrize("plan_type", ALL_CATEGORIES + ["unknown-category"])
def test_empty_and_missing_notes_render_the_same(plan_type):
    with_none = _profile(petType="Dog", breed="Beagle", notes=None)
    with_blank = _profile(petType="Dog", breed="Beagle", notes="")
    assert render_fallback_plan(with_none, plan_type) == render_fallback_plan(with_blank, plan_type)


def test_nutrition_notes_replace_placeholder(labrador):
    without_notes = render_fallback_plan(labrador, "nutrition")
    assert "- No specific dietary restrictions noted" in without_notes
    assert "## 📌 Special Considerations" not in without_notes

    with_notes = render_fallback_plan(labrador.model_copy(update={"notes": "grain-free only"}), "nutrition")
    assert "No specific dietary restrictions noted" not in with_notes
    assert with_notes.endswith("## 📌 Special Considerations\n- grain-free only")


def test_health_notes_replace_placeholder():
    profile = _profile(petType="Cat", breed="Persian", age="12", weight="9")
    assert "- No specific health concerns noted" in render_fallback_plan(profile, "health")

    plan = render_fallback_plan(profile.model_copy(update={"notes": "kidney diet"}), "health")
    assert "No specific health concerns noted" not in plan
    assert plan.endswith("- kidney diet")


@pytest.mark.parametrize("plan_type, placeholder", [
    ("training", "No specific training challenges noted"),
    ("activities", "No specific activity restrictions noted"),
    ("grooming", "No specific grooming challenges noted"),
    ("social", "No specific socialization challenges noted"),
])
def test_trailing_special_considerations(labrador, plan_type, placeholder):
    plan = render_fallback_plan(labrador, plan_type)
    assert plan.endswith(f"## 📌 Special Considerations\n- {placeholder}")

    noted = render_fallback_plan(labrador.model_copy(update={"notes": "afraid of thunder"}), plan_type)
    assert noted.endswith("## 📌 Special Considerations\n- afraid of thunder")


def test_unknown_category_uses_generic_plan(labrador):
    plan = render_fallback_plan(labrador, "unknown-category")
    lines = plan.splitlines()

    assert lines[0] == "# 📋 unknown-category Care Plan for Labrador dog"
    assert "- **Breed:** Labrador" in plan
    assert "- **Weight:** 60 lbs" in plan
    assert lines[-1] == "- Please research the specific unknown-category needs of your dog"


def test_dog_activity_minutes():
    husky_pup = _profile(petType="Dog", breed="Husky", age="1", activityLevel="High")
    assert dog_daily_activity_minutes(husky_pup, "high") == 58

    old_bulldog = _profile(petType="Dog", breed="Bulldog", age="10", activityLevel="Low")
    assert dog_daily_activity_minutes(old_bulldog, "low") == 14


def test_dog_activities_plan_scales_sessions():
    plan = render_fallback_plan(_profile(petType="Dog", breed="Husky", age="1", activityLevel="High"), "activities")
    assert "- **Recommended daily activity:** 58 minutes" in plan
    assert "- 23 minute brisk walk or light jog" in plan
    assert "- 29 minute main exercise session:" in plan
    assert "- Puppy socialization classes" in plan


def test_cat_grooming_picks_coat_type():
    plan = render_fallback_plan(_profile(petType="Cat", breed="Sphynx", age="3", weight="7"), "grooming")
    assert "- **Coat Type:** Minimal to no coat, oily skin" in plan
    assert "- Weekly with specialized shampoo" in plan


def test_defaulted_weight_still_renders_portions():
    plan = render_fallback_plan(_profile(petType="Dog", weight="heavy"), "nutrition")
    assert "- **Weight:** 10 lbs" in plan
    assert "- Main meal: 2 oz" in plan
    assert "- Total daily food: 3 oz" in plan
    assert "Mixed Breed Dog" in plan.splitlines()[0]


@pytest.mark.parametrize("plan_type", ALL_CATEGORIES + ["unknown-category"])
@pytest.mark.parametrize("pet_type", ["Dog", "Cat", "Bird"])
@pytest.mark.parametrize("number", ["1" + "0" * 400, "9" * 5000, "-" + "9" * 5000])
def test_huge_age_and_weight_still_render(pet_type, plan_type, number):
    plan = render_fallback_plan(_profile(petType=pet_type, age=number, weight=number), plan_type)
    assert plan.startswith("# ")


def test_huge_weight_uses_clamped_value():
    plan = render_fallback_plan(_profile(petType="Dog", weight="9" * 5000), "nutrition")
    assert "- **Weight:** 1000000 lbs" in plan
    assert "- Total daily food: 300000 oz" in plan
    assert "- **Size:** Extra-Large" in plan
