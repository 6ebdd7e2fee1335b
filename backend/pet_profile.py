"""
Pet profile input model
-----------------------
Request payloads arrive with loosely typed text fields (age "3", weight "60 lbs", ...).
PetProfile keeps the raw text for prompts/metadata and exposes parsed values for the
fallback templates. Building a profile never fails for any JSON object.
"""

import re
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from size_classifier import SizeCategory, classify_size

DEFAULT_AGE_YEARS = 1
DEFAULT_WEIGHT_UNITS = 10
DEFAULT_ACTIVITY_LEVEL = "Moderate"

ACTIVITY_LEVELS = ["Low", "Moderate", "High", "Very High"]

# Largest magnitude accepted for parsed age/weight
MAX_PARSED_VALUE = 1_000_000

_LEADING_INT = re.compile(r"^\s*([+-]?)(\d+)")


class Species(str, Enum):
    DOG = "dog"
    CAT = "cat"
    OTHER = "other"


class PlanCategory(str, Enum):
    NUTRITION = "nutrition"
    TRAINING = "training"
    HEALTH = "health"
    ACTIVITIES = "activities"
    GROOMING = "grooming"
    SOCIAL = "social"

    @classmethod
    def parse(cls, raw) -> Optional["PlanCategory"]:
        """Return the matching category, or None for anything unrecognized."""
        if isinstance(raw, str):
            raw = raw.strip()
        try:
            return cls(raw)
        except ValueError:
            return None


def parse_leading_int(value: Any, default: int) -> int:
    """
    Parse the leading integer of a value the way the web client's parseInt does:
    "3 years" -> 3, "12.9" -> 12, "abc" -> default. Zero also falls back to the default.
    Results are clamped to +/-MAX_PARSED_VALUE so template arithmetic stays in float range.
    """
    if value is None or isinstance(value, bool):
        return default
    match = _LEADING_INT.match(str(value))
    if not match:
        return default
    sign, digits = match.groups()
    digits = digits.lstrip("0")
    if len(digits) > len(str(MAX_PARSED_VALUE)):
        number = MAX_PARSED_VALUE
    else:
        number = min(int(digits or "0"), MAX_PARSED_VALUE)
    if sign == "-":
        number = -number
    return number or default


class PetProfile(BaseModel):
    """A pet described by the plan forms. Immutable for the lifetime of a request."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    pet_type: str = Field(default="", alias="petType", description="Species as entered, e.g. 'Dog'")
    breed: str = Field(default="", description="Free-text breed, display only")
    age: str = Field(default="", description="Age in years as entered")
    weight: str = Field(default="", description="Weight in lbs as entered")
    activity_level: str = Field(default=DEFAULT_ACTIVITY_LEVEL, alias="activityLevel")
    notes: str = Field(default="", description="Restrictions or free-text notes")

    @field_validator("pet_type", "breed", "age", "weight", mode="before")
    @classmethod
    def _coerce_text(cls, value):
        if value is None:
            return ""
        return str(value)

    @field_validator("activity_level", mode="before")
    @classmethod
    def _coerce_activity(cls, value):
        if value is None or not str(value).strip():
            return DEFAULT_ACTIVITY_LEVEL
        return str(value).strip()

    @field_validator("notes", mode="before")
    @classmethod
    def _coerce_notes(cls, value):
        if value is None:
            return ""
        return str(value).strip()

    # ---- derived values -------------------------------------------------

    @property
    def species_name(self) -> str:
        return self.pet_type.strip().lower()

    @property
    def species(self) -> Species:
        name = self.species_name
        if name == Species.DOG.value:
            return Species.DOG
        if name == Species.CAT.value:
            return Species.CAT
        return Species.OTHER

    @property
    def species_label(self) -> str:
        return self.species_name or "pet"

    @property
    def breed_label(self) -> str:
        return self.breed.strip() or "Mixed Breed"

    @property
    def age_years(self) -> int:
        return parse_leading_int(self.age, DEFAULT_AGE_YEARS)

    @property
    def weight_units(self) -> int:
        return parse_leading_int(self.weight, DEFAULT_WEIGHT_UNITS)

    @property
    def activity_tier(self) -> str:
        level = self.activity_level.lower()
        if level in ("high", "very high"):
            return "high"
        if level == "low":
            return "low"
        return "moderate"

    @property
    def size(self) -> SizeCategory:
        return classify_size(self.species_name, self.weight_units)

    @property
    def age_category(self) -> str:
        age = self.age_years
        if self.species is Species.DOG:
            if age < 2:
                return "puppy"
            return "senior dog" if age > 7 else "adult dog"
        if self.species is Species.CAT:
            if age < 1:
                return "kitten"
            return "senior cat" if age > 10 else "adult cat"
        return "pet"

    @property
    def has_notes(self) -> bool:
        return bool(self.notes)
