"""
Size classification for pets
Maps (species, weight in lbs) to a size bracket used in the care plan templates.
"""

from enum import Enum


class SizeCategory(str, Enum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
    EXTRA_LARGE = "extra-large"

    @property
    def label(self) -> str:
        return self.value.replace("-", " ").title().replace(" ", "-")


# Upper bounds (exclusive) for small, medium and large; anything above is extra-large
SIZE_THRESHOLDS = {
    "dog": (10, 30, 70),
    "cat": (5, 10, 15),
}


def classify_size(species, weight) -> SizeCategory:
    """
    Classify a pet into a size bracket.
    Species without thresholds are always medium. Zero and negative weights land in the lowest bracket.
    """
    thresholds = SIZE_THRESHOLDS.get((species or "").strip().lower())
    if thresholds is None:
        return SizeCategory.MEDIUM

    small, medium, large = thresholds
    if weight < small:
        return SizeCategory.SMALL
    if weight < medium:
        return SizeCategory.MEDIUM
    if weight < large:
        return SizeCategory.LARGE
    return SizeCategory.EXTRA_LARGE
