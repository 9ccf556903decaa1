"""Ordering of CPE candidates from most to least specific."""

from typing import Iterable, List

from .constants import (
    SPECIFICITY_WEIGHT_PART,
    SPECIFICITY_WEIGHT_PRODUCT,
    SPECIFICITY_WEIGHT_TARGET_SW,
    SPECIFICITY_WEIGHT_VENDOR,
    SPECIFICITY_WEIGHT_VERSION,
)
from .models import ANY, CPE


def specificity_score(cpe: CPE) -> int:
    """
    Weighted count of the attributes that are not ANY.

    Args:
        cpe: CPE to score

    Returns:
        Score (higher = more specific)
    """
    weighted_fields = (
        (cpe.part, SPECIFICITY_WEIGHT_PART),
        (cpe.vendor, SPECIFICITY_WEIGHT_VENDOR),
        (cpe.product, SPECIFICITY_WEIGHT_PRODUCT),
        (cpe.version, SPECIFICITY_WEIGHT_VERSION),
        (cpe.target_sw, SPECIFICITY_WEIGHT_TARGET_SW),
    )
    return sum(weight for value, weight in weighted_fields if value is not ANY)


def sort_by_specificity(cpes: Iterable[CPE]) -> List[CPE]:
    # sorted() is stable, so equally specific CPEs keep their generation order
    return sorted(cpes, key=specificity_score, reverse=True)
