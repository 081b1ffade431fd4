"""Canonical mission categories for free-text mission/experiment labels"""

from enum import Enum
from typing import Callable, List, Optional, Tuple


class MissionCategory(str, Enum):
    ISS = "ISS"
    SHUTTLE = "Shuttle"
    GENELAB = "GeneLab"
    VEGGIE = "VEGGIE"
    APH = "APH"
    RODENT_RESEARCH = "Rodent Research"
    ARTEMIS = "Artemis"
    TWINS_STUDY = "Twins Study"
    NOT_APPLICABLE = "N/A"
    OTHER = "Other"


def _contains(*keywords: str) -> Callable[[str], bool]:
    return lambda text: any(keyword in text for keyword in keywords)


def _equals(value: str) -> Callable[[str], bool]:
    return lambda text: text == value


# Evaluated in order, first match wins. "ISS Expedition 42 GLDS-242" is ISS.
MISSION_RULES: List[Tuple[Callable[[str], bool], MissionCategory]] = [
    (_contains("iss", "expedition"), MissionCategory.ISS),
    (_contains("shuttle", "sts"), MissionCategory.SHUTTLE),
    (_contains("glds"), MissionCategory.GENELAB),
    (_contains("veggie"), MissionCategory.VEGGIE),
    (_contains("aph"), MissionCategory.APH),
    (_contains("rr-", "rodent research"), MissionCategory.RODENT_RESEARCH),
    (_contains("artemis"), MissionCategory.ARTEMIS),
    (_contains("twins study"), MissionCategory.TWINS_STUDY),
    (_equals("n/a"), MissionCategory.NOT_APPLICABLE),
]


def normalize(raw: Optional[str]) -> MissionCategory:
    """Map a free-text mission label onto one of the canonical categories.

    Total over any input: unmatched and empty labels become ``Other``.
    """
    text = (raw or "").lower()
    for matches, category in MISSION_RULES:
        if matches(text):
            return category
    return MissionCategory.OTHER


def category_label(raw: Optional[str]) -> str:
    """Display label of the category for ``raw``"""
    return normalize(raw).value
