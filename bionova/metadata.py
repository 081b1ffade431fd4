"""Static taxonomy used for search suggestions and filter pickers"""

from typing import Dict, List

ORGANISM_TYPES = [
    "Human",
    "Mice",
    "Rats",
    "Zebrafish",
    "Fruit flies",
    "Plants",
    "Microbes",
    "Fungi",
    "C. elegans",
    "Yeast",
    "Algae",
    "Other",
]

MISSION_PLATFORMS = [
    "ISS",
    "Shuttle",
    "GeneLab",
    "VEGGIE",
    "Rodent Research",
    "Artemis",
    "Twins Study",
    "Other",
    "N/A",
]

RESEARCH_AREAS = [
    "Microgravity Effects",
    "Space Radiation",
    "Gene Expression",
    "Bone & Muscle",
    "Plant Biology",
    "Cardiovascular",
    "Immune System",
    "Cellular Biology",
]

PUBLICATION_TYPES = [
    "Dataset",
    "Publication/Paper",
    "Experiment",
    "Article",
    "Report",
    "Other",
]


def get_metadata() -> Dict[str, List[str]]:
    return {
        "organism_types": list(ORGANISM_TYPES),
        "mission_platforms": list(MISSION_PLATFORMS),
        "research_areas": list(RESEARCH_AREAS),
        "publication_types": list(PUBLICATION_TYPES),
    }


def suggest(text: str, limit: int = 10) -> List[str]:
    """Autocomplete over every taxonomy list, prefix matches before substring matches"""
    needle = (text or "").strip().lower()
    if not needle or limit <= 0:
        return []

    prefix, inner = [], []
    for values in get_metadata().values():
        for value in values:
            lowered = value.lower()
            if value in prefix or value in inner:
                continue
            if lowered.startswith(needle):
                prefix.append(value)
            elif needle in lowered:
                inner.append(value)
    return (prefix + inner)[:limit]
