import pytest

from bionova.missions import MISSION_RULES, MissionCategory, category_label, normalize


@pytest.mark.parametrize("raw, expected", [
    ("ISS", MissionCategory.ISS),
    ("Expedition 42", MissionCategory.ISS),
    ("Space Shuttle Columbia", MissionCategory.SHUTTLE),
    ("STS-135", MissionCategory.SHUTTLE),
    ("GLDS-242", MissionCategory.GENELAB),
    ("VEGGIE-03", MissionCategory.VEGGIE),
    ("Advanced Plant Habitat (APH)", MissionCategory.APH),
    ("RR-5", MissionCategory.RODENT_RESEARCH),
    ("Rodent Research 9", MissionCategory.RODENT_RESEARCH),
    ("Artemis I", MissionCategory.ARTEMIS),
    ("NASA Twins Study", MissionCategory.TWINS_STUDY),
    ("N/A", MissionCategory.NOT_APPLICABLE),
    ("Bion-M1", MissionCategory.OTHER),
])
def test_normalize_known_labels(raw, expected):
    assert normalize(raw) == expected


def test_empty_and_none_are_other():
    assert normalize("") == MissionCategory.OTHER
    assert normalize(None) == MissionCategory.OTHER


def test_first_matching_rule_wins():
    # Both the ISS and GeneLab rules match; ISS is declared first
    assert normalize("ISS Expedition 42 GLDS-242") == MissionCategory.ISS


def test_not_applicable_requires_exact_match():
    assert normalize("n/a") == MissionCategory.NOT_APPLICABLE
    assert normalize("N/A (ground control)") == MissionCategory.OTHER


def test_result_is_always_a_known_category():
    labels = ["", "random text", "12345", "mission", "Twins", "rr", "glds"]
    categories = set(MissionCategory)
    for raw in labels:
        assert normalize(raw) in categories


def test_category_label_is_the_display_value():
    assert category_label("RR-10") == "Rodent Research"
    assert len(MISSION_RULES) == 9
