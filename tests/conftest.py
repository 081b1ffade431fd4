"""
Pytest configuration and shared fixtures.

Provides sample report items, a sample search result and a stub provider so
no test touches a real model API.
"""

import pytest

from bionova.errors import ProviderError
from bionova.providers.base import AiService
from bionova.schema import AiSearchResult, ReportItem


def make_item(title="Untitled", year=2020, organism="Human", mission="ISS", findings="", source_url=None):
    return ReportItem(
        title=title,
        year=year,
        organism=organism,
        mission_or_experiment=mission,
        main_findings=findings,
        source_url=source_url,
    )


SAMPLE_RESULT = {
    "summary": {
        "overview": "Spaceflight alters bone and plant physiology.",
        "years_range": "2015-2021",
        "highlight_points": ["Bone loss in mice", "Plant growth in VEGGIE"],
    },
    "detailed_report": [
        {
            "title": "Microgravity induces pelvic bone loss in mice",
            "year": 2015,
            "organism": "Mouse",
            "mission_or_experiment": "RR-1",
            "main_findings": "Osteoclast activity increased during spaceflight.",
            "source_url": "https://genelab-data.ndc.nasa.gov/genelab/accession/GLDS-21",
        },
        {
            "title": "Lettuce growth aboard the station",
            "year": 2020,
            "organism": "Plant",
            "mission_or_experiment": "VEGGIE-03",
            "main_findings": "Lettuce grown in orbit was safe to eat.",
            "source_url": None,
        },
        {
            "title": "Astronaut immune profiling",
            "year": 2021,
            "organism": "Human",
            "mission_or_experiment": "ISS Expedition 60",
            "main_findings": "Immune markers shifted during long missions.",
            "source_url": "https://ntrs.nasa.gov/citations/1",
        },
    ],
    "graph": {
        "nodes": [
            {"id": "Mouse", "type": "organism"},
            {"id": "RR-1", "type": "experiment"},
            {"id": "Bone loss", "type": "result"},
        ],
        "links": [
            {"source": "Mouse", "target": "RR-1", "label": "flown on"},
            {"source": "RR-1", "target": "Bone loss", "label": "observed"},
        ],
    },
}


class StubService(AiService):
    """Provider double that returns canned results and records calls"""

    name = "stub"
    model = "stub-model"

    def __init__(self, result=None, error=None, configured=True):
        self.result = result
        self.error = error
        self.configured = configured
        self.calls = []

    @property
    def is_configured(self):
        return self.configured

    def generate(self, query, filters=None, context=None):
        self.calls.append({"query": query, "filters": filters, "context": context})
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture
def sample_payload():
    return dict(SAMPLE_RESULT)


@pytest.fixture
def sample_result():
    return AiSearchResult.model_validate(SAMPLE_RESULT)


@pytest.fixture
def scenario_items():
    return [
        make_item(title="A", year=2020, organism="Human", mission="ISS Expedition 60"),
        make_item(title="B", year=2020, organism="Plant", mission="VEGGIE-03"),
        make_item(title="C", year=2021, organism="Human", mission="RR-10"),
    ]


@pytest.fixture
def stub_service(sample_result):
    return StubService(result=sample_result)


@pytest.fixture
def failing_service():
    return StubService(error=ProviderError("Failed to get summary from AI."))
