"""Dashboard statistics derived from a list of report items"""

from collections import Counter
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Sequence

from .missions import normalize
from .schema import ReportItem

NOT_AVAILABLE = "N/A"
YEAR_RANGE_SEPARATOR = " – "


@dataclass
class AggregateStats:
    total_reports: int
    year_range: str
    top_organism: str
    top_mission: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class MissionShare:
    name: str
    value: int


@dataclass
class TrendRow:
    year: int
    counts: Dict[str, int]

    def to_dict(self) -> Dict[str, Any]:
        row: Dict[str, Any] = {"year": self.year}
        row.update(self.counts)
        return row


@dataclass
class OrganismTrend:
    organisms: List[str] = field(default_factory=list)
    rows: List[TrendRow] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {"organisms": list(self.organisms), "data": [row.to_dict() for row in self.rows]}


@dataclass
class OrganismMissionMatrix:
    organisms: List[str] = field(default_factory=list)
    missions: List[str] = field(default_factory=list)
    cells: Dict[str, Dict[str, int]] = field(default_factory=dict)
    max_count: int = 0

    def count(self, organism: str, mission: str) -> int:
        return self.cells.get(organism, {}).get(mission, 0)

    def total(self) -> int:
        return sum(sum(row.values()) for row in self.cells.values())

    def to_dict(self) -> Dict[str, Any]:
        return {
            "organisms": list(self.organisms),
            "missions": list(self.missions),
            "cells": {organism: dict(row) for organism, row in self.cells.items()},
            "max_count": self.max_count,
        }


@dataclass
class Dashboard:
    stats: AggregateStats
    mission_distribution: List[MissionShare]
    organism_trend: OrganismTrend
    matrix: OrganismMissionMatrix

    def to_dict(self) -> Dict[str, Any]:
        return {
            "stats": self.stats.to_dict(),
            "mission_distribution": [asdict(share) for share in self.mission_distribution],
            "organism_trend": self.organism_trend.to_dict(),
            "matrix": self.matrix.to_dict(),
        }


def _modal(counts: Counter) -> str:
    # max() keeps the first of equal keys, i.e. the first seen in the input
    if not counts:
        return NOT_AVAILABLE
    return max(counts, key=counts.get)


def year_range(items: Sequence[ReportItem]) -> str:
    if not items:
        return NOT_AVAILABLE
    if len(items) == 1:
        return str(items[0].year)
    years = [item.year for item in items]
    return f"{min(years)}{YEAR_RANGE_SEPARATOR}{max(years)}"


def compute_stats(items: Sequence[ReportItem]) -> AggregateStats:
    """Headline numbers: count, year span and the most common organism / mission"""
    organism_counts = Counter(item.organism for item in items)
    mission_counts = Counter(normalize(item.mission_or_experiment).value for item in items)
    return AggregateStats(
        total_reports=len(items),
        year_range=year_range(items),
        top_organism=_modal(organism_counts),
        top_mission=_modal(mission_counts),
    )


def mission_distribution(items: Sequence[ReportItem]) -> List[MissionShare]:
    """Items per mission category, largest first; ties keep first-seen order"""
    counts = Counter(normalize(item.mission_or_experiment).value for item in items)
    shares = [MissionShare(name=name, value=value) for name, value in counts.items()]
    return sorted(shares, key=lambda share: share.value, reverse=True)


def organism_trend(items: Sequence[ReportItem]) -> OrganismTrend:
    """Per-year item counts for every organism; only years present get a row"""
    if not items:
        return OrganismTrend()

    organisms: List[str] = []
    by_year: Dict[int, Counter] = {}
    for item in items:
        if item.organism not in organisms:
            organisms.append(item.organism)
        by_year.setdefault(item.year, Counter())[item.organism] += 1

    rows = [
        TrendRow(year=year, counts={organism: by_year[year].get(organism, 0) for organism in organisms})
        for year in sorted(by_year)
    ]
    return OrganismTrend(organisms=organisms, rows=rows)


def organism_mission_matrix(items: Sequence[ReportItem]) -> OrganismMissionMatrix:
    """Cross-tabulation of organism against mission category for the heatmap"""
    if not items:
        return OrganismMissionMatrix()

    pairs = [(item.organism, normalize(item.mission_or_experiment).value) for item in items]
    organisms = sorted({organism for organism, _ in pairs})
    missions = sorted({mission for _, mission in pairs})

    cells = {organism: {mission: 0 for mission in missions} for organism in organisms}
    max_count = 0
    for organism, mission in pairs:
        cells[organism][mission] += 1
        max_count = max(max_count, cells[organism][mission])

    return OrganismMissionMatrix(organisms=organisms, missions=missions, cells=cells, max_count=max_count)


def aggregate(items: Sequence[ReportItem]) -> Dashboard:
    """Derive every dashboard structure from ``items``.

    Empty input is a valid result: zero count, "N/A" placeholders and empty
    distribution, trend and matrix.
    """
    items = list(items)
    return Dashboard(
        stats=compute_stats(items),
        mission_distribution=mission_distribution(items),
        organism_trend=organism_trend(items),
        matrix=organism_mission_matrix(items),
    )
