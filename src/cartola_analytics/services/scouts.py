"""
Scout Point Scorer

Attributes a team's points to individual scout actions (goals, tackles,
saves, cards...) using a weight table of points per occurrence.
"""

from collections.abc import Iterable, Mapping
from types import MappingProxyType

from cartola_analytics.config import Settings
from cartola_analytics.models import PickRecord, ScoutPoints
from cartola_analytics.services.normalization import as_count

SCOUT_EPSILON = 1e-9


class ScoutWeightTable:
    """
    Immutable, ordered mapping of scout code to points per occurrence.

    Declaration order is kept: it breaks ties when ranking scout totals.
    Codes that are not in the table are ignored by the scorer.
    """

    def __init__(self, name: str, weights: Mapping[str, float]):
        self.name = name
        self._weights = MappingProxyType(dict(weights))

    @property
    def codes(self) -> tuple[str, ...]:
        return tuple(self._weights)

    def weight(self, code: str) -> float | None:
        return self._weights.get(code)

    def items(self):
        return self._weights.items()

    def __contains__(self, code: object) -> bool:
        return code in self._weights

    def __len__(self) -> int:
        return len(self._weights)

    def __repr__(self) -> str:
        return f"ScoutWeightTable({self.name!r}, {len(self)} codes)"


LEGACY_SCOUT_WEIGHTS = ScoutWeightTable(
    "legacy",
    {
        "DS": 1.5,  # tackle won
        "FC": -0.3,  # foul committed
        "GC": -3.0,  # own goal
        "CA": -1.0,  # yellow card
        "CV": -3.0,  # red card
        "FS": 0.5,  # foul suffered
        "FT": 3.0,  # shot off the post
        "FD": 1.2,  # shot on target
        "FF": 0.8,  # shot off target
        "G": 8.0,
        "I": -0.1,  # offside
        "PP": -4.0,  # penalty missed
        "PC": -1.0,  # penalty conceded
        "OS": 1.0,
        "A": 5.0,
    },
)

CANONICAL_SCOUT_WEIGHTS = ScoutWeightTable(
    "canonical",
    {
        **dict(LEGACY_SCOUT_WEIGHTS.items()),
        "SG": 5.0,  # clean sheet
        "DE": 1.3,  # save
        "DP": 7.0,  # penalty saved
        "GS": -1.0,  # goal conceded
    },
)

SCOUT_TABLES = {
    CANONICAL_SCOUT_WEIGHTS.name: CANONICAL_SCOUT_WEIGHTS,
    LEGACY_SCOUT_WEIGHTS.name: LEGACY_SCOUT_WEIGHTS,
}


def scout_table_from_settings(settings: Settings) -> ScoutWeightTable:
    """Select the weight table configured for this deployment."""
    if settings.scout_weights:
        return ScoutWeightTable("custom", settings.scout_weights)
    return SCOUT_TABLES[settings.scout_table]


def score_scouts(
    picks: Iterable[PickRecord],
    weights: ScoutWeightTable = CANONICAL_SCOUT_WEIGHTS,
    epsilon: float = SCOUT_EPSILON,
) -> list[ScoutPoints]:
    """
    Total points contributed by each scout action.

    Malformed per-pick scout data is skipped for that code and pick; it never
    fails the computation. Totals within epsilon of zero are dropped.

    Args:
        picks: Normalized picks (already venue-filtered)
        weights: Points per occurrence for each scout code
        epsilon: Smallest absolute total worth reporting

    Returns:
        ScoutPoints rows sorted by points descending, ties in table order
    """
    totals = {code: 0.0 for code in weights.codes}

    for pick in picks:
        if not pick.has_known_position or not pick.scout_counts:
            continue
        for code, weight in weights.items():
            count = as_count(pick.scout_counts.get(code))
            if count is None:
                continue
            totals[code] += count * weight

    rows = [
        ScoutPoints(scout=code, points=points)
        for code, points in totals.items()
        if abs(points) > epsilon
    ]
    # sort is stable, so equal totals keep declaration order
    rows.sort(key=lambda row: row.points, reverse=True)
    return rows
