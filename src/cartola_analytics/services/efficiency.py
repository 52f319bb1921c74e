"""
Positional Efficiency Service

Clean-sheet rate for defenders and goal/assist involvement for line players,
per position and in total.
"""

from collections.abc import Callable, Iterable, Sequence

from cartola_analytics.models import (
    TOTAL_ROW_ID,
    TOTAL_ROW_LABEL,
    EfficiencyRow,
    EfficiencyTable,
    PickRecord,
    Position,
)

# Display order of the cards. Offense lists attackers first.
DEFENSIVE_POSITIONS = (Position.GOALKEEPER, Position.FULL_BACK, Position.CENTER_BACK)
OFFENSIVE_POSITIONS = (
    Position.FORWARD,
    Position.MIDFIELDER,
    Position.FULL_BACK,
    Position.CENTER_BACK,
)


def _rate(ok: int, n: int) -> float | None:
    return ok / n if n else None


def efficiency_table(
    picks: Iterable[PickRecord],
    positions: Sequence[Position],
    is_ok: Callable[[PickRecord], bool],
) -> EfficiencyTable:
    """
    Build an efficiency table for a set of positions.

    Every pick in one of the positions counts toward n, whether or not it has
    points. The total row is recomputed from the pooled counts, not averaged
    from the per-position rates.

    Args:
        picks: Normalized picks (already venue-filtered)
        positions: Positions to report, in display order
        is_ok: Success predicate for a pick

    Returns:
        EfficiencyTable with one row per position plus TOT
    """
    totals = {int(p): 0 for p in positions}
    oks = {int(p): 0 for p in positions}

    for pick in picks:
        if pick.position_id not in totals:
            continue
        totals[pick.position_id] += 1
        if is_ok(pick):
            oks[pick.position_id] += 1

    by_position = [
        EfficiencyRow(
            position_id=int(p),
            position=p.label,
            n=totals[p],
            ok=oks[p],
            rate=_rate(oks[p], totals[p]),
        )
        for p in positions
    ]

    total_n = sum(totals.values())
    total_ok = sum(oks.values())

    return EfficiencyTable(
        by_position=by_position,
        total=EfficiencyRow(
            position_id=TOTAL_ROW_ID,
            position=TOTAL_ROW_LABEL,
            n=total_n,
            ok=total_ok,
            rate=_rate(total_ok, total_n),
        ),
    )


def is_clean_sheet(pick: PickRecord) -> bool:
    return pick.had_clean_sheet


def is_goal_involvement(pick: PickRecord) -> bool:
    return pick.had_goal or pick.had_assist


def defensive_efficiency(picks: Iterable[PickRecord]) -> EfficiencyTable:
    """Clean-sheet rate for GOL, LAT and ZAG."""
    return efficiency_table(picks, DEFENSIVE_POSITIONS, is_clean_sheet)


def offensive_efficiency(picks: Iterable[PickRecord]) -> EfficiencyTable:
    """Goal-or-assist rate for ATA, MEI, LAT and ZAG (in that order)."""
    return efficiency_table(picks, OFFENSIVE_POSITIONS, is_goal_involvement)
