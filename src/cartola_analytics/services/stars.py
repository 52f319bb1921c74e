"""
Star Player Ranker

Finds the best contributor for each position over the season.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from cartola_analytics.models import Club, PickRecord, Position, StarPlayer


@dataclass
class _PlayerTally:
    position_id: int
    player_id: int | None
    player_name: str
    club_id: int | None
    total_points: float = 0.0
    appearances: int = 0

    @property
    def avg_points(self) -> float:
        return self.total_points / self.appearances if self.appearances else 0.0


def _tally_players(picks: Iterable[PickRecord]) -> dict[tuple, _PlayerTally]:
    tallies: dict[tuple, _PlayerTally] = {}

    for pick in picks:
        if not pick.has_known_position:
            continue

        # picks without a player id fall back to grouping by name
        player_key = pick.player_id if pick.player_id is not None else f"name:{pick.player_name}"
        key = (pick.position_id, player_key)

        tally = tallies.get(key)
        if tally is None:
            tally = tallies[key] = _PlayerTally(
                position_id=pick.position_id,
                player_id=pick.player_id,
                player_name=pick.player_name,
                club_id=pick.club_id,
            )
        if tally.club_id is None:
            tally.club_id = pick.club_id
        if not tally.player_name:
            tally.player_name = pick.player_name

        tally.appearances += 1
        if pick.points is not None:
            tally.total_points += pick.points

    return tallies


def _ranking_key(tally: _PlayerTally) -> tuple[float, float, str]:
    return (-tally.total_points, -tally.avg_points, tally.player_name)


def rank_star_players(picks: Iterable[PickRecord]) -> list[StarPlayer]:
    """
    Pick the best player for every position.

    Players are ranked by total points, then points per appearance, then
    name. A position nobody played yields a placeholder with an empty name.
    Badges are not resolved here; see attach_badges.

    Args:
        picks: Normalized picks (already venue-filtered)

    Returns:
        One StarPlayer per position, in position-id order
    """
    by_position: dict[int, list[_PlayerTally]] = {int(p): [] for p in Position}
    for tally in _tally_players(picks).values():
        by_position[tally.position_id].append(tally)

    stars = []
    for position in Position:
        candidates = by_position[position]
        if not candidates:
            stars.append(StarPlayer(position_id=int(position), position=position.label))
            continue

        best = min(candidates, key=_ranking_key)
        stars.append(
            StarPlayer(
                position_id=int(position),
                position=position.label,
                player_id=best.player_id,
                player_name=best.player_name,
                club_id=best.club_id,
                total_points=best.total_points,
                appearances=best.appearances,
                avg_points=best.avg_points,
            )
        )
    return stars


def club_ids_for(stars: Iterable[StarPlayer]) -> set[int]:
    """Distinct club ids whose badges the ranking needs."""
    return {s.club_id for s in stars if s.club_id is not None}


def attach_badges(stars: Iterable[StarPlayer], clubs: Mapping[int, Club]) -> list[StarPlayer]:
    """Return copies of the stars with club badges filled in (None when unknown)."""
    resolved = []
    for star in stars:
        club = clubs.get(star.club_id) if star.club_id is not None else None
        resolved.append(
            star.model_copy(update={"club_badge_url": club.badge_url if club else None})
        )
    return resolved
