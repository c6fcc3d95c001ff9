"""
Roster auto-fill engine.

Assigns active players to the seven netball positions across four quarters.
Greedy, quarter-major / position-minor: every slot picks the best candidate
still free in that quarter, preferring players who list the position, then
players furthest below their playing-time target.

Pure computation, no I/O. Persisting the result is the caller's job
(see services.roster_service).
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from core.logging import logger


class Position(str, Enum):
    GS = "GS"
    GA = "GA"
    WA = "WA"
    C = "C"
    WD = "WD"
    GD = "GD"
    GK = "GK"

    @property
    def label(self) -> str:
        return POSITION_LABELS[self]


POSITION_LABELS = {
    Position.GS: "Goal Shooter",
    Position.GA: "Goal Attack",
    Position.WA: "Wing Attack",
    Position.C: "Centre",
    Position.WD: "Wing Defence",
    Position.GD: "Goal Defence",
    Position.GK: "Goal Keeper",
}

POSITIONS: Tuple[Position, ...] = tuple(Position)
QUARTERS: Tuple[int, ...] = (1, 2, 3, 4)
TOTAL_SLOTS = len(POSITIONS) * len(QUARTERS)

# Nobody is targeted below this many quarters, whatever the roster size
MIN_QUARTERS_FLOOR = 3

Slot = Tuple[int, Position]


class NoPlayersAvailable(Exception):
    """Raised when auto-fill is asked to run with no active players"""

    def __init__(self):
        super().__init__("No active players to assign")


@dataclass(frozen=True)
class Player:
    id: int
    display_name: str
    position_preferences: Tuple[Position, ...] = ()
    active: bool = True

    def preference_rank(self, position: Position) -> Optional[int]:
        """Index of the position in this player's preferences, or None"""
        try:
            return self.position_preferences.index(position)
        except ValueError:
            return None


@dataclass(frozen=True)
class SlotAssignment:
    quarter: int
    position: Position
    player_id: int


@dataclass
class AutoFillResult:
    """Output of one auto-fill run.

    assignments maps every filled (quarter, position) to a player id; slots
    missing from it are unassigned. assignment_counts holds quarters played
    per active player.
    """
    assignments: Dict[Slot, int]
    assignment_counts: Dict[int, int]
    ideal_quarters: int
    min_quarters: int
    target_feasible: bool
    unfilled_slots: List[Slot] = field(default_factory=list)

    def entries(self) -> List[SlotAssignment]:
        """Filled slots in quarter then position order"""
        return [
            SlotAssignment(quarter=quarter, position=position, player_id=self.assignments[(quarter, position)])
            for quarter in QUARTERS
            for position in POSITIONS
            if (quarter, position) in self.assignments
        ]

    def player_for(self, quarter: int, position: Position) -> Optional[int]:
        return self.assignments.get((quarter, position))

    @property
    def is_complete(self) -> bool:
        return not self.unfilled_slots


def playing_time_targets(player_count: int) -> Tuple[int, int]:
    """Return (ideal, minimum) quarters per player for a roster size"""
    if player_count <= 0:
        raise NoPlayersAvailable()
    ideal = min(len(QUARTERS), TOTAL_SLOTS // player_count)
    return ideal, max(MIN_QUARTERS_FLOOR, ideal)


def _quarters_needed(min_quarters: int, count: int) -> int:
    return max(0, min_quarters - count)


def auto_fill(players: Iterable[Player]) -> AutoFillResult:
    """
    Build a full-game assignment for the active players.

    Raises NoPlayersAvailable when no player is active.
    """
    # Fixed candidate order so full ties resolve by name, not input order
    active = sorted(
        (p for p in players if p.active),
        key=lambda p: (p.display_name.casefold(), p.id)
    )
    if not active:
        raise NoPlayersAvailable()

    ideal_quarters, min_quarters = playing_time_targets(len(active))
    target_feasible = min_quarters * len(active) <= TOTAL_SLOTS
    if not target_feasible:
        logger.warning(
            f"Auto-fill target of {min_quarters} quarters is unreachable for "
            f"{len(active)} players ({TOTAL_SLOTS} slots); filling best effort"
        )

    counts: Dict[int, int] = {p.id: 0 for p in active}
    assignments: Dict[Slot, int] = {}
    unfilled: List[Slot] = []

    def fairness_key(player: Player):
        return (-_quarters_needed(min_quarters, counts[player.id]), counts[player.id])

    for quarter in QUARTERS:
        used_in_quarter = set()

        for position in POSITIONS:
            available = [p for p in active if p.id not in used_in_quarter]
            if not available:
                unfilled.append((quarter, position))
                continue

            preferred = [p for p in available if position in p.position_preferences]
            preferred.sort(key=lambda p: (
                -_quarters_needed(min_quarters, counts[p.id]),
                p.preference_rank(position),
                counts[p.id],
            ))
            fallback = sorted(available, key=fairness_key)

            chosen = preferred[0] if preferred else fallback[0]
            assignments[(quarter, position)] = chosen.id
            used_in_quarter.add(chosen.id)
            counts[chosen.id] += 1

    logger.debug(f"Auto-fill counts: {counts}, unfilled slots: {len(unfilled)}")

    return AutoFillResult(
        assignments=assignments,
        assignment_counts=counts,
        ideal_quarters=ideal_quarters,
        min_quarters=min_quarters,
        target_feasible=target_feasible,
        unfilled_slots=unfilled,
    )


def find_double_bookings(entries: Sequence[SlotAssignment]) -> List[Tuple[int, int]]:
    """Return (quarter, player_id) pairs that appear in more than one position"""
    seen = set()
    duplicates = []
    for entry in entries:
        key = (entry.quarter, entry.player_id)
        if key in seen and key not in duplicates:
            duplicates.append(key)
        seen.add(key)
    return duplicates
