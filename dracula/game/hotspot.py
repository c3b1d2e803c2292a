"""Long-horizon routing: Dracula's hotspot teleport cycles.

Dracula rotates through three fixed cycles, picked by how many times he
has teleported so far (``teleports % 3``). Each cycle has an anchor city.
Until the anchor shows up among his recent locations he walks towards it
along a shortest path. Once it has, he plays a fixed chain of follow-up
moves, each keyed by the move he made last, ending with a teleport back to
Castle Dracula. The teleport bumps the count and with it the next cycle.

The router is a small state machine whose state is derived from the game
history on every call; it stores nothing between turns.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from dracula import config
from dracula.constants.hotspots import HotspotConstants, HotspotSequence
from dracula.environment.places import TELEPORT, Move
from dracula.game.enums import HotspotPhase, Player
from dracula.util.pathfinding import find_shortest_path

if TYPE_CHECKING:
    from dracula.game.game_state import GameStateView

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class HotspotDecision:
    """The router's choice for this turn.

    Attributes:
        sequence: Index of the active cycle (0, 1 or 2).
        phase: Where the router is within that cycle.
        move: The suggested move, or ``None`` for no suggestion.
    """

    sequence: int
    phase: HotspotPhase
    move: Move | None


def count_teleports(state: GameStateView) -> int:
    """How many times Dracula has teleported this game."""
    return sum(
        1 for move in state.full_move_history(Player.DRACULA) if move is TELEPORT
    )


class HotspotRouter:
    """Suggests Dracula's next step along the active hotspot cycle."""

    def __init__(
        self,
        state: GameStateView,
        sequences: tuple[HotspotSequence, ...] = HotspotConstants.SEQUENCES,
    ) -> None:
        self.state = state
        self.sequences = sequences

    @property
    def sequence_index(self) -> int:
        return count_teleports(self.state) % len(self.sequences)

    def anchor_visited(self, sequence: HotspotSequence) -> bool:
        """Whether the anchor appears among Dracula's recent locations."""
        recent = self.state.last_locations(Player.DRACULA, config.HOTSPOT_LOOKBACK)
        return sequence.anchor in recent

    def plan(self) -> HotspotDecision:
        index = self.sequence_index
        sequence = self.sequences[index]

        if self.anchor_visited(sequence):
            decision = self._follow_up(index, sequence)
        elif sequence.approach_modes is None:
            decision = HotspotDecision(index, HotspotPhase.AWAITING_ANCHOR, None)
        else:
            decision = self._approach(index, sequence)

        logger.debug(
            f"Hotspot sequence {index} ({sequence.anchor.name}): "
            f"{decision.phase.name} -> {decision.move!r}"
        )
        return decision

    def next_step(self) -> Move | None:
        """The suggested move this turn, or ``None`` for no suggestion."""
        return self.plan().move

    def _approach(self, index: int, sequence: HotspotSequence) -> HotspotDecision:
        assert sequence.approach_modes is not None
        result = find_shortest_path(
            self.state, Player.DRACULA, sequence.anchor, sequence.approach_modes
        )
        if result is None or result.length == 0:
            return HotspotDecision(index, HotspotPhase.NO_ROUTE, None)
        return HotspotDecision(index, HotspotPhase.APPROACHING, result.path[0])

    def _follow_up(self, index: int, sequence: HotspotSequence) -> HotspotDecision:
        last = self.state.last_moves(Player.DRACULA, 1)
        move = sequence.follow_ups.get(last[0]) if last else None
        if move is None:
            return HotspotDecision(index, HotspotPhase.OFF_CYCLE, None)
        return HotspotDecision(index, HotspotPhase.IN_CYCLE, move)
