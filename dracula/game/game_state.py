"""Read-only game state consumed by the Dracula decision-support core.

``GameStateView`` is the boundary between this package and whatever owns
the authoritative game: the rules engine, the round counter, the score and
health bookkeeping, and the move log. Every query in the package takes a
``GameStateView`` explicitly instead of reaching for a shared handle, so a
query's dependency on game state is visible at the call site.

``InMemoryGameState`` is a small reference implementation backed by a
``PlaceGraph`` and per-player move logs. It applies only the location
bookkeeping needed to answer the protocol; it does not enforce the rules.
"""

from __future__ import annotations

import logging
from collections.abc import Collection, Iterable
from dataclasses import dataclass, field
from typing import Protocol

from dracula import config
from dracula.environment.map import PlaceGraph
from dracula.environment.places import (
    TELEPORT_DESTINATION,
    DoubleBack,
    Move,
    Place,
    PseudoMove,
)
from dracula.game.enums import ALL_MODES, HUNTERS, Player, TransportMode
from dracula.types import Health, Round, Score

logger = logging.getLogger(__name__)


class GameStateView(Protocol):
    """The queries this package needs answered about the current game."""

    def current_round(self) -> Round: ...

    def current_score(self) -> Score: ...

    def health(self, player: Player) -> Health: ...

    def location(self, player: Player) -> Place | None:
        """The player's current real location, or ``None`` before their first move."""
        ...

    def vampire_location(self) -> Place | None: ...

    def trap_locations(self) -> frozenset[Place]: ...

    def last_moves(self, player: Player, n: int) -> list[Move]:
        """Up to ``n`` of the player's latest moves, most recent first."""
        ...

    def last_locations(self, player: Player, n: int) -> list[Place]:
        """Up to ``n`` of the player's latest real locations, most recent first."""
        ...

    def full_move_history(self, player: Player) -> list[Move]:
        """Every move the player has made, oldest first."""
        ...

    def reachable_from(
        self,
        player: Player,
        round_number: Round,
        place: Place,
        modes: Collection[TransportMode] = ALL_MODES,
    ) -> frozenset[Place]: ...


@dataclass
class InMemoryGameState:
    """A ``GameStateView`` held entirely in memory.

    Attributes:
        graph: The board the game is played on.
        round_override: Forces ``current_round()``. When ``None`` the round
            is the number of moves Dracula has completed, since Dracula is
            the last player to move in each round.
        score: Pass-through game score.
        healths: Pass-through per-player health.
        traps: Places holding one of Dracula's traps.
        vampire: Where the immature vampire is, if anywhere.
    """

    graph: PlaceGraph
    round_override: Round | None = None
    score: Score = config.GAME_START_SCORE
    healths: dict[Player, Health] = field(default_factory=dict)
    traps: set[Place] = field(default_factory=set)
    vampire: Place | None = None
    _moves: dict[Player, list[Move]] = field(
        init=False,
        repr=False,
        default_factory=lambda: {player: [] for player in Player}
    )
    _locations: dict[Player, list[Place]] = field(
        init=False,
        repr=False,
        default_factory=lambda: {player: [] for player in Player}
    )

    def __post_init__(self) -> None:
        for hunter in HUNTERS:
            self.healths.setdefault(hunter, config.HUNTER_START_HEALTH)
        self.healths.setdefault(Player.DRACULA, config.DRACULA_START_HEALTH)

    # ------------------------------------------------------------------
    # Recording moves

    def record_move(self, player: Player, move: Move) -> Place:
        """Append ``move`` to the player's history and return the resulting location.

        Hunters may only move to real places. Dracula's pseudo-moves are
        resolved against his location history as it stood before the move:
        ``HIDE`` keeps him in place, ``DoubleBack(k)`` returns him to his
        k-th most recent location and ``TELEPORT`` sends him home.

        Raises:
            ValueError: If the move cannot be resolved to a location.
        """
        locations = self._locations[player]

        if isinstance(move, Place):
            location = move
        elif player.is_hunter:
            raise ValueError(f"{player.name} cannot make pseudo-move {move!r}")
        elif move is PseudoMove.TELEPORT:
            location = TELEPORT_DESTINATION
        elif move is PseudoMove.HIDE:
            if not locations:
                raise ValueError("Dracula cannot hide before his first move")
            location = locations[-1]
        elif isinstance(move, DoubleBack):
            if move.distance > len(locations):
                raise ValueError(
                    f"{move!r} reaches past Dracula's {len(locations)} locations"
                )
            location = locations[-move.distance]
        else:
            raise ValueError(f"Unrecognised move: {move!r}")

        self._moves[player].append(move)
        locations.append(location)
        logger.debug(f"{player.name} played {move!r} -> {location.name}")
        return location

    def record_moves(self, player: Player, moves: Iterable[Move]) -> Place | None:
        """Record several moves in order, returning the final location."""
        location = self.location(player)
        for move in moves:
            location = self.record_move(player, move)
        return location

    # ------------------------------------------------------------------
    # GameStateView

    def current_round(self) -> Round:
        if self.round_override is not None:
            return self.round_override
        return Round(len(self._moves[Player.DRACULA]))

    def current_score(self) -> Score:
        return self.score

    def health(self, player: Player) -> Health:
        return self.healths[player]

    def location(self, player: Player) -> Place | None:
        locations = self._locations[player]
        return locations[-1] if locations else None

    def vampire_location(self) -> Place | None:
        return self.vampire

    def trap_locations(self) -> frozenset[Place]:
        return frozenset(self.traps)

    def last_moves(self, player: Player, n: int) -> list[Move]:
        return _latest(self._moves[player], n)

    def last_locations(self, player: Player, n: int) -> list[Place]:
        return _latest(self._locations[player], n)

    def full_move_history(self, player: Player) -> list[Move]:
        return list(self._moves[player])

    def reachable_from(
        self,
        player: Player,
        round_number: Round,
        place: Place,
        modes: Collection[TransportMode] = ALL_MODES,
    ) -> frozenset[Place]:
        return self.graph.reachable_from(player, round_number, place, modes)


def _latest[T](history: list[T], n: int) -> list[T]:
    """The last ``n`` items of ``history``, most recent first."""
    if n < 0:
        raise ValueError(f"Cannot take {n} items from a history")
    if n == 0:
        return []
    return history[: -n - 1 : -1]
