"""Dracula's trail: his most recent moves and the places they left him in.

The board game keeps a six-card trail, but by the time Dracula chooses a
move the oldest card no longer constrains him, so the tracker only holds
the last ``TRAIL_WINDOW`` (5) moves and locations, most recent first.

A ``Trail`` is a snapshot. It is built from the authoritative history with
``Trail.from_state`` at every decision point and never mutated afterwards.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from itertools import islice
from typing import TYPE_CHECKING

from dracula import config
from dracula.environment.places import DoubleBack, Move, Place, is_double_back
from dracula.game.enums import Player

if TYPE_CHECKING:
    from dracula.game.game_state import GameStateView


class Trail:
    """A bounded, most-recent-first view of Dracula's latest moves."""

    __slots__ = ("_locations", "_moves")

    def __init__(
        self,
        moves: Iterable[Move] = (),
        locations: Iterable[Place] = (),
    ) -> None:
        """Build a trail from moves and locations given most recent first.

        Anything beyond the trail window is dropped from the old end.
        """
        window = config.TRAIL_WINDOW
        self._moves: deque[Move] = deque(islice(moves, window), maxlen=window)
        self._locations: deque[Place] = deque(
            islice(locations, window), maxlen=window
        )

        if len(self._moves) != len(self._locations):
            raise ValueError(
                f"Trail has {len(self._moves)} moves but "
                f"{len(self._locations)} locations"
            )

    @classmethod
    def from_state(cls, state: GameStateView) -> Trail:
        """Snapshot Dracula's trail from the game state."""
        window = config.TRAIL_WINDOW
        return cls(
            state.last_moves(Player.DRACULA, window),
            state.last_locations(Player.DRACULA, window),
        )

    def latest_moves(self) -> tuple[Move, ...]:
        return tuple(self._moves)

    def latest_locations(self) -> tuple[Place, ...]:
        return tuple(self._locations)

    @property
    def count(self) -> int:
        return len(self._moves)

    def __len__(self) -> int:
        return len(self._moves)

    @property
    def last_move(self) -> Move | None:
        return self._moves[0] if self._moves else None

    def contains(self, move: Move) -> bool:
        """Whether ``move`` was played within the trail window."""
        return move in self._moves

    def contains_location(self, place: Place) -> bool:
        return place in self._locations

    def contains_double_back(self) -> bool:
        return any(is_double_back(move) for move in self._moves)

    def resolve_double_back(self, double_back: DoubleBack) -> Place | None:
        """The location ``double_back`` would return Dracula to.

        Resolution uses the trail as it stands at the start of the turn.
        Returns ``None`` when the trail is too short.
        """
        index = double_back.distance - 1
        if index >= len(self._locations):
            return None
        return self._locations[index]

    def __repr__(self) -> str:
        entries = ", ".join(
            f"{move!r}@{place.abbrev}"
            for move, place in zip(self._moves, self._locations, strict=True)
        )
        return f"Trail([{entries}])"
