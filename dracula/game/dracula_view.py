"""
The caller-facing view of the game from Dracula's side of the board.

``DraculaView`` wraps a read-only ``GameStateView`` snapshot and Dracula's
trail at the moment it is built, and answers every question the turn
decision driver asks: game state pass-through, legal moves, reachability
for Dracula and the hunters, multi-round shortest paths and the hotspot
routing suggestion.

Build a new view whenever the game state changes. Nothing is cached between
views.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from dracula.environment.places import Move, Place
from dracula.game import legality
from dracula.game.enums import Player, transport_modes
from dracula.game.hotspot import HotspotDecision, HotspotRouter, count_teleports
from dracula.game.trail import Trail
from dracula.util.pathfinding import ShortestPath, find_shortest_path

if TYPE_CHECKING:
    from dracula.game.game_state import GameStateView
    from dracula.types import Health, Round, Score


class DraculaView:
    """Dracula's read-only view of a single decision point."""

    def __init__(self, state: GameStateView) -> None:
        self.state = state
        self.trail = Trail.from_state(state)

    # ------------------------------------------------------------------
    # Game state

    @property
    def round(self) -> Round:
        return self.state.current_round()

    @property
    def score(self) -> Score:
        return self.state.current_score()

    def health(self, player: Player) -> Health:
        return self.state.health(player)

    def player_location(self, player: Player) -> Place | None:
        return self.state.location(player)

    @property
    def where_am_i(self) -> Place | None:
        return self.state.location(Player.DRACULA)

    @property
    def vampire_location(self) -> Place | None:
        return self.state.vampire_location()

    @property
    def trap_locations(self) -> frozenset[Place]:
        return self.state.trap_locations()

    # ------------------------------------------------------------------
    # Making a move

    def legal_moves(self) -> list[Move]:
        return legality.legal_moves(self.state, self.trail)

    def where_can_i_go(self) -> list[Place]:
        return legality.where_can_i_go(self.state, self.trail)

    def where_can_i_go_by_type(self, road: bool, sea: bool) -> list[Place]:
        return legality.where_can_i_go(self.state, self.trail, road=road, sea=sea)

    def where_can_they_go(self, player: Player) -> list[Place]:
        return legality.where_can_they_go(self.state, player, self.trail)

    def where_can_they_go_by_type(
        self, player: Player, road: bool, rail: bool, sea: bool
    ) -> list[Place]:
        return legality.where_can_they_go(
            self.state, player, self.trail, road=road, rail=rail, sea=sea
        )

    # ------------------------------------------------------------------
    # Planning

    def shortest_path_to(
        self,
        dest: Place,
        *,
        road: bool = True,
        sea: bool = True,
        player: Player = Player.DRACULA,
    ) -> ShortestPath | None:
        """Shortest path for ``player`` to ``dest``, or ``None`` if there is none.

        Dracula never travels by rail, so only hunters' paths use it.
        """
        modes = transport_modes(road=road, rail=player.is_hunter, sea=sea)
        return find_shortest_path(self.state, player, dest, modes)

    def last_move(self) -> Move | None:
        return self.trail.last_move

    def teleport_count(self) -> int:
        return count_teleports(self.state)

    def hotspot_decision(self) -> HotspotDecision:
        return HotspotRouter(self.state).plan()

    def next_hotspot_step(self) -> Move | None:
        return HotspotRouter(self.state).next_step()
