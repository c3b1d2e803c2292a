from __future__ import annotations

from collections.abc import Collection, Iterable
from dataclasses import dataclass, field

from dracula.environment.map import Edge, PlaceGraph
from dracula.environment.places import Move, Place
from dracula.game.enums import ALL_MODES, Player, TransportMode
from dracula.game.game_state import InMemoryGameState
from dracula.types import Round

ROAD = TransportMode.ROAD
RAIL = TransportMode.RAIL
SEA = TransportMode.SEA
P = Place

# A corner of the real board: Iberia and south-west France.
IBERIA_EDGES: list[Edge] = [
    (P.MADRID, P.ALICANTE, ROAD),
    (P.MADRID, P.CADIZ, ROAD),
    (P.MADRID, P.GRANADA, ROAD),
    (P.MADRID, P.LISBON, ROAD),
    (P.MADRID, P.SANTANDER, ROAD),
    (P.MADRID, P.SARAGOSSA, ROAD),
    (P.GRANADA, P.ALICANTE, ROAD),
    (P.GRANADA, P.CADIZ, ROAD),
    (P.CADIZ, P.LISBON, ROAD),
    (P.LISBON, P.SANTANDER, ROAD),
    (P.SANTANDER, P.SARAGOSSA, ROAD),
    (P.SARAGOSSA, P.ALICANTE, ROAD),
    (P.SARAGOSSA, P.BARCELONA, ROAD),
    (P.SARAGOSSA, P.BORDEAUX, ROAD),
    (P.SARAGOSSA, P.TOULOUSE, ROAD),
    (P.BARCELONA, P.TOULOUSE, ROAD),
    (P.BORDEAUX, P.TOULOUSE, ROAD),
    (P.BORDEAUX, P.NANTES, ROAD),
    (P.BORDEAUX, P.CLERMONT_FERRAND, ROAD),
    (P.TOULOUSE, P.CLERMONT_FERRAND, ROAD),
    (P.TOULOUSE, P.MARSEILLES, ROAD),
    (P.CADIZ, P.ATLANTIC_OCEAN, SEA),
    (P.LISBON, P.ATLANTIC_OCEAN, SEA),
    (P.SANTANDER, P.BAY_OF_BISCAY, SEA),
    (P.BORDEAUX, P.BAY_OF_BISCAY, SEA),
    (P.NANTES, P.BAY_OF_BISCAY, SEA),
    (P.ALICANTE, P.MEDITERRANEAN_SEA, SEA),
    (P.BARCELONA, P.MEDITERRANEAN_SEA, SEA),
    (P.MARSEILLES, P.MEDITERRANEAN_SEA, SEA),
    (P.ATLANTIC_OCEAN, P.BAY_OF_BISCAY, SEA),
    (P.ATLANTIC_OCEAN, P.MEDITERRANEAN_SEA, SEA),
    (P.LISBON, P.MADRID, RAIL),
    (P.MADRID, P.SANTANDER, RAIL),
    (P.MADRID, P.ALICANTE, RAIL),
    (P.ALICANTE, P.BARCELONA, RAIL),
    (P.BARCELONA, P.SARAGOSSA, RAIL),
    (P.SARAGOSSA, P.BORDEAUX, RAIL),
    (P.BORDEAUX, P.PARIS, RAIL),
]

# Central Europe and Italy, linked to Iberia through the Mediterranean.
CONTINENT_EDGES: list[Edge] = [
    (P.PRAGUE, P.BERLIN, ROAD),
    (P.PRAGUE, P.NUREMBURG, ROAD),
    (P.PRAGUE, P.VIENNA, ROAD),
    (P.BERLIN, P.LEIPZIG, ROAD),
    (P.BERLIN, P.HAMBURG, ROAD),
    (P.LEIPZIG, P.HAMBURG, ROAD),
    (P.LEIPZIG, P.NUREMBURG, ROAD),
    (P.LEIPZIG, P.FRANKFURT, ROAD),
    (P.LEIPZIG, P.COLOGNE, ROAD),
    (P.HAMBURG, P.COLOGNE, ROAD),
    (P.ROME, P.FLORENCE, ROAD),
    (P.ROME, P.NAPLES, ROAD),
    (P.ROME, P.BARI, ROAD),
    (P.FLORENCE, P.GENOA, ROAD),
    (P.FLORENCE, P.VENICE, ROAD),
    (P.GENOA, P.MILAN, ROAD),
    (P.GENOA, P.VENICE, ROAD),
    (P.VENICE, P.MILAN, ROAD),
    (P.VENICE, P.MUNICH, ROAD),
    (P.NAPLES, P.BARI, ROAD),
    (P.HAMBURG, P.NORTH_SEA, SEA),
    (P.ROME, P.TYRRHENIAN_SEA, SEA),
    (P.NAPLES, P.TYRRHENIAN_SEA, SEA),
    (P.GENOA, P.TYRRHENIAN_SEA, SEA),
    (P.CAGLIARI, P.TYRRHENIAN_SEA, SEA),
    (P.CAGLIARI, P.MEDITERRANEAN_SEA, SEA),
    (P.TYRRHENIAN_SEA, P.MEDITERRANEAN_SEA, SEA),
    (P.TYRRHENIAN_SEA, P.IONIAN_SEA, SEA),
    (P.BARI, P.ADRIATIC_SEA, SEA),
    (P.VENICE, P.ADRIATIC_SEA, SEA),
    (P.ADRIATIC_SEA, P.IONIAN_SEA, SEA),
    (P.BERLIN, P.HAMBURG, RAIL),
    (P.BERLIN, P.LEIPZIG, RAIL),
    (P.BERLIN, P.PRAGUE, RAIL),
    (P.PRAGUE, P.VIENNA, RAIL),
]


def make_graph(edges: Iterable[Edge] | None = None) -> PlaceGraph:
    if edges is None:
        edges = [*IBERIA_EDGES, *CONTINENT_EDGES]
    return PlaceGraph(edges)


def make_state(
    dracula_moves: Iterable[Move] = (),
    *,
    edges: Iterable[Edge] | None = None,
    round_override: int | None = None,
    hunters: dict[Player, Place] | None = None,
) -> InMemoryGameState:
    """Build a game state with Dracula's history already played out."""
    state = InMemoryGameState(
        make_graph(edges),
        round_override=Round(round_override) if round_override is not None else None,
    )
    for hunter, place in (hunters or {}).items():
        state.record_move(hunter, place)
    state.record_moves(Player.DRACULA, dracula_moves)
    return state


@dataclass
class StubGameState:
    """A hand-wired ``GameStateView`` with fixed reachable sets.

    ``reachable`` maps a place to the places one move away from it,
    regardless of round, player or transport modes.
    """

    dracula_at: Place | None = None
    reachable: dict[Place, set[Place]] = field(default_factory=dict)
    moves: list[Move] = field(default_factory=list)
    locations: list[Place] = field(default_factory=list)
    round_number: Round = Round(0)

    def current_round(self) -> Round:
        return self.round_number

    def current_score(self) -> int:
        return 366

    def health(self, player: Player) -> int:
        return 40

    def location(self, player: Player) -> Place | None:
        return self.dracula_at if player is Player.DRACULA else None

    def vampire_location(self) -> Place | None:
        return None

    def trap_locations(self) -> frozenset[Place]:
        return frozenset()

    def last_moves(self, player: Player, n: int) -> list[Move]:
        return list(reversed(self.moves))[:n]

    def last_locations(self, player: Player, n: int) -> list[Place]:
        return list(reversed(self.locations))[:n]

    def full_move_history(self, player: Player) -> list[Move]:
        return list(self.moves)

    def reachable_from(
        self,
        player: Player,
        round_number: Round,
        place: Place,
        modes: Collection[TransportMode] = ALL_MODES,
    ) -> frozenset[Place]:
        return frozenset(self.reachable.get(place, set()))
