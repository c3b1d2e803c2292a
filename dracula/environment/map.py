"""The place graph and its round-dependent reachability rules.

``PlaceGraph`` stores undirected, typed connections between real places and
answers the one question the rest of the package asks of the board: "from
this place, at this round, using these transport modes, where can this
player be after one move?"

Reachability depends on the round because of rail travel: a hunter may
take ``(round + player) % 4`` rail hops in a single move, so the same
hunter in the same city can reach different places on different rounds.
Dracula never travels by rail and may never enter the hospital.

The answer is recomputed on every call. Game state changes between every
query, so nothing here is cached.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Collection, Iterable

from dracula import config
from dracula.environment.places import HOSPITAL_PLACE, Place
from dracula.game.enums import ALL_MODES, Player, TransportMode
from dracula.types import Round

type Edge = tuple[Place, Place, TransportMode]


class PlaceGraph:
    """Undirected multigraph of places keyed by transport mode."""

    def __init__(self, edges: Iterable[Edge] = ()) -> None:
        self._adjacency: dict[TransportMode, dict[Place, set[Place]]] = {
            mode: {} for mode in TransportMode
        }
        self.num_edges = 0
        for a, b, mode in edges:
            self.add_connection(a, b, mode)

    def add_connection(self, a: Place, b: Place, mode: TransportMode) -> None:
        """Connect two distinct places by ``mode`` in both directions."""
        if a == b:
            raise ValueError(f"Cannot connect {a.name} to itself")
        neighbors = self._adjacency[mode]
        if b in neighbors.get(a, ()):
            return
        neighbors.setdefault(a, set()).add(b)
        neighbors.setdefault(b, set()).add(a)
        self.num_edges += 1

    def connections(self, place: Place, mode: TransportMode) -> frozenset[Place]:
        """Places directly connected to ``place`` by a single ``mode`` edge."""
        return frozenset(self._adjacency[mode].get(place, ()))

    def is_connected(self, a: Place, b: Place, mode: TransportMode) -> bool:
        return b in self._adjacency[mode].get(a, ())

    def reachable_from(
        self,
        player: Player,
        round_number: Round,
        place: Place,
        modes: Collection[TransportMode] = ALL_MODES,
    ) -> frozenset[Place]:
        """Every place ``player`` could occupy after one move from ``place``.

        The result always includes ``place`` itself, mirroring the board game
        where staying put (hiding, resting, doubling back to the current
        city) is a legal outcome of a move.

        Args:
            player: The moving player. Dracula ignores rail and may not
                enter the hospital.
            round_number: The round in which the move is made. Only rail
                travel depends on it.
            place: The starting place.
            modes: Transport modes to consider.

        Returns:
            The set of reachable places.
        """
        reachable: set[Place] = {place}

        if TransportMode.ROAD in modes:
            reachable |= self._adjacency[TransportMode.ROAD].get(place, set())

        if TransportMode.SEA in modes:
            reachable |= self._adjacency[TransportMode.SEA].get(place, set())

        if TransportMode.RAIL in modes and player.is_hunter:
            max_hops = rail_hops(player, round_number)
            reachable |= self._rail_reachable(place, max_hops)

        if player is Player.DRACULA:
            reachable.discard(HOSPITAL_PLACE)

        return frozenset(reachable)

    def _rail_reachable(self, place: Place, max_hops: int) -> set[Place]:
        """Breadth-first walk over rail edges up to ``max_hops`` deep."""
        if max_hops <= 0:
            return set()

        rail = self._adjacency[TransportMode.RAIL]
        seen: dict[Place, int] = {place: 0}
        queue: deque[Place] = deque([place])

        while queue:
            current = queue.popleft()
            depth = seen[current]
            if depth == max_hops:
                continue
            for neighbor in rail.get(current, ()):
                if neighbor not in seen:
                    seen[neighbor] = depth + 1
                    queue.append(neighbor)

        del seen[place]
        return set(seen)


def rail_hops(player: Player, round_number: Round) -> int:
    """Number of rail hops a hunter may take this round (0 to 3)."""
    if not player.is_hunter:
        return 0
    return (round_number + player.value) % config.RAIL_HOP_DIVISOR
