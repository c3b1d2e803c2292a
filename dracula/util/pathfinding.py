"""Shortest paths over a graph whose edges change from round to round.

Reachability on the board depends on the round (hunters' rail allowance is
``(round + player) % 4`` hops), so a plain BFS over a single snapshot of the
graph can report paths that are not actually playable. The search here
expands one *round layer* at a time: every place reached after k moves is
expanded using the reachability of round ``start_round + k`` before any
place reached after k + 1 moves is looked at. Paths are therefore shortest
in number of moves, and every step is valid in the round it is taken.

The search result is a dense predecessor array indexed by place id. It is
built fresh per query and discarded once the path is extracted.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Collection, Iterator
from typing import TYPE_CHECKING, NamedTuple

import numpy as np

from dracula.environment.places import NUM_REAL_PLACES, Place
from dracula.game.enums import ALL_MODES, Player, TransportMode
from dracula.types import Round

if TYPE_CHECKING:
    from dracula.game.game_state import GameStateView

logger = logging.getLogger(__name__)

# Predecessor value for places the search never reached.
UNVISITED = -1


class ShortestPath(NamedTuple):
    """A path from (but excluding) the source to the destination."""

    path: list[Place]
    length: int


def round_layered_bfs(
    state: GameStateView,
    player: Player,
    source: Place,
    start_round: Round,
    modes: Collection[TransportMode] = ALL_MODES,
) -> np.ndarray:
    """Breadth-first search that advances the round between layers.

    Two FIFO frontiers are kept: places to expand this round and places
    discovered for the next round. When the current frontier runs dry the
    two are swapped and the round counter advances. The search ends when
    both are empty.

    Args:
        state: Supplies per-round reachability.
        player: Whose movement rules apply.
        source: Where the search starts.
        start_round: The round in which the first move is made.
        modes: Transport modes the player may use.

    Returns:
        An ``int16`` array of length ``NUM_REAL_PLACES``. Entry ``p`` holds
        the place ``p`` was first reached from, ``source`` maps to itself,
        and unreached places hold ``UNVISITED``.
    """
    pred = np.full(NUM_REAL_PLACES, UNVISITED, dtype=np.int16)
    pred[source] = source

    current: deque[Place] = deque([source])
    upcoming: deque[Place] = deque()
    round_number = start_round

    while current:
        place = current.popleft()
        reachable = state.reachable_from(player, round_number, place, modes)
        for neighbor in sorted(reachable):
            if pred[neighbor] == UNVISITED:
                pred[neighbor] = place
                upcoming.append(neighbor)

        # Exhausted this round's layer: the next round's places become current.
        if not current:
            current, upcoming = upcoming, current
            round_number = Round(round_number + 1)

    logger.debug(
        f"Layered search for {player.name} from {source.name}: "
        f"{int(np.count_nonzero(pred != UNVISITED))} places over "
        f"rounds {start_round}..{round_number - 1}"
    )
    return pred


def extract_path(pred: np.ndarray, source: Place, dest: Place) -> list[Place] | None:
    """Rebuild the path to ``dest`` from a predecessor array.

    Returns:
        The places from the first step through ``dest`` (``source`` is not
        included), an empty list when ``dest`` is ``source``, or ``None``
        when ``dest`` was never reached.
    """
    if pred[dest] == UNVISITED:
        return None

    # First pass: count the steps.
    length = 0
    current = dest
    while current != source:
        length += 1
        current = Place(int(pred[current]))

    # Second pass: fill the path back to front.
    path: list[Place] = [source] * length
    current = dest
    for i in range(length - 1, -1, -1):
        path[i] = current
        current = Place(int(pred[current]))

    return path


def find_shortest_path(
    state: GameStateView,
    player: Player,
    dest: Place,
    modes: Collection[TransportMode] = ALL_MODES,
) -> ShortestPath | None:
    """Shortest path, in moves, from ``player``'s location to ``dest``.

    The first move is made in the current round.

    Returns:
        The path and its length, or ``None`` when the player has no location
        or ``dest`` cannot be reached with the given transport modes.
    """
    source = state.location(player)
    if source is None:
        logger.debug(f"{player.name} has no location; no path to {dest.name}")
        return None

    pred = round_layered_bfs(state, player, source, state.current_round(), modes)
    path = extract_path(pred, source, dest)
    if path is None:
        logger.debug(f"No path for {player.name} from {source.name} to {dest.name}")
        return None
    return ShortestPath(path, len(path))


def path_round_steps(
    path: list[Place], source: Place, start_round: Round
) -> Iterator[tuple[Place, Place, Round]]:
    """Yield ``(from_place, to_place, round)`` for every move along ``path``."""
    previous = source
    for offset, place in enumerate(path):
        yield previous, place, Round(start_round + offset)
        previous = place
