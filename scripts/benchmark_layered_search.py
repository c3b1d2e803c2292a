#!/usr/bin/env python3
"""Benchmark the round-layered shortest-path search on random boards.

Builds random place graphs over the real place ids, then times
``round_layered_bfs`` for Dracula and for a hunter with rail, and compares
the layered path lengths against a single-round snapshot search.

Usage:
    python scripts/benchmark_layered_search.py
"""

# ruff: noqa: E402  # Allow path setup before importing project modules

from __future__ import annotations

import sys
import timeit
from collections import deque
from pathlib import Path

import numpy as np

# Add the project root to Python path so running as a script works.
project_root = Path(__file__).resolve().parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from dracula.environment.map import PlaceGraph
from dracula.environment.places import NUM_REAL_PLACES, Place
from dracula.game.enums import ALL_MODES, ROAD_AND_SEA, Player, TransportMode
from dracula.game.game_state import InMemoryGameState
from dracula.types import Round
from dracula.util.pathfinding import UNVISITED, extract_path, round_layered_bfs

# ---------------------------------------------------------------------------
# Board generators
# ---------------------------------------------------------------------------


def _make_board(edges_per_mode: int, seed: int) -> PlaceGraph:
    """Random connections between real places for every transport mode."""
    rng = np.random.default_rng(seed)
    graph = PlaceGraph()
    for mode in TransportMode:
        pairs = rng.integers(0, NUM_REAL_PLACES, size=(edges_per_mode, 2))
        for a, b in pairs:
            if a != b:
                graph.add_connection(Place(int(a)), Place(int(b)), mode)
    return graph


# ---------------------------------------------------------------------------
# Runners
# ---------------------------------------------------------------------------


def _snapshot_distances(
    state: InMemoryGameState, player: Player, source: Place, round_number: Round
) -> dict[Place, int]:
    """Plain BFS that uses one round's reachability for every move."""
    dist = {source: 0}
    queue: deque[Place] = deque([source])
    while queue:
        place = queue.popleft()
        for neighbor in state.reachable_from(player, round_number, place, ALL_MODES):
            if neighbor not in dist:
                dist[neighbor] = dist[place] + 1
                queue.append(neighbor)
    return dist


def _bench(fn: object, *args: object) -> float:
    """Time *fn(*args)* and return average ms per call."""
    # Warm up
    fn(*args)  # type: ignore[operator]
    timer = timeit.Timer(lambda: fn(*args))  # type: ignore[operator]
    number, total = timer.autorange()
    return (total / number) * 1000


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------


def main() -> None:
    scenarios: list[tuple[str, int, int]] = [
        ("Sparse (40 edges/mode)", 40, 1),
        ("Board-like (120 edges/mode)", 120, 2),
        ("Dense (400 edges/mode)", 400, 3),
    ]
    source = Place.MADRID

    print("Round-layered search benchmark")
    print("=" * 78)
    print(f"{'Scenario':<30} {'Dracula':>10} {'Hunter':>10} {'reached':>9}")
    print("-" * 78)

    for name, edges, seed in scenarios:
        state = InMemoryGameState(_make_board(edges, seed))
        dracula_ms = _bench(
            round_layered_bfs, state, Player.DRACULA, source, Round(0), ROAD_AND_SEA
        )
        hunter_ms = _bench(
            round_layered_bfs, state, Player.VAN_HELSING, source, Round(0), ALL_MODES
        )
        pred = round_layered_bfs(
            state, Player.VAN_HELSING, source, Round(0), ALL_MODES
        )
        reached = int(np.count_nonzero(pred != UNVISITED))
        print(f"{name:<30} {dracula_ms:>8.3f}ms {hunter_ms:>8.3f}ms {reached:>9}")

    print("-" * 78)
    print()

    # ------------------------------------------------------------------
    # Layered vs snapshot comparison
    # ------------------------------------------------------------------
    print("Layered vs single-round snapshot (hunter, start round 0)...")
    state = InMemoryGameState(_make_board(120, 2))
    pred = round_layered_bfs(state, Player.VAN_HELSING, source, Round(0), ALL_MODES)
    snapshot = _snapshot_distances(state, Player.VAN_HELSING, source, Round(0))

    shorter = longer = missing = 0
    for place in Place:
        path = extract_path(pred, source, place)
        if path is None:
            missing += 1
            continue
        if place not in snapshot:
            shorter += 1
        elif len(path) < snapshot[place]:
            shorter += 1
        elif len(path) > snapshot[place]:
            longer += 1

    print(f"  Layered path shorter than snapshot: {shorter}")
    print(f"  Layered path longer than snapshot:  {longer}")
    print(f"  Unreachable from {source.display_name}:       {missing}")


if __name__ == "__main__":
    main()
