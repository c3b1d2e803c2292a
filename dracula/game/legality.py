"""Which moves Dracula may legally make this turn.

Dracula's movement is restricted by his trail (the last five moves):

1. **Ordinary moves** - any place one road or sea move away, unless that
   place was itself played as a move somewhere in the trail. Rail travel
   is never available to Dracula.
2. **Double-backs** - ``DoubleBack(k)`` returns Dracula to his k-th most
   recent location. Allowed only when no double-back is already in the
   trail and the target location is one move away (or is where he stands).
3. **Hide** - stay put without revealing the location. Allowed only when no
   hide is in the trail and Dracula is on land.

``where_can_i_go`` answers a related but different question: which
*places* Dracula could end up in, regardless of which move gets him there.
A place played earlier in the trail is still reachable through a
double-back, so it is only ruled out once a double-back has been spent,
and even then the current location stays open through a legal hide. The two
predicates (``is_legal_move`` and ``can_move_to``) deliberately diverge in
exactly that case and are kept separate.

All functions here are pure: they read the state snapshot and trail and
return fresh lists.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from dracula.environment.places import (
    ALL_DOUBLE_BACKS,
    HIDE,
    DoubleBack,
    Move,
    Place,
    PseudoMove,
)
from dracula.game.enums import Player, transport_modes
from dracula.game.trail import Trail
from dracula.types import Round

if TYPE_CHECKING:
    from dracula.game.game_state import GameStateView

logger = logging.getLogger(__name__)


def dracula_reachable(
    state: GameStateView,
    *,
    road: bool = True,
    sea: bool = True,
) -> frozenset[Place]:
    """Places one road/sea move from Dracula's location this round.

    Returns an empty set when Dracula has not been placed yet.
    """
    location = state.location(Player.DRACULA)
    if location is None:
        return frozenset()
    return state.reachable_from(
        Player.DRACULA,
        state.current_round(),
        location,
        transport_modes(road=road, rail=False, sea=sea),
    )


def legal_moves(state: GameStateView, trail: Trail | None = None) -> list[Move]:
    """Every legal Dracula move this turn.

    Ordinary moves come first (in place order), then double-backs from
    ``DoubleBack(1)`` to ``DoubleBack(5)``, then ``HIDE``.

    Args:
        state: The current game state.
        trail: Dracula's trail; built from ``state`` when omitted.

    Returns:
        The legal moves, or an empty list if Dracula has no location yet.
    """
    if state.location(Player.DRACULA) is None:
        logger.debug("Dracula has no location yet; no legal moves")
        return []

    if trail is None:
        trail = Trail.from_state(state)

    reachable = dracula_reachable(state)
    moves: list[Move] = []

    for place in sorted(reachable):
        if _is_legal(state, trail, reachable, place):
            moves.append(place)

    for double_back in ALL_DOUBLE_BACKS:
        if _is_legal(state, trail, reachable, double_back):
            moves.append(double_back)

    if _is_legal(state, trail, reachable, HIDE):
        moves.append(HIDE)

    return moves


def is_legal_move(
    state: GameStateView, move: Move, trail: Trail | None = None
) -> bool:
    """Whether Dracula may play ``move`` this turn."""
    if state.location(Player.DRACULA) is None:
        return False
    if trail is None:
        trail = Trail.from_state(state)
    return _is_legal(state, trail, dracula_reachable(state), move)


def _is_legal(
    state: GameStateView,
    trail: Trail,
    reachable: frozenset[Place],
    move: Move,
) -> bool:
    if isinstance(move, Place):
        return move in reachable and not trail.contains(move)

    if isinstance(move, DoubleBack):
        target = trail.resolve_double_back(move)
        return (
            target is not None
            and target in reachable
            and not trail.contains_double_back()
        )

    if move is PseudoMove.HIDE:
        location = state.location(Player.DRACULA)
        return (
            location is not None and not location.is_sea and not trail.contains(HIDE)
        )

    # TELEPORT is forced by the rules engine when nothing else is legal.
    return False


def can_move_to(
    state: GameStateView, place: Place, trail: Trail | None = None
) -> bool:
    """Whether some legal move could leave Dracula at ``place``.

    Assumes ``place`` is already one move away from Dracula.
    """
    if trail is None:
        trail = Trail.from_state(state)

    if not trail.contains(place):
        return True

    # In the trail, but still reachable through a double-back.
    if not trail.contains_double_back():
        return True

    # Double-back used up: only staying put by hiding remains.
    if place != state.location(Player.DRACULA):
        return False

    return not trail.contains(HIDE) and not place.is_sea


def where_can_i_go(
    state: GameStateView,
    trail: Trail | None = None,
    *,
    road: bool = True,
    sea: bool = True,
) -> list[Place]:
    """Places Dracula could be in after his next move.

    Args:
        state: The current game state.
        trail: Dracula's trail; built from ``state`` when omitted.
        road: Include places reachable by road.
        sea: Include places reachable by sea.

    Returns:
        The places in place order, or an empty list if Dracula has no
        location yet.
    """
    if state.location(Player.DRACULA) is None:
        logger.debug("Dracula has no location yet; nowhere to go")
        return []

    if trail is None:
        trail = Trail.from_state(state)

    reachable = dracula_reachable(state, road=road, sea=sea)
    return [place for place in sorted(reachable) if can_move_to(state, place, trail)]


def where_can_they_go(
    state: GameStateView,
    player: Player,
    trail: Trail | None = None,
    *,
    road: bool = True,
    rail: bool = True,
    sea: bool = True,
) -> list[Place]:
    """Places ``player`` could be in after their next move.

    Hunters move next round and are not bound by any trail. For Dracula this
    is ``where_can_i_go`` and ``rail`` is ignored.
    """
    if player is Player.DRACULA:
        return where_can_i_go(state, trail, road=road, sea=sea)

    location = state.location(player)
    if location is None:
        logger.debug(f"{player.name} has no location yet; nowhere to go")
        return []

    # Hunters have already moved this round; their next move is next round.
    next_round = Round(state.current_round() + 1)
    reachable = state.reachable_from(
        player,
        next_round,
        location,
        transport_modes(road=road, rail=rail, sea=sea),
    )
    return sorted(reachable)
