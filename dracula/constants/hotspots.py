"""Waypoint tables for the hotspot teleport cycles."""

from __future__ import annotations

from dataclasses import dataclass, field

from dracula.environment.places import HIDE, TELEPORT, DoubleBack, Move, Place
from dracula.game.enums import ROAD_AND_SEA, ROAD_ONLY, TransportMode


@dataclass(frozen=True)
class HotspotSequence:
    """One teleport cycle.

    Dracula heads for ``anchor`` (using ``approach_modes``, or not at all
    when it is ``None``) and then plays the follow-up moves, each chosen by
    the move he made last, until he teleports home.
    """

    anchor: Place
    approach_modes: frozenset[TransportMode] | None
    follow_ups: dict[Move, Move] = field(default_factory=dict)


class HotspotConstants:
    """The three hotspot cycles, selected by ``teleports taken % 3``."""

    SPAIN = HotspotSequence(
        anchor=Place.MADRID,
        approach_modes=ROAD_ONLY,
        follow_ups={
            Place.MADRID: Place.ALICANTE,
            Place.ALICANTE: Place.GRANADA,
            Place.GRANADA: Place.CADIZ,
            Place.CADIZ: DoubleBack(1),
            DoubleBack(1): HIDE,
            HIDE: TELEPORT,
        },
    )

    # No approach route: Dracula has to wander into Prague on his own.
    GERMANY = HotspotSequence(
        anchor=Place.PRAGUE,
        approach_modes=None,
        follow_ups={
            Place.PRAGUE: Place.BERLIN,
            Place.BERLIN: Place.LEIPZIG,
            Place.LEIPZIG: Place.HAMBURG,
            Place.HAMBURG: DoubleBack(3),
            DoubleBack(3): HIDE,
            HIDE: TELEPORT,
        },
    )

    ITALY = HotspotSequence(
        anchor=Place.ROME,
        approach_modes=ROAD_AND_SEA,
        follow_ups={
            Place.ROME: Place.FLORENCE,
            Place.FLORENCE: Place.GENOA,
            Place.GENOA: Place.VENICE,
            Place.VENICE: DoubleBack(3),
            DoubleBack(3): HIDE,
            HIDE: TELEPORT,
        },
    )

    SEQUENCES: tuple[HotspotSequence, ...] = (SPAIN, GERMANY, ITALY)
