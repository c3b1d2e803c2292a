from enum import Enum, IntEnum, auto


class Player(IntEnum):
    """Players in turn order.

    Integer values matter: the hunters' rail allowance is computed from
    ``round + player``.
    """

    LORD_GODALMING = 0
    DR_SEWARD = 1
    VAN_HELSING = 2
    MINA_HARKER = 3
    DRACULA = 4

    @property
    def is_hunter(self) -> bool:
        return self is not Player.DRACULA


HUNTERS = (
    Player.LORD_GODALMING,
    Player.DR_SEWARD,
    Player.VAN_HELSING,
    Player.MINA_HARKER,
)


class PlaceType(Enum):
    LAND = auto()
    SEA = auto()


class TransportMode(Enum):
    """Edge types of the place graph."""

    ROAD = auto()
    RAIL = auto()
    SEA = auto()


# Common transport filters.
ALL_MODES = frozenset(TransportMode)
ROAD_AND_SEA = frozenset({TransportMode.ROAD, TransportMode.SEA})
ROAD_ONLY = frozenset({TransportMode.ROAD})
SEA_ONLY = frozenset({TransportMode.SEA})


class HotspotPhase(Enum):
    """Where the hotspot router is within its current teleport cycle.

    - APPROACHING: anchor not yet visited, heading there along a shortest path
    - AWAITING_ANCHOR: anchor not yet visited and the sequence has no
      approach route, so the router makes no suggestion
    - IN_CYCLE: anchor visited, following the fixed follow-up moves
    - OFF_CYCLE: anchor visited but the last move is not part of the cycle
    - NO_ROUTE: anchor not yet visited and no path to it exists
    """

    APPROACHING = auto()
    AWAITING_ANCHOR = auto()
    IN_CYCLE = auto()
    OFF_CYCLE = auto()
    NO_ROUTE = auto()


def transport_modes(
    *, road: bool = True, rail: bool = True, sea: bool = True
) -> frozenset[TransportMode]:
    """Build a transport filter from boolean flags."""
    modes: set[TransportMode] = set()
    if road:
        modes.add(TransportMode.ROAD)
    if rail:
        modes.add(TransportMode.RAIL)
    if sea:
        modes.add(TransportMode.SEA)
    return frozenset(modes)
