"""Place identifiers and Dracula's pseudo-moves.

Real places form a dense, bounded id space (``Place``), which lets the
pathfinding code index numpy arrays directly by place. Moves that are not
places - hiding, teleporting and doubling back - are separate types rather
than reserved integers, so a move can never be mistaken for a location:

    type Move = Place | PseudoMove | DoubleBack

"Nowhere" (a player who has not yet been placed on the board, or a
double-back that points past the end of the trail) is always ``None``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum

from dracula import config
from dracula.game.enums import PlaceType


class Place(IntEnum):
    """The real locations on the board, in alphabetical order."""

    ADRIATIC_SEA = 0
    ALICANTE = 1
    AMSTERDAM = 2
    ATHENS = 3
    ATLANTIC_OCEAN = 4
    BARCELONA = 5
    BARI = 6
    BAY_OF_BISCAY = 7
    BELGRADE = 8
    BERLIN = 9
    BLACK_SEA = 10
    BORDEAUX = 11
    BRUSSELS = 12
    BUCHAREST = 13
    BUDAPEST = 14
    CADIZ = 15
    CAGLIARI = 16
    CASTLE_DRACULA = 17
    CLERMONT_FERRAND = 18
    COLOGNE = 19
    CONSTANTA = 20
    DUBLIN = 21
    EDINBURGH = 22
    ENGLISH_CHANNEL = 23
    FLORENCE = 24
    FRANKFURT = 25
    GALATZ = 26
    GALWAY = 27
    GENEVA = 28
    GENOA = 29
    GRANADA = 30
    HAMBURG = 31
    IONIAN_SEA = 32
    IRISH_SEA = 33
    KLAUSENBURG = 34
    LE_HAVRE = 35
    LEIPZIG = 36
    LISBON = 37
    LIVERPOOL = 38
    LONDON = 39
    MADRID = 40
    MANCHESTER = 41
    MARSEILLES = 42
    MEDITERRANEAN_SEA = 43
    MILAN = 44
    MUNICH = 45
    NANTES = 46
    NAPLES = 47
    NORTH_SEA = 48
    NUREMBURG = 49
    PARIS = 50
    PLYMOUTH = 51
    PRAGUE = 52
    ROME = 53
    SALONICA = 54
    SANTANDER = 55
    SARAGOSSA = 56
    SARAJEVO = 57
    SOFIA = 58
    ST_JOSEPH_AND_ST_MARY = 59
    STRASBOURG = 60
    SWANSEA = 61
    SZEGED = 62
    TOULOUSE = 63
    TYRRHENIAN_SEA = 64
    VALONA = 65
    VARNA = 66
    VENICE = 67
    VIENNA = 68
    ZAGREB = 69
    ZURICH = 70

    @property
    def abbrev(self) -> str:
        return _PLACE_INFO[self].abbrev

    @property
    def display_name(self) -> str:
        return _PLACE_INFO[self].display_name

    @property
    def place_type(self) -> PlaceType:
        return _PLACE_INFO[self].place_type

    @property
    def is_sea(self) -> bool:
        return self.place_type is PlaceType.SEA

    @property
    def is_land(self) -> bool:
        return self.place_type is PlaceType.LAND


NUM_REAL_PLACES = len(Place)


@dataclass(frozen=True, slots=True)
class PlaceInfo:
    abbrev: str
    display_name: str
    place_type: PlaceType


_L = PlaceType.LAND
_S = PlaceType.SEA

_PLACE_INFO: dict[Place, PlaceInfo] = {
    Place.ADRIATIC_SEA: PlaceInfo("AS", "Adriatic Sea", _S),
    Place.ALICANTE: PlaceInfo("AL", "Alicante", _L),
    Place.AMSTERDAM: PlaceInfo("AM", "Amsterdam", _L),
    Place.ATHENS: PlaceInfo("AT", "Athens", _L),
    Place.ATLANTIC_OCEAN: PlaceInfo("AO", "Atlantic Ocean", _S),
    Place.BARCELONA: PlaceInfo("BA", "Barcelona", _L),
    Place.BARI: PlaceInfo("BI", "Bari", _L),
    Place.BAY_OF_BISCAY: PlaceInfo("BB", "Bay of Biscay", _S),
    Place.BELGRADE: PlaceInfo("BE", "Belgrade", _L),
    Place.BERLIN: PlaceInfo("BR", "Berlin", _L),
    Place.BLACK_SEA: PlaceInfo("BS", "Black Sea", _S),
    Place.BORDEAUX: PlaceInfo("BO", "Bordeaux", _L),
    Place.BRUSSELS: PlaceInfo("BU", "Brussels", _L),
    Place.BUCHAREST: PlaceInfo("BC", "Bucharest", _L),
    Place.BUDAPEST: PlaceInfo("BD", "Budapest", _L),
    Place.CADIZ: PlaceInfo("CA", "Cadiz", _L),
    Place.CAGLIARI: PlaceInfo("CG", "Cagliari", _L),
    Place.CASTLE_DRACULA: PlaceInfo("CD", "Castle Dracula", _L),
    Place.CLERMONT_FERRAND: PlaceInfo("CF", "Clermont-Ferrand", _L),
    Place.COLOGNE: PlaceInfo("CO", "Cologne", _L),
    Place.CONSTANTA: PlaceInfo("CN", "Constanta", _L),
    Place.DUBLIN: PlaceInfo("DU", "Dublin", _L),
    Place.EDINBURGH: PlaceInfo("ED", "Edinburgh", _L),
    Place.ENGLISH_CHANNEL: PlaceInfo("EC", "English Channel", _S),
    Place.FLORENCE: PlaceInfo("FL", "Florence", _L),
    Place.FRANKFURT: PlaceInfo("FR", "Frankfurt", _L),
    Place.GALATZ: PlaceInfo("GA", "Galatz", _L),
    Place.GALWAY: PlaceInfo("GW", "Galway", _L),
    Place.GENEVA: PlaceInfo("GE", "Geneva", _L),
    Place.GENOA: PlaceInfo("GO", "Genoa", _L),
    Place.GRANADA: PlaceInfo("GR", "Granada", _L),
    Place.HAMBURG: PlaceInfo("HA", "Hamburg", _L),
    Place.IONIAN_SEA: PlaceInfo("IO", "Ionian Sea", _S),
    Place.IRISH_SEA: PlaceInfo("IR", "Irish Sea", _S),
    Place.KLAUSENBURG: PlaceInfo("KL", "Klausenburg", _L),
    Place.LE_HAVRE: PlaceInfo("LE", "Le Havre", _L),
    Place.LEIPZIG: PlaceInfo("LI", "Leipzig", _L),
    Place.LISBON: PlaceInfo("LS", "Lisbon", _L),
    Place.LIVERPOOL: PlaceInfo("LV", "Liverpool", _L),
    Place.LONDON: PlaceInfo("LO", "London", _L),
    Place.MADRID: PlaceInfo("MA", "Madrid", _L),
    Place.MANCHESTER: PlaceInfo("MN", "Manchester", _L),
    Place.MARSEILLES: PlaceInfo("MR", "Marseilles", _L),
    Place.MEDITERRANEAN_SEA: PlaceInfo("MS", "Mediterranean Sea", _S),
    Place.MILAN: PlaceInfo("MI", "Milan", _L),
    Place.MUNICH: PlaceInfo("MU", "Munich", _L),
    Place.NANTES: PlaceInfo("NA", "Nantes", _L),
    Place.NAPLES: PlaceInfo("NP", "Naples", _L),
    Place.NORTH_SEA: PlaceInfo("NS", "North Sea", _S),
    Place.NUREMBURG: PlaceInfo("NU", "Nuremburg", _L),
    Place.PARIS: PlaceInfo("PA", "Paris", _L),
    Place.PLYMOUTH: PlaceInfo("PL", "Plymouth", _L),
    Place.PRAGUE: PlaceInfo("PR", "Prague", _L),
    Place.ROME: PlaceInfo("RO", "Rome", _L),
    Place.SALONICA: PlaceInfo("SA", "Salonica", _L),
    Place.SANTANDER: PlaceInfo("SN", "Santander", _L),
    Place.SARAGOSSA: PlaceInfo("SR", "Saragossa", _L),
    Place.SARAJEVO: PlaceInfo("SJ", "Sarajevo", _L),
    Place.SOFIA: PlaceInfo("SO", "Sofia", _L),
    Place.ST_JOSEPH_AND_ST_MARY: PlaceInfo("JM", "St Joseph and St Mary", _L),
    Place.STRASBOURG: PlaceInfo("ST", "Strasbourg", _L),
    Place.SWANSEA: PlaceInfo("SW", "Swansea", _L),
    Place.SZEGED: PlaceInfo("SZ", "Szeged", _L),
    Place.TOULOUSE: PlaceInfo("TO", "Toulouse", _L),
    Place.TYRRHENIAN_SEA: PlaceInfo("TS", "Tyrrhenian Sea", _S),
    Place.VALONA: PlaceInfo("VA", "Valona", _L),
    Place.VARNA: PlaceInfo("VR", "Varna", _L),
    Place.VENICE: PlaceInfo("VE", "Venice", _L),
    Place.VIENNA: PlaceInfo("VI", "Vienna", _L),
    Place.ZAGREB: PlaceInfo("ZA", "Zagreb", _L),
    Place.ZURICH: PlaceInfo("ZU", "Zurich", _L),
}

_PLACES_BY_ABBREV: dict[str, Place] = {
    info.abbrev: place for place, info in _PLACE_INFO.items()
}


class PseudoMove(Enum):
    """Dracula moves that do not name a destination."""

    HIDE = "HI"
    TELEPORT = "TP"

    @property
    def abbrev(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class DoubleBack:
    """Return to the location Dracula occupied ``distance`` moves ago.

    ``DoubleBack(1)`` names the most recent trail location, i.e. the place
    Dracula is standing on now.
    """

    distance: int

    def __post_init__(self) -> None:
        if not 1 <= self.distance <= config.NUM_DOUBLE_BACKS:
            raise ValueError(
                f"Double-back distance must be 1..{config.NUM_DOUBLE_BACKS}, "
                f"got {self.distance}"
            )

    @property
    def abbrev(self) -> str:
        return f"D{self.distance}"

    def __repr__(self) -> str:
        return f"DoubleBack({self.distance})"


ALL_DOUBLE_BACKS: tuple[DoubleBack, ...] = tuple(
    DoubleBack(k) for k in range(1, config.NUM_DOUBLE_BACKS + 1)
)

type Move = Place | PseudoMove | DoubleBack

HIDE = PseudoMove.HIDE
TELEPORT = PseudoMove.TELEPORT

TELEPORT_DESTINATION = _PLACES_BY_ABBREV[config.TELEPORT_DESTINATION_ABBREV]
HOSPITAL_PLACE = _PLACES_BY_ABBREV[config.HOSPITAL_ABBREV]


def place_from_abbrev(abbrev: str) -> Place:
    """Look up a real place by its two-letter board abbreviation."""
    try:
        return _PLACES_BY_ABBREV[abbrev.upper()]
    except KeyError:
        raise ValueError(f"Unknown place abbreviation: {abbrev!r}") from None


def move_from_abbrev(abbrev: str) -> Move:
    """Look up any move - real place or pseudo-move - by abbreviation."""
    code = abbrev.upper()
    if code in ("HI", "TP"):
        return PseudoMove(code)
    if len(code) == 2 and code[0] == "D" and code[1].isdigit():
        return DoubleBack(int(code[1]))
    return place_from_abbrev(code)


def is_real_place(move: Move | None) -> bool:
    return isinstance(move, Place)


def is_double_back(move: Move | None) -> bool:
    return isinstance(move, DoubleBack)
