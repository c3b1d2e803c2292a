from dracula.environment.places import HIDE, TELEPORT, DoubleBack, Place
from dracula.game.dracula_view import DraculaView
from dracula.game.enums import HotspotPhase, Player
from dracula.game.game_state import InMemoryGameState
from dracula.game.legality import legal_moves, where_can_i_go
from dracula.util.pathfinding import ShortestPath
from tests.helpers import make_state

P = Place


def test_game_state_pass_through() -> None:
    state = make_state([P.MADRID, P.GRANADA], hunters={Player.DR_SEWARD: P.ROME})
    state.score = 350
    state.healths[Player.DRACULA] = 30
    state.vampire = P.MADRID
    state.traps.update({P.MADRID, P.GRANADA})
    view = DraculaView(state)

    assert view.round == 2
    assert view.score == 350
    assert view.health(Player.DRACULA) == 30
    assert view.where_am_i is P.GRANADA
    assert view.player_location(Player.DR_SEWARD) is P.ROME
    assert view.player_location(Player.MINA_HARKER) is None
    assert view.vampire_location is P.MADRID
    assert view.trap_locations == {P.MADRID, P.GRANADA}


def test_view_snapshots_trail() -> None:
    state = make_state([P.CADIZ, P.GRANADA, HIDE])
    view = DraculaView(state)

    assert view.trail.latest_moves() == (HIDE, P.GRANADA, P.CADIZ)
    assert view.last_move() is HIDE


def test_moves_match_legality_engine() -> None:
    state = make_state([P.GRANADA, P.MADRID, DoubleBack(2)])
    view = DraculaView(state)

    assert view.legal_moves() == legal_moves(state)
    assert view.where_can_i_go() == where_can_i_go(state)
    assert view.where_can_i_go_by_type(road=False, sea=True) == [P.GRANADA]


def test_where_can_they_go() -> None:
    state = make_state(
        [P.CADIZ],
        round_override=0,
        hunters={Player.MINA_HARKER: P.LISBON},
    )
    view = DraculaView(state)

    # Round 1: (1 + 3) % 4 = 0 rail hops for Mina.
    assert view.where_can_they_go_by_type(
        Player.MINA_HARKER, road=False, rail=True, sea=False
    ) == [P.LISBON]
    assert view.where_can_they_go(Player.MINA_HARKER) == [
        P.ATLANTIC_OCEAN,
        P.CADIZ,
        P.LISBON,
        P.MADRID,
        P.SANTANDER,
    ]
    assert view.where_can_they_go(Player.DRACULA) == view.where_can_i_go()


def test_shortest_path_to() -> None:
    state = make_state(
        [P.LISBON],
        round_override=3,
        hunters={Player.LORD_GODALMING: P.LISBON},
    )
    view = DraculaView(state)

    assert view.shortest_path_to(P.BARCELONA, road=False, sea=False) is None
    assert view.shortest_path_to(P.ALICANTE, sea=False) == ShortestPath(
        [P.MADRID, P.ALICANTE], 2
    )
    assert view.shortest_path_to(
        P.BARCELONA, road=False, sea=False, player=Player.LORD_GODALMING
    ) == ShortestPath([P.BARCELONA], 1)


def test_hotspot_step() -> None:
    state = make_state([P.MADRID, P.ALICANTE, P.GRANADA])
    view = DraculaView(state)

    assert view.teleport_count() == 0
    assert view.next_hotspot_step() is P.CADIZ
    assert view.hotspot_decision().phase is HotspotPhase.IN_CYCLE


def test_hotspot_step_after_teleport() -> None:
    state = make_state([P.MADRID, TELEPORT])
    view = DraculaView(state)

    assert view.teleport_count() == 1
    assert view.next_hotspot_step() is None


def test_empty_game(empty_state: InMemoryGameState) -> None:
    view = DraculaView(empty_state)

    assert view.where_am_i is None
    assert view.legal_moves() == []
    assert view.where_can_i_go() == []
    assert view.where_can_they_go(Player.VAN_HELSING) == []
    assert view.shortest_path_to(P.MADRID) is None
    assert view.last_move() is None
