from __future__ import annotations

import pytest

from dracula.game.game_state import InMemoryGameState
from tests.helpers import make_state


@pytest.fixture
def empty_state() -> InMemoryGameState:
    """A game where nobody has moved yet."""
    return make_state()
