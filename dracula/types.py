from __future__ import annotations

from typing import NewType

# =============================================================================
# GAME-RELATED TYPES
# =============================================================================

# Game round number. Round 0 is the first round; every player moves once
# per round, hunters first and Dracula last.
Round = NewType("Round", int)

# Dracula's blood points and the hunters' life points.
type Health = int

# The shared game score, counting down from GAME_START_SCORE.
type Score = int
