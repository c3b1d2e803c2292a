"""
Configuration constants.

Centralizes the rule numbers and tuning values used by the Dracula
decision-support core. Organized by functional area for easy maintenance.
"""

# =============================================================================
# TRAIL
# =============================================================================

# Size of the public trail in the board game, including the current move.
TRAIL_SIZE = 6

# Number of past moves that restrict Dracula's movement. The oldest trail
# slot has already fallen off by the time Dracula picks his next move.
TRAIL_WINDOW = TRAIL_SIZE - 1

# DOUBLE_BACK_1 .. DOUBLE_BACK_5
NUM_DOUBLE_BACKS = 5

# How far back the hotspot router looks for an anchor place.
HOTSPOT_LOOKBACK = TRAIL_SIZE

# =============================================================================
# MOVEMENT RULES
# =============================================================================

# Hunters may travel (round + player) % RAIL_HOP_DIVISOR rail hops per turn.
RAIL_HOP_DIVISOR = 4

# Dracula's teleport always lands him in his castle.
TELEPORT_DESTINATION_ABBREV = "CD"

# Dracula may never enter the hospital.
HOSPITAL_ABBREV = "JM"

# =============================================================================
# GAME STATE
# =============================================================================

GAME_START_SCORE = 366
HUNTER_START_HEALTH = 9
DRACULA_START_HEALTH = 40
