"""Game rules, view sizing and color definitions.
"""

import os

# Board
GRID_W = 12
GRID_H = 12

# Rewards
GOLD_PER_KILL = 20

# Messages a session keeps for the message log
LOG_HISTORY_LIMIT = 200

# Day/night cycle: the clock is night for the second half of every cycle
DAY_NIGHT_PERIOD = 5
DAY_NIGHT_CYCLE = 10

# Orc stat overrides as (attack, attack_chance, defence, defence_chance)
ORC_DAY_STATS = (25, 0.25, 10, 0.25)
ORC_NIGHT_STATS = (45, 1.0, 25, 0.5)

# Seeding. Unset seed means the module-level generator is used as-is.
_seed_env = os.getenv("GRID_ADVENTURE_SEED")
SEED: int | None = int(_seed_env) if _seed_env else None
# Legacy mode reseeds from wall-clock time on every board population.
LEGACY_RESEED: bool = os.getenv("GRID_ADVENTURE_LEGACY_SEED", "0").lower() in {"1", "true", "yes"}

# View sizing
CELL_SIZE = 48
STATUS_BAR_HEIGHT = 40
STATS_PANEL_WIDTH = 320
LOG_HEIGHT = 220

# Colors
BLACK = (20, 20, 30)
WHITE = (240, 240, 240)
GRAY = (60, 60, 80)
BLUE = (80, 180, 255)
GREEN = (80, 220, 120)
RED = (255, 80, 80)
YELLOW = (255, 220, 80)
CELL_BORDER = (180, 180, 220)
NIGHT_TINT = (10, 10, 40)
