"""
Simulation tuning knobs.
"""

import os

# Service
HOST = "0.0.0.0"
PORT = int(os.environ.get("PORT", "5001"))
SIM_NAME = "go-sim"

# Runtime pacing
TICK_INTERVAL = 0.2  # seconds between simulation steps

# Environment
WORLD_W, WORLD_H = 2000.0, 2000.0

# Population controls
START_POP = 20
START_FOOD = 12

# Organism creation
SIZE_RANGE = (8.0, 12.0)
SPAWN_ENERGY_RANGE = (0.6, 1.5)

# Energy + life
ENERGY_CAP = 1.6
BASE_DRAIN = 0.002
MOTION_DRAIN = 0.001
MAX_STEP = 0.5  # per-axis displacement bound
EAT_REACH = 10.0  # added to organism size

# Reproduction
REPRO_ENERGY_THRESHOLD = 1.1
REPRO_COST = 0.45
REPRO_BASE_CHANCE = 0.12

# Food
FOOD_SPAWN_PROB = 0.15
FOOD_ENERGY_RANGE = (0.4, 1.2)
TOUCH_FOOD_COUNT = 3
TOUCH_JITTER = 30.0

# Mutation
BASE_COLOR = "#88c1ff"
DNA_MUTATION_RATE = 0.02
MUT_LAYER_MAGNITUDE = 0.08
MUT_APPEND_MAGNITUDE = 0.15

# Event log (None = unbounded)
EVENT_LOG_LIMIT = 10_000

# Viewer
VIEW_W, VIEW_H = 900, 900
VIEW_POLL_SECONDS = 0.25
VIEW_URL = "http://127.0.0.1:5001"
