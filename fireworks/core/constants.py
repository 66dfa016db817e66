"""
Fireworks - Constants and Configuration Defaults
Units: pixels for distances, seconds for time. Screen y grows downward.
"""

from dataclasses import dataclass

# =============================================================================
# DISPLAY SETTINGS
# =============================================================================
WINDOW_WIDTH = 1280
WINDOW_HEIGHT = 720
TARGET_FPS = 60
WINDOW_TITLE = "Fireworks"
SHOW_STATS = True


@dataclass(frozen=True)
class Colors:
    BACKGROUND = (0, 0, 0)
    WHITE = (255, 255, 255)


COLORS = Colors()

# =============================================================================
# PHYSICS
# =============================================================================
# Downward acceleration, scaled by each body's mass
GRAVITATION = (0.0, 9.81)

# =============================================================================
# ROCKETS
# =============================================================================
ROCKET_LIFETIME = 10.0
ROCKET_MASS = 20.0
ROCKET_RADIUS = 3.0
ROCKET_MIN_SPEED = 350.0
ROCKET_MAX_SPEED = 480.0
ROCKET_HORIZONTAL_JITTER = 40.0  # max |vx| at launch

# Launch trail (sparks left behind a climbing rocket)
LAUNCH_TRAIL_DRAG = -0.1  # fraction of parent velocity inherited
LAUNCH_TRAIL_JITTER = 12.0
LAUNCH_TRAIL_HUE_MIN = 20.0
LAUNCH_TRAIL_HUE_MAX = 50.0
LAUNCH_TRAIL_MASS = 0.5
LAUNCH_TRAIL_RADIUS = 2.0
LAUNCH_TRAIL_MIN_LIFETIME = 0.3
LAUNCH_TRAIL_MAX_LIFETIME = 0.8

# =============================================================================
# EXPLOSIONS
# =============================================================================
EXPLOSION_TRAIL_COUNT = 32
EXPLOSION_MIN_SPEED = 60.0
EXPLOSION_MAX_SPEED = 200.0
EXPLOSION_TRAIL_MASS = 5.0
EXPLOSION_TRAIL_MIN_LIFETIME = 0.8
EXPLOSION_TRAIL_MAX_LIFETIME = 1.6

SPARK_FORCE = 20.0  # outward speed of each spark
SPARK_LIFETIME = 0.5
SPARK_MASS = 2.0
SPARK_RADIUS = 2.5
SPARK_HUE_BAND = 30.0  # +/- degrees around the explosion's base hue
SPARK_MIN_LIGHTNESS = 50.0
SPARK_MAX_LIGHTNESS = 80.0

# =============================================================================
# SHOW
# =============================================================================
AUTO_LAUNCH = True
AUTO_LAUNCH_INTERVAL = 0.8  # seconds
MAX_ROCKETS = 64  # 0 disables the cap
