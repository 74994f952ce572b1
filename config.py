import logging


class Config:
    """Global tunables. Keep constants here to avoid magic numbers."""

    # ------------------------------------------------------------------
    # Display
    SCREEN_WIDTH       = 1280
    SCREEN_HEIGHT      = 720
    FPS                = 60
    WINDOW_TITLE       = "starwarp"

    # ------------------------------------------------------------------
    # Stars
    STAR_SIZE          = 3
    STAR_MIN_SCALE     = 0.2
    STAR_DENSITY       = 8        # one star per this many px of (w + h)
    OVERFLOW_THRESHOLD = 50
    RESEED_DEPTH       = 0.1
    TWINKLE_MIN        = 100
    TWINKLE_MAX        = 200
    TAIL_LENGTH        = 2

    # ------------------------------------------------------------------
    # Velocity
    VELOCITY_DAMPING       = 0.96
    VELOCITY_INTERPOLATION = 0.07
    BASE_VELOCITY_Z        = 0.0005
    POINTER_GAIN           = 0.001
    INTERACTIVE            = False

    # ------------------------------------------------------------------
    # Colors
    WHITE  = (255, 255, 255)
    BLACK  = (0,   0,   0)

    # ------------------------------------------------------------------
    # Logging
    LOG_LEVEL = logging.INFO
    LOG_FILE: str | None = None
