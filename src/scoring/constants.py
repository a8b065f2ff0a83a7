"""Constants for the scoring module."""

# Velocity: each DECAY_HOURS of age multiplies velocity by DECAY_BASE
DECAY_BASE: float = 0.9

# A comment counts as this many score points of engagement
COMMENT_WEIGHT: int = 2

# Controversy bands over the approval ratio: [0, LOW) suppressed,
# [LOW, HIGH) boosted, [HIGH, 1] neutral
CONTROVERSY_LOW_BOUND: float = 0.4
CONTROVERSY_HIGH_BOUND: float = 0.7
SUPPRESSED_FACTOR: float = 0.5
NEUTRAL_FACTOR: float = 1.0

# Output precision (decimal places)
NES_DECIMALS: int = 3
VELOCITY_DECIMALS: int = 2
CONTROVERSY_DECIMALS: int = 2
AGE_DECIMALS: int = 1

SECONDS_PER_HOUR: float = 3600.0

# Title normalization for duplicate detection
DEDUPE_KEY_LENGTH: int = 50

# Accepted magnitude of raw post counters; keeps every derived score finite
MAX_ABS_SCORE: int = 10**12
MAX_COMMENT_COUNT: int = 10**12
