"""Breeding condition constants.

Used to derive mare stress and feed quality from the mare's persisted
record when the breeding request does not supply them.
"""

# Both condition scales run 0-100
CONDITION_MIN = 0.0
CONDITION_MAX = 100.0

# Fallbacks for missing persisted fields
DEFAULT_STRESS_LEVEL = 50.0
DEFAULT_BOND_SCORE = 50.0
DEFAULT_HEALTH_SCORE = 60.0

# health_status -> health score (0-100). Lookups are case-insensitive.
HEALTH_SCORES = {
    "excellent": 100.0,
    "good": 80.0,
    "fair": 60.0,
    "poor": 35.0,
    "bad": 20.0,
    "critical": 10.0,
}

# Derived stress = stress_level
#   + HEALTH_STRESS_WEIGHT * (100 - health)
#   + BOND_STRESS_WEIGHT * max(0, BOND_COMFORT_LEVEL - bond)
HEALTH_STRESS_WEIGHT = 0.2
BOND_STRESS_WEIGHT = 0.2
BOND_COMFORT_LEVEL = 50.0

# Derived feed quality = weighted mean of health, bond and earnings scores
FEED_HEALTH_WEIGHT = 0.4
FEED_BOND_WEIGHT = 0.3
FEED_EARNINGS_WEIGHT = 0.3

# Earnings at which a mare is assumed to receive premium feed
PREMIUM_FEED_EARNINGS = 100_000.0
