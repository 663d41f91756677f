"""
Fixed scoring parameters for the airdrop allocation estimate.

These values define how every estimate is computed.
Changing any of them changes every published estimate.
"""

# Address format: 0x + 40 hex characters
ADDRESS_PATTERN = r"^0x[a-fA-F0-9]{40}$"

# Seed slice (hex characters after the 0x prefix)
SEED_SLICE = slice(2, 10)

# Synthetic telemetry ranges (inclusive)
TRANSACTION_COUNT_RANGE = (10, 250)
FIRST_ACTIVITY_DAYS_RANGE = (30, 270)
UPTIME_PERCENT_RANGE = (40, 98)
TASK_SCORE_RANGE = (100, 10000)

# Hardware pattern byte thresholds -> (tier, label), checked top down
HARDWARE_TIERS = (
    (200, 5, "High-end GPU (RTX 4090/A100)"),
    (150, 4, "High-mid GPU (RTX 4070/3090)"),
    (100, 3, "Mid-range GPU (RTX 3070/4060)"),
    (50, 2, "Low-end GPU (GTX/RTX 3050)"),
)
BASIC_HARDWARE = (1, "CPU Only / Basic VPS")

# Scoring
TASK_SCORE_WEIGHT = 0.4
HARDWARE_MULTIPLIERS = {
    1: 1.0,
    2: 1.5,
    3: 2.0,
    4: 3.0,
    5: 5.0,
}
EARLY_ADOPTION_MULTIPLIERS = (  # (days_ago >, multiplier)
    (240, 3.0),
    (180, 2.5),
    (120, 2.0),
    (60, 1.5),
)
RECENT_ADOPTION_MULTIPLIER = 1.2
UPTIME_MULTIPLIERS = (  # (uptime % >, multiplier)
    (90, 1.5),
    (70, 1.3),
    (50, 1.1),
)
BASE_UPTIME_MULTIPLIER = 1.0

# Pool normalization
TOTAL_AIRDROP = 160_000_000  # 1.6% of a 10B supply
ESTIMATED_PARTICIPANTS = 30_000
AVERAGE_WEIGHTED_SCORE = 5_000

# Jitter applied to the raw allocation (fraction, +/-)
MAX_JITTER = 0.1

# Floor on any estimate
MIN_ALLOCATION = 1_000

# Allocation tiers: (tokens >, tier, label), checked top down
ALLOCATION_TIERS = (
    (70_000, 1, "Elite (Top 5%)"),
    (40_000, 2, "High (Top 15%)"),
    (15_000, 3, "Mid-High (Top 30%)"),
    (5_000, 4, "Mid (Top 60%)"),
)
LOWEST_TIER = (5, "Low (Bottom 40%)")

# Breakdown factors (display only; they do not add up to the estimate)
BASE_POINTS_PER_TASK_SCORE = 5
HARDWARE_BONUS_SHARE = 0.3
EARLY_BONUS_SHARE = 0.2
UPTIME_BONUS_SHARE = 0.15

# Simulated chain lookup delay used by the async entry point
DEFAULT_SIMULATED_LATENCY_S = 1.5
