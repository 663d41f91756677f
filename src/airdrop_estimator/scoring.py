from __future__ import annotations

import hashlib
import math
import random
from dataclasses import dataclass
from typing import Tuple

from .project_constants import (
    ALLOCATION_TIERS,
    AVERAGE_WEIGHTED_SCORE,
    BASE_POINTS_PER_TASK_SCORE,
    BASE_UPTIME_MULTIPLIER,
    EARLY_ADOPTION_MULTIPLIERS,
    EARLY_BONUS_SHARE,
    ESTIMATED_PARTICIPANTS,
    HARDWARE_BONUS_SHARE,
    HARDWARE_MULTIPLIERS,
    LOWEST_TIER,
    MAX_JITTER,
    MIN_ALLOCATION,
    RECENT_ADOPTION_MULTIPLIER,
    TASK_SCORE_WEIGHT,
    TOTAL_AIRDROP,
    UPTIME_BONUS_SHARE,
    UPTIME_MULTIPLIERS,
)
from .telemetry import TelemetrySample


@dataclass(frozen=True)
class Breakdown:
    base: int
    hardware_bonus: int
    early_bonus: int
    uptime_bonus: int


@dataclass(frozen=True)
class AllocationResult:
    estimated_tokens: int
    tier: int
    tier_label: str
    breakdown: Breakdown


def hardware_multiplier(tier: int) -> float:
    return HARDWARE_MULTIPLIERS[tier]


def early_adoption_multiplier(days_ago: int) -> float:
    for threshold, multiplier in EARLY_ADOPTION_MULTIPLIERS:
        if days_ago > threshold:
            return multiplier
    return RECENT_ADOPTION_MULTIPLIER


def uptime_multiplier(uptime_percent: int) -> float:
    for threshold, multiplier in UPTIME_MULTIPLIERS:
        if uptime_percent > threshold:
            return multiplier
    return BASE_UPTIME_MULTIPLIER


def classify_tier(tokens: int) -> Tuple[int, str]:
    for threshold, tier, label in ALLOCATION_TIERS:
        if tokens > threshold:
            return tier, label
    return LOWEST_TIER


def weighted_score(sample: TelemetrySample) -> float:
    weighted = sample.task_score * TASK_SCORE_WEIGHT
    weighted *= hardware_multiplier(sample.hardware_tier)
    weighted *= early_adoption_multiplier(sample.first_activity_days_ago)
    weighted *= uptime_multiplier(sample.uptime_percent)
    return weighted


def raw_allocation(weighted: float) -> int:
    share = weighted / (AVERAGE_WEIGHTED_SCORE * ESTIMATED_PARTICIPANTS)
    return math.floor(share * TOTAL_AIRDROP)


def deterministic_jitter(address: str) -> float:
    """Maps sha256(address) onto [-MAX_JITTER, MAX_JITTER]."""
    digest = hashlib.sha256(address.lower().encode("utf-8")).hexdigest()
    unit = int(digest, 16) / float(2**256 - 1)
    return (unit * 2 - 1) * MAX_JITTER


def random_jitter() -> float:
    return random.uniform(-MAX_JITTER, MAX_JITTER)


def score(sample: TelemetrySample, jitter: float) -> AllocationResult:
    if not -MAX_JITTER <= jitter <= MAX_JITTER:
        raise ValueError(f"Jitter {jitter} outside [-{MAX_JITTER}, {MAX_JITTER}].")

    weighted = weighted_score(sample)
    raw = raw_allocation(weighted)
    final = math.floor(raw + raw * jitter)
    estimated = max(MIN_ALLOCATION, final)

    tier, tier_label = classify_tier(estimated)

    # Display-only figures, all taken from the fully multiplied score.
    breakdown = Breakdown(
        base=math.floor(sample.task_score * BASE_POINTS_PER_TASK_SCORE),
        hardware_bonus=math.floor(weighted * HARDWARE_BONUS_SHARE),
        early_bonus=math.floor(weighted * EARLY_BONUS_SHARE),
        uptime_bonus=math.floor(weighted * UPTIME_BONUS_SHARE),
    )
    return AllocationResult(
        estimated_tokens=estimated,
        tier=tier,
        tier_label=tier_label,
        breakdown=breakdown,
    )
