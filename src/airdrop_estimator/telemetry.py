from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from typing import Tuple

from .project_constants import (
    ADDRESS_PATTERN,
    BASIC_HARDWARE,
    FIRST_ACTIVITY_DAYS_RANGE,
    HARDWARE_TIERS,
    SEED_SLICE,
    TASK_SCORE_RANGE,
    TRANSACTION_COUNT_RANGE,
    UPTIME_PERCENT_RANGE,
)

log = logging.getLogger(__name__)

_ADDRESS_RE = re.compile(ADDRESS_PATTERN)


class InvalidAddressError(ValueError):
    def __init__(self, address: str) -> None:
        super().__init__("Invalid Ethereum address format")
        self.address = address


@dataclass(frozen=True)
class TelemetrySample:
    transaction_count: int
    first_activity_days_ago: int
    uptime_percent: int
    task_score: int
    hardware_tier: int
    hardware_label: str


def validate_address(address: str) -> str:
    """Returns the lower-cased address, or raises InvalidAddressError."""
    if not isinstance(address, str) or not _ADDRESS_RE.fullmatch(address):
        raise InvalidAddressError(address)
    return address.lower()


def seed_from_address(address: str) -> int:
    return int(validate_address(address)[SEED_SLICE], 16)


def pattern_byte(address: str) -> int:
    return int(validate_address(address)[-2:], 16)


def seeded_int(seed: int, lo: int, hi: int) -> int:
    """
    Reproducible integer in [lo, hi] for a seed.
    The lower bound shifts the phase of the sine, so every range
    drawn against the same seed lands somewhere different.
    """
    x = math.sin(seed + lo) * 10000
    return math.floor((x - math.floor(x)) * (hi - lo + 1)) + lo


def hardware_tier(byte_value: int) -> Tuple[int, str]:
    for threshold, tier, label in HARDWARE_TIERS:
        if byte_value > threshold:
            return tier, label
    return BASIC_HARDWARE


def synthesize(address: str) -> TelemetrySample:
    normalized = validate_address(address)
    seed = int(normalized[SEED_SLICE], 16)
    hw_byte = int(normalized[-2:], 16)

    tier, label = hardware_tier(hw_byte)
    sample = TelemetrySample(
        transaction_count=seeded_int(seed, *TRANSACTION_COUNT_RANGE),
        first_activity_days_ago=seeded_int(seed, *FIRST_ACTIVITY_DAYS_RANGE),
        uptime_percent=seeded_int(seed, *UPTIME_PERCENT_RANGE),
        task_score=seeded_int(seed, *TASK_SCORE_RANGE),
        hardware_tier=tier,
        hardware_label=label,
    )
    log.debug("Seed %d / pattern byte %d -> %s", seed, hw_byte, sample)
    return sample
