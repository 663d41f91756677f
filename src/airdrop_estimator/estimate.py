from __future__ import annotations

import asyncio
import logging
from dataclasses import asdict, dataclass
from datetime import datetime, timezone
from typing import Any, Dict

from .config import Settings
from .project_constants import DEFAULT_SIMULATED_LATENCY_S
from .scoring import AllocationResult, deterministic_jitter, random_jitter, score
from .telemetry import TelemetrySample, pattern_byte, seed_from_address, synthesize

log = logging.getLogger(__name__)

REPORT_TOOL = "airdrop-allocation-estimator"
REPORT_VERSION = "1.0.0"


@dataclass(frozen=True)
class Estimate:
    address: str
    telemetry: TelemetrySample
    allocation: AllocationResult
    jitter: float
    jitter_mode: str

    def to_report(self) -> Dict[str, Any]:
        return {
            "metadata": {
                "tool": REPORT_TOOL,
                "version": REPORT_VERSION,
                "generated_at_utc": datetime.now(timezone.utc).isoformat(),
                "address": self.address,
                "seed": seed_from_address(self.address),
                "hardware_pattern_byte": pattern_byte(self.address),
                "jitter_mode": self.jitter_mode,
                "jitter": self.jitter,
            },
            "telemetry": asdict(self.telemetry),
            "allocation": asdict(self.allocation),
        }


def pick_jitter(address: str, jitter_mode: str) -> float:
    if jitter_mode == "random":
        return random_jitter()
    if jitter_mode == "deterministic":
        return deterministic_jitter(address)
    raise ValueError(f"Unknown jitter mode: {jitter_mode!r}")


def evaluate(address: str, jitter_mode: str | None = None) -> Estimate:
    """
    Synthesizes telemetry for an address and scores it.
    Raises InvalidAddressError before anything is derived.
    """
    mode = Settings.from_env(jitter_mode_override=jitter_mode).jitter_mode
    telemetry = synthesize(address)
    jitter = pick_jitter(address, mode)
    allocation = score(telemetry, jitter)
    log.debug("Jitter (%s): %+.4f", mode, jitter)
    return Estimate(
        address=address,
        telemetry=telemetry,
        allocation=allocation,
        jitter=jitter,
        jitter_mode=mode,
    )


async def evaluate_async(
    address: str,
    latency_s: float = DEFAULT_SIMULATED_LATENCY_S,
    jitter_mode: str | None = None,
) -> Estimate:
    # Stands in for a chain lookup; nothing is fetched.
    if latency_s > 0:
        await asyncio.sleep(latency_s)
    return evaluate(address, jitter_mode=jitter_mode)
