from __future__ import annotations

import os
from dataclasses import dataclass
from dotenv import load_dotenv

JITTER_MODES = ("deterministic", "random")


@dataclass(frozen=True)
class Settings:
    jitter_mode: str = "deterministic"
    latency_s: float = 0.0

    @staticmethod
    def from_env(
        jitter_mode_override: str | None = None,
        latency_override: float | None = None,
    ) -> "Settings":
        load_dotenv()

        # CLI flags win over the environment.
        jitter_mode = jitter_mode_override or os.getenv("JITTER_MODE", "").strip()
        jitter_mode = (jitter_mode or "deterministic").lower()
        if jitter_mode not in JITTER_MODES:
            raise RuntimeError(
                f"Unknown JITTER_MODE {jitter_mode!r}. Use one of: {', '.join(JITTER_MODES)}."
            )

        if latency_override is not None:
            latency_s = float(latency_override)
        else:
            raw = os.getenv("SIMULATED_LATENCY_S", "").strip()
            try:
                latency_s = float(raw) if raw else 0.0
            except ValueError:
                raise RuntimeError(f"SIMULATED_LATENCY_S is not a number: {raw!r}")

        if latency_s < 0:
            raise RuntimeError(f"Simulated latency must be >= 0 (got {latency_s}).")

        return Settings(jitter_mode=jitter_mode, latency_s=latency_s)
