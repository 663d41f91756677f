from __future__ import annotations

import json
from dataclasses import asdict
from typing import Any, Dict

from .project_constants import MAX_JITTER
from .scoring import deterministic_jitter, score
from .telemetry import synthesize


def verify_report(report_path: str) -> Dict[str, Any]:
    with open(report_path, "r", encoding="utf-8") as f:
        report = json.load(f)

    meta = report["metadata"]
    address = meta["address"]
    jitter_mode = meta["jitter_mode"]
    jitter = float(meta["jitter"])

    if not -MAX_JITTER <= jitter <= MAX_JITTER:
        raise RuntimeError(
            f"jitter out of range: report={jitter} allowed=[-{MAX_JITTER}, {MAX_JITTER}]"
        )

    telemetry = synthesize(address)
    telemetry_expected = report["telemetry"]
    fields_expected = sorted(asdict(telemetry))
    if sorted(telemetry_expected) != fields_expected:
        raise RuntimeError(
            f"telemetry fields mismatch: report={sorted(telemetry_expected)} recomputed={fields_expected}"
        )
    for field, value in asdict(telemetry).items():
        if telemetry_expected.get(field) != value:
            raise RuntimeError(
                f"{field} mismatch: report={telemetry_expected.get(field)} recomputed={value}"
            )

    # Random-mode jitter cannot be re-drawn; rescore with the stored value.
    allocation = score(telemetry, jitter)
    allocation_expected = report["allocation"]
    for field, value in asdict(allocation).items():
        if allocation_expected.get(field) != value:
            raise RuntimeError(
                f"{field} mismatch: report={allocation_expected.get(field)} recomputed={value}"
            )

    if jitter_mode == "deterministic":
        recomputed = deterministic_jitter(address)
        if recomputed != jitter:
            raise RuntimeError(
                f"jitter mismatch: report={jitter} recomputed={recomputed}"
            )

    return {
        "ok": True,
        "address": address,
        "jitter_mode": jitter_mode,
        "estimated_tokens": allocation.estimated_tokens,
        "tier": allocation.tier,
        "tier_label": allocation.tier_label,
    }
