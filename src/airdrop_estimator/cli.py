from __future__ import annotations

import argparse
import asyncio
import json
import logging

from .config import JITTER_MODES, Settings
from .estimate import evaluate_async
from .telemetry import InvalidAddressError, pattern_byte, seed_from_address
from .verify import verify_report


def setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


def cmd_check(args: argparse.Namespace) -> int:
    settings = Settings.from_env(
        jitter_mode_override=args.jitter,
        latency_override=args.latency,
    )
    log = logging.getLogger("check")

    address = (args.address or "").strip()
    if not address:
        raise SystemExit("Please enter a wallet address")

    try:
        estimate = asyncio.run(
            evaluate_async(
                address,
                latency_s=settings.latency_s,
                jitter_mode=settings.jitter_mode,
            )
        )
    except InvalidAddressError as e:
        raise SystemExit(str(e))

    log.info("Seed              : %d", seed_from_address(estimate.address))
    log.info("Pattern byte      : %d", pattern_byte(estimate.address))
    log.info("Jitter mode       : %s", estimate.jitter_mode)
    log.info("Jitter            : %+.4f", estimate.jitter)

    t = estimate.telemetry
    a = estimate.allocation
    print("========================================")
    print("AIRDROP ALLOCATION ESTIMATE (unofficial)")
    print("========================================")
    print(f"Address       : {estimate.address}")
    print(f"Estimated     : {a.estimated_tokens} tokens")
    print(f"Tier          : {a.tier} - {a.tier_label}")
    print("----------------------------------------")
    print(f"Transactions  : {t.transaction_count}")
    print(f"First activity: {t.first_activity_days_ago} days ago")
    print(f"Uptime        : {t.uptime_percent}%")
    print(f"Task score    : {t.task_score}")
    print(f"Hardware      : {t.hardware_label} (tier {t.hardware_tier})")
    print("----------------------------------------")
    print(f"Base          : {a.breakdown.base}")
    print(f"Hardware bonus: {a.breakdown.hardware_bonus}")
    print(f"Early bonus   : {a.breakdown.early_bonus}")
    print(f"Uptime bonus  : {a.breakdown.uptime_bonus}")

    if args.out:
        with open(args.out, "w", encoding="utf-8") as f:
            json.dump(estimate.to_report(), f, indent=2)
        print("----------------------------------------")
        print(f"Wrote report: {args.out}")
    return 0


def cmd_verify(args: argparse.Namespace) -> int:
    try:
        result = verify_report(args.report)
    except InvalidAddressError as e:
        raise SystemExit(str(e))
    print("REPORT VERIFIED")
    print(f"Address       : {result['address']}")
    print(f"Estimated     : {result['estimated_tokens']} tokens")
    print(f"Tier          : {result['tier']} - {result['tier_label']}")
    print(f"Jitter mode   : {result['jitter_mode']}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="airdrop-estimate",
        description="Synthetic airdrop allocation estimator (no chain data is read).",
    )
    p.add_argument("--verbose", action="store_true", help="Enable debug logging.")

    sub = p.add_subparsers(dest="cmd", required=True)

    c = sub.add_parser("check", help="Estimate the allocation for an address.")
    c.add_argument("--address", required=True, help="0x-prefixed 40-hex address.")
    c.add_argument(
        "--jitter",
        choices=JITTER_MODES,
        default=None,
        help="Jitter mode (else JITTER_MODE env, else deterministic).",
    )
    c.add_argument(
        "--latency",
        type=float,
        default=None,
        help="Simulated lookup delay in seconds (else SIMULATED_LATENCY_S env).",
    )
    c.add_argument("--out", default=None, help="Write a JSON report to this path.")
    c.set_defaults(func=cmd_check)

    v = sub.add_parser("verify", help="Re-derive a JSON report and check it.")
    v.add_argument("--report", required=True, help="Path to a report JSON.")
    v.set_defaults(func=cmd_verify)

    return p


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)
    raise SystemExit(args.func(args))
