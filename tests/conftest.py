"""Shared fixtures for estimator tests."""

import pytest

from airdrop_estimator.telemetry import TelemetrySample


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep host settings out of the tests."""
    monkeypatch.delenv("JITTER_MODE", raising=False)
    monkeypatch.delenv("SIMULATED_LATENCY_S", raising=False)


@pytest.fixture
def top_sample():
    """Best case on every factor."""
    return TelemetrySample(
        transaction_count=200,
        first_activity_days_ago=250,
        uptime_percent=95,
        task_score=10000,
        hardware_tier=5,
        hardware_label="High-end GPU (RTX 4090/A100)",
    )


@pytest.fixture
def bottom_sample():
    """Worst case on every factor."""
    return TelemetrySample(
        transaction_count=10,
        first_activity_days_ago=30,
        uptime_percent=40,
        task_score=100,
        hardware_tier=1,
        hardware_label="CPU Only / Basic VPS",
    )
