"""Tests for the telemetry synthesizer."""

import pytest

from airdrop_estimator.telemetry import (
    InvalidAddressError,
    hardware_tier,
    pattern_byte,
    seed_from_address,
    seeded_int,
    synthesize,
)

HIGH_END_ADDRESS = "0x" + "1" * 38 + "ff"
BASIC_ADDRESS = "0x" + "1" * 38 + "00"


class TestAddressValidation:
    """Tests for address format checks."""

    @pytest.mark.parametrize(
        "address",
        [
            "",
            "0x",
            "1" * 40,
            "0x" + "1" * 39,
            "0x" + "1" * 41,
            "0x" + "1" * 39 + "g",
            "0X" + "1" * 40,
            "0x" + "1" * 40 + "\n",
            " 0x" + "1" * 40,
        ],
    )
    def test_rejects_malformed(self, address):
        """Anything but 0x + 40 hex characters is rejected."""
        with pytest.raises(InvalidAddressError) as exc:
            synthesize(address)
        assert str(exc.value) == "Invalid Ethereum address format"
        assert exc.value.address == address

    def test_error_is_value_error(self):
        with pytest.raises(ValueError):
            synthesize("not an address")

    def test_accepts_mixed_case(self):
        """Case does not change the derived telemetry."""
        lower = "0xabcdef0123456789abcdef0123456789abcdef9a"
        assert synthesize(lower.upper().replace("0X", "0x")) == synthesize(lower)


class TestSeed:
    def test_seed_uses_first_eight_hex_characters(self):
        address = "0x0000000f" + "a" * 32
        assert seed_from_address(address) == 15

    def test_pattern_byte_uses_last_two_hex_characters(self):
        assert pattern_byte(HIGH_END_ADDRESS) == 255
        assert pattern_byte(BASIC_ADDRESS) == 0

    def test_seeded_int_stays_in_range(self):
        """Every seed lands inside the inclusive range."""
        for seed in range(0, 5000, 7):
            value = seeded_int(seed, 40, 98)
            assert 40 <= value <= 98


class TestHardwareTier:
    """Tests for pattern byte bucketing."""

    def test_boundaries(self):
        test_cases = [
            (255, 5),
            (201, 5),
            (200, 4),
            (151, 4),
            (150, 3),
            (101, 3),
            (100, 2),
            (51, 2),
            (50, 1),
            (0, 1),
        ]

        for byte_value, expected_tier in test_cases:
            tier, _ = hardware_tier(byte_value)
            assert tier == expected_tier, f"byte {byte_value} should be tier {expected_tier}"

    def test_monotonic_in_pattern_byte(self):
        tiers = [hardware_tier(b)[0] for b in range(256)]
        assert tiers == sorted(tiers)

    def test_high_end_address(self):
        sample = synthesize(HIGH_END_ADDRESS)
        assert sample.hardware_tier == 5
        assert "High-end GPU" in sample.hardware_label

    def test_basic_address(self):
        sample = synthesize(BASIC_ADDRESS)
        assert sample.hardware_tier == 1
        assert sample.hardware_label == "CPU Only / Basic VPS"


class TestSynthesize:
    """Tests for the full telemetry bundle."""

    def test_fields_in_range(self):
        for i in range(50):
            address = "0x" + format(i * 2654435761 % 2**32, "08x") + "0" * 30 + "7f"
            sample = synthesize(address)
            assert 10 <= sample.transaction_count <= 250
            assert 30 <= sample.first_activity_days_ago <= 270
            assert 40 <= sample.uptime_percent <= 98
            assert 100 <= sample.task_score <= 10000
            assert sample.hardware_tier == 3

    def test_repeat_calls_identical(self):
        first = synthesize(HIGH_END_ADDRESS)
        second = synthesize(HIGH_END_ADDRESS)
        assert first == second

    def test_independent_of_call_order(self):
        """No state carries over between addresses."""
        a_first = synthesize(HIGH_END_ADDRESS)
        synthesize(BASIC_ADDRESS)
        synthesize("0x" + "9" * 40)
        assert synthesize(HIGH_END_ADDRESS) == a_first

    def test_only_seed_and_pattern_byte_matter(self):
        """Characters between the seed slice and the pattern byte are ignored."""
        a = "0x12345678" + "0" * 30 + "aa"
        b = "0x12345678" + "f" * 30 + "aa"
        assert synthesize(a) == synthesize(b)
