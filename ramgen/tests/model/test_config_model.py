"""Tests for the RAM configuration model."""

import pytest
from pydantic import ValidationError

from ramgen.model.config import RamConfig, ReadPolicy, TriggerPolicy


class TestLaneArithmetic:
    """Derived lane quantities for every word and address width."""

    @pytest.mark.parametrize("word_width", range(1, 65))
    @pytest.mark.parametrize("address_width", [1, 4, 9, 16])
    def test_byte_enable_lanes(self, word_width, address_width):
        cfg = RamConfig(word_width=word_width, address_width=address_width, byte_enables=True)

        assert cfg.lane_count == (word_width + 7) // 8
        assert cfg.ragged == (word_width % 8 != 0)
        assert sum(s.width for s in cfg.lane_slices) == word_width
        assert cfg.entry_count == 2**address_width

    @pytest.mark.parametrize("word_width", range(1, 65))
    def test_slices_are_ascending_and_disjoint(self, word_width):
        slices = RamConfig(word_width=word_width, address_width=3, byte_enables=True).lane_slices

        assert slices[0].lsb == 0
        assert slices[-1].msb == word_width - 1
        for lower, upper in zip(slices, slices[1:]):
            assert lower.msb < upper.lsb
            assert upper.lsb == lower.msb + 1

    @pytest.mark.parametrize("word_width", [1, 7, 8, 13, 64])
    def test_without_byte_enables_single_lane(self, word_width):
        cfg = RamConfig(word_width=word_width, address_width=2)

        assert cfg.lane_count == 1
        assert not cfg.ragged
        assert cfg.last_lane_width == 8
        assert cfg.lane_width(0) == word_width
        assert [(s.lsb, s.msb) for s in cfg.lane_slices] == [(0, word_width - 1)]

    def test_ragged_twelve_bit_word(self):
        """Scenario B: lane 0 is a full byte, lane 1 holds the remaining 4 bits."""
        cfg = RamConfig(word_width=12, address_width=2, byte_enables=True)

        assert cfg.lane_count == 2
        assert cfg.ragged
        assert cfg.last_lane_width == 4
        assert [cfg.lane_width(i) for i in range(2)] == [8, 4]
        assert [(s.lsb, s.msb) for s in cfg.lane_slices] == [(0, 7), (8, 11)]

    def test_lane_width_out_of_range(self):
        cfg = RamConfig(word_width=16, address_width=2, byte_enables=True)
        with pytest.raises(ValueError, match="out of range"):
            cfg.lane_width(2)


class TestTriggerAndPolicies:
    def test_asynchronous_for_level_triggers(self):
        assert RamConfig(word_width=8, address_width=2, trigger="high").asynchronous
        assert RamConfig(word_width=8, address_width=2, trigger="low").asynchronous
        assert not RamConfig(word_width=8, address_width=2, trigger="rising").asynchronous
        assert not RamConfig(word_width=8, address_width=2, trigger="falling").asynchronous

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("rising", TriggerPolicy.RISING_EDGE),
            ("RisingEdge", TriggerPolicy.RISING_EDGE),
            ("rising_edge", TriggerPolicy.RISING_EDGE),
            ("FALLING", TriggerPolicy.FALLING_EDGE),
            ("negedge", TriggerPolicy.FALLING_EDGE),
            ("high-level", TriggerPolicy.HIGH_LEVEL),
            ("LowLevel", TriggerPolicy.LOW_LEVEL),
        ],
    )
    def test_trigger_aliases(self, raw, expected):
        assert RamConfig(word_width=8, address_width=2, trigger=raw).trigger == expected

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("readAfterWrite", ReadPolicy.READ_AFTER_WRITE),
            ("read_after_write", ReadPolicy.READ_AFTER_WRITE),
            ("readBeforeWrite", ReadPolicy.READ_BEFORE_WRITE),
            ("dont_care", ReadPolicy.DONT_CARE),
        ],
    )
    def test_read_policy_aliases(self, raw, expected):
        assert RamConfig(word_width=8, address_width=2, read_policy=raw).read_policy == expected

    def test_unknown_trigger_rejected(self):
        with pytest.raises(ValidationError):
            RamConfig(word_width=8, address_width=2, trigger="sideways")


class TestValidation:
    @pytest.mark.parametrize("field", ["word_width", "address_width"])
    def test_widths_must_be_positive(self, field):
        kwargs = {"word_width": 8, "address_width": 4, field: 0}
        with pytest.raises(ValidationError):
            RamConfig(**kwargs)

    def test_unknown_fields_rejected(self):
        with pytest.raises(ValidationError):
            RamConfig(word_width=8, address_width=4, depth=16)

    def test_camel_case_aliases(self):
        cfg = RamConfig.model_validate(
            {"wordWidth": 16, "addressWidth": 3, "byteEnables": True, "clearPin": False}
        )
        assert cfg.word_width == 16
        assert cfg.byte_enables

    def test_immutable(self):
        cfg = RamConfig(word_width=8, address_width=4)
        with pytest.raises(ValidationError):
            cfg.word_width = 16
