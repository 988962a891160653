"""Tests for the signal planner."""

import pytest

from ramgen.core.planner import SignalPlanner
from ramgen.errors import UnsupportedConfigurationError
from ramgen.model.config import RamConfig
from ramgen.model.declarations import StorageRole
from ramgen.model.port import PortDirection


def names(items):
    return [item.name for item in items]


class TestWordRam:
    """Scenario A: 8-bit words, 4 address bits, no byte enables."""

    def test_single_full_word_array(self, word_plan):
        assert len(word_plan.storage_arrays) == 1
        array = word_plan.storage_arrays[0]
        assert array.role == StorageRole.FULL_WORD
        assert array.entry_count == 16
        assert array.entry_width == 8
        assert array.lane is None

    def test_wires(self, word_plan):
        widths = {w.name: w.width for w in word_plan.wires}
        assert widths == {"s_oe": 1, "s_ram_data_out": 8, "s_we": 1}

    def test_no_byte_enable_ports(self, word_plan):
        assert not any(name.startswith("ByteEnable") for name in names(word_plan.ports))
        assert "s_byte_enable_reg" not in names(word_plan.registers)

    def test_ports(self, word_plan):
        ports = {p.name: (p.direction, p.width) for p in word_plan.ports}
        assert ports == {
            "Address": (PortDirection.IN, 4),
            "Clock": (PortDirection.IN, 1),
            "DataIn": (PortDirection.IN, 8),
            "DataOut": (PortDirection.OUT, 8),
            "OE": (PortDirection.IN, 1),
            "Tick": (PortDirection.IN, 1),
            "WE": (PortDirection.IN, 1),
        }

    def test_registers(self, word_plan):
        widths = {r.name: r.width for r in word_plan.registers}
        assert widths == {
            "s_address_reg": 4,
            "s_data_in_reg": 8,
            "s_oe_reg": 1,
            "s_tick_delay_line": 3,
            "s_we_reg": 1,
        }

    def test_array_type(self, word_plan):
        assert [(t.name, t.entry_width, t.entry_count) for t in word_plan.array_types] == [
            ("MEMORY_ARRAY", 8, 16)
        ]

    def test_lane_helpers(self, word_plan):
        assert word_plan.lane_array(0).name == "s_mem_contents"
        assert word_plan.write_enable(0) == "s_we"
        assert word_plan.read_enable(0) == "s_oe"


class TestRaggedRam:
    """Scenario B: 12-bit words, 2 address bits, byte enables."""

    def test_byte_enable_ports(self, ragged_plan):
        be_ports = [p for p in ragged_plan.ports if p.name.startswith("ByteEnable")]
        assert names(be_ports) == ["ByteEnable0", "ByteEnable1"]
        assert all(p.width == 1 and p.is_input for p in be_ports)

    def test_storage_arrays(self, ragged_plan):
        byte_lane = ragged_plan.lane_array(0)
        remainder = ragged_plan.lane_array(1)

        assert len(ragged_plan.storage_arrays) == 2
        assert (byte_lane.role, byte_lane.entry_width, byte_lane.type_name) == (
            StorageRole.BYTE_LANE,
            8,
            "BYTE_ARRAY",
        )
        assert (remainder.role, remainder.entry_width, remainder.type_name) == (
            StorageRole.RAGGED_REMAINDER,
            4,
            "REST_ARRAY",
        )
        assert all(a.entry_count == 4 for a in ragged_plan.storage_arrays)

    def test_array_types(self, ragged_plan):
        assert [(t.name, t.entry_width) for t in ragged_plan.array_types] == [
            ("BYTE_ARRAY", 8),
            ("REST_ARRAY", 4),
        ]

    def test_wires_per_lane(self, ragged_plan):
        assert names(ragged_plan.wires) == [
            "s_byte_enable_0",
            "s_byte_enable_1",
            "s_ram_data_out",
            "s_we_0",
            "s_we_1",
        ]

    def test_byte_enable_register(self, ragged_plan):
        register = {r.name: r for r in ragged_plan.registers}["s_byte_enable_reg"]
        assert register.width == 2
        assert register.indexed

    def test_lane_helpers(self, ragged_plan):
        assert ragged_plan.write_enable(1) == "s_we_1"
        assert ragged_plan.read_enable(1) == "s_byte_enable_1"
        assert ragged_plan.lane_slice(1).msb == 11


class TestPlannerProperties:
    @pytest.mark.parametrize("word_width", [1, 8, 9, 16, 31, 64])
    @pytest.mark.parametrize("byte_enables", [False, True])
    def test_collections_sorted_and_unique(self, planner, word_width, byte_enables):
        plan = planner.plan(
            RamConfig(word_width=word_width, address_width=3, byte_enables=byte_enables)
        )

        for collection in (plan.ports, plan.registers, plan.wires, plan.storage_arrays):
            assert names(collection) == sorted(names(collection))
        all_names = (
            names(plan.ports) + names(plan.registers) + names(plan.wires)
            + names(plan.storage_arrays)
        )
        assert len(all_names) == len(set(all_names))

    @pytest.mark.parametrize("word_width", range(1, 33))
    def test_one_array_per_lane(self, planner, word_width):
        cfg = RamConfig(word_width=word_width, address_width=2, byte_enables=True)
        plan = planner.plan(cfg)

        assert len(plan.storage_arrays) == cfg.lane_count
        ragged = [a for a in plan.storage_arrays if a.role == StorageRole.RAGGED_REMAINDER]
        assert len(ragged) == (1 if cfg.ragged else 0)
        if ragged:
            assert ragged[0].lane == cfg.lane_count - 1
            assert ragged[0].entry_width == word_width % 8
        assert sum(a.entry_width for a in plan.storage_arrays) == word_width

    def test_narrow_byte_enabled_word_has_no_byte_array_type(self, planner):
        plan = planner.plan(RamConfig(word_width=5, address_width=2, byte_enables=True))

        assert [t.name for t in plan.array_types] == ["REST_ARRAY"]
        assert plan.lane_array(0).name == "s_trunc_mem_contents"

    def test_deterministic(self, planner, ragged_config):
        assert planner.plan(ragged_config) == planner.plan(ragged_config)

    def test_unsupported_configuration_fails_fast(self, planner):
        with pytest.raises(UnsupportedConfigurationError):
            planner.plan(RamConfig(word_width=8, address_width=4, trigger="high"))

    def test_port_lookup(self, ragged_plan):
        assert ragged_plan.port("DataOut").is_output
        assert ragged_plan.has_port("Tick")
        with pytest.raises(KeyError):
            ragged_plan.port("Reset")

    def test_planner_is_stateless(self, ragged_config, word_config):
        planner = SignalPlanner()
        first = planner.plan(ragged_config)
        planner.plan(word_config)
        assert planner.plan(ragged_config) == first
