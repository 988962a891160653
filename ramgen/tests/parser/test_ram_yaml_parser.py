"""Tests for the RAM description YAML parser."""

import pytest

from ramgen.errors import ParseError
from ramgen.model.config import ReadPolicy, TriggerPolicy
from ramgen.parser.yaml import YamlRamParser

DESCRIPTION = """\
ram:
  name: scratchpad
  wordWidth: 12
  addressWidth: 4
  trigger: falling_edge
  byteEnables: true
netlist:
  circuitName: main
  requiresGlobalClock: true
  terminals:
    0: {net: s_address}
    5: {net: s_clock_bus, clockNet: s_clock_bus}
"""


@pytest.fixture
def parser():
    return YamlRamParser()


def write(tmp_path, text, name="ram.yml"):
    path = tmp_path / name
    path.write_text(text)
    return path


class TestParseDescription:
    def test_sectioned_file(self, parser, tmp_path):
        cfg, netlist = parser.parse_description(write(tmp_path, DESCRIPTION))

        assert cfg.name == "scratchpad"
        assert cfg.word_width == 12
        assert cfg.entry_count == 16
        assert cfg.trigger == TriggerPolicy.FALLING_EDGE
        assert cfg.byte_enables
        assert netlist.circuit_name == "main"
        assert netlist.requires_global_clock
        assert netlist.net_name(0) == "s_address"
        assert netlist.clock_net_name(5) == "s_clock_bus"

    def test_root_level_config(self, parser, tmp_path):
        path = write(tmp_path, "wordWidth: 8\naddressWidth: 3\nreadPolicy: raw\n")
        cfg, netlist = parser.parse_description(path)

        assert cfg.name == "ram"
        assert cfg.read_policy == ReadPolicy.READ_AFTER_WRITE
        assert netlist is None

    def test_parse_file_ignores_netlist(self, parser, tmp_path):
        cfg = parser.parse_file(write(tmp_path, DESCRIPTION))
        assert cfg.lane_count == 2

    def test_parse_netlist_file(self, parser, tmp_path):
        path = write(tmp_path, "circuitName: top\nterminals:\n  3: {net: s_we}\n", "top.net.yml")
        netlist = parser.parse_netlist(path)

        assert netlist.circuit_name == "top"
        assert not netlist.requires_global_clock
        assert netlist.is_connected(3)
        assert not netlist.is_connected(5)

    def test_null_values_use_defaults(self, parser):
        cfg = parser.parse_dict({"ram": {"wordWidth": 8, "addressWidth": 2, "trigger": None}})
        assert cfg.trigger == TriggerPolicy.RISING_EDGE


class TestParseErrors:
    def test_missing_file(self, parser, tmp_path):
        with pytest.raises(ParseError, match="File not found"):
            parser.parse_file(tmp_path / "missing.yml")

    def test_yaml_syntax_error_has_line(self, parser, tmp_path):
        path = write(tmp_path, "ram:\n  wordWidth: 8\n  addressWidth: [4\n")
        with pytest.raises(ParseError) as exc_info:
            parser.parse_file(path)
        assert exc_info.value.line is not None
        assert "YAML syntax error" in str(exc_info.value)

    def test_root_must_be_mapping(self, parser, tmp_path):
        with pytest.raises(ParseError, match="Root element"):
            parser.parse_file(write(tmp_path, "- 1\n- 2\n"))

    def test_validation_errors_listed(self, parser, tmp_path):
        path = write(tmp_path, "ram:\n  wordWidth: 0\n  addressWidth: 4\n  colour: red\n")
        with pytest.raises(ParseError) as exc_info:
            parser.parse_file(path)

        message = str(exc_info.value)
        assert "Validation of 'ram' failed" in message
        assert "wordWidth" in message
        assert "colour" in message
        assert str(path.name) in message

    def test_section_must_be_mapping(self, parser):
        with pytest.raises(ParseError, match="must be a mapping"):
            parser.parse_dict({"ram": "scratchpad"})

    def test_unknown_trigger_rejected(self, parser):
        with pytest.raises(ParseError, match="trigger"):
            parser.parse_dict({"wordWidth": 8, "addressWidth": 2, "trigger": "sideways"})
