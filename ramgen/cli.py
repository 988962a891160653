"""
ramgen - synthesizable VHDL for simulated synchronous RAMs.

Usage:
    ramgen generate scratchpad.ram.yml --output ./generated
    ramgen generate scratchpad.ram.yml --netlist main.net.yml --json
    ramgen check scratchpad.ram.yml

Subcommands:
    generate    Generate the VHDL entity (and port map when connectivity is given)
    check       Report whether the RAM description can be synthesized
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from ramgen.binder.port_binder import PortBinder
from ramgen.core.feasibility import unsupported_reasons
from ramgen.diagnostics import CollectingReporter
from ramgen.errors import RamGenError
from ramgen.generator.hdl.ram_generator import RamGenerator
from ramgen.parser.yaml.ram_yaml_parser import YamlRamParser


def fail(message: str, use_json: bool) -> None:
    """Print an error in the requested format and exit with status 1."""
    if use_json:
        print(json.dumps({"success": False, "error": message}))
    else:
        print(f"Error: {message}")
    sys.exit(1)


def cmd_generate(args) -> None:
    """Generate VHDL files from a RAM description."""
    parser = YamlRamParser()
    try:
        cfg, netlist = parser.parse_description(args.input)
        if args.netlist:
            netlist = parser.parse_netlist(args.netlist)

        reporter = CollectingReporter()
        reasons = unsupported_reasons(cfg)
        if reasons:
            for reason in reasons:
                reporter.add_error(f"RAM '{cfg.name}' cannot be synthesized: {reason}")
            fail("; ".join(reporter.errors), args.json)

        generator = RamGenerator()
        entity_name = (args.entity or cfg.name).lower()
        output_base = Path(args.output or Path(args.input).parent)
        written = generator.write_files(cfg, output_base, entity_name)

        if netlist is not None:
            bindings = PortBinder(netlist, reporter).bind(generator.plan(cfg))
            port_map = generator.generate_port_map(bindings, entity_name)
            port_map_path = output_base / generator.SUB_DIR / f"{entity_name}_inst.vhd"
            port_map_path.write_text(port_map)
            written[f"{generator.SUB_DIR}/{entity_name}_inst.vhd"] = port_map_path
    except (RamGenError, OSError) as e:
        fail(str(e), args.json)
        return

    if args.json:
        print(
            json.dumps(
                {
                    "success": True,
                    "files": {name: str(path) for name, path in written.items()},
                    "count": len(written),
                    "warnings": reporter.warnings,
                }
            )
        )
    else:
        print(f"✓ Generated {len(written)} file(s) to: {output_base}")
        for name in written:
            print(f"  {name}")
        for warning in reporter.warnings:
            print(f"Warning: {warning}")


def cmd_check(args) -> None:
    """Report the feasibility of a RAM description."""
    try:
        cfg = YamlRamParser().parse_file(args.input)
    except RamGenError as e:
        fail(str(e), args.json)
        return

    reasons = unsupported_reasons(cfg)
    if args.json:
        print(json.dumps({"success": not reasons, "name": cfg.name, "reasons": reasons}))
    elif reasons:
        print(f"RAM '{cfg.name}' cannot be synthesized:")
        for reason in reasons:
            print(f"  - {reason}")
    else:
        print(
            f"✓ RAM '{cfg.name}' ({cfg.entry_count} x {cfg.word_width} bits, "
            f"{cfg.lane_count} lane(s)) can be synthesized"
        )
    if reasons:
        sys.exit(1)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ramgen", description="Synthesizable VHDL generation for synchronous RAMs"
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    gen_parser = subparsers.add_parser("generate", help="Generate VHDL from a RAM description")
    gen_parser.add_argument("input", help="RAM description YAML file")
    gen_parser.add_argument("--output", "-o", help="Output directory (default: same as input)")
    gen_parser.add_argument("--netlist", "-n", help="Connectivity YAML file")
    gen_parser.add_argument("--entity", "-e", help="Entity name (default: RAM name)")
    gen_parser.add_argument("--json", action="store_true", help="JSON output")
    gen_parser.set_defaults(func=cmd_generate)

    check_parser = subparsers.add_parser("check", help="Check whether a RAM can be synthesized")
    check_parser.add_argument("input", help="RAM description YAML file")
    check_parser.add_argument("--json", action="store_true", help="JSON output")
    check_parser.set_defaults(func=cmd_check)

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    args.func(args)


if __name__ == "__main__":
    main()
