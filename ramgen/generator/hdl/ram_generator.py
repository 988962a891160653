"""
VHDL generator for synchronous RAM instances.

Orchestrates the generation of one memory source file:
- feasibility gate (unsupported instances are rejected, never partially emitted)
- declarations from the signal planner
- pipelined process body from the RTL emitter
- entity and architecture assembly from Jinja2 templates
- port map fragments from a port binder's binding table
"""

import logging
import os
from typing import List, Optional

from ramgen.binder.port_binder import BindingTable
from ramgen.core.planner import SignalPlan, SignalPlanner
from ramgen.generator.base_generator import BaseGenerator
from ramgen.model.config import RamConfig

from .ram_emitter import RamRtlEmitter
from .vhdl_renderer import HdlTarget, VhdlRenderer, check_target, render_statements

logger = logging.getLogger(__name__)


class RamGenerator(BaseGenerator):
    """RAM generator producing VHDL sources under a ``memory/`` subdirectory."""

    SUB_DIR = "memory"

    def __init__(self, template_dir: Optional[str] = None, target: HdlTarget = HdlTarget.VHDL):
        """Initialize VHDL generator with templates.

        Raises:
            UnsupportedTargetError: If ``target`` is not VHDL
        """
        check_target(target)
        if template_dir is None:
            template_dir = os.path.join(os.path.dirname(__file__), "templates")
        super().__init__(template_dir)
        self.target = target
        self.planner = SignalPlanner()

    def plan(self, cfg: RamConfig) -> SignalPlan:
        """Check feasibility and plan declarations for ``cfg``."""
        return self.planner.plan(cfg)

    def file_name(self, entity_name: str) -> str:
        return f"{self.SUB_DIR}/{entity_name}.vhd"

    def generate_declarations(self, plan: SignalPlan) -> str:
        """Generate VHDL array type and signal declarations."""
        renderer = VhdlRenderer(plan)
        lines = renderer.type_declarations() + renderer.signal_declarations()
        return "\n".join(lines) + "\n"

    def generate_body(self, plan: SignalPlan) -> str:
        """Generate the control signals and the pipelined processes."""
        statements = RamRtlEmitter(plan).statements()
        return render_statements(plan, statements, self.target)

    def _header(self, cfg: RamConfig, entity_name: str) -> List[str]:
        header = [f"{entity_name}: {cfg.entry_count} x {cfg.word_width} bit synchronous RAM"]
        if cfg.byte_enables:
            lanes = f"{cfg.lane_count} byte-enable lane(s)"
            if cfg.ragged:
                lanes += f", last lane {cfg.last_lane_width} bit(s) wide"
            header.append(lanes)
        return header

    def generate_entity(self, cfg: RamConfig, entity_name: Optional[str] = None) -> str:
        """Generate a complete VHDL file (entity and architecture) for ``cfg``.

        Raises:
            UnsupportedConfigurationError: If ``cfg`` fails the feasibility check
        """
        plan = self.plan(cfg)
        name = (entity_name or cfg.name).lower()
        renderer = VhdlRenderer(plan)
        logger.info("Generating RAM entity '%s'", name)

        template = self.env.get_template("ram_entity.vhdl.j2")
        return template.render(
            entity_name=name,
            header=self._header(cfg, name),
            ports=renderer.port_declarations(),
            type_declarations=renderer.type_declarations(),
            signal_declarations=renderer.signal_declarations(),
            body=self.generate_body(plan),
        )

    def generate_port_map(
        self, bindings: BindingTable, entity_name: str, label: Optional[str] = None
    ) -> str:
        """Generate an entity instantiation wiring ``bindings``.

        Args:
            bindings: Result of ``PortBinder.bind``
            entity_name: Name of the generated RAM entity
            label: Instance label, defaults to ``<entity_name>_inst``

        Returns:
            VHDL instantiation text
        """
        template = self.env.get_template("ram_port_map.vhdl.j2")
        return template.render(
            label=label or f"{entity_name.lower()}_inst",
            entity_name=entity_name.lower(),
            bindings=bindings.bindings,
        )
