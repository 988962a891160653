"""
Base generator interface for HDL code generation.

Provides the abstract interface a dialect-specific memory generator
implements, plus the shared Jinja2 environment and file writing.

Current implementations:
- RamGenerator: VHDL generation (ramgen.generator.hdl.ram_generator)
"""

import logging
import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional, Union

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from ramgen.core.planner import SignalPlan
from ramgen.model.config import RamConfig

logger = logging.getLogger(__name__)


class BaseGenerator(ABC):
    """
    Abstract base class for RAM code generators.

    Subclasses must implement language-specific generation methods.
    Templates are loaded from a 'templates' subdirectory.
    """

    def __init__(self, template_dir: Optional[str] = None):
        """
        Initialize the generator with Jinja2 environment.

        Args:
            template_dir: Optional custom template directory.
                Defaults to 'templates' subdirectory of concrete generator.
        """
        if template_dir is None:
            template_dir = os.path.join(os.path.dirname(__file__), "templates")

        self.template_dir = template_dir
        self.env = Environment(
            loader=FileSystemLoader(template_dir),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
        )

    @abstractmethod
    def generate_declarations(self, plan: SignalPlan) -> str:
        """
        Generate type and signal declarations.

        Args:
            plan: Planned declarations of the instance

        Returns:
            Declaration text
        """
        pass

    @abstractmethod
    def generate_body(self, plan: SignalPlan) -> str:
        """
        Generate the behavioral body (concurrent statements and processes).

        Args:
            plan: Planned declarations of the instance

        Returns:
            Body text
        """
        pass

    @abstractmethod
    def generate_entity(self, cfg: RamConfig, entity_name: Optional[str] = None) -> str:
        """
        Generate a complete source file for one RAM instance.

        Args:
            cfg: Instance configuration
            entity_name: Entity name, defaults to the instance name

        Returns:
            File content as string
        """
        pass

    @abstractmethod
    def file_name(self, entity_name: str) -> str:
        """Relative output path of the source file for ``entity_name``."""
        pass

    def generate_all(self, cfg: RamConfig, entity_name: Optional[str] = None) -> Dict[str, str]:
        """
        Generate all HDL files for the RAM instance.

        Args:
            cfg: Instance configuration
            entity_name: Entity name, defaults to the instance name

        Returns:
            Dictionary mapping relative file path to content
        """
        name = (entity_name or cfg.name).lower()
        return {self.file_name(name): self.generate_entity(cfg, name)}

    def write_files(
        self,
        cfg: RamConfig,
        output_dir: Union[str, Path],
        entity_name: Optional[str] = None,
    ) -> Dict[str, Path]:
        """
        Generate and write all HDL files to output directory.

        Args:
            cfg: Instance configuration
            output_dir: Output directory path
            entity_name: Entity name, defaults to the instance name

        Returns:
            Dictionary mapping relative file path to written file path
        """
        output_path = Path(output_dir)
        output_path.mkdir(parents=True, exist_ok=True)

        files = self.generate_all(cfg, entity_name)
        written = {}

        for filename, content in files.items():
            file_path = output_path / filename
            # Create parent directories for structured paths like 'memory/ram.vhd'
            file_path.parent.mkdir(parents=True, exist_ok=True)
            file_path.write_text(content)
            logger.info("Written %s", file_path)
            written[filename] = file_path

        return written
