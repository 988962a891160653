"""
YAML parser for RAM descriptions.

Loads YAML files and converts them to the canonical Pydantic models.
A description file holds a ``ram`` section (the instance configuration)
and optionally a ``netlist`` section (connectivity of that instance):

.. code-block:: yaml

    ram:
      name: scratchpad
      wordWidth: 12
      addressWidth: 4
      trigger: rising
      byteEnables: true
    netlist:
      circuitName: main
      terminals:
        0: {net: s_address}
        5: {net: s_clock_bus, clockNet: s_clock_bus}

Files whose root is the section itself are accepted as well.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Type, TypeVar, Union

import yaml
from pydantic import BaseModel, ValidationError

from ramgen.binder.netlist import StaticNetlist
from ramgen.errors import ParseError
from ramgen.model.config import RamConfig
from ramgen.utils import filter_none

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

RAM_SECTION = "ram"
NETLIST_SECTION = "netlist"


class YamlRamParser:
    """
    Parser for RAM description YAML files.

    Handles:
    - Instance configuration (``ram`` section)
    - Connectivity (``netlist`` section)
    - Validation and error reporting with line numbers
    """

    def __init__(self):
        self._current_file: Optional[Path] = None

    def _load(self, file_path: Union[str, Path]) -> Dict[str, Any]:
        file_path = Path(file_path).resolve()
        self._current_file = file_path

        if not file_path.exists():
            raise ParseError(f"File not found: {file_path}")

        try:
            with open(file_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            mark = getattr(e, "problem_mark", None)
            line_num = mark.line + 1 if mark else None
            raise ParseError(f"YAML syntax error: {e}", file_path, line_num)

        if not isinstance(data, dict):
            raise ParseError("Root element must be a YAML object/dictionary", file_path)
        return data

    def _validate(self, model: Type[ModelT], data: Any, section: str) -> ModelT:
        if not isinstance(data, dict):
            raise ParseError(f"Section '{section}' must be a mapping", self._current_file)
        try:
            return model.model_validate(filter_none(data))
        except ValidationError as e:
            errors = []
            for error in e.errors():
                loc = " -> ".join(str(x) for x in error["loc"])
                errors.append(f"{loc}: {error['msg']}")
            raise ParseError(
                f"Validation of '{section}' failed:\n  " + "\n  ".join(errors),
                self._current_file,
            )

    def parse_dict(self, data: Dict[str, Any]) -> RamConfig:
        """Build a ``RamConfig`` from an already loaded mapping.

        Raises:
            ParseError: If validation fails
        """
        return self._validate(RamConfig, data.get(RAM_SECTION, data), RAM_SECTION)

    def parse_netlist_dict(self, data: Dict[str, Any]) -> StaticNetlist:
        """Build a ``StaticNetlist`` from an already loaded mapping."""
        return self._validate(StaticNetlist, data.get(NETLIST_SECTION, data), NETLIST_SECTION)

    def parse_file(self, file_path: Union[str, Path]) -> RamConfig:
        """
        Parse the RAM configuration of a description file.

        Args:
            file_path: Path to the YAML file

        Returns:
            RamConfig: Validated configuration

        Raises:
            ParseError: If parsing or validation fails
        """
        data = self._load(file_path)
        cfg = self.parse_dict(data)
        logger.debug("Parsed RAM '%s' from %s", cfg.name, self._current_file)
        return cfg

    def parse_netlist(self, file_path: Union[str, Path]) -> StaticNetlist:
        """
        Parse the connectivity of a description or netlist file.

        Raises:
            ParseError: If parsing or validation fails
        """
        return self.parse_netlist_dict(self._load(file_path))

    def parse_description(
        self, file_path: Union[str, Path]
    ) -> Tuple[RamConfig, Optional[StaticNetlist]]:
        """Parse a file holding a ``ram`` section and an optional ``netlist`` section."""
        data = self._load(file_path)
        cfg = self.parse_dict(data)
        netlist = None
        if NETLIST_SECTION in data:
            netlist = self.parse_netlist_dict(data)
        return cfg, netlist
