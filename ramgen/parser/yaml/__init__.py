"""
YAML parsers for RAM descriptions.
"""

from ramgen.errors import ParseError

from .ram_yaml_parser import YamlRamParser

__all__ = ["YamlRamParser", "ParseError"]
