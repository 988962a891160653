"""
Parsers for RAM description formats.
"""

from .yaml import ParseError, YamlRamParser

__all__ = ["YamlRamParser", "ParseError"]
