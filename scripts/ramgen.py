#!/usr/bin/env python3
"""
ramgen - synthesizable VHDL generation for synchronous RAMs.

Usage:
    python scripts/ramgen.py generate scratchpad.ram.yml --output ./generated
    python scripts/ramgen.py check scratchpad.ram.yml --json
"""
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from ramgen.cli import main

if __name__ == "__main__":
    main()
