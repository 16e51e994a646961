#!/usr/bin/env python3
"""Sediment setup runner.

Usage:
    python scripts/run_sediment_setup.py scripts/example_input.txt basin.nc
    python scripts/run_sediment_setup.py scripts/example_input.txt basin.nc --cell-factor 24
    python scripts/run_sediment_setup.py scripts/example_input.txt basin.nc --json -v
"""

import sys
from pathlib import Path

# Add src to path
project_root = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(project_root / "src"))

from sedinit.cli.run_setup import main


if __name__ == "__main__":
    sys.exit(main())
