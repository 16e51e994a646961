"""Command-line interface modules for sediment setup.

This package contains core execution logic, making scripts/ optional and deletable.
"""

from sedinit.cli.run_setup import run_sediment_setup, main

__all__ = ['run_sediment_setup', 'main']
