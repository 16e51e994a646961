"""Pydantic configuration schemas for sedinit.

Exports
-------
resolve_config : function
    Single entrypoint for configuration resolution
InternalConfig : class
    Fully validated, authoritative runtime configuration
ParamConfig : class
    Expert defaults (complete)
CLIConfig : class
    Command-line operational overrides
"""

from sedinit.schemas.resolve import resolve_config
from sedinit.schemas.internal import InternalConfig
from sedinit.schemas.param import ParamConfig
from sedinit.schemas.cli import CLIConfig

__all__ = [
    'resolve_config',
    'InternalConfig',
    'ParamConfig',
    'CLIConfig',
]
