"""CLIConfig: Command-line operational overrides.

Minimal configuration for parameters that commonly change between runs:
verbosity and the two array sizes fixed at setup time.

This schema handles command-line arguments parsed by argparse.
"""

from typing import Literal, Optional
from pydantic import Field
from sedinit.schemas.base import SedBaseModel


class CLIConfig(SedBaseModel):
    """Command-line configuration overrides.

    Highest priority in config resolution.

    Usage
    -----
        cli_cfg = CLIConfig(log_level="DEBUG", cell_factor=24)
        internal = resolve_config(param_cfg, cli_cfg)
    """

    log_level: Optional[Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]] = None
    n_sed_sizes: Optional[int] = Field(None, ge=2)
    cell_factor: Optional[int] = Field(None, ge=1)

    def to_internal_overrides(self) -> dict:
        """Convert CLI config to internal config structure.

        Returns
        -------
        dict
            Nested dictionary matching InternalConfig structure
        """
        overrides = {}

        if self.log_level is not None:
            overrides["logging"] = {"level": self.log_level}

        if self.n_sed_sizes is not None:
            overrides["particles"] = {"n_sed_sizes": self.n_sed_sizes}

        if self.cell_factor is not None:
            overrides["road"] = {"cell_factor": self.cell_factor}

        return overrides
