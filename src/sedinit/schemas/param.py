"""ParamConfig: Expert defaults for sediment setup.

This module defines the complete default configuration. ALL setup parameters
that are not read from the model input file have their defaults here. No
runtime code should define fallback values.

Runtime code NEVER reads from ParamConfig directly - it only receives InternalConfig.
"""

from typing import Literal
from pydantic import Field, field_validator
from sedinit.schemas.base import SedBaseModel


# =============================================================================
# Nested Configuration Models
# =============================================================================

class ParticleConfig(SedBaseModel):
    """Particle-class configuration for the diameter partition."""
    n_sed_sizes: int = Field(
        4, ge=2, description="Number of representative diameters (both populations need one)"
    )


class RoadConfig(SedBaseModel):
    """Road-network buffer configuration."""
    cell_factor: int = Field(10, ge=1, description="Sub-daily steps held in each road buffer")
    outside_basin_value: int = Field(0, description="Mask value marking cells outside the basin")


class CalendarConfig(SedBaseModel):
    """Timestamp formats accepted for erosion periods, tried in order."""
    date_formats: list[str] = Field(
        default_factory=lambda: [
            "%m/%d/%Y-%H:%M:%S",
            "%m/%d/%Y-%H:%M",
            "%m/%d/%Y-%H",
            "%m/%d/%Y",
        ]
    )
    allow_iso: bool = True

    @field_validator("date_formats")
    @classmethod
    def require_formats(cls, v):
        """At least one format must be available."""
        if not v:
            raise ValueError("date_formats must not be empty")
        return v


class InputConfig(SedBaseModel):
    """Input file reader configuration."""
    buffer_size: int = Field(255, ge=1, description="Maximum characters kept per value")
    comment_prefixes: tuple[str, ...] = ("#",)


class LoggingConfig(SedBaseModel):
    """Logging configuration."""
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"


# =============================================================================
# Main ParamConfig
# =============================================================================

class ParamConfig(SedBaseModel):
    """Complete expert configuration with all defaults.

    Usage
    -----
    This config is NOT used directly by runtime code. It serves as the
    base layer in config resolution:

        internal_cfg = resolve_config(param_cfg, cli_cfg)
    """

    particles: ParticleConfig = Field(default_factory=ParticleConfig)
    road: RoadConfig = Field(default_factory=RoadConfig)
    calendar: CalendarConfig = Field(default_factory=CalendarConfig)
    input: InputConfig = Field(default_factory=InputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
