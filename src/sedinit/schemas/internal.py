"""InternalConfig: Authoritative runtime configuration.

This is the ONLY config schema that runtime code sees. It is fully validated,
normalized, and immutable.
"""

from typing import Literal
from pydantic import Field
from sedinit.schemas.base import FrozenSedModel, SedBaseModel


# =============================================================================
# Nested Configuration Models (Runtime)
# =============================================================================

class InternalParticleConfig(SedBaseModel):
    """Runtime particle-class configuration."""
    n_sed_sizes: int = Field(ge=2)


class InternalRoadConfig(SedBaseModel):
    """Runtime road buffer configuration."""
    cell_factor: int = Field(ge=1)
    outside_basin_value: int


class InternalCalendarConfig(SedBaseModel):
    """Runtime timestamp parsing configuration."""
    date_formats: tuple[str, ...]
    allow_iso: bool


class InternalInputConfig(SedBaseModel):
    """Runtime input reader configuration."""
    buffer_size: int
    comment_prefixes: tuple[str, ...]


class InternalLoggingConfig(SedBaseModel):
    """Runtime logging configuration."""
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


# =============================================================================
# Main InternalConfig
# =============================================================================

class InternalConfig(FrozenSedModel):
    """Authoritative runtime configuration.

    Runtime modules receive InternalConfig and access fields directly:

        def allocate_road_cells(grid, options, config: InternalConfig):
            length = config.road.cell_factor  # NOT .get()

    Rules
    -----
    - NO .get() calls
    - NO fallback defaults
    - NO validation in runtime code
    """

    particles: InternalParticleConfig
    road: InternalRoadConfig
    calendar: InternalCalendarConfig
    input: InternalInputConfig
    logging: InternalLoggingConfig
