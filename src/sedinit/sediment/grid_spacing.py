"""Fine grid used by the mass-wasting routines."""

import logging

from sedinit.core.grid import BasinGrid
from sedinit.core.state import GridGeometry
from sedinit.io.input_file import InputStore
from sedinit.keys import InputKey
from sedinit.sediment.values import parse_positive_float

logger = logging.getLogger(__name__)


def fine_dimension(n: int, dy: float, dmass: float) -> int:
    """``n * (dy / dmass)`` truncated toward zero."""
    return int(n * (dy / dmass))


def derive_fine_grid(store: InputStore, grid: BasinGrid) -> GridGeometry:
    """Read MASS WASTING SPACING and derive the fine grid dimensions.

    The fine cell counter starts at zero; the mass-wasting stage fills it.

    Raises
    ------
    MissingOrMalformedValue
        If the spacing is missing, not a number, or not positive.
    """
    entry = InputKey.MASS_SPACING
    dmass = parse_positive_float(store.lookup(entry, default=""), entry.key)

    geometry = GridGeometry(
        nx=grid.nx,
        ny=grid.ny,
        dy=grid.dy,
        dmass=dmass,
        nx_fine=fine_dimension(grid.nx, grid.dy, dmass),
        ny_fine=fine_dimension(grid.ny, grid.dy, dmass),
        num_cells_fine=0,
    )
    logger.info("Fine grid: %d x %d (dmass=%s, dy=%s)",
                geometry.ny_fine, geometry.nx_fine, dmass, grid.dy)
    return geometry
