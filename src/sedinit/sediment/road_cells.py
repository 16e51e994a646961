"""Road-network erosion buffers.

Only cells inside the basin that carry road area get buffers. The rest of the
grid stays empty, which keeps memory proportional to the road network rather
than to the basin.
"""

import logging

import numpy as np

from sedinit.contracts.failure import AllocationFailure
from sedinit.core.grid import BasinGrid
from sedinit.core.road import RoadCellOverlay, RoadCellState
from sedinit.core.state import ProcessOptions
from sedinit.schemas.internal import InternalConfig

logger = logging.getLogger(__name__)

ROUTINE = "allocate_road_cells"


def road_cell_mask(grid: BasinGrid, outside_value: int = 0) -> np.ndarray:
    """Cells inside the basin with positive road area."""
    if not grid.has_road_network:
        return np.zeros(grid.mask.shape, dtype=bool)
    return grid.in_basin(outside_value) & (grid.road_area > 0)


def allocate_road_cells(grid: BasinGrid, options: ProcessOptions,
                        config: InternalConfig) -> RoadCellOverlay:
    """Allocate the five road buffers for every qualifying cell.

    Parameters
    ----------
    grid : BasinGrid
        Coarse grid with basin mask and road area.
    options : ProcessOptions
        Nothing is allocated unless ``road_routing`` is set.
    config : InternalConfig
        ``road.cell_factor`` is the buffer length.

    Returns
    -------
    RoadCellOverlay
        Overlay with a state for each qualifying cell and None elsewhere.

    Raises
    ------
    AllocationFailure
        If any buffer cannot be allocated. Buffers already handed out are kept.
    """
    overlay = RoadCellOverlay(grid.ny, grid.nx)
    if not options.road_routing:
        return overlay

    length = config.road.cell_factor
    qualifying = road_cell_mask(grid, config.road.outside_basin_value)

    # argwhere walks the grid in row-major order
    for y, x in np.argwhere(qualifying):
        try:
            state = RoadCellState.allocate(length)
        except MemoryError as e:
            raise AllocationFailure(ROUTINE, f"cell ({y}, {x})") from e
        overlay.set(int(y), int(x), state)

    logger.info("Road buffers allocated: %d cells x %d steps", int(qualifying.sum()), length)
    return overlay
