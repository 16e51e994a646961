"""Fine grid and road buffer contracts."""

import numpy as np

from sedinit.contracts.base import require
from sedinit.core.road import ROAD_BUFFER_NAMES, RoadCellOverlay
from sedinit.core.state import GridGeometry


def assert_fine_grid(geometry: GridGeometry) -> None:
    """Enforce fine grid contract.

    Raises
    ------
    ContractViolation
        If spacing is not positive, the counter is not zero, or the fine grid
        is coarser than the coarse grid although the spacing is finer.
    """
    require(
        geometry.dmass > 0,
        f"Fine grid contract violated: dmass={geometry.dmass}, expected > 0"
    )
    require(
        geometry.num_cells_fine == 0,
        f"Fine grid contract violated: num_cells_fine={geometry.num_cells_fine}, expected 0 at setup"
    )
    if geometry.dmass <= geometry.dy:
        require(
            geometry.nx_fine >= geometry.nx and geometry.ny_fine >= geometry.ny,
            f"Fine grid contract violated: fine grid {geometry.ny_fine}x{geometry.nx_fine} "
            f"smaller than coarse grid {geometry.ny}x{geometry.nx}"
        )


def assert_road_overlay(overlay: RoadCellOverlay, qualifying: np.ndarray, length: int) -> None:
    """Enforce road buffer contract.

    Buffers exist exactly on the qualifying cells, and each of them holds all
    five buffers at the configured length.

    Raises
    ------
    ContractViolation
        If allocation and the predicate disagree anywhere.
    """
    require(
        overlay.shape == qualifying.shape,
        f"Road contract violated: overlay shape {overlay.shape}, expected {qualifying.shape}"
    )
    require(
        bool(np.array_equal(overlay.allocated_mask(), qualifying)),
        "Road contract violated: allocated cells differ from basin AND road-area cells"
    )
    for y, x, state in overlay.cells():
        for name in ROAD_BUFFER_NAMES:
            buffer = getattr(state, name)
            require(
                buffer is not None and len(buffer) == length,
                "Road contract violated: cell (%d, %d) buffer '%s' length, expected %d",
                y, x, name, length,
            )
