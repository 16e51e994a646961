"""Load the coarse basin grid from NetCDF."""

import logging
from pathlib import Path
from typing import Union

import xarray as xr

from sedinit.core.grid import BasinGrid

logger = logging.getLogger(__name__)


def load_basin_grid(path: Union[str, Path], mask_var: str = "mask",
                    road_var: str = "road_area") -> BasinGrid:
    """Read mask, road area and cell size from a NetCDF file.

    Parameters
    ----------
    path : str or Path
        NetCDF file with a ``mask`` variable on (y, x), an optional
        ``road_area`` variable on the same dims and a ``dy`` attribute.

    Returns
    -------
    BasinGrid
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Grid file not found: {path}")

    with xr.open_dataset(path) as ds:
        grid = BasinGrid.from_dataset(ds.load(), mask_var=mask_var, road_var=road_var)

    logger.info("Basin grid loaded: %s (ny=%d, nx=%d, dy=%s, roads=%s)",
                path.name, grid.ny, grid.nx, grid.dy, grid.has_road_network)
    return grid
