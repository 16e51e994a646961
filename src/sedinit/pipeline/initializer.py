"""Sediment setup orchestration.

Runs the setup stages in their required order and returns one
``SedimentSetup`` holding everything the time-stepping stages consume.

**Stage order:**

1. **Options**: resolve the four [SEDOPTIONS] switches. Road routing is
   switched off if no road network was loaded. Enabled processes are
   announced on stdout.
2. **Road cells** (only if road routing): allocate the five buffers on each
   basin cell with road area.
3. **Fine grid**: read MASS WASTING SPACING, derive the fine dimensions.
4. **Calibration and diameters**: read [PARAMETERS] constants and partition
   the sediment into size classes.
5. **Erosion schedule** (only if surface erosion): parse [SEDTIME] periods.

Every stage is followed by its contract check. Any ``SetupError`` propagates
to the caller unchanged; nothing allocated before the failure is released.
"""

import logging
from typing import Optional

import numpy as np

from sedinit.contracts import (
    assert_diameters,
    assert_fine_grid,
    assert_options_consistent,
    assert_road_overlay,
    assert_schedule,
)
from sedinit.core.grid import BasinGrid
from sedinit.core.road import RoadCellOverlay
from sedinit.core.state import (
    CalibrationConstants,
    ErosionSchedule,
    GridGeometry,
    ProcessOptions,
)
from sedinit.io.input_file import InputStore
from sedinit.schemas.internal import InternalConfig
from sedinit.sediment.diameters import distribute_sediment_diameters, read_calibration
from sedinit.sediment.grid_spacing import derive_fine_grid
from sedinit.sediment.options import resolve_options
from sedinit.sediment.road_cells import allocate_road_cells, road_cell_mask
from sedinit.sediment.schedule import parse_erosion_schedule, read_period_count

__all__ = ['SedimentSetup', 'init_sediment_parameters']

logger = logging.getLogger(__name__)


class SedimentSetup:
    """Result of sediment setup.

    Attributes
    ----------
    options : ProcessOptions
    geometry : GridGeometry
    road_cells : RoadCellOverlay
        Empty overlay when road routing is off.
    calibration : CalibrationConstants
    diameters : np.ndarray
    schedule : ErosionSchedule or None
        None when surface erosion is off.
    """

    def __init__(self, options: ProcessOptions, geometry: GridGeometry,
                 road_cells: RoadCellOverlay, calibration: CalibrationConstants,
                 diameters: np.ndarray, schedule: Optional[ErosionSchedule]):
        self.options = options
        self.geometry = geometry
        self.road_cells = road_cells
        self.calibration = calibration
        self.diameters = diameters
        self.schedule = schedule

    def summary(self) -> dict:
        """JSON-friendly overview for reporting."""
        return {
            "options": self.options.model_dump(),
            "geometry": self.geometry.model_dump(),
            "calibration": self.calibration.model_dump(),
            "diameters": [float(d) for d in self.diameters],
            "road_cells": len(self.road_cells),
            "erosion_periods": None if self.schedule is None else [
                {"start": p.start.isoformat(), "end": p.end.isoformat()}
                for p in self.schedule.periods
            ],
        }


def init_sediment_parameters(store: InputStore, grid: BasinGrid,
                             config: InternalConfig) -> SedimentSetup:
    """Run sediment setup.

    Parameters
    ----------
    store : InputStore
        Model input file.
    grid : BasinGrid
        Coarse grid with basin mask and, if loaded, road area.
    config : InternalConfig
        Resolved runtime configuration.

    Returns
    -------
    SedimentSetup

    Raises
    ------
    SetupError
        Any of its subclasses, from the first stage that fails.

    Examples
    --------
    >>> store = InputStore.from_file("input.sed")
    >>> grid = load_basin_grid("basin.nc")
    >>> setup = init_sediment_parameters(store, grid, resolve_config())
    >>> setup.options.surface_erosion
    True
    """
    logger.info("=" * 60)
    logger.info("Sediment setup")
    logger.info("=" * 60)

    options = resolve_options(store, grid.has_road_network)
    assert_options_consistent(options, grid.has_road_network)

    road_cells = allocate_road_cells(grid, options, config)
    if options.road_routing:
        qualifying = road_cell_mask(grid, config.road.outside_basin_value)
    else:
        qualifying = np.zeros(grid.mask.shape, dtype=bool)
    assert_road_overlay(road_cells, qualifying, config.road.cell_factor)

    geometry = derive_fine_grid(store, grid)
    assert_fine_grid(geometry)

    calibration = read_calibration(store)
    diameters = distribute_sediment_diameters(calibration, config.particles.n_sed_sizes)
    assert_diameters(diameters, config.particles.n_sed_sizes)

    schedule = None
    if options.surface_erosion:
        schedule = parse_erosion_schedule(store, config)
        assert_schedule(schedule, read_period_count(store))
        if not schedule.is_sorted():
            logger.warning("Erosion periods are not in chronological order")
        overlaps = schedule.overlapping_periods()
        if overlaps:
            logger.warning("Overlapping erosion periods: %s",
                           ", ".join(f"{i + 1}/{j + 1}" for i, j in overlaps))

    logger.info("Sediment setup complete: road cells=%d, diameters=%d, periods=%s",
                len(road_cells), len(diameters),
                "n/a" if schedule is None else len(schedule))

    return SedimentSetup(options, geometry, road_cells, calibration, diameters, schedule)
