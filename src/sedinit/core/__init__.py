"""Core data structures produced by sediment setup."""

from sedinit.core.grid import BasinGrid
from sedinit.core.road import RoadCellState, RoadCellOverlay, ROAD_BUFFER_NAMES
from sedinit.core.state import (
    ProcessOptions,
    GridGeometry,
    CalibrationConstants,
    ErosionPeriod,
    ErosionSchedule,
)

__all__ = [
    'BasinGrid',
    'RoadCellState',
    'RoadCellOverlay',
    'ROAD_BUFFER_NAMES',
    'ProcessOptions',
    'GridGeometry',
    'CalibrationConstants',
    'ErosionPeriod',
    'ErosionSchedule',
]
