"""Sediment setup stages.

Each stage reads what it needs from the input store and returns a typed
result; the orchestrator in ``sedinit.pipeline`` decides the order.
"""

from sedinit.sediment.options import resolve_options
from sedinit.sediment.grid_spacing import derive_fine_grid
from sedinit.sediment.road_cells import allocate_road_cells
from sedinit.sediment.diameters import read_calibration, distribute_sediment_diameters
from sedinit.sediment.schedule import parse_erosion_schedule

__all__ = [
    'resolve_options',
    'derive_fine_grid',
    'allocate_road_cells',
    'read_calibration',
    'distribute_sediment_diameters',
    'parse_erosion_schedule',
]
