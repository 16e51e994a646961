"""Input readers: sectioned model input file and basin grid."""

from sedinit.io.input_file import InputStore
from sedinit.io.grid_loader import load_basin_grid

__all__ = ['InputStore', 'load_basin_grid']
