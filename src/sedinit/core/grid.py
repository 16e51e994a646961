"""Coarse basin grid supplied by the host model."""

import logging
from typing import Optional

import numpy as np
import xarray as xr

from sedinit.contracts.failure import MissingOrMalformedValue

logger = logging.getLogger(__name__)


class BasinGrid:
    """Basin mask, optional road-area field and cell edge length.

    Parameters
    ----------
    mask : array-like, shape (ny, nx)
        Basin membership; cells equal to the outside value are not in the basin.
    dy : float
        Coarse cell edge length.
    road_area : array-like, shape (ny, nx), optional
        Road area per cell. ``None`` means no road network was loaded.
    """

    def __init__(self, mask, dy: float, road_area=None):
        self.mask = np.asarray(mask)
        if self.mask.ndim != 2:
            raise ValueError(f"mask must be 2D, got {self.mask.ndim} dims")
        self.dy = float(dy)
        if not self.dy > 0:
            raise ValueError(f"dy must be positive, got {dy}")

        self.road_area: Optional[np.ndarray] = None
        if road_area is not None:
            road_area = np.asarray(road_area, dtype=float)
            if road_area.size and road_area.shape != self.mask.shape:
                raise ValueError(
                    f"road_area shape {road_area.shape} does not match mask shape {self.mask.shape}"
                )
            self.road_area = road_area

    @property
    def ny(self) -> int:
        return self.mask.shape[0]

    @property
    def nx(self) -> int:
        return self.mask.shape[1]

    @property
    def has_road_network(self) -> bool:
        """False when no road data was loaded or it is empty."""
        return self.road_area is not None and self.road_area.size > 0

    def in_basin(self, outside_value: int = 0) -> np.ndarray:
        """Cells inside the basin.

        Fill values decoded to NaN by xarray are outside the basin.
        """
        mask = self.mask
        if np.issubdtype(mask.dtype, np.floating):
            return np.isfinite(mask) & (mask != outside_value)
        return mask != outside_value

    @classmethod
    def from_dataset(cls, ds: xr.Dataset, mask_var: str = "mask",
                     road_var: str = "road_area") -> "BasinGrid":
        """Build a grid from an xarray Dataset.

        The cell size comes from the ``dy`` attribute, or from the spacing of
        the ``y`` coordinate when the attribute is missing.
        """
        if mask_var not in ds.data_vars:
            raise MissingOrMalformedValue(mask_var, "basin mask variable not found")

        dy = ds.attrs.get("dy")
        if dy is None:
            if "y" not in ds.coords or ds.sizes.get("y", 0) < 2:
                raise MissingOrMalformedValue("dy", "no 'dy' attribute and no usable 'y' coordinate")
            dy = abs(float(ds["y"].values[1] - ds["y"].values[0]))

        road_area = ds[road_var].values if road_var in ds.data_vars else None
        logger.debug("Basin grid from dataset: shape=%s, dy=%s, roads=%s",
                     ds[mask_var].shape, dy, road_area is not None)

        return cls(ds[mask_var].values, dy, road_area)
