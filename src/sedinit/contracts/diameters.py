"""Sediment diameter contract."""

import numpy as np

from sedinit.contracts.base import require


def assert_diameters(diameters: np.ndarray, n_sizes: int) -> None:
    """Enforce diameter partition contract.

    Raises
    ------
    ContractViolation
        If the array has the wrong length, non-positive entries, or decreases.
    """
    require(
        diameters.ndim == 1 and diameters.shape[0] == n_sizes,
        f"Diameter contract violated: got shape {diameters.shape}, expected ({n_sizes},)"
    )
    require(
        bool(np.all(np.isfinite(diameters))) and bool(np.all(diameters > 0)),
        "Diameter contract violated: diameters must be finite and positive"
    )
    require(
        bool(np.all(np.diff(diameters) >= 0)),
        "Diameter contract violated: diameters must be non-decreasing"
    )
