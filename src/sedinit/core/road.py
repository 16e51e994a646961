"""Per-cell road-erosion buffers as a sparse overlay on the coarse grid."""

from typing import Iterator, Optional

import numpy as np


ROAD_BUFFER_NAMES = ("h", "start_runoff", "start_runon", "old_sed_in", "old_sed_out")


class RoadCellState:
    """Time-series buffers owned by one road cell.

    Attributes
    ----------
    h : np.ndarray
        Flow depth history over the sub-daily steps.
    start_runoff, start_runon : np.ndarray
        Runoff and run-on at the start of each sub-daily step.
    old_sed_in, old_sed_out : np.ndarray
        Sediment in/out from the previous step.
    """

    __slots__ = ROAD_BUFFER_NAMES

    def __init__(self, h, start_runoff, start_runon, old_sed_in, old_sed_out):
        self.h = h
        self.start_runoff = start_runoff
        self.start_runon = start_runon
        self.old_sed_in = old_sed_in
        self.old_sed_out = old_sed_out

    @classmethod
    def allocate(cls, length: int, dtype=np.float32) -> "RoadCellState":
        """Zero-filled buffers, each an independent array of ``length``."""
        return cls(*(np.zeros(length, dtype=dtype) for _ in ROAD_BUFFER_NAMES))

    def buffers(self) -> dict:
        return {name: getattr(self, name) for name in ROAD_BUFFER_NAMES}

    def __repr__(self) -> str:
        return f"RoadCellState(length={len(self.h)})"


class RoadCellOverlay:
    """Dense (ny, nx) grid of optional RoadCellState slots.

    ``get`` returns None for cells with no buffers, so an absent cell can never
    be confused with one whose buffers are present but empty.
    """

    def __init__(self, ny: int, nx: int):
        self._cells = np.full((ny, nx), None, dtype=object)

    @property
    def shape(self) -> tuple:
        return self._cells.shape

    def get(self, y: int, x: int) -> Optional[RoadCellState]:
        return self._cells[y, x]

    def has(self, y: int, x: int) -> bool:
        return self._cells[y, x] is not None

    def set(self, y: int, x: int, state: RoadCellState) -> None:
        if self._cells[y, x] is not None:
            raise ValueError(f"Road buffers already allocated for cell ({y}, {x})")
        self._cells[y, x] = state

    def cells(self) -> Iterator[tuple[int, int, RoadCellState]]:
        """Allocated cells in row-major order."""
        ny, nx = self._cells.shape
        for y in range(ny):
            for x in range(nx):
                state = self._cells[y, x]
                if state is not None:
                    yield y, x, state

    def allocated_mask(self) -> np.ndarray:
        return np.vectorize(lambda s: s is not None, otypes=[bool])(self._cells)

    def __len__(self) -> int:
        return int(self.allocated_mask().sum())
