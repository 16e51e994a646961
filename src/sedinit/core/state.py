"""Setup state consumed by the later simulation stages.

Everything except GridGeometry is frozen once built. GridGeometry keeps
``num_cells_fine`` assignable because the mass-wasting stage fills it in.
"""

from datetime import datetime
from typing import Optional

import pandas as pd
from pydantic import Field, model_validator

from sedinit.schemas.base import FrozenSedModel, SedBaseModel


class ProcessOptions(FrozenSedModel):
    """Resolved process switches.

    ``erosion_period`` mirrors ``surface_erosion`` and ``init_sed_flag`` is the
    snapshot of ``surface_erosion`` kept for output dumping.
    """

    mass_wasting: bool
    surface_erosion: bool
    erosion_period: bool
    road_routing: bool
    channel_routing: bool
    init_sed_flag: bool

    @model_validator(mode="after")
    def check_mirrored_flags(self):
        if self.erosion_period != self.surface_erosion:
            raise ValueError("erosion_period must mirror surface_erosion")
        return self


class GridGeometry(SedBaseModel):
    """Coarse grid, mass-wasting spacing and the derived fine grid."""

    nx: int = Field(ge=1)
    ny: int = Field(ge=1)
    dy: float = Field(gt=0)
    dmass: float = Field(gt=0)
    nx_fine: int = Field(ge=0)
    ny_fine: int = Field(ge=0)
    num_cells_fine: int = Field(0, ge=0)


class CalibrationConstants(FrozenSedModel):
    """Calibration values read once from [PARAMETERS]."""

    max_iterations: float
    channel_d50: float = Field(gt=0)
    channel_d90: float = Field(gt=0)
    debris_d50: float = Field(gt=0)
    debris_d90: float = Field(gt=0)


class ErosionPeriod(FrozenSedModel):
    """One [start, end) erosion-accounting interval."""

    start: datetime
    end: datetime

    def contains(self, when: datetime) -> bool:
        return self.start <= when < self.end


class ErosionSchedule(FrozenSedModel):
    """Ordered erosion-accounting periods as declared in [SEDTIME].

    Periods are kept in declaration order. Sorting and overlap are not
    enforced; ``is_sorted`` and ``overlapping_periods`` report them.
    """

    periods: tuple[ErosionPeriod, ...] = ()

    def __len__(self) -> int:
        return len(self.periods)

    def __getitem__(self, index: int) -> ErosionPeriod:
        return self.periods[index]

    @property
    def starts(self) -> tuple[datetime, ...]:
        return tuple(p.start for p in self.periods)

    @property
    def ends(self) -> tuple[datetime, ...]:
        return tuple(p.end for p in self.periods)

    def is_sorted(self) -> bool:
        """True if period starts are non-decreasing."""
        starts = self.starts
        return all(a <= b for a, b in zip(starts, starts[1:]))

    def overlapping_periods(self) -> list[tuple[int, int]]:
        """0-based index pairs of periods whose intervals intersect."""
        pairs = []
        for i, first in enumerate(self.periods):
            for j in range(i + 1, len(self.periods)):
                second = self.periods[j]
                if first.start < second.end and second.start < first.end:
                    pairs.append((i, j))
        return pairs

    def active_period(self, when: datetime) -> Optional[int]:
        """0-based index of the first period containing ``when``, or None."""
        for i, period in enumerate(self.periods):
            if period.contains(when):
                return i
        return None

    def to_frame(self) -> pd.DataFrame:
        """Tabular view with 1-based period numbers."""
        return pd.DataFrame(
            {
                "period": list(range(1, len(self.periods) + 1)),
                "start": list(self.starts),
                "end": list(self.ends),
            },
            columns=["period", "start", "end"],
        )
