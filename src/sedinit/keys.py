"""Named (section, key) pairs recognised in the model input file."""

from enum import Enum


class InputKey(Enum):
    """Fixed input keys, addressed by symbolic name rather than position."""

    MASS_WASTING = ("SEDOPTIONS", "MASS WASTING")
    SURFACE_EROSION = ("SEDOPTIONS", "SURFACE EROSION")
    ROAD_EROSION = ("SEDOPTIONS", "ROAD EROSION")
    CHANNEL_ROUTING = ("SEDOPTIONS", "CHANNEL ROUTING")
    MASS_SPACING = ("PARAMETERS", "MASS WASTING SPACING")
    MAX_ITERATIONS = ("PARAMETERS", "MAXIMUM ITERATIONS")
    CHANNEL_D50 = ("PARAMETERS", "CHANNEL PARENT D50")
    CHANNEL_D90 = ("PARAMETERS", "CHANNEL PARENT D90")
    DEBRIS_D50 = ("PARAMETERS", "DEBRIS FLOW D50")
    DEBRIS_D90 = ("PARAMETERS", "DEBRIS FLOW D90")
    TIME_STEPS = ("SEDTIME", "TIME STEPS")

    @property
    def section(self) -> str:
        return self.value[0]

    @property
    def key(self) -> str:
        return self.value[1]


SEDTIME_SECTION = "SEDTIME"


class PeriodBound(str, Enum):
    """The two per-period keys in [SEDTIME]."""

    START = "EROSION START"
    END = "EROSION END"

    def key_for(self, index: int) -> str:
        """Key name for a 0-based period index (keys are 1-based)."""
        return f"{self.value} {index + 1}"
