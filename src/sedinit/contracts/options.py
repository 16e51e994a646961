"""Option resolution contract."""

from sedinit.contracts.base import require
from sedinit.core.state import ProcessOptions


def assert_options_consistent(options: ProcessOptions, has_road_network: bool) -> None:
    """Enforce option resolution contract.

    Called right after option resolution, before any gated stage runs.

    Raises
    ------
    ContractViolation
        If mirrored flags disagree or road routing survived without a network.
    """
    require(
        options.erosion_period == options.surface_erosion,
        "Options contract violated: erosion_period does not mirror surface_erosion"
    )
    require(
        options.init_sed_flag == options.surface_erosion,
        "Options contract violated: init_sed_flag does not match surface_erosion"
    )
    require(
        has_road_network or not options.road_routing,
        "Options contract violated: road_routing enabled without a road network"
    )
