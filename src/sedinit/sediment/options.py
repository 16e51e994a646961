"""Process switch resolution for the [SEDOPTIONS] section."""

import logging

from sedinit.core.state import ProcessOptions
from sedinit.io.input_file import InputStore
from sedinit.keys import InputKey
from sedinit.sediment.values import parse_flag

logger = logging.getLogger(__name__)

ROAD_NETWORK_MISSING = "Cannot route the road network without the network files!"

COMPONENT_NAMES = {
    InputKey.MASS_WASTING: "Mass Wasting",
    InputKey.SURFACE_EROSION: "Surface Erosion",
    InputKey.ROAD_EROSION: "Road Erosion",
    InputKey.CHANNEL_ROUTING: "Channel Routing",
}


def announce(entry: InputKey) -> None:
    print(f"Sediment {COMPONENT_NAMES[entry]} component will be run")


def resolve_flag(store: InputStore, entry: InputKey) -> bool:
    """Read one switch. A missing key is as fatal as a malformed one."""
    return parse_flag(store.lookup(entry, default=""), entry.key)


def resolve_options(store: InputStore, has_road_network: bool) -> ProcessOptions:
    """Resolve the four process switches.

    Switches are read in input order. Each enabled process is announced on
    stdout as soon as its switch resolves, so a malformed later switch leaves
    the earlier notices printed.

    Parameters
    ----------
    store : InputStore
        Model input file.
    has_road_network : bool
        Whether road network data was loaded. Road routing requested without
        it is switched off with a notice instead of failing.

    Returns
    -------
    ProcessOptions

    Raises
    ------
    MissingOrMalformedValue
        If any switch is not TRUE/FALSE.
    """
    mass_wasting = resolve_flag(store, InputKey.MASS_WASTING)
    if mass_wasting:
        announce(InputKey.MASS_WASTING)

    surface_erosion = resolve_flag(store, InputKey.SURFACE_EROSION)
    if surface_erosion:
        announce(InputKey.SURFACE_EROSION)

    road_routing = resolve_flag(store, InputKey.ROAD_EROSION)
    if road_routing and not has_road_network:
        print(ROAD_NETWORK_MISSING)
        logger.warning("ROAD EROSION requested but no road network loaded; road routing disabled")
        road_routing = False
    elif road_routing:
        announce(InputKey.ROAD_EROSION)

    channel_routing = resolve_flag(store, InputKey.CHANNEL_ROUTING)
    if channel_routing:
        announce(InputKey.CHANNEL_ROUTING)

    options = ProcessOptions(
        mass_wasting=mass_wasting,
        surface_erosion=surface_erosion,
        erosion_period=surface_erosion,
        road_routing=road_routing,
        channel_routing=channel_routing,
        init_sed_flag=surface_erosion,
    )
    logger.debug("Resolved options: %s", options.model_dump())
    return options
