import numpy as np
import pytest

from tests.helpers.sed_inputs import BASE_SECTIONS, SURFACE_SEDTIME


@pytest.fixture
def all_switches_on(make_store):
    """Every process enabled with a valid two-period schedule."""
    switches = {key: "TRUE" for key in BASE_SECTIONS["SEDOPTIONS"]}
    return make_store(SEDOPTIONS=switches, SEDTIME=SURFACE_SEDTIME)


@pytest.fixture
def road_grid(make_grid):
    """4x4 basin with one outside corner and three road cells, one outside."""
    mask = np.ones((4, 4), dtype=np.int8)
    mask[3, 3] = 0
    road_area = np.zeros((4, 4))
    road_area[0, 1] = 40.0
    road_area[2, 2] = 15.0
    road_area[3, 3] = 90.0
    return make_grid(mask=mask, road_area=road_area)
