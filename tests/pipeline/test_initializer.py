"""End-to-end tests for sediment setup orchestration."""

import json
from datetime import datetime

import numpy as np
import pytest

from sedinit.contracts.failure import (
    InvalidOptionCombination,
    MissingOrMalformedValue,
    TemporalOrderingViolation,
)
from sedinit.pipeline import initializer
from sedinit.pipeline.initializer import init_sediment_parameters
from tests.helpers.sed_inputs import SURFACE_SEDTIME

pytestmark = [pytest.mark.unit, pytest.mark.pipeline]


def test_all_processes_off(make_store, make_grid, internal_config, capsys):
    setup = init_sediment_parameters(make_store(), make_grid(), internal_config)

    assert not any(setup.options.model_dump().values())
    assert setup.schedule is None
    assert len(setup.road_cells) == 0
    assert setup.geometry.nx_fine == 9
    assert setup.diameters.shape == (internal_config.particles.n_sed_sizes,)
    assert "will be run" not in capsys.readouterr().out


def test_surface_erosion_builds_schedule(make_store, make_grid, internal_config, capsys):
    store = make_store(SEDOPTIONS={"SURFACE EROSION": "TRUE"}, SEDTIME=SURFACE_SEDTIME)

    setup = init_sediment_parameters(store, make_grid(), internal_config)

    assert setup.options.erosion_period
    assert setup.options.init_sed_flag
    assert len(setup.schedule) == 2
    assert "Sediment Surface Erosion component will be run" in capsys.readouterr().out


def test_road_erosion_with_network(make_store, road_grid, make_config):
    config = make_config(cell_factor=6)
    store = make_store(SEDOPTIONS={"ROAD EROSION": "TRUE"})

    setup = init_sediment_parameters(store, road_grid, config)

    assert setup.options.road_routing
    assert [(y, x) for y, x, _ in setup.road_cells.cells()] == [(0, 1), (2, 2)]
    assert setup.road_cells.get(2, 2).old_sed_out.shape == (6,)
    assert setup.road_cells.get(3, 3) is None


def test_road_erosion_without_network_downgraded(make_store, make_grid, internal_config, capsys):
    store = make_store(SEDOPTIONS={"ROAD EROSION": "TRUE"})

    setup = init_sediment_parameters(store, make_grid(), internal_config)

    out = capsys.readouterr().out
    assert not setup.options.road_routing
    assert len(setup.road_cells) == 0
    assert "without the network files" in out
    assert "Road Erosion component will be run" not in out


def test_every_process_announced(all_switches_on, road_grid, internal_config, capsys):
    init_sediment_parameters(all_switches_on, road_grid, internal_config)

    out = capsys.readouterr().out
    for name in ("Mass Wasting", "Surface Erosion", "Road Erosion", "Channel Routing"):
        assert f"Sediment {name} component will be run" in out


def test_schedule_skipped_when_surface_erosion_off(make_store, make_grid, internal_config):
    """A broken [SEDTIME] is never read unless surface erosion is on."""
    store = make_store(SEDTIME={"TIME STEPS": "lots"})

    setup = init_sediment_parameters(store, make_grid(), internal_config)

    assert setup.schedule is None


def test_malformed_switch_stops_before_allocation(make_store, road_grid, internal_config, monkeypatch):
    calls = []
    monkeypatch.setattr(initializer, "allocate_road_cells", lambda *a: calls.append(a))
    store = make_store(SEDOPTIONS={"ROAD EROSION": "TRUE", "CHANNEL ROUTING": "maybe"})

    with pytest.raises(MissingOrMalformedValue, match="CHANNEL ROUTING"):
        init_sediment_parameters(store, road_grid, internal_config)

    assert calls == []


def test_spacing_failure_after_road_allocation(make_store, road_grid, internal_config, monkeypatch):
    allocated = []
    real = initializer.allocate_road_cells

    def tracking(*args):
        overlay = real(*args)
        allocated.append(overlay)
        return overlay

    monkeypatch.setattr(initializer, "allocate_road_cells", tracking)
    store = make_store(
        SEDOPTIONS={"ROAD EROSION": "TRUE"},
        PARAMETERS={"MASS WASTING SPACING": "none"},
    )

    with pytest.raises(MissingOrMalformedValue, match="MASS WASTING SPACING"):
        init_sediment_parameters(store, road_grid, internal_config)

    assert len(allocated) == 1
    assert len(allocated[0]) == 2


def test_bad_calibration_is_fatal(make_store, make_grid, internal_config):
    store = make_store(PARAMETERS={"DEBRIS FLOW D90": "2"})

    with pytest.raises(InvalidOptionCombination):
        init_sediment_parameters(store, make_grid(), internal_config)


def test_reversed_period_is_fatal(make_store, make_grid, internal_config):
    sedtime = dict(SURFACE_SEDTIME, **{"EROSION END 2": "10/31/1995-00"})
    store = make_store(SEDOPTIONS={"SURFACE EROSION": "TRUE"}, SEDTIME=sedtime)

    with pytest.raises(TemporalOrderingViolation, match="period 2"):
        init_sediment_parameters(store, make_grid(), internal_config)


def test_unsorted_periods_logged(make_store, make_grid, internal_config, caplog):
    sedtime = {
        "TIME STEPS": "2",
        "EROSION START 1": "11/01/1995-00",
        "EROSION END 1": "11/30/1995-00",
        "EROSION START 2": "10/01/1995-00",
        "EROSION END 2": "11/05/1995-00",
    }
    store = make_store(SEDOPTIONS={"SURFACE EROSION": "TRUE"}, SEDTIME=sedtime)

    setup = init_sediment_parameters(store, make_grid(), internal_config)

    assert len(setup.schedule) == 2
    messages = [r.getMessage() for r in caplog.records if r.levelname == "WARNING"]
    assert any("chronological" in m for m in messages)
    assert any("1/2" in m for m in messages)


def test_n_sed_sizes_override(make_store, make_grid, make_config):
    setup = init_sediment_parameters(make_store(), make_grid(), make_config(n_sed_sizes=7))

    assert setup.diameters.shape == (7,)
    assert np.all(np.diff(setup.diameters) >= 0)


def test_summary_is_json_serialisable(all_switches_on, road_grid, internal_config):
    setup = init_sediment_parameters(all_switches_on, road_grid, internal_config)

    summary = json.loads(json.dumps(setup.summary()))

    assert summary["road_cells"] == 2
    assert summary["options"]["mass_wasting"] is True
    assert summary["erosion_periods"][0]["start"] == "1995-10-01T00:00:00"
    assert len(summary["diameters"]) == internal_config.particles.n_sed_sizes


class TestScenarios:
    """Reference setups from the model documentation."""

    def test_everything_off(self, make_store, make_grid, internal_config, monkeypatch):
        parsed = []
        monkeypatch.setattr(initializer, "parse_erosion_schedule", lambda *a: parsed.append(a))

        setup = init_sediment_parameters(make_store(), make_grid(), internal_config)

        assert not setup.options.init_sed_flag
        assert len(setup.road_cells) == 0
        assert parsed == []

    def test_surface_erosion_two_periods(self, make_store, make_grid, internal_config):
        store = make_store(
            SEDOPTIONS={"SURFACE EROSION": "TRUE"},
            SEDTIME={
                "TIME STEPS": "2",
                "EROSION START 1": "01/01/2000-00",
                "EROSION END 1": "01/10/2000-00",
                "EROSION START 2": "02/01/2000-00",
                "EROSION END 2": "02/15/2000-00",
            },
        )

        setup = init_sediment_parameters(store, make_grid(), internal_config)

        assert setup.options.init_sed_flag
        assert setup.schedule.starts == (datetime(2000, 1, 1), datetime(2000, 2, 1))
        assert setup.schedule.ends == (datetime(2000, 1, 10), datetime(2000, 2, 15))

    def test_reversed_first_period(self, make_store, make_grid, internal_config):
        store = make_store(
            SEDOPTIONS={"SURFACE EROSION": "TRUE"},
            SEDTIME={
                "TIME STEPS": "2",
                "EROSION START 1": "03/10/2001-00",
                "EROSION END 1": "03/05/2001-00",
                "EROSION START 2": "not parsed",
            },
        )

        with pytest.raises(TemporalOrderingViolation, match="period 1") as exc_info:
            init_sediment_parameters(store, make_grid(), internal_config)

        assert exc_info.value.key == "SEDTIME"

    def test_single_road_cell(self, make_store, make_grid, internal_config):
        road_area = np.zeros((3, 3))
        road_area[1, 2] = 25.0
        store = make_store(SEDOPTIONS={"ROAD EROSION": "TRUE"})

        setup = init_sediment_parameters(store, make_grid(road_area=road_area), internal_config)

        cells = list(setup.road_cells.cells())
        assert [(y, x) for y, x, _ in cells] == [(1, 2)]
        for buf in cells[0][2].buffers().values():
            assert buf.shape == (internal_config.road.cell_factor,)
        assert setup.road_cells.allocated_mask().sum() == 1

    def test_negative_period_count(self, make_store, make_grid, internal_config):
        store = make_store(SEDOPTIONS={"SURFACE EROSION": "TRUE"}, SEDTIME={"TIME STEPS": "-2"})

        with pytest.raises(MissingOrMalformedValue) as exc_info:
            init_sediment_parameters(store, make_grid(), internal_config)

        assert exc_info.value.key == "SEDTIME"
