"""Tests for calibration reading and the diameter partition."""

import math

import numpy as np
import pytest

from sedinit.contracts import assert_diameters
from sedinit.contracts.failure import InvalidOptionCombination, MissingOrMalformedValue
from sedinit.core.state import CalibrationConstants
from sedinit.sediment.diameters import (
    distribute_sediment_diameters,
    lognormal_quantiles,
    read_calibration,
)

pytestmark = pytest.mark.unit


def _calibration(channel=(2.0, 8.0), debris=(4.0, 50.0)):
    return CalibrationConstants(
        max_iterations=100,
        channel_d50=channel[0],
        channel_d90=channel[1],
        debris_d50=debris[0],
        debris_d90=debris[1],
    )


class TestReadCalibration:

    def test_reads_all_constants(self, make_store):
        constants = read_calibration(make_store())

        assert constants.max_iterations == 100.0
        assert constants.channel_d50 == 2.0
        assert constants.channel_d90 == 8.0
        assert constants.debris_d50 == 4.0
        assert constants.debris_d90 == 50.0

    @pytest.mark.parametrize("key", [
        "MAXIMUM ITERATIONS",
        "CHANNEL PARENT D50",
        "CHANNEL PARENT D90",
        "DEBRIS FLOW D50",
        "DEBRIS FLOW D90",
    ])
    def test_missing_value_names_key(self, make_store, key):
        with pytest.raises(MissingOrMalformedValue) as exc_info:
            read_calibration(make_store(PARAMETERS={key: None}))

        assert exc_info.value.key == key

    @pytest.mark.parametrize("value", ["big", "0", "-1.5"])
    def test_bad_diameter_is_fatal(self, make_store, value):
        with pytest.raises(MissingOrMalformedValue, match="DEBRIS FLOW D50"):
            read_calibration(make_store(PARAMETERS={"DEBRIS FLOW D50": value}))

    def test_d90_below_d50_rejected(self, make_store):
        store = make_store(PARAMETERS={"CHANNEL PARENT D50": "9", "CHANNEL PARENT D90": "3"})

        with pytest.raises(InvalidOptionCombination, match="CHANNEL PARENT D90"):
            read_calibration(store)

    def test_debris_d90_below_d50_rejected(self, make_store):
        store = make_store(PARAMETERS={"DEBRIS FLOW D90": "1"})

        with pytest.raises(InvalidOptionCombination, match="DEBRIS FLOW D90"):
            read_calibration(store)

    def test_equal_d50_d90_allowed(self, make_store):
        store = make_store(PARAMETERS={"CHANNEL PARENT D50": "5", "CHANNEL PARENT D90": "5"})

        assert read_calibration(store).channel_d90 == 5.0


class TestLognormalQuantiles:

    def test_single_class_is_median(self):
        assert lognormal_quantiles(3.0, 12.0, 1).tolist() == pytest.approx([3.0])

    def test_zero_classes_is_empty(self):
        assert lognormal_quantiles(3.0, 12.0, 0).size == 0

    def test_symmetric_about_median_in_log_space(self):
        values = lognormal_quantiles(2.0, 8.0, 4)

        assert math.sqrt(values[0] * values[-1]) == pytest.approx(2.0)
        assert math.sqrt(values[1] * values[-2]) == pytest.approx(2.0)

    def test_uniform_population_collapses(self):
        assert lognormal_quantiles(5.0, 5.0, 3).tolist() == pytest.approx([5.0, 5.0, 5.0])

    def test_ninetieth_percentile_bounds_upper_class(self):
        values = lognormal_quantiles(2.0, 8.0, 10)

        # top class sits at the 95th percentile, above D90
        assert values[-1] > 8.0
        assert values[-2] < 8.0


class TestDistributeDiameters:

    @pytest.mark.parametrize("n_sizes", [2, 3, 4, 7, 12])
    def test_contract_holds(self, n_sizes):
        diameters = distribute_sediment_diameters(_calibration(), n_sizes)

        assert diameters.dtype == np.float32
        assert_diameters(diameters, n_sizes)

    def test_class_split_between_populations(self):
        """n=3 gives two channel classes and one debris class at D50."""
        diameters = distribute_sediment_diameters(
            _calibration(channel=(1.0, 1.0), debris=(20.0, 20.0)), 3
        )

        assert diameters.tolist() == pytest.approx([1.0, 1.0, 20.0])

    def test_deterministic(self):
        first = distribute_sediment_diameters(_calibration(), 6)
        second = distribute_sediment_diameters(_calibration(), 6)

        np.testing.assert_array_equal(first, second)

    def test_too_few_sizes_rejected(self):
        with pytest.raises(ValueError, match="at least 2"):
            distribute_sediment_diameters(_calibration(), 1)
