"""Representative particle diameters for the sediment size classes.

Two source populations feed the channel network: parent material of the
channel bed and debris-flow deposits. Each is described by its D50 and D90.
Both are treated as log-normal, so

    ln(D) ~ N(ln(D50), sigma),   sigma = ln(D90 / D50) / z(0.90)

The channel population gets ceil(n/2) classes and the debris-flow population
floor(n/2). Each class is represented by the diameter at the middle of its
equal-mass slice, quantile (i + 0.5) / k. The combined set is sorted
ascending.
"""

import logging
import math

import numpy as np
from scipy.stats import norm

from sedinit.contracts.failure import InvalidOptionCombination
from sedinit.core.state import CalibrationConstants
from sedinit.io.input_file import InputStore
from sedinit.keys import InputKey
from sedinit.sediment.values import parse_float, parse_positive_float

logger = logging.getLogger(__name__)

Z90 = norm.ppf(0.90)


def read_calibration(store: InputStore) -> CalibrationConstants:
    """Read MAXIMUM ITERATIONS and the two D50/D90 pairs from [PARAMETERS].

    Raises
    ------
    MissingOrMalformedValue
        If any value is missing or not numeric, or a diameter is not positive.
    InvalidOptionCombination
        If a population has D90 smaller than its D50.
    """
    def positive(entry):
        return parse_positive_float(store.lookup(entry, default=""), entry.key)

    max_iterations = parse_float(
        store.lookup(InputKey.MAX_ITERATIONS, default=""), InputKey.MAX_ITERATIONS.key
    )
    constants = CalibrationConstants(
        max_iterations=max_iterations,
        channel_d50=positive(InputKey.CHANNEL_D50),
        channel_d90=positive(InputKey.CHANNEL_D90),
        debris_d50=positive(InputKey.DEBRIS_D50),
        debris_d90=positive(InputKey.DEBRIS_D90),
    )

    if constants.channel_d90 < constants.channel_d50:
        raise InvalidOptionCombination(
            InputKey.CHANNEL_D90.key,
            f"D90 {constants.channel_d90} is smaller than D50 {constants.channel_d50}",
        )
    if constants.debris_d90 < constants.debris_d50:
        raise InvalidOptionCombination(
            InputKey.DEBRIS_D90.key,
            f"D90 {constants.debris_d90} is smaller than D50 {constants.debris_d50}",
        )

    return constants


def lognormal_quantiles(d50: float, d90: float, count: int) -> np.ndarray:
    """Diameters at the mid-quantiles of ``count`` equal-mass slices."""
    if count == 0:
        return np.empty(0)
    sigma = math.log(d90 / d50) / Z90
    levels = (np.arange(count) + 0.5) / count
    z = norm.ppf(levels)
    return d50 * np.exp(sigma * z)


def distribute_sediment_diameters(calibration: CalibrationConstants, n_sizes: int) -> np.ndarray:
    """Fill the fixed-size, non-decreasing diameter array.

    Parameters
    ----------
    calibration : CalibrationConstants
        Channel and debris-flow D50/D90.
    n_sizes : int
        Number of size classes, at least 2.

    Returns
    -------
    np.ndarray
        float32 array of length ``n_sizes``, sorted ascending.
    """
    if n_sizes < 2:
        raise ValueError(f"n_sizes must be at least 2, got {n_sizes}")

    n_channel = (n_sizes + 1) // 2
    n_debris = n_sizes // 2

    diameters = np.concatenate([
        lognormal_quantiles(calibration.channel_d50, calibration.channel_d90, n_channel),
        lognormal_quantiles(calibration.debris_d50, calibration.debris_d90, n_debris),
    ])
    diameters = np.sort(diameters).astype(np.float32)

    logger.info("Sediment diameters (%d classes): %s", n_sizes,
                ", ".join(f"{d:.4g}" for d in diameters))
    return diameters
