"""Root-level pytest fixtures for the sedinit test suite.

Provides shared configuration, input-store and grid fixtures. Tests build
their inputs through these factories instead of writing files.
"""

import pytest
import numpy as np

from sedinit.core.grid import BasinGrid
from sedinit.io.input_file import InputStore
from sedinit.schemas import ParamConfig, CLIConfig, resolve_config
from tests.helpers.sed_inputs import BASE_SECTIONS


# =============================================================================
# Configuration Fixtures (Pydantic-based)
# =============================================================================

@pytest.fixture
def param_config():
    """Expert configuration with all defaults."""
    return ParamConfig()


@pytest.fixture
def internal_config(param_config):
    """Fully validated runtime configuration (no overrides)."""
    return resolve_config(param_config, None)


@pytest.fixture
def make_config(param_config):
    """Factory fixture for configs with CLI-style overrides.

    Examples
    --------
    >>> def test_buffers(make_config):
    ...     config = make_config(cell_factor=24)
    ...     assert config.road.cell_factor == 24
    """
    def _make(**cli_overrides):
        if cli_overrides:
            return resolve_config(param_config, CLIConfig(**cli_overrides))
        return resolve_config(param_config, None)

    return _make


# =============================================================================
# Input Fixtures
# =============================================================================

@pytest.fixture
def make_store():
    """Factory fixture for input stores.

    Starts from a complete input with every switch FALSE. Keyword sections
    are merged over it; a value of None removes the key.

    Examples
    --------
    >>> store = make_store(SEDOPTIONS={"SURFACE EROSION": "TRUE"},
    ...                    SEDTIME={"TIME STEPS": "0"})
    """
    def _make(**sections):
        merged = {name: dict(entries) for name, entries in BASE_SECTIONS.items()}
        for name, entries in sections.items():
            target = merged.setdefault(name, {})
            for key, value in entries.items():
                if value is None:
                    target.pop(key, None)
                else:
                    target[key] = value
        return InputStore(merged)

    return _make


@pytest.fixture
def make_grid():
    """Factory fixture for basin grids.

    Defaults to a 3x3 grid fully inside the basin with dy=30 and no roads.
    """
    def _make(mask=None, road_area=None, dy=30.0, shape=(3, 3)):
        if mask is None:
            mask = np.ones(shape, dtype=np.int8)
        return BasinGrid(mask, dy, road_area)

    return _make
