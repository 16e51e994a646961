"""`sedinit` - Sediment-transport setup for distributed hydrology runs.

Subpackages:
- schemas: Layered runtime configuration (expert defaults, CLI overrides)
- io: Sectioned input file store, basin grid loader
- sediment: Option resolution, fine grid, road buffers, diameters, erosion schedule
- pipeline: Setup orchestration
- contracts: Stage invariants

Everything here runs once, before the first model time step.
"""

__version__ = "0.1.0"
