"""Setup orchestration."""

from sedinit.pipeline.initializer import SedimentSetup, init_sediment_parameters

__all__ = ['SedimentSetup', 'init_sediment_parameters']
