"""Shared pydantic settings for sedinit models.

Two flavours are used across the package:

- ``SedBaseModel`` for configuration layers that are built up and checked
  (ParamConfig, CLIConfig) and for GridGeometry, whose fine cell count is
  filled in after construction.
- ``FrozenSedModel`` for values that must not change once setup hands them
  on: the resolved InternalConfig, process switches, calibration constants
  and erosion periods.

Unknown keys are an error in both, so a misspelled option in a parameter
dict is reported instead of silently ignored.
"""

from pydantic import BaseModel, ConfigDict

STRICT = ConfigDict(
    extra='forbid',
    validate_assignment=True,
    use_enum_values=True,
    str_strip_whitespace=True,
)

FROZEN = ConfigDict(**STRICT, frozen=True)


class SedBaseModel(BaseModel):
    model_config = STRICT


class FrozenSedModel(SedBaseModel):
    model_config = FROZEN
