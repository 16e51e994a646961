"""Configuration resolution and merging logic.

This module provides the single entrypoint for configuration resolution:
resolve_config(). It merges ParamConfig and CLIConfig in precedence order
and returns a validated InternalConfig.

Precedence (highest to lowest):
1. CLIConfig (command-line overrides)
2. ParamConfig (expert defaults)
"""

from typing import Union, Optional
from sedinit.schemas.param import ParamConfig
from sedinit.schemas.cli import CLIConfig
from sedinit.schemas.internal import InternalConfig


def deep_merge(base: dict, override: dict) -> dict:
    """Overlay CLI overrides on the parameter dump, section by section.

    A section present on both sides is merged key by key; any other value in
    ``override`` replaces the one in ``base``. Neither argument is modified.

    Examples
    --------
    >>> deep_merge({"road": {"cell_factor": 24}, "logging": {"level": "INFO"}},
    ...            {"road": {"cell_factor": 48}})
    {'road': {'cell_factor': 48}, 'logging': {'level': 'INFO'}}
    """
    keys = dict.fromkeys([*base, *override])
    return {key: _merge_value(base.get(key), override.get(key, base.get(key))) for key in keys}


def _merge_value(lower, upper):
    if isinstance(lower, dict) and isinstance(upper, dict):
        return deep_merge(lower, upper)
    if isinstance(upper, dict):
        return deep_merge(upper, {})
    return upper


def resolve_config(
    param_cfg: Union[dict, ParamConfig, None] = None,
    cli_cfg: Optional[Union[dict, CLIConfig]] = None,
) -> InternalConfig:
    """Resolve final runtime configuration from param and CLI configs.

    Parameters
    ----------
    param_cfg : dict or ParamConfig, optional
        Expert configuration with complete defaults. ``None`` uses ParamConfig().
    cli_cfg : dict or CLIConfig, optional
        Command-line overrides. If None or empty, no CLI overrides applied.

    Returns
    -------
    InternalConfig
        Fully validated, immutable runtime configuration

    Raises
    ------
    ValidationError
        If any config fails Pydantic validation

    Examples
    --------
    >>> config = resolve_config(ParamConfig(), CLIConfig(cell_factor=24))
    >>> config.road.cell_factor
    24
    """
    if param_cfg is None:
        param = ParamConfig()
    elif not isinstance(param_cfg, ParamConfig):
        param = ParamConfig.model_validate(param_cfg)
    else:
        param = param_cfg

    if cli_cfg is None or (isinstance(cli_cfg, dict) and not cli_cfg):
        cli = CLIConfig()
    elif not isinstance(cli_cfg, CLIConfig):
        cli = CLIConfig.model_validate(cli_cfg)
    else:
        cli = cli_cfg

    merged = deep_merge(param.model_dump(), cli.to_internal_overrides())

    return InternalConfig.model_validate(merged)
