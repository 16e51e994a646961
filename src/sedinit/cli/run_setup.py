"""Core sediment setup execution logic.

This module contains the actual setup runner, separated from argument parsing.
Scripts are thin wrappers; this is the real implementation.
"""

import sys
import json
import argparse
import logging
from pathlib import Path
from typing import Optional, Dict, Any

from sedinit.contracts.failure import SetupError
from sedinit.io.grid_loader import load_basin_grid
from sedinit.io.input_file import InputStore
from sedinit.pipeline.initializer import SedimentSetup, init_sediment_parameters
from sedinit.schemas import resolve_config, ParamConfig, CLIConfig


logger = logging.getLogger(__name__)

# sysexits EX_NOINPUT
EXIT_NO_INPUT = 66


def _int_at_least(minimum: int):
    """argparse type for integers with a lower bound."""
    def _parse(value: str) -> int:
        try:
            number = int(value)
        except ValueError:
            raise argparse.ArgumentTypeError(f"expected an integer, got {value!r}") from None
        if number < minimum:
            raise argparse.ArgumentTypeError(f"must be at least {minimum}, got {number}")
        return number
    return _parse


def _setup_logging(level: str) -> None:
    """Configure the root logger with a console handler."""
    log_level = getattr(logging, level.upper(), logging.INFO)

    formatter = logging.Formatter(
        fmt='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    root = logging.getLogger()
    root.setLevel(log_level)
    for handler in root.handlers[:]:
        root.removeHandler(handler)

    ch = logging.StreamHandler()
    ch.setLevel(log_level)
    ch.setFormatter(formatter)
    root.addHandler(ch)


def run_sediment_setup(
    input_path: str,
    grid_path: str,
    cli_args: Optional[Dict[str, Any]] = None,
    verbose: bool = False,
) -> SedimentSetup:
    """Execute sediment setup for one model input file and basin grid.

    1. Resolves configuration (Param < CLI)
    2. Loads the input file and the basin grid
    3. Runs all setup stages

    Parameters
    ----------
    input_path : str
        Sectioned model input file.
    grid_path : str
        NetCDF basin grid (mask, optional road_area, dy attribute).
    cli_args : dict, optional
        CLI overrides. Keys: log_level, n_sed_sizes, cell_factor.
    verbose : bool, optional
        If True, enable DEBUG logging.

    Returns
    -------
    SedimentSetup

    Raises
    ------
    FileNotFoundError
        If either file does not exist.
    SetupError
        If the input is missing values, malformed, or contradictory.
    """
    cli_args = dict(cli_args or {})
    if verbose and cli_args.get("log_level") is None:
        cli_args["log_level"] = "DEBUG"

    cli_dict = {k: v for k, v in cli_args.items() if v is not None}
    cli_cfg = CLIConfig.model_validate(cli_dict) if cli_dict else CLIConfig()

    config = resolve_config(ParamConfig(), cli_cfg)
    _setup_logging(config.logging.level)

    store = InputStore.from_file(
        input_path,
        buffer_size=config.input.buffer_size,
        comment_prefixes=config.input.comment_prefixes,
    )
    grid = load_basin_grid(grid_path)

    return init_sediment_parameters(store, grid, config)


def _print_summary(setup: SedimentSetup, input_path: str) -> None:
    geometry = setup.geometry

    print(f"\n{'='*60}")
    print("Sediment Setup")
    print('='*60)
    print(f"Input:      {input_path}")
    for name, enabled in setup.options.model_dump().items():
        print(f"  {name:16s}: {enabled}")
    print(f"Fine grid:  {geometry.ny_fine} x {geometry.nx_fine} (dmass={geometry.dmass})")
    print(f"Diameters:  {', '.join(f'{d:.4g}' for d in setup.diameters)}")
    print(f"Road cells: {len(setup.road_cells)}")
    if setup.schedule is not None:
        print("Erosion periods:")
        print(setup.schedule.to_frame().to_string(index=False))
    print('='*60)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run sediment setup for a model input file")
    parser.add_argument("input", help="Path to model input file")
    parser.add_argument("grid", help="Path to NetCDF basin grid")
    parser.add_argument("--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
                        help="Override log level")
    parser.add_argument("--n-sed-sizes", type=_int_at_least(2),
                        help="Number of sediment size classes (at least 2)")
    parser.add_argument("--cell-factor", type=_int_at_least(1),
                        help="Sub-daily steps per road buffer (at least 1)")
    parser.add_argument("--json", action="store_true", help="Print the setup summary as JSON")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    try:
        setup = run_sediment_setup(
            args.input,
            args.grid,
            cli_args={
                "log_level": args.log_level,
                "n_sed_sizes": args.n_sed_sizes,
                "cell_factor": args.cell_factor,
            },
            verbose=args.verbose,
        )
    except SetupError as e:
        logger.error("Sediment setup failed: %s", e)
        print(f"ERROR: {e}", file=sys.stderr)
        return e.code
    except FileNotFoundError as e:
        logger.error("Sediment setup failed: %s", e)
        print(f"ERROR: {e}", file=sys.stderr)
        return EXIT_NO_INPUT

    if args.json:
        print(json.dumps(setup.summary(), indent=2))
    else:
        _print_summary(setup, str(Path(args.input)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
