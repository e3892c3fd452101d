"""CLI argument parsing and main entry point."""

from __future__ import annotations

import argparse
import json
import math
import sys
from typing import TYPE_CHECKING, TypeVar

import filmstrip_layout.config as fl_config
from filmstrip_layout.events import (
    set_horizontal_view_dimensions,
    set_tile_view_dimensions,
)
from filmstrip_layout.logging_utils import logger, set_verbosity
from filmstrip_layout.preview import save_tile_preview
from filmstrip_layout.runtime.grid_shape import resolve_grid_shape
from filmstrip_layout.runtime.version import resolve_project_version
from filmstrip_layout.type_defs import GridShape, ViewportSize

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Callable, Sequence

    from filmstrip_layout.events import LayoutEvent
    from filmstrip_layout.type_defs import LayoutFlags

T = TypeVar("T")

MODE_CHOICES = ("tile", "horizontal", "both")


def positive_int(text: str) -> int:
    """Argparse-style validator that enforces a strictly positive integer."""
    try:
        value = int(text)
    except ValueError as exc:
        msg = "must be an integer"
        raise ValueError(msg) from exc
    if value <= 0:
        msg = "must be positive"
        raise ValueError(msg)
    return value


def non_negative_float(text: str) -> float:
    """Argparse-style validator for pixel sizes that may be zero."""
    try:
        value = float(text)
    except ValueError as exc:
        msg = "must be a number"
        raise ValueError(msg) from exc
    if not math.isfinite(value):
        msg = "must be a finite number"
        raise ValueError(msg)
    if value < 0:
        msg = "must not be negative"
        raise ValueError(msg)
    return value


def _wrap_validator(
    validator: Callable[[str], T],
) -> Callable[[str], T]:
    """Convert ``ValueError`` from a validator into ``ArgumentTypeError``."""

    def wrapper(text: str) -> T:
        try:
            return validator(text)
        except ValueError as exc:
            raise argparse.ArgumentTypeError(str(exc)) from exc

    return wrapper


def build_arg_parser() -> argparse.ArgumentParser:
    """Construct the argument parser for the command-line interface."""
    p = argparse.ArgumentParser(
        prog="filmstrip-layout",
        description="Compute filmstrip thumbnail sizes for tile and "
                    "horizontal views",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "filmstrip-layout --width 1280 --height 720 "
            "--columns 4 --rows 2\n"
            "filmstrip-layout --width 1920 --height 1080 "
            "--participants 7 --panel-open\n"
            "filmstrip-layout --height 480 --mode horizontal\n"
        ),
    )
    p.add_argument(
        "--version", action="version",
        version=f"%(prog)s {resolve_project_version()}")

    viewport = p.add_argument_group("viewport")
    viewport.add_argument(
        "--width", type=_wrap_validator(non_negative_float), default=0.0,
        help="Viewport width in pixels")
    viewport.add_argument(
        "--height", type=_wrap_validator(non_negative_float), default=0.0,
        help="Viewport height in pixels")

    grid = p.add_argument_group("grid")
    grid.add_argument(
        "--columns", type=_wrap_validator(positive_int),
        help="Tile view columns (requires --rows)")
    grid.add_argument(
        "--rows", type=_wrap_validator(positive_int),
        help="Tile view rows (requires --columns)")
    grid.add_argument(
        "--participants", type=_wrap_validator(positive_int),
        help="Derive the grid shape from a participant count")
    grid.add_argument(
        "--max-columns", type=_wrap_validator(positive_int),
        help="Upper bound on columns when using --participants")

    layout = p.add_argument_group("layout")
    layout.add_argument(
        "--mode", choices=MODE_CHOICES, default="both",
        help="Which layouts to compute (default: both)")
    layout.add_argument(
        "--panel-open", action="store_true",
        help="Reserve the side panel width from the viewport")
    layout.add_argument(
        "--panel-width", type=_wrap_validator(positive_int),
        help="Reserved side panel width in pixels")
    layout.add_argument(
        "--disable-responsive", action="store_true",
        help="Use the fixed default tile size")

    output = p.add_argument_group("output")
    output.add_argument(
        "--preview", type=str,
        help="Write a PNG wireframe of the tile layout to this path")
    output.add_argument(
        "--indent", type=int, default=2,
        help="JSON indentation (default: 2)")
    output.add_argument(
        "-v", "--verbose", action="store_true",
        help="Log every computed thumbnail size")

    cfg = p.add_argument_group("config")
    cfg.add_argument(
        "--config", type=str,
        help="Path to config.toml file")
    cfg.add_argument(
        "--validate-config-only", action="store_true",
        help="Validate config file and exit without computing layouts")

    return p


def log_parameters(
    viewport: ViewportSize,
    flags: LayoutFlags,
    grid_shape: GridShape | None,
    args: argparse.Namespace,
) -> None:
    """Log the effective layout inputs."""
    if getattr(args, "config", None):
        logger.info("Loaded config from: %s", args.config)
    logger.info("Viewport: %gx%g", viewport.width, viewport.height)
    if grid_shape is not None:
        logger.info("Grid: %d columns x %d rows",
                    grid_shape.columns, grid_shape.rows)
    logger.info("Side Panel: %s (%g px)",
                "Open" if flags.panel_open else "Closed",
                flags.panel_reserved_width)
    logger.info("Responsive Tiles: %s",
                "Disabled" if flags.responsive_disabled else "Enabled")


def resolve_cli_grid_shape(
    args: argparse.Namespace,
    cfg: fl_config.FilmstripLayoutConfig,
) -> GridShape | None:
    """Return the grid shape requested on the command line, if any."""
    if args.columns is not None or args.rows is not None:
        if args.columns is None or args.rows is None:
            msg = "--columns and --rows must be given together"
            raise ValueError(msg)
        if args.participants is not None:
            msg = "--participants cannot be combined with --columns/--rows"
            raise ValueError(msg)
        return GridShape(columns=args.columns, rows=args.rows)
    if args.participants is not None:
        return resolve_grid_shape(args.participants,
                                  cfg.tile_view.max_columns)
    return None


def run_from_args(args: argparse.Namespace) -> list[LayoutEvent]:
    """Compute the requested layouts and print them as JSON."""
    base_cfg: fl_config.FilmstripLayoutConfig | None = None
    if args.config:
        base_cfg = fl_config.ConfigLoader.load(args.config)
        if args.validate_config_only:
            logger.info("Config %s validated successfully.", args.config)
            sys.exit(0)

    cfg = fl_config.build_config_from_cli(vars(args), base_config=base_cfg)
    settings = fl_config.settings_from_config(cfg)
    flags = fl_config.flags_from_config(cfg)
    viewport = ViewportSize(width=args.width, height=args.height)
    grid_shape = resolve_cli_grid_shape(args, cfg)
    log_parameters(viewport, flags, grid_shape, args)

    events: list[LayoutEvent] = []
    if args.mode in ("tile", "both"):
        if grid_shape is None:
            msg = "tile view needs --columns/--rows or --participants"
            raise ValueError(msg)
        tile_event = set_tile_view_dimensions(
            grid_shape, viewport, flags, settings=settings)
        events.append(tile_event)
        if args.preview:
            save_tile_preview(args.preview, tile_event.dimensions,
                              viewport, flags, settings=settings)
    if args.mode in ("horizontal", "both"):
        events.append(set_horizontal_view_dimensions(
            args.height, settings=settings))

    print(json.dumps([event.to_dict() for event in events],
                     indent=args.indent))
    return events


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command-line interface."""
    arg_parser = build_arg_parser()
    args = arg_parser.parse_args(argv)
    if args.validate_config_only and not args.config:
        arg_parser.error("--validate-config-only requires --config")
    set_verbosity(verbose=args.verbose)

    try:
        run_from_args(args)
    except ValueError as exc:
        arg_parser.error(str(exc))

    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
