"""
entrypoints.py - Application entry points v1.0

Provides logging setup, the `seatmap` CLI and the API server entry point.

CLI output is JSON on stdout; logs go to stderr so output can be piped.
"""

from __future__ import annotations
from typing import Any, List, Optional, Tuple
import argparse
import json
import logging
import sys

import uvicorn

from seatmap.app import create_app
from seatmap.builder import build_custom_template
from seatmap.catalog import get_template, get_templates_by_bus_type, list_all_templates
from seatmap.config import SeatmapConfig, load_config
from seatmap.errors import SeatLayoutError
from seatmap.validators import validate_seat_layout_for_bus_type

__all__ = [
    'setup_logging',
    'cli_main',
    'api_main',
    'main',
]

logger = logging.getLogger(__name__)

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class JSONFormatter(logging.Formatter):
    def format(self, record):
        return json.dumps({
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        })


def setup_logging(
    level: str = "INFO",
    log_file: str = None,
    json_format: bool = False,
    fmt: str = DEFAULT_LOG_FORMAT,
) -> None:
    """
    Configure application logging.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        log_file: Optional log file path
        json_format: Use JSON format for logs
        fmt: Format string for plain-text logs
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    if json_format:
        formatter = JSONFormatter()
    else:
        formatter = logging.Formatter(fmt)

    # Console handler
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(log_level)

    # Root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.addHandler(console_handler)

    # File handler
    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        file_handler.setLevel(log_level)
        root_logger.addHandler(file_handler)

    # Reduce noise from third-party libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


def _setup_logging_from_config(config: SeatmapConfig, level: Optional[str], log_file: Optional[str]) -> None:
    setup_logging(
        level=level or config.logging.level,
        log_file=log_file or config.logging.log_file,
        json_format=config.logging.json_logs,
        fmt=config.logging.format,
    )


def _emit(payload: Any) -> None:
    print(json.dumps(payload, indent=2, ensure_ascii=False))


def _parse_position(value: str) -> Tuple[int, int]:
    """'row,col' -> (row, col)"""
    try:
        row, col = value.split(",")
        return int(row), int(col)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected ROW,COL, got {value!r}")


# =============================================================================
# CLI
# =============================================================================

def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Bus seat layout templates, builder and validator",
        prog="seatmap",
    )

    parser.add_argument(
        "-c", "--config",
        help="Path to configuration file",
        default=None,
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Log level",
    )
    parser.add_argument(
        "--log-file",
        help="Log file path",
        default=None,
    )

    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("api", help="Start the API server (see 'seatmap api --help')")

    templates = commands.add_parser("templates", help="List catalog templates")
    templates.add_argument("--bus-type", default=None, help="Only templates for this bus type")

    template = commands.add_parser("template", help="Show one catalog template")
    template.add_argument("bus_type")
    template.add_argument("template_key")

    build = commands.add_parser("build", help="Build a custom layout")
    build.add_argument("--bus-type", required=True)
    build.add_argument("--rows", type=int, required=True)
    build.add_argument("--columns", type=int, default=None)
    build.add_argument("--floors", type=int, default=None)
    build.add_argument("--pattern", default=None)
    build.add_argument(
        "--empty",
        type=_parse_position,
        action="append",
        default=None,
        metavar="ROW,COL",
        help="Leave a cell empty (repeatable)",
    )

    validate = commands.add_parser("validate", help="Validate a layout JSON file")
    validate.add_argument("file", help="JSON file holding a seat layout")
    validate.add_argument("--bus-type", required=True)

    return parser


def cli_main(args: List[str] = None) -> int:
    """
    CLI entry point.

    Args:
        args: Command line arguments (defaults to sys.argv)

    Returns:
        Exit code: 0 on success, 1 if a template is missing or a layout
        is invalid, 2 if a build request is rejected
    """
    if args is None:
        args = sys.argv[1:]
    if args and args[0] == "api":
        api_main(args[1:])
        return 0

    parser = _build_parser()
    parsed = parser.parse_args(args)

    config = load_config(parsed.config)
    log_level = "DEBUG" if parsed.verbose else parsed.log_level
    _setup_logging_from_config(config, log_level, parsed.log_file)

    try:
        if parsed.command == "templates":
            if parsed.bus_type:
                templates = get_templates_by_bus_type(parsed.bus_type)
                _emit({
                    "bus_type": parsed.bus_type,
                    "templates": {key: t.to_dict() for key, t in templates.items()},
                })
            else:
                summaries = [s.to_dict() for s in list_all_templates()]
                _emit({"templates": summaries, "total": len(summaries)})
            return 0

        if parsed.command == "template":
            found = get_template(parsed.bus_type, parsed.template_key)
            if found is None:
                _emit({"error": f"Template not found: {parsed.bus_type}/{parsed.template_key}"})
                return 1
            _emit({"template": found.to_dict()})
            return 0

        if parsed.command == "build":
            request = {
                "bus_type": parsed.bus_type,
                "rows": parsed.rows,
                "columns": parsed.columns,
                "floors": parsed.floors,
                "pattern": parsed.pattern,
                "empty_positions": parsed.empty,
            }
            try:
                built = build_custom_template(request, limits=config.limits)
            except SeatLayoutError as e:
                _emit({"error": e.to_dict()})
                return 2
            _emit({"seat_layout": built.to_dict()})
            return 0

        if parsed.command == "validate":
            with open(parsed.file) as f:
                seat_layout = json.load(f)
            result = validate_seat_layout_for_bus_type(
                seat_layout,
                parsed.bus_type,
                limits=config.limits,
            )
            _emit(result.to_dict())
            return 0 if result.valid else 1

        parser.error(f"unknown command: {parsed.command}")

    except KeyboardInterrupt:
        print("\nInterrupted", file=sys.stderr)
        return 130
    except Exception as e:
        logger.exception(f"Fatal error: {e}")
        return 1


# =============================================================================
# API SERVER
# =============================================================================

def api_main(args: List[str] = None) -> None:
    """
    API server entry point.

    Args:
        args: Command line arguments
    """
    parser = argparse.ArgumentParser(
        description="Seatmap API Server",
        prog="seatmap api",
    )

    parser.add_argument(
        "-c", "--config",
        help="Path to configuration file",
        default=None,
    )
    parser.add_argument(
        "-p", "--port",
        type=int,
        help="API port",
        default=None,
    )
    parser.add_argument(
        "-H", "--host",
        help="API host",
        default=None,
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Log level",
    )

    parsed = parser.parse_args(args)

    config = load_config(parsed.config)
    _setup_logging_from_config(config, parsed.log_level, None)

    # Override config with CLI args
    if parsed.port:
        config.api.port = parsed.port
    if parsed.host:
        config.api.host = parsed.host

    try:
        app = create_app(config)
        logger.info(f"Starting API server on {config.api.host}:{config.api.port}")
        uvicorn.run(app, host=config.api.host, port=config.api.port)

    except KeyboardInterrupt:
        print("\nShutting down...", file=sys.stderr)
    except Exception as e:
        logger.exception(f"Fatal error: {e}")
        sys.exit(1)


def main():
    """Main entry point for the package."""
    sys.exit(cli_main(sys.argv[1:]))


if __name__ == "__main__":
    main()
