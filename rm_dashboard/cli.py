# rm_dashboard/cli.py
# Command-line interface entry point (argparse)
import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Dict, List, Optional, Sequence

import pandas as pd

from rm_dashboard.avatars import generate_avatar, generate_client_avatars, svg_to_data_url
from rm_dashboard.config import (
    ConfigLoadError,
    DashboardConfig,
    RetirementInputs,
    load_clients,
    load_dashboard_config,
)
from rm_dashboard.projections import project_retirement_corpus
from rm_dashboard.projections.reporting import (
    plot_retirement_projection,
    save_projection_results,
    summarize_projection,
)
from rm_dashboard.risk import get_risk_category_breakdown

# Import logging configuration
from logging_config import DEFAULT_LOG_DIR, ERROR_LOGGER, setup_logging

# Get logger for this module
logger = logging.getLogger(__name__)

RETIREMENT_FIELDS = list(RetirementInputs.model_fields)


def parse_arguments(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="rm-dashboard",
        description="Relationship-manager dashboard utilities: avatars, retirement projections, risk profiling.",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--log-dir",
        type=str,
        default=str(DEFAULT_LOG_DIR),
        help=f"Directory to store log files (default: {DEFAULT_LOG_DIR})",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # avatar
    avatar = subparsers.add_parser("avatar", help="Generate the SVG avatar for one client")
    avatar.add_argument("name", help="Client full name (avatar seed)")
    avatar.add_argument("--tier", default="silver", help="silver, gold or platinum (default: silver)")
    avatar.add_argument("--gender", default="neutral", help="Accepted for compatibility; does not change the avatar")
    avatar.add_argument("--data-url", action="store_true", help="Print a data URL instead of SVG markup")
    avatar.add_argument("--base64", action="store_true", help="Use base64 for the data URL")
    avatar.add_argument("--output", type=str, default=None, help="Write to this file instead of stdout")

    # client-avatars
    batch = subparsers.add_parser("client-avatars", help="Generate avatar data URLs for a client list")
    batch.add_argument("clients", help="CSV, JSON or YAML file with id, fullName/full_name and tier")
    batch.add_argument("--output", type=str, default=None, help="Write the JSON map to this file")

    # project
    project = subparsers.add_parser("project", help="Run a retirement corpus projection")
    project.add_argument("--config", type=str, default=None, help="YAML file with a 'retirement' section")
    project.add_argument("--current-age", type=int)
    project.add_argument("--retirement-age", type=int)
    project.add_argument("--current-corpus", type=float)
    project.add_argument("--monthly-contribution", type=float)
    project.add_argument("--expected-return", type=float)
    project.add_argument("--monthly-expense-after-retirement", type=float)
    project.add_argument("--inflation-rate", type=float)
    project.add_argument("--horizon-age", type=int)
    project.add_argument("--output-dir", type=str, default=None, help="Directory for CSV/summary output")
    project.add_argument("--scenario-name", type=str, default="retirement_projection")
    project.add_argument("--plot", action="store_true", help="Also save a PNG chart (needs --output-dir)")

    # risk
    risk = subparsers.add_parser("risk", help="Compute a client's final risk category")
    risk.add_argument("--rp", type=float, required=True, help="Risk profiling score (0-75)")
    risk.add_argument("--kp", type=float, default=None, help="Knowledge profiling score (0-45)")
    risk.add_argument(
        "--answer",
        action="append",
        default=[],
        metavar="CATEGORY=TEXT",
        help="Questionnaire answer used by ceiling rules; may be repeated",
    )
    risk.add_argument("--config", type=str, default=None, help="YAML file with a 'risk_profiling' section")

    return parser.parse_args(argv)


def initialize_logging(debug: bool = False, log_dir: Path = DEFAULT_LOG_DIR) -> None:
    """Initialize the logging configuration.

    Args:
        debug: Whether to enable debug logging
        log_dir: Directory to store log files
    """
    try:
        setup_logging(log_dir=log_dir, debug=debug)
        logger.info("Starting rm-dashboard")
        logger.info(f"Command line arguments: {sys.argv}")
        logger.info(f"Python version: {sys.version}")
        logger.info(f"Pandas version: {pd.__version__}")
        if debug:
            logger.debug("Debug logging enabled")
    except Exception as e:
        print(f"Error initializing logging: {e}", file=sys.stderr)
        raise


def _load_config(path: Optional[str]) -> DashboardConfig:
    if path:
        config = load_dashboard_config(path)
        numeric_level = getattr(logging, config.log_level.upper(), logging.INFO)
        logging.getLogger().setLevel(numeric_level)
        logger.info(f"Logging level set to: {config.log_level.upper()}")
        return config
    return DashboardConfig()


def _write_or_print(text: str, output: Optional[str]) -> None:
    if output:
        out_path = Path(output)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(text, encoding="utf-8")
        logger.info(f"Wrote {len(text)} characters to {out_path}")
    else:
        print(text)


def _parse_answers(pairs: List[str]) -> Dict[str, List[str]]:
    answers: Dict[str, List[str]] = {}
    for pair in pairs:
        category, sep, text = pair.partition("=")
        if not sep or not category.strip():
            raise ValueError(f"Answers must look like CATEGORY=TEXT, got {pair!r}")
        answers.setdefault(category.strip(), []).append(text.strip())
    return answers


def run_avatar(args: argparse.Namespace) -> int:
    svg = generate_avatar(args.name, args.tier, args.gender)
    text = svg_to_data_url(svg, base64=args.base64) if (args.data_url or args.base64) else svg
    _write_or_print(text, args.output)
    return 0


def run_client_avatars(args: argparse.Namespace) -> int:
    clients = load_clients(args.clients)
    avatars = generate_client_avatars(clients)
    payload = json.dumps({str(client_id): url for client_id, url in avatars.items()}, indent=2)
    _write_or_print(payload, args.output)
    return 0


def run_project(args: argparse.Namespace) -> int:
    config = _load_config(args.config)

    overrides = {
        name: getattr(args, name)
        for name in RETIREMENT_FIELDS
        if getattr(args, name, None) is not None
    }
    inputs = RetirementInputs(**{**config.retirement.model_dump(), **overrides})
    logger.info(f"Projection inputs: {inputs.model_dump()}")

    projection = project_retirement_corpus(**inputs.model_dump())

    output_dir = args.output_dir or config.output_directory
    if output_dir:
        save_projection_results(projection, Path(output_dir), args.scenario_name)
        if args.plot:
            plot_retirement_projection(projection, Path(output_dir) / f"{args.scenario_name}.png")
    elif args.plot:
        logger.warning("--plot needs an output directory; skipping chart")

    print(projection.to_frame().to_string(index=False))
    print()
    for key, value in summarize_projection(projection).items():
        print(f"{key}: {value}")
    return 0


def run_risk(args: argparse.Namespace) -> int:
    config = _load_config(args.config)
    breakdown = get_risk_category_breakdown(
        args.kp,
        args.rp,
        _parse_answers(args.answer),
        config.risk_profiling.ranges,
        config.risk_profiling.ceiling_rules,
    )
    print(json.dumps(breakdown.model_dump(mode="json"), indent=2))
    return 0


COMMANDS = {
    "avatar": run_avatar,
    "client-avatars": run_client_avatars,
    "project": run_project,
    "risk": run_risk,
}


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the rm-dashboard CLI."""
    err_logger = logging.getLogger(ERROR_LOGGER)

    args = parse_arguments(argv)
    initialize_logging(debug=args.debug, log_dir=Path(args.log_dir))
    logger.info(f"Running command {args.command!r} with arguments: {vars(args)}")

    try:
        return COMMANDS[args.command](args)
    except ConfigLoadError as e:
        err_logger.error(f"Configuration error: {e}")
        return 1
    except Exception as e:
        err_logger.exception(f"Command {args.command!r} failed: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
