"""Command-line interface for querying charging-station metrics."""

import argparse
import asyncio
import logging
import sys

from ev_charging_insights.adapters.config import AppConfig, FilterCriteriaLoader
from ev_charging_insights.adapters.console import create_dashboard_view
from ev_charging_insights.domain.models import ALL, StatusCategory
from ev_charging_insights.logging_config import configure_logging
from ev_charging_insights.main import load_coordinator

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with the query and options subcommands."""
    parser = argparse.ArgumentParser(
        prog="ev-insights",
        description="Normalized, filterable metrics over charging-station records",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  ev-insights query --region VIC --status operational
  ev-insights query --city Springvale --json
  ev-insights options --source https://example.org/stations.json
        """,
    )
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--source", help="JSON file path or http(s) URL of the station data")
    common.add_argument("--config", help="Path to a TOML configuration file")
    common.add_argument("--json", action="store_true", help="Output as JSON")
    common.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    query_parser = subparsers.add_parser(
        "query", parents=[common], help="Show metrics and expansion suggestions"
    )
    query_parser.add_argument("--region", help=f"Region code, e.g. VIC (default: {ALL})")
    query_parser.add_argument("--city", help=f"City name (default: {ALL})")
    query_parser.add_argument("--town", help=f"Town name (default: {ALL})")
    query_parser.add_argument(
        "--status",
        choices=[ALL, *(category.value for category in StatusCategory)],
        help=f"Status category (default: {ALL})",
    )

    subparsers.add_parser("options", parents=[common], help="List the selectable filter values")
    return parser


def build_config(args: argparse.Namespace) -> AppConfig:
    """Create the app config, with command-line flags taking precedence."""
    overrides = {}
    if args.config:
        overrides["config_file"] = args.config
    return AppConfig(**overrides)


async def run(args: argparse.Namespace) -> int:
    """Execute the selected command and return the process exit code."""
    config = build_config(args)
    configure_logging(logging.DEBUG if args.verbose else config.log_level_value)

    try:
        criteria = FilterCriteriaLoader.load(config)
    except (ValueError, FileNotFoundError) as e:
        logger.error(f"Invalid configuration: {e}")
        return 1

    # Flags win over TOML settings, which are applied while loading the criteria
    if args.source:
        config.data_source = args.source
    if args.json:
        config.output_format = "json"

    view = create_dashboard_view(config)
    coordinator = await load_coordinator(config, view)
    if coordinator is None:
        return 1

    if args.command == "options":
        view.render_options(coordinator.filter_options())
        return 0

    criteria = FilterCriteriaLoader.apply_overrides(
        criteria,
        {
            "region": args.region,
            "city": args.city,
            "town": args.town,
            "status": args.status,
        },
    )
    view.render(coordinator.run_query(criteria))
    return 0


def cli_main(argv: list[str] | None = None) -> None:
    """Entry point for the ev-insights console script."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    sys.exit(asyncio.run(run(args)))


if __name__ == "__main__":
    cli_main()
