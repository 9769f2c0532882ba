"""
Command-line entry point for the NextBus feed client.

    python main.py --method predictions --agency ttc --route 510 --stop 14339
"""
import argparse
import logging
import sys

from settings import get_settings
from src.nextbus.client import NextBusClient
from src.nextbus.errors import NextBusError
from src.nextbus.render import (
    render_agency,
    render_list,
    render_predictions,
    render_route,
    render_route_config,
    render_schedule,
    render_vehicle_locations,
)

logger = logging.getLogger(__name__)

METHODS = ("agencies", "routes", "stops", "predictions", "schedule", "locations")


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Query the NextBus public JSON feed")
    parser.add_argument(
        "--method",
        default="agencies",
        choices=METHODS,
        help="Available methods: " + ", ".join(METHODS),
    )
    parser.add_argument("--agency", default=settings.default_agency, help="Agency tag (e.g. ttc)")
    parser.add_argument("--route", default=settings.default_route, help="Route tag (e.g. 510)")
    parser.add_argument("--stop", default=settings.default_stop, help="Stop tag, for predictions")
    parser.add_argument(
        "--timeout",
        default=settings.request_timeout_seconds,
        type=float,
        help="HTTP timeout in seconds",
    )
    parser.add_argument("--api-url", default=settings.api_url, help="Feed endpoint")
    parser.add_argument("--log-level", default=settings.log_level, help="Logging level (DEBUG, INFO, ...)")
    return parser


def run_method(client: NextBusClient, args: argparse.Namespace) -> tuple[str, str]:
    """Dispatch one --method to the client; returns (heading, rendered text)."""
    if args.method == "locations":
        return "Vehicle Locations:", render_vehicle_locations(client.get_vehicle_locations(args.agency, args.route))
    if args.method == "routes":
        return "Route List:", render_list(client.get_route_list(args.agency), render_route)
    if args.method == "stops":
        return "Route Stops:", render_route_config(client.get_route_config(args.agency, args.route))
    if args.method == "predictions":
        return "Predictions:", render_predictions(client.get_predictions(args.agency, args.route, args.stop))
    if args.method == "schedule":
        return "Schedule:", render_list(client.get_schedule(args.agency, args.route), render_schedule)
    return "Agency List:", render_list(client.get_agency_list(), render_agency)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.WARNING),
        format="%(levelname)s %(name)s %(message)s",
    )

    try:
        client = NextBusClient(base_url=args.api_url, timeout=args.timeout)
        heading, text = run_method(client, args)
    except NextBusError as e:
        logger.error("telemetry nextbus_failed method=%s error=%s", args.method, str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(heading)
    print(text)
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
