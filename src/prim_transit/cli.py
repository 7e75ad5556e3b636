"""Command-line access to the PRIM real-time APIs."""

import argparse
import asyncio
import json
import logging
import sys
from dataclasses import asdict, is_dataclass
from datetime import datetime
from typing import Any

import aiohttp

from prim_transit.adapters.config import AppConfig
from prim_transit.adapters.prim_api import AiohttpTransport, PrimClient
from prim_transit.application.services import BulkPassagesService, LateChanceService
from prim_transit.domain.errors import PrimError
from prim_transit.domain.identifiers import to_canonical_line, to_canonical_stop
from prim_transit.domain.models import BulkPassagesResult, TransportMode
from prim_transit.domain.ports import TransitClient

logger = logging.getLogger(__name__)


def _json_default(value: Any) -> Any:
    """Serialize values json does not handle natively."""
    if isinstance(value, datetime):
        return value.isoformat()
    return str(value)


def to_jsonable(value: Any) -> Any:
    """Convert domain objects (dataclasses, lists of them) to plain JSON data."""
    if isinstance(value, BulkPassagesResult):
        return {
            "results": [asdict(result) for result in value.results],
            "summary": {
                "requested": value.requested,
                "success": value.success,
                "errors": value.errors,
            },
        }
    if is_dataclass(value) and not isinstance(value, type):
        return asdict(value)
    if isinstance(value, list):
        return [to_jsonable(item) for item in value]
    return value


def format_json(value: Any) -> str:
    return json.dumps(to_jsonable(value), indent=2, ensure_ascii=False, default=_json_default)


def _setup_argparse() -> argparse.ArgumentParser:
    """Set up and configure argument parser."""
    parser = argparse.ArgumentParser(
        prog="prim-transit",
        description="Île-de-France Mobilités real-time data (PRIM)",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Next passages at a stop (any identifier format)
  prim-transit passages 22089
  prim-transit passages "STIF:StopPoint:Q:22089:"

  # Traffic status of all metro lines, or of one line
  prim-transit trafic --mode Metro
  prim-transit trafic --line C01371

  # Search stations and lines
  prim-transit search "Châtelet" --type stop

  # Inspect how an identifier is resolved (no network)
  prim-transit canonical monomodalStopPlace:47918

Requires PRIM_API_KEY: https://prim.iledefrance-mobilites.fr/
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    passages_parser = subparsers.add_parser("passages", help="Next passages at a stop")
    passages_parser.add_argument("stop_id", help="Stop ID (e.g., 22089)")

    line_passages_parser = subparsers.add_parser(
        "line-passages", help="Passages of a line at all of its stops"
    )
    line_passages_parser.add_argument("line_id", help="Line ID (e.g., C01371)")

    trafic_parser = subparsers.add_parser("trafic", help="Traffic status of lines")
    trafic_group = trafic_parser.add_mutually_exclusive_group()
    trafic_group.add_argument(
        "--mode", choices=[mode.value for mode in TransportMode], help="Restrict to one mode"
    )
    trafic_group.add_argument("--line", help="Restrict to one line (e.g., C01371)")

    messages_parser = subparsers.add_parser("messages", help="Station screen messages")
    messages_parser.add_argument("--line", help="Restrict to one line (e.g., C01742)")

    subparsers.add_parser("disruptions", help="Traffic status from all ongoing disruptions")

    line_stops_parser = subparsers.add_parser("line-stops", help="Stations served by a line")
    line_stops_parser.add_argument("line_id", help="Line ID (e.g., C01371)")

    search_parser = subparsers.add_parser("search", help="Search stations and lines")
    search_parser.add_argument("query", help="Text to search for")
    search_parser.add_argument(
        "--type", dest="kind", choices=["stop", "line", "all"], default="all", help="Result type"
    )

    bulk_parser = subparsers.add_parser("bulk", help="Next passages at several stops")
    bulk_parser.add_argument("stop_ids", nargs="+", help="Stop IDs")

    late_parser = subparsers.add_parser(
        "late-chance", help="Chance of being late on favourite lines"
    )
    late_parser.add_argument("lines", nargs="+", help="Favourite line codes (e.g., 1 A T3a)")
    late_parser.add_argument("--humor", action="store_true", help="Add a humorous quote")

    canonical_parser = subparsers.add_parser(
        "canonical", help="Show how a stop or line identifier is resolved"
    )
    canonical_parser.add_argument("identifier", help="Stop or line identifier")
    canonical_parser.add_argument(
        "--line", action="store_true", help="Treat the identifier as a line"
    )

    return parser


async def _execute_command(
    args: argparse.Namespace, client: TransitClient, config: AppConfig
) -> Any:
    """Run a network command and return its result."""
    if args.command == "passages":
        return await client.get_next_departures(args.stop_id)
    if args.command == "line-passages":
        return await client.get_line_passages(args.line_id)
    if args.command == "trafic":
        if args.line:
            return await client.get_line_traffic_info(args.line)
        mode = TransportMode(args.mode) if args.mode else None
        return await client.get_traffic_info(mode)
    if args.command == "messages":
        return await client.get_screen_messages(args.line)
    if args.command == "disruptions":
        return await client.get_bulk_disruptions()
    if args.command == "line-stops":
        return await client.get_line_stops(args.line_id)
    if args.command == "search":
        return await client.search(args.query, args.kind)
    if args.command == "bulk":
        service = BulkPassagesService(client, max_stops=config.bulk_max_stops)
        return await service.get_bulk_passages(args.stop_ids)
    if args.command == "late-chance":
        traffic = await client.get_traffic_info()
        return LateChanceService().calculate(args.lines, traffic, humor=args.humor)
    raise ValueError(f"Unknown command: {args.command}")


def _resolve_identifier(identifier: str, as_line: bool) -> Any:
    return to_canonical_line(identifier) if as_line else to_canonical_stop(identifier)


async def _run(args: argparse.Namespace, config: AppConfig) -> Any:
    async with aiohttp.ClientSession() as session:
        transport = AiohttpTransport(session, timeout=config.prim_api_timeout)
        client = PrimClient(transport, config)
        return await _execute_command(args, client, config)


async def main() -> None:
    """Main CLI entry point."""
    parser = _setup_argparse()
    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.command == "canonical":
        print(format_json(_resolve_identifier(args.identifier, args.line)))
        return

    config = AppConfig()
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )

    try:
        result = await _run(args, config)
    except (PrimError, ValueError) as e:
        logger.debug(f"Command {args.command} failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    print(format_json(result))


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    cli_main()
