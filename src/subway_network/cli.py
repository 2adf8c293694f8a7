"""Command-line helpers for inspecting a subway network."""

import asyncio
import json
import sys
from typing import Any

from subway_network.adapters.config import AppConfig
from subway_network.domain.models.line import Line
from subway_network.domain.models.shortest_path import ShortestPath
from subway_network.main import SubwayNetwork, build_network, configure_logging


def _line_to_dict(line: Line) -> dict[str, Any]:
    return {
        "id": line.id,
        "name": line.name,
        "color": line.color,
        "stations": [{"id": s.id, "name": s.name} for s in line.ordered_stations()],
        "distance": line.sections.total_distance,
    }


def _path_to_dict(path: ShortestPath) -> dict[str, Any]:
    return {
        "stations": [{"id": s.id, "name": s.name} for s in path.stations],
        "distance": path.distance,
    }


async def _handle_lines_command(network: SubwayNetwork, as_json: bool) -> None:
    """Handle the lines command."""
    lines = await network.line_service.find_lines()
    if as_json:
        print(json.dumps([_line_to_dict(line) for line in lines], indent=2, ensure_ascii=False))
        return

    if not lines:
        print("No lines configured.")
        return
    for line in lines:
        stations = " - ".join(s.name for s in line.ordered_stations())
        print(f"{line.name} [{line.color}] ({line.sections.total_distance}): {stations}")


async def _handle_stations_command(network: SubwayNetwork, as_json: bool) -> None:
    """Handle the stations command."""
    stations = await network.station_service.find_stations()
    if as_json:
        print(json.dumps([{"id": s.id, "name": s.name} for s in stations], ensure_ascii=False))
        return
    for station in stations:
        print(f"{station.id}: {station.name}")


async def _handle_path_command(
    network: SubwayNetwork, source_name: str, destination_name: str, as_json: bool
) -> None:
    """Handle the path command."""
    source = await network.station_service.find_station_by_name(source_name)
    destination = await network.station_service.find_station_by_name(destination_name)
    path = await network.path_service.find_shortest_path(source.id, destination.id)  # type: ignore[arg-type]

    if as_json:
        print(json.dumps(_path_to_dict(path), indent=2, ensure_ascii=False))
        return
    print(" -> ".join(s.name for s in path.stations))
    print(f"Distance: {path.distance}")


def _setup_argparse() -> Any:
    """Set up and configure argument parser."""
    import argparse

    parser = argparse.ArgumentParser(
        description="Subway network inspection tool",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # List lines with their stations in order
  NETWORK_FILE=network.toml subway-network lines

  # Shortest path between two stations
  NETWORK_FILE=network.toml subway-network path "Gangnam" "Jamsil"

  # Only travel in the recorded section direction
  PATH_DIRECTION=directed subway-network --network-file network.toml path A B
        """,
    )
    parser.add_argument("--network-file", help="TOML network file (overrides NETWORK_FILE)")

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    lines_parser = subparsers.add_parser("lines", help="List lines and their stations")
    lines_parser.add_argument("--json", action="store_true", help="Output as JSON")

    stations_parser = subparsers.add_parser("stations", help="List registered stations")
    stations_parser.add_argument("--json", action="store_true", help="Output as JSON")

    path_parser = subparsers.add_parser("path", help="Find the shortest path between stations")
    path_parser.add_argument("source", help="Name of the station to start from")
    path_parser.add_argument("destination", help="Name of the station to arrive at")
    path_parser.add_argument("--json", action="store_true", help="Output as JSON")

    return parser


async def _execute_command(args: Any) -> None:
    """Execute the appropriate command based on args."""
    config = AppConfig()
    if args.network_file:
        config.network_file = args.network_file
    configure_logging(config.log_level)

    network = await build_network(config)

    if args.command == "lines":
        await _handle_lines_command(network, args.json)
    elif args.command == "stations":
        await _handle_stations_command(network, args.json)
    elif args.command == "path":
        await _handle_path_command(network, args.source, args.destination, args.json)
    else:
        _setup_argparse().print_help()
        sys.exit(1)


async def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = _setup_argparse()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    try:
        await _execute_command(args)
    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        sys.exit(1)
    except (ValueError, FileNotFoundError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    asyncio.run(main())


if __name__ == "__main__":
    cli_main()
