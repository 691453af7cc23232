"""Command line front end for the Sydney trip planner."""

import argparse
import asyncio
import json
import logging
import sys
from collections.abc import Awaitable, Callable
from dataclasses import asdict, dataclass
from datetime import datetime
from typing import Any, TypeVar
from zoneinfo import ZoneInfo

import aiohttp

from trip_planner.adapters.config import AppConfig
from trip_planner.adapters.gtfs_realtime import GtfsRealtimeFeedRepository
from trip_planner.adapters.pollers import SnapshotPoller, SnapshotState
from trip_planner.adapters.storage import JsonPreferenceStore
from trip_planner.adapters.tfnsw_api import (
    TfnswDepartureRepository,
    TfnswHttpClient,
    TfnswStopRepository,
    TfnswTripRepository,
)
from trip_planner.application.services import (
    DepartureBoard,
    DepartureBoardService,
    FavoritesService,
    JourneySummary,
    LiveTripService,
    LiveVehicleService,
    PreferencesService,
    TripPlanningService,
    summarize_journey,
)
from trip_planner.application.services.departure_board_service import departure_platform
from trip_planner.application.services.journey_extractors import correlation_id
from trip_planner.domain.errors import ApiError, NoTripsFoundError
from trip_planner.domain.models import (
    DisplayPreferences,
    FavoriteRoute,
    Journey,
    LiveTripStatus,
    Stop,
    TransportFilters,
    TransportMode,
    TripPreference,
    VehicleEntity,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


def configure_logging(verbose: bool = False) -> None:
    """Configure root logging on stderr."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


@dataclass
class Services:
    """Services wired to the TfNSW adapters for one CLI run."""

    planning: TripPlanningService
    departures: DepartureBoardService
    live_trips: LiveTripService
    vehicles: LiveVehicleService


def build_services(config: AppConfig, session: aiohttp.ClientSession) -> Services:
    """Composition root: wire adapters into the application services."""
    http_client = TfnswHttpClient(
        session,
        base_url=config.tfnsw_base_url,
        timeout_seconds=config.tfnsw_api_timeout,
        min_delay_seconds=config.min_delay_seconds_between_calls,
    )
    api_key = config.trip_planner_api_key()
    feed_repository = GtfsRealtimeFeedRepository(
        http_client,
        vehicle_positions_api_key=config.vehicle_positions_api_key(),
        trip_updates_api_key=config.trip_updates_api_key(),
    )
    return Services(
        planning=TripPlanningService(
            TfnswTripRepository(http_client, api_key, timezone=config.timezone),
            TfnswStopRepository(http_client, api_key),
            fetch_settings=config.fetch_settings(),
            policy=config.planner_policy(),
        ),
        departures=DepartureBoardService(TfnswDepartureRepository(http_client, api_key)),
        live_trips=LiveTripService(feed_repository),
        vehicles=LiveVehicleService(feed_repository),
    )


class Renderer:
    """Formats domain objects for the terminal in the configured timezone."""

    def __init__(self, preferences: PreferencesService, timezone: str) -> None:
        self._preferences = preferences
        self._zone = ZoneInfo(timezone)

    def time(self, value: datetime | None) -> str:
        local = value.astimezone(self._zone) if value is not None else None
        return self._preferences.format_time(local)

    def stop(self, stop: Stop) -> str:
        return f"  {stop.display_name} ({stop.type})\n    ID: {stop.id}"

    def journey(self, index: int, summary: JourneySummary) -> str:
        minutes = summary.duration_minutes
        duration = f"{minutes} min" if minutes is not None else "?"
        changes = "direct" if summary.change_count == 0 else f"{summary.change_count} change(s)"
        lines = [
            f"[{index}] {summary.line_code} to {summary.destination_name}: "
            f"{self.time(summary.departure)} -> {self.time(summary.arrival)} "
            f"({duration}, {changes})"
        ]
        for step in summary.interchanges:
            lines.append(
                f"      change at {step.interchange}: platform {step.drop_platform or '?'} -> "
                f"{step.next_service_code} on platform {step.board_platform or '?'}"
            )
        return "\n".join(lines)

    def board(self, board: DepartureBoard) -> str:
        if not board.departures:
            return f"{board.stop_name}\n  No departures found"
        lines = [board.stop_name]
        for departure in board.departures:
            platform = departure_platform(departure)
            delay = f" (+{departure.delay_minutes} min)" if departure.delay_minutes > 0 else ""
            platform_text = f" platform {platform}" if platform else ""
            lines.append(
                f"  {self.time(departure.time)}{delay} {departure.line} to "
                f"{departure.destination}{platform_text}"
            )
        return "\n".join(lines)

    @staticmethod
    def vehicle(vehicle: VehicleEntity) -> str:
        trip_id = vehicle.trip.trip_id if vehicle.trip else "-"
        return (
            f"  [{vehicle.mode.value}] {vehicle.label or vehicle.id} trip={trip_id} "
            f"at ({vehicle.latitude}, {vehicle.longitude})"
        )

    def live_status(self, status: LiveTripStatus) -> str:
        if not status.found:
            return f"Live tracking unavailable for {status.trip_id or 'this trip'}: {status.reason}"
        lines = [f"Live data for {status.trip_id} ({status.mode.value if status.mode else '?'})"]
        if status.vehicle is not None:
            lines.append(self.vehicle(status.vehicle))
        if status.trip_update is not None:
            delays = [
                u.departure_delay or u.arrival_delay or 0
                for u in status.trip_update.stop_time_updates
            ]
            latest = delays[-1] if delays else 0
            lines.append(f"  trip update with {len(delays)} stop(s), latest delay {latest}s")
        return "\n".join(lines)


def journey_to_dict(journey: Journey, summary: JourneySummary) -> dict[str, Any]:
    """JSON-friendly view of a journey for ``plan --json``."""
    return {
        "line": summary.line_name,
        "line_code": summary.line_code,
        "destination": summary.destination_name,
        "departure": summary.departure.isoformat() if summary.departure else None,
        "arrival": summary.arrival.isoformat() if summary.arrival else None,
        "duration_minutes": summary.duration_minutes,
        "changes": summary.change_count,
        "realtime_trip_id": correlation_id(journey),
        "legs": [
            {
                "line": leg.transportation.line_name,
                "from": leg.origin.name,
                "to": leg.destination.name,
            }
            for leg in journey.legs
        ],
    }


async def _watch(
    name: str,
    fetch: Callable[[], Awaitable[T]],
    render: Callable[[T], None],
    interval_seconds: float,
) -> None:
    """Refresh a view on a timer until interrupted."""
    state: SnapshotState[T] = SnapshotState(name=name, on_replace=render)
    poller = SnapshotPoller(name, fetch, state, interval_seconds)
    await poller.start()
    try:
        while True:
            await asyncio.sleep(3600)
    finally:
        state.close()
        await poller.stop()


async def _plan_and_rank(
    services: Services, args: argparse.Namespace
) -> list[Journey]:
    journeys = await services.planning.plan(
        args.origin, args.destination, one_per_vehicle=args.one_per_vehicle
    )
    return services.planning.rank(journeys, TripPreference(args.preference))


async def run_plan(
    services: Services, renderer: Renderer, args: argparse.Namespace, config: AppConfig
) -> None:
    def render(journeys: list[Journey]) -> None:
        shown = journeys[: args.limit]
        if args.json:
            print(json.dumps([journey_to_dict(j, summarize_journey(j)) for j in shown], indent=2))
            return
        print(f"\n{len(journeys)} journey(s), {args.preference.replace('_', ' ')}:")
        for index, journey in enumerate(shown):
            print(renderer.journey(index, summarize_journey(journey)))

    if args.watch:
        await _watch(
            "trips", lambda: _plan_and_rank(services, args), render, config.trip_refresh_seconds
        )
    else:
        render(await _plan_and_rank(services, args))


async def run_departures(
    services: Services,
    renderer: Renderer,
    filters: TransportFilters,
    args: argparse.Namespace,
    config: AppConfig,
) -> None:
    def render(board: DepartureBoard) -> None:
        if args.json:
            print(
                json.dumps(
                    [
                        {
                            "time": d.time.isoformat() if d.time else None,
                            "line": d.line,
                            "destination": d.destination,
                            "platform": departure_platform(d),
                            "delay_minutes": d.delay_minutes,
                        }
                        for d in board.departures
                    ],
                    indent=2,
                )
            )
        else:
            print(renderer.board(board))

    async def fetch() -> DepartureBoard:
        return await services.departures.get_board(args.stop_id, filters)

    if args.watch:
        await _watch("departures", fetch, render, config.departure_refresh_seconds)
    else:
        render(await fetch())


async def run_live(
    services: Services, renderer: Renderer, args: argparse.Namespace, config: AppConfig
) -> None:
    journeys = await _plan_and_rank(services, args)
    if not 0 <= args.index < len(journeys):
        print(f"No journey at index {args.index} ({len(journeys)} found).", file=sys.stderr)
        sys.exit(1)
    journey = journeys[args.index]
    print(renderer.journey(args.index, summarize_journey(journey)))

    async def fetch() -> LiveTripStatus:
        return await services.live_trips.get_live_status(journey)

    def render(status: LiveTripStatus) -> None:
        print(renderer.live_status(status))

    if args.watch:
        await _watch("live trip", fetch, render, config.live_trip_refresh_seconds)
    else:
        render(await fetch())


async def run_vehicles(
    services: Services,
    filters: TransportFilters,
    args: argparse.Namespace,
    config: AppConfig,
) -> None:
    if args.mode:
        selected = set(args.mode)
        filters = TransportFilters(**{mode.value: mode.value in selected for mode in TransportMode})

    def render(vehicles: list[VehicleEntity]) -> None:
        print(f"\n{len(vehicles)} vehicle(s)")
        for vehicle in vehicles[: args.limit]:
            print(Renderer.vehicle(vehicle))

    async def fetch() -> list[VehicleEntity]:
        return await services.vehicles.get_vehicles(filters)

    if args.watch:
        await _watch("vehicles", fetch, render, config.vehicle_refresh_seconds)
    else:
        render(await fetch())


def run_favorites(favorites: FavoritesService, args: argparse.Namespace) -> None:
    if args.favorites_command == "add":
        favorite = FavoriteRoute(
            origin_id=args.origin_id,
            origin_name=args.origin_name,
            destination_id=args.destination_id,
            destination_name=args.destination_name,
        )
        if favorites.add_favorite(favorite):
            print(f"Saved favorite {favorite.id}")
        else:
            print(f"Favorite {favorite.id} already saved")
    elif args.favorites_command == "remove":
        if not favorites.remove_favorite(args.favorite_id):
            print(f"No favorite {args.favorite_id}", file=sys.stderr)
            sys.exit(1)
        print(f"Removed favorite {args.favorite_id}")
    else:
        saved = favorites.list_favorites()
        if not saved:
            print("No favorites saved")
        for favorite in saved:
            print(f"  {favorite.origin_name} -> {favorite.destination_name}  ({favorite.id})")


def run_prefs(preferences: PreferencesService, args: argparse.Namespace) -> None:
    if args.prefs_command == "set":
        preferences.update_preference(args.name, args.value == "on")
    elif args.prefs_command == "toggle-filter":
        preferences.toggle_filter(args.mode)

    current: DisplayPreferences = preferences.preferences
    print(f"use_24_hour: {current.use_24_hour}")
    print(f"show_date: {current.show_date}")
    enabled = ", ".join(mode.value for mode in preferences.filters.enabled_modes()) or "none"
    print(f"enabled modes: {enabled}")


def build_parser(config: AppConfig | None = None) -> argparse.ArgumentParser:
    """Argument parser for all subcommands."""
    default_preference = config.default_preference if config else TripPreference.ALL_STOPS.value
    preference_choices = [p.value for p in TripPreference]

    parser = argparse.ArgumentParser(
        description="Sydney public transport trip planner",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Find stop IDs
  trip-planner search "Central Station"

  # Plan a trip, fastest first
  trip-planner plan 10101100 10101229 --preference fastest

  # Live departure board, refreshed every 30 seconds
  trip-planner departures 10101100 --watch
        """,
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    search_parser = subparsers.add_parser("search", help="Search for stops and stations")
    search_parser.add_argument("query", help="Stop name to search for")
    search_parser.add_argument("--json", action="store_true", help="Output as JSON")

    def add_trip_arguments(sub: argparse.ArgumentParser) -> None:
        sub.add_argument("origin", help="Origin stop ID")
        sub.add_argument("destination", help="Destination stop ID")
        sub.add_argument(
            "--preference", choices=preference_choices, default=default_preference
        )
        sub.add_argument(
            "--one-per-vehicle",
            action="store_true",
            help="Keep only the best journey per service run",
        )
        sub.add_argument("--watch", action="store_true", help="Refresh until interrupted")

    plan_parser = subparsers.add_parser("plan", help="Plan journeys between two stops")
    add_trip_arguments(plan_parser)
    plan_parser.add_argument("--limit", type=int, default=10, help="Journeys to show")
    plan_parser.add_argument("--json", action="store_true", help="Output as JSON")

    live_parser = subparsers.add_parser("live", help="Live position of a planned journey")
    add_trip_arguments(live_parser)
    live_parser.add_argument("--index", type=int, default=0, help="Journey to track")

    departures_parser = subparsers.add_parser("departures", help="Departure board for a stop")
    departures_parser.add_argument("stop_id", help="Stop ID")
    departures_parser.add_argument("--json", action="store_true", help="Output as JSON")
    departures_parser.add_argument("--watch", action="store_true", help="Refresh until interrupted")

    vehicles_parser = subparsers.add_parser("vehicles", help="Live vehicle positions")
    vehicles_parser.add_argument(
        "--mode",
        action="append",
        choices=[m.value for m in TransportMode],
        help="Mode to show (repeatable, default: enabled filters)",
    )
    vehicles_parser.add_argument("--limit", type=int, default=20, help="Vehicles to list")
    vehicles_parser.add_argument("--watch", action="store_true", help="Refresh until interrupted")

    favorites_parser = subparsers.add_parser("favorites", help="Manage favorite routes")
    favorites_sub = favorites_parser.add_subparsers(dest="favorites_command")
    favorites_sub.add_parser("list", help="List favorites")
    add_parser = favorites_sub.add_parser("add", help="Save a favorite")
    add_parser.add_argument("origin_id")
    add_parser.add_argument("origin_name")
    add_parser.add_argument("destination_id")
    add_parser.add_argument("destination_name")
    remove_parser = favorites_sub.add_parser("remove", help="Remove a favorite")
    remove_parser.add_argument("favorite_id", help="ID as shown by 'favorites list'")

    prefs_parser = subparsers.add_parser("prefs", help="Show or change display preferences")
    prefs_sub = prefs_parser.add_subparsers(dest="prefs_command")
    prefs_sub.add_parser("show", help="Show preferences")
    set_parser = prefs_sub.add_parser("set", help="Set a display preference")
    set_parser.add_argument("name", choices=["use_24_hour", "show_date"])
    set_parser.add_argument("value", choices=["on", "off"])
    toggle_parser = prefs_sub.add_parser("toggle-filter", help="Toggle a transport mode")
    toggle_parser.add_argument("mode", choices=[m.value for m in TransportMode])

    return parser


async def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    config = AppConfig()
    try:
        config.load_toml()
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    parser = build_parser(config)
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    store = JsonPreferenceStore(config.preferences_file)
    preferences = PreferencesService(store)

    if args.command == "favorites":
        run_favorites(FavoritesService(store), args)
        return
    if args.command == "prefs":
        run_prefs(preferences, args)
        return

    renderer = Renderer(preferences, config.timezone)
    try:
        async with aiohttp.ClientSession() as session:
            services = build_services(config, session)
            if args.command == "search":
                stops = await services.planning.search_stops(args.query)
                if args.json:
                    print(json.dumps([asdict(s) for s in stops], indent=2, ensure_ascii=False))
                elif not stops:
                    print(f"No stops found for '{args.query}'", file=sys.stderr)
                    sys.exit(1)
                else:
                    print(f"\nFound {len(stops)} stop(s):\n")
                    for stop in stops:
                        print(renderer.stop(stop))
            elif args.command == "plan":
                await run_plan(services, renderer, args, config)
            elif args.command == "live":
                await run_live(services, renderer, args, config)
            elif args.command == "departures":
                await run_departures(services, renderer, preferences.filters, args, config)
            elif args.command == "vehicles":
                await run_vehicles(services, preferences.filters, args, config)
    except (ApiError, NoTripsFoundError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    cli_main()
