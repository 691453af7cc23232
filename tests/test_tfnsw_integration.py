"""End-to-end integration tests against the live Transport for NSW API."""

import os

import aiohttp
import pytest

from trip_planner.adapters.config import AppConfig
from trip_planner.cli import build_services
from trip_planner.domain.models import TransportFilters, TripPreference

CENTRAL = "10101100"
PARRAMATTA = "10101229"

pytestmark = [
    pytest.mark.integration,
    pytest.mark.skipif(not os.getenv("TFNSW_API_KEY"), reason="TFNSW_API_KEY not set"),
]


@pytest.mark.asyncio
async def test_search_finds_central_station() -> None:
    """Searching for Central should return the station among transport locations."""
    async with aiohttp.ClientSession() as session:
        services = build_services(AppConfig(), session)

        stops = await services.planning.search_stops("Central Station")

    assert stops, "Should find at least one stop"
    assert any("Central" in stop.name for stop in stops)


@pytest.mark.asyncio
async def test_plan_central_to_parramatta() -> None:
    """Planning Central to Parramatta should return journeys, all of them kept when ranked by departure."""
    async with aiohttp.ClientSession() as session:
        services = build_services(AppConfig(), session)

        journeys = await services.planning.plan(CENTRAL, PARRAMATTA)
        ranked = services.planning.rank(journeys, TripPreference.ALL_STOPS)

    assert len(ranked) > 0
    assert sorted(map(id, ranked)) == sorted(map(id, journeys))


@pytest.mark.asyncio
async def test_departure_board_for_central() -> None:
    """The departure board at Central should list upcoming services."""
    async with aiohttp.ClientSession() as session:
        services = build_services(AppConfig(), session)

        board = await services.departures.get_board(CENTRAL, TransportFilters())

    assert board.stop_id == CENTRAL
    assert board.departures
