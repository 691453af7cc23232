"""Condensed, display-ready view of a journey."""

import re
from dataclasses import dataclass
from datetime import UTC, datetime

from trip_planner.application.services.journey_extractors import (
    UNKNOWN_DURATION,
    arrival_time,
    departure_time,
    duration,
    primary_legs,
)
from trip_planner.domain.models.journey import Journey, StopPoint

LINE_CODE_PATTERN = re.compile(r"([A-Z0-9]+)(\s|$)")
PLATFORM_NAME_PATTERN = re.compile(r"(?:Platform|Plat)\s+([A-Za-z0-9]+)", re.IGNORECASE)
PLATFORM_SUFFIX_PATTERN = re.compile(r"Platform\s+\w+", re.IGNORECASE)
KNOWN_LINE_CODES = ("T1", "T2", "T3", "T4", "T8", "T9", "SCO", "CCN", "BMT")


@dataclass(frozen=True)
class InterchangeStep:
    """A change between two primary legs."""

    interchange: str
    drop_platform: str | None
    board_platform: str | None
    next_service: str
    next_service_code: str


@dataclass(frozen=True)
class JourneySummary:
    """What a journey list row shows."""

    line_code: str
    line_name: str
    destination_name: str
    departure: datetime | None
    arrival: datetime | None
    duration_minutes: int | None
    change_count: int
    interchanges: list[InterchangeStep]
    minutes_until_departure: int | None


def line_code(line_name: str) -> str:
    """Short line code, e.g. ``T1`` for ``T1 North Shore & Western Line``."""
    for code in KNOWN_LINE_CODES:
        if code in line_name:
            return code
    match = LINE_CODE_PATTERN.search(line_name)
    return match.group(1) if match else line_name[:3]


def extract_platform(stop: StopPoint | None) -> str | None:
    """Platform of a stop, from the explicit field or from its name."""
    if stop is None:
        return None
    if stop.platform:
        return re.sub(r"[^A-Za-z0-9]", "", stop.platform).upper() or None
    match = PLATFORM_NAME_PATTERN.search(stop.name or "")
    return match.group(1).upper() if match else None


def clean_stop_name(stop: StopPoint | None) -> str:
    """Stop name without locality and platform, e.g. ``Strathfield Station``."""
    if stop is None or not stop.name:
        return "Interchange"
    name = PLATFORM_SUFFIX_PATTERN.sub("", stop.name.split(",")[0]).strip()
    return name or "Interchange"


def summarize_journey(journey: Journey, now: datetime | None = None) -> JourneySummary:
    """Build the summary row for a journey."""
    legs = primary_legs(journey)
    main_leg = legs[0] if legs else (journey.legs[0] if journey.legs else None)
    line_name = main_leg.transportation.line_name if main_leg else ""

    interchanges = [
        InterchangeStep(
            interchange=clean_stop_name(leg.destination),
            drop_platform=extract_platform(leg.destination),
            board_platform=extract_platform(next_leg.origin),
            next_service=next_leg.transportation.line_name or "Next service",
            next_service_code=line_code(next_leg.transportation.line_name),
        )
        for leg, next_leg in zip(legs, legs[1:])
    ]

    departure = departure_time(journey)
    journey_duration = duration(journey)
    minutes_until = None
    if departure is not None:
        minutes_until = int((departure - (now or datetime.now(UTC))).total_seconds() // 60)

    destination_name = ""
    if main_leg and main_leg.destination.name:
        destination_name = main_leg.destination.name.split(",")[0]
    elif journey.legs and journey.legs[-1].destination.name:
        destination_name = (journey.legs[-1].destination.name or "").split(",")[0]

    return JourneySummary(
        line_code=line_code(line_name),
        line_name=line_name,
        destination_name=destination_name or "Destination",
        departure=departure,
        arrival=arrival_time(journey),
        duration_minutes=(
            None
            if journey_duration == UNKNOWN_DURATION
            else int(journey_duration.total_seconds() // 60)
        ),
        change_count=len(interchanges),
        interchanges=interchanges,
        minutes_until_departure=minutes_until,
    )
