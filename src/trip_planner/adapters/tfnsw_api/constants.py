"""Constants for the Transport for NSW Open Data adapters.

API Documentation: https://opendata.transport.nsw.gov.au/
Every request authenticates with an ``Authorization: apikey <key>`` header.
"""

# Trip planner (EFA) endpoints, relative to the configured base URL
TRIP_PATH = "/v1/tp/trip"
STOP_FINDER_PATH = "/v1/tp/stop_finder"
DEPARTURE_MONITOR_PATH = "/v1/tp/departure_mon"

# GTFS-realtime endpoints, suffixed with the feed path for a mode
VEHICLE_POSITIONS_PATH = "/v1/gtfs/vehiclepos"
TRIP_UPDATES_PATH = "/v1/gtfs/realtime"

TRIP_PLANNER_VERSION = "10.2.1.42"

# Parameters every trip planner request carries
COMMON_PARAMS = {
    "outputFormat": "rapidJSON",
    "coordOutputFormat": "EPSG:4326",
    "version": TRIP_PLANNER_VERSION,
}

DEFAULT_HEADERS = {
    "Accept": "application/json",
}

# Product classes reported by the trip planner
PRODUCT_CLASS_TRAIN = 1
PRODUCT_CLASS_METRO = 2
PRODUCT_CLASS_LIGHTRAIL = 4
PRODUCT_CLASS_BUS = 5
PRODUCT_CLASS_COACH = 7
PRODUCT_CLASS_FERRY = 9
PRODUCT_CLASS_SCHOOL_BUS = 11

STOP_TYPES = frozenset({"stop", "platform"})
STOP_NAME_PATTERN = r"(Station|Wharf|Stop|Interchange)"
