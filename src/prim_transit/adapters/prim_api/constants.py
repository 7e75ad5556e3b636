"""Constants for the PRIM API adapter.

Île-de-France Mobilités PRIM marketplace.
API Documentation: https://prim.iledefrance-mobilites.fr/

Every endpoint requires the apiKey header.
"""

from zoneinfo import ZoneInfo

PRIM_BASE_URL = "https://prim.iledefrance-mobilites.fr/marketplace"

# API endpoints, relative to PRIM_BASE_URL
STOP_MONITORING_PATH = "/stop-monitoring"  # ?MonitoringRef=... or ?LineRef=...
GENERAL_MESSAGE_PATH = "/general-message"  # ?LineRef=... or ?LineRef=ALL
LINE_REPORTS_PATH = "/v2/navitia/line_reports/line_reports"
LINE_REPORTS_BY_MODE_PATH = (
    "/v2/navitia/line_reports/physical_modes/physical_mode:{mode}/line_reports"
)
LINE_REPORTS_BY_LINE_PATH = "/v2/navitia/line_reports/lines/{line_id}/line_reports"
DISRUPTIONS_BULK_PATH = "/disruptions_bulk"
LINE_STOP_POINTS_PATH = "/v2/navitia/lines/{line_id}/stop_points"
PLACES_PATH = "/places"

ALL_LINES_REF = "ALL"

# HTTP headers
API_KEY_HEADER = "apiKey"
DEFAULT_HEADERS = {
    "Accept": "application/json",
}

# Navitia reports local wall-clock times without an offset
PRIM_TIMEZONE = ZoneInfo("Europe/Paris")

SEARCH_MIN_QUERY_LENGTH = 2

# Fallback texts shown when upstream leaves a field empty
DEFAULT_DESTINATION = "Terminus"
DEFAULT_STATUS = "noReport"
DEFAULT_DISRUPTION_TITLE = "Information trafic"
DEFAULT_DISRUPTION_MESSAGE = "Perturbation en cours"
