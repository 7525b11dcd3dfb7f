"""Constants and defaults.

Note: Keep constants here to avoid magic strings spread across code.
"""

HOURS_TABLE = "hours"

# Key the client keeps its hourly rate under (never sent to the API)
RATE_STORAGE_KEY = "hourlyRate"
DEFAULT_HOURLY_RATE = 0.0
CURRENCY_SYMBOL = "$"

# Largest hourly rate the dashboard accepts
MAX_HOURLY_RATE = 10000.0

# hours is DECIMAL(6, 2)
MAX_ENTRY_HOURS = 9999.99
HOURS_DECIMAL_PLACES = 2

EMPTY_STATE_MESSAGE = "No entries yet. Add your first babysitting session above!"
LOAD_ERROR_MESSAGE = "Unable to load entries. Check console for details."

INVALID_ENTRY_MESSAGE = "Invalid date or hours"
INVALID_ID_MESSAGE = "Invalid id"
METHOD_NOT_ALLOWED_MESSAGE = "Method not allowed"

CORS_HEADERS = {
    "Access-Control-Allow-Credentials": "true",
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET,POST,DELETE,OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}
