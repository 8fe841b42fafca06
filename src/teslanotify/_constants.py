"""Internal constants shared across the package."""

from __future__ import annotations

STATUS_ENDPOINT = "/v1/cars/{car_id}/status"
DEFAULT_CAR_ID = 1
DEFAULT_POLL_INTERVAL = 60.0
DEFAULT_REQUEST_TIMEOUT = 30.0

#: The only vehicle state with special handling; everything else is "not charging".
CHARGING_STATE = "charging"

#: Remaining charge time (seconds) that triggers the "almost complete" message.
#: Matched exactly, so a poll that does not land on it skips the message.
ALMOST_COMPLETE_SECONDS = 300

DISPLAY_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"
