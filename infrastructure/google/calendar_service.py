import logging
import re
from datetime import datetime, time, timedelta, timezone
from typing import Any, Callable, Dict, List, Optional, Tuple

from application.ports import ScheduleService
from core.items import ScheduleItem

from .rest_client import GoogleClientError, GoogleRestClient

logger = logging.getLogger("dashdeck.google")

CALENDAR_EVENTS_URL = "https://www.googleapis.com/calendar/v3/calendars/primary/events"

_OFFSET_RE = re.compile(r"^([+-])(\d{2}):?(\d{2})$")


def parse_utc_offset(value: str) -> timezone:
    """Parse ``+09:00`` / ``-0530`` / ``Z`` into a fixed-offset timezone."""
    token = (value or "").strip()
    if token.upper() in ("Z", "UTC", ""):
        return timezone.utc
    match = _OFFSET_RE.match(token)
    if not match:
        raise ValueError(f"Invalid UTC offset: {value!r}")
    sign, hours, minutes = match.groups()
    delta = timedelta(hours=int(hours), minutes=int(minutes))
    return timezone(-delta if sign == "-" else delta)


def time_window(now: datetime, utc_offset: str) -> Tuple[str, str]:
    """Today 00:00:00 through tomorrow 23:59:59 in the given offset, RFC 3339."""
    tz = parse_utc_offset(utc_offset)
    local_now = now.astimezone(tz) if now.tzinfo else now.replace(tzinfo=timezone.utc).astimezone(tz)
    today = local_now.date()
    time_min = datetime.combine(today, time(0, 0, 0), tzinfo=tz)
    time_max = datetime.combine(today + timedelta(days=1), time(23, 59, 59), tzinfo=tz)
    return time_min.isoformat(), time_max.isoformat()


class GoogleCalendarService(ScheduleService):
    def __init__(
        self,
        client: GoogleRestClient,
        utc_offset: str = "+09:00",
        time_zone: str = "Asia/Tokyo",
        base_url: str = CALENDAR_EVENTS_URL,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> None:
        self.client = client
        self.utc_offset = utc_offset
        self.time_zone = time_zone
        self.base_url = base_url
        self.clock = clock or (lambda: datetime.now(timezone.utc))

    def list_events(self) -> List[ScheduleItem]:
        try:
            time_min, time_max = time_window(self.clock(), self.utc_offset)
        except ValueError as exc:
            logger.warning("Calendar read skipped: %s", exc)
            return []
        params = {
            "orderBy": "startTime",
            "singleEvents": "true",
            "timeMin": time_min,
            "timeMax": time_max,
        }
        try:
            payload = self.client.get_json(self.base_url, params=params)
        except GoogleClientError as exc:
            logger.warning("Calendar read failed: %s", exc)
            return []
        items = payload.get("items")
        if not isinstance(items, list):
            return []
        return [ScheduleItem.from_event(item) for item in items if isinstance(item, dict)]

    def _event_body(self, summary: str, start: str, end: str, description: str) -> Dict[str, Any]:
        return {
            "summary": summary,
            "description": description,
            "start": {"dateTime": start, "timeZone": self.time_zone},
            "end": {"dateTime": end, "timeZone": self.time_zone},
        }

    def create_event(self, summary: str, start: str, end: str, description: str) -> bool:
        # New events are typed without an offset; edited ones come back from the API with one.
        body = self._event_body(summary, f"{start}{self.utc_offset}", f"{end}{self.utc_offset}", description)
        return self._write("post", self.base_url, body)

    def update_event(self, event_id: str, summary: str, start: str, end: str, description: str) -> bool:
        body = self._event_body(summary, start, end, description)
        return self._write("put", f"{self.base_url}/{event_id}", body)

    def delete_event(self, event_id: str) -> bool:
        return self._write("delete", f"{self.base_url}/{event_id}", None)

    def _write(self, method: str, url: str, body: Optional[Dict[str, Any]]) -> bool:
        try:
            self.client.request(method, url, payload=body)
        except GoogleClientError as exc:
            logger.warning("Calendar %s failed: %s", method.upper(), exc)
            return False
        return True
