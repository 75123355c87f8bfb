from .calendar_service import CALENDAR_EVENTS_URL, GoogleCalendarService, parse_utc_offset, time_window
from .credentials import TOKEN_ENV_VAR, TokenFileCredentials
from .rest_client import GoogleClientError, GooglePermissionError, GoogleRestClient
from .tasks_service import TASKS_URL, GoogleTasksService

__all__ = [
    "CALENDAR_EVENTS_URL",
    "GoogleCalendarService",
    "parse_utc_offset",
    "time_window",
    "TOKEN_ENV_VAR",
    "TokenFileCredentials",
    "GoogleClientError",
    "GooglePermissionError",
    "GoogleRestClient",
    "TASKS_URL",
    "GoogleTasksService",
]
