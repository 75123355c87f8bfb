from typing import Any, Callable, Dict, Optional

import requests

from core.errors import RemoteServiceError


class GoogleClientError(RemoteServiceError):
    pass


class GooglePermissionError(GoogleClientError):
    pass


class GoogleRestClient:
    """Bearer-authenticated JSON calls against Google REST endpoints.

    Every call is blocking and, unless a timeout is configured, may wait
    indefinitely; the dashboard runs it on the UI thread.
    """

    def __init__(
        self,
        session: Optional[requests.Session],
        token_provider: Callable[[], Optional[str]],
        timeout: Optional[float] = None,
    ) -> None:
        self.session = session or requests.Session()
        self.token_provider = token_provider
        self.timeout = timeout

    def request(
        self,
        method: str,
        url: str,
        params: Optional[Dict[str, str]] = None,
        payload: Optional[Dict[str, Any]] = None,
    ) -> requests.Response:
        token = self.token_provider()
        if not token:
            raise GooglePermissionError("Google access token missing")
        headers = {"Authorization": f"Bearer {token}", "Accept": "application/json"}
        kwargs: Dict[str, Any] = {"headers": headers, "timeout": self.timeout}
        if params:
            kwargs["params"] = params
        if payload is not None:
            kwargs["json"] = payload
        try:
            resp = getattr(self.session, method)(url, **kwargs)
        except requests.RequestException as exc:
            raise GoogleClientError(f"Google API network error: {exc}") from exc
        if resp.status_code in (401, 403):
            raise GooglePermissionError(f"HTTP {resp.status_code}")
        if resp.status_code >= 400:
            raise GoogleClientError(f"Google API error: {resp.status_code} {resp.text}")
        return resp

    def get_json(self, url: str, params: Optional[Dict[str, str]] = None) -> Dict[str, Any]:
        resp = self.request("get", url, params=params)
        try:
            data = resp.json()
        except ValueError as exc:
            raise GoogleClientError(f"Google API returned invalid JSON: {exc}") from exc
        return data if isinstance(data, dict) else {}
