import json
import logging
import os
from pathlib import Path
from typing import Optional

logger = logging.getLogger("dashdeck.google")

TOKEN_ENV_VAR = "DASHDECK_GOOGLE_TOKEN"


class TokenFileCredentials:
    """Opaque bearer-token provider.

    Resolution order: ``DASHDECK_GOOGLE_TOKEN``, the ``access_token`` of the
    token JSON file, then the token saved in the user config. The first hit is
    cached for the lifetime of the process.
    """

    def __init__(self, token_path: Path, fallback: str = ""):
        self.token_path = Path(token_path)
        self.fallback = (fallback or "").strip()
        self._cached: Optional[str] = None

    def __call__(self) -> Optional[str]:
        if self._cached:
            return self._cached
        token = os.environ.get(TOKEN_ENV_VAR, "").strip() or self._from_file() or self.fallback
        if token:
            self._cached = token
        return token or None

    def _from_file(self) -> str:
        if not self.token_path.exists():
            return ""
        try:
            data = json.loads(self.token_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            logger.warning("Unable to read token file %s: %s", self.token_path, exc)
            return ""
        if not isinstance(data, dict):
            return ""
        return str(data.get("access_token") or "").strip()
