"""Single-shot HTTP GET transport."""

from __future__ import annotations

import os
from typing import Optional, Sequence
from urllib.error import HTTPError, URLError
from urllib.request import Request, urlopen

from .. import __version__

_AUTO_TOKEN = object()


class TransportError(RuntimeError):
    """Raised when an upstream request does not succeed."""


class HttpTransport:
    """Fetches text bodies over HTTP with no retries."""

    ENV_TOKEN_KEYS = ("VMASYNC_GITHUB_TOKEN", "GITHUB_TOKEN")
    USER_AGENT = f"vmasync/{__version__}"

    def __init__(self, *, token: str | None | object = _AUTO_TOKEN) -> None:
        self.token = self._resolve_token(token)

    def get(self, url: str, *, error_message: str) -> str:
        """Return the response body of ``url``; raise ``TransportError`` on non-2xx."""
        headers = {"User-Agent": self.USER_AGENT}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        request = Request(url, headers=headers, method="GET")

        try:
            with urlopen(request) as response:  # type: ignore[arg-type]
                status = getattr(response, "status", 200)
                if not 200 <= status < 300:
                    raise TransportError(
                        f"{error_message}: {status} {getattr(response, 'reason', '')}".rstrip()
                    )
                raw = response.read()
        except HTTPError as exc:
            raise TransportError(f"{error_message}: {exc.code} {exc.reason}") from exc
        except URLError as exc:
            raise TransportError(f"{error_message}: {exc.reason}") from exc

        return raw.decode("utf-8", errors="replace")

    def _resolve_token(self, token: str | None | object) -> Optional[str]:
        if token is _AUTO_TOKEN:
            return self._first_env_value(self.ENV_TOKEN_KEYS)
        return token  # type: ignore[return-value]

    @staticmethod
    def _first_env_value(keys: Sequence[str]) -> str | None:
        for key in keys:
            value = os.getenv(key)
            if value:
                return value
        return None


__all__ = ["HttpTransport", "TransportError"]
