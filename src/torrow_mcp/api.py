"""Torrow REST API transport."""

import logging
from typing import Any

import requests

from torrow_mcp.config import API_BASE, REQUEST_TIMEOUT, resolve_token
from torrow_mcp.errors import AuthenticationError, TorrowApiError


def normalize_token(token: str) -> str:
    """Return the token as an Authorization header value, adding "Bearer " if missing."""
    trimmed = token.strip()
    if not trimmed:
        return ""
    if trimmed.startswith("Bearer "):
        return trimmed
    return f"Bearer {trimmed}"


class TorrowApi:
    """Encapsulated Torrow API with bearer authentication."""

    def __init__(
        self,
        token: str | None = None,
        *,
        api_base: str | None = None,
        timeout: float = REQUEST_TIMEOUT,
    ) -> None:
        self.logger = logging.getLogger("api")
        self.api_base = (api_base or API_BASE).rstrip("/")
        self.timeout = timeout

        raw_token = token if token is not None else resolve_token()
        self.auth_header = normalize_token(raw_token or "")
        if not self.auth_header:
            msg = "TORROW_TOKEN is required: set the environment variable or a token file."
            raise AuthenticationError(msg)

        self.sess = requests.Session()
        self.sess.headers.update(
            {"Authorization": self.auth_header, "Content-Type": "application/json"}
        )
        self.logger.debug(f"API ready: base {self.api_base!r}")

    def call(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, str] | None = None,
        body: Any = None,
    ) -> Any:
        """Invoke a Torrow API endpoint, return decoded JSON (None for empty bodies)."""
        self.logger.debug(f"Making request: {method} {path!r} {params!r}")

        try:
            r = self.sess.request(
                method,
                f"{self.api_base}{path}",
                params=params,
                json=body,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise TorrowApiError(str(e)) from e

        if not r.ok:
            raise TorrowApiError(_error_message(r), r.status_code)

        if not r.content:
            return None
        try:
            return r.json()
        except ValueError as e:
            msg = f"Invalid JSON from {method} {path!r}: {r.text[:64]!r}"
            raise TorrowApiError(msg, r.status_code) from e


def _error_message(r: requests.Response) -> str:
    try:
        data = r.json()
    except ValueError:
        data = None
    if isinstance(data, dict) and data.get("message"):
        return str(data["message"])
    return f"HTTP {r.status_code} {r.reason or ''}".strip()
