"""Configuration constants for torrow-mcp."""

import os
from pathlib import Path

# API token location, used when TORROW_TOKEN is not set. First file found is used.
API_TOKEN_FILES: list[Path] = [
    Path("~/.config/torrow-token.txt").expanduser(),
    Path("~/.config/secret/torrow-token.txt").expanduser(),
    Path(f"/run/user/{os.getuid()}/torrow-token"),
]

DEFAULT_API_BASE: str = "https://torrow.net"

API_BASE: str = os.environ.get("TORROW_API_BASE") or DEFAULT_API_BASE

SERVER_NAME: str = (
    os.environ.get("MCP_SERVER_NAME") or os.environ.get("TORROW_MCP_SERVER_NAME") or "torrow-mcp"
)

# Seconds before an HTTP request to the note store is abandoned.
REQUEST_TIMEOUT: float = 30.0

# Name of the hidden context all archives live under.
ROOT_CONTEXT_NAME: str = "MCP"

MAX_ARCHIVES: int = 10

MAX_NAME_LENGTH: int = 100


def resolve_token() -> str | None:
    """Return the API token from the environment or the first readable token file."""
    token = os.environ.get("TORROW_TOKEN")
    if token and token.strip():
        return token.strip()
    for token_path in API_TOKEN_FILES:
        try:
            return token_path.read_text(encoding="utf-8").strip()
        except FileNotFoundError:
            pass
    return None
