"""Tests for TorrowApi: HTTP transport with bearer auth."""

import json
from pathlib import Path
from typing import Any
from unittest.mock import MagicMock, patch

import pytest
import requests

from torrow_mcp.api import TorrowApi, normalize_token
from torrow_mcp.errors import AuthenticationError, TorrowApiError


@pytest.fixture
def api_with_mock_session() -> tuple[TorrowApi, MagicMock]:
    """Create a TorrowApi with a mocked requests.Session."""
    with patch("torrow_mcp.api.requests.Session") as mock_session_cls:
        mock_session = MagicMock()
        mock_session_cls.return_value = mock_session
        api = TorrowApi("test-token", api_base="https://example.test/")
    return api, mock_session


def _make_response(data: Any, status_code: int = 200) -> MagicMock:
    """Create a mock HTTP response with given JSON data."""
    response = MagicMock()
    response.status_code = status_code
    response.ok = status_code < 400
    response.reason = "Not Found" if status_code == 404 else "OK"
    response.text = json.dumps(data) if data is not None else ""
    response.content = response.text.encode()
    response.json.return_value = data
    return response


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("abc", "Bearer abc"), ("  Bearer abc ", "Bearer abc"), ("   ", "")],
)
def test_normalize_token(raw: str, expected: str) -> None:
    assert normalize_token(raw) == expected


def test_init_sets_authorization_header(api_with_mock_session: tuple[TorrowApi, MagicMock]) -> None:
    api, session = api_with_mock_session
    assert api.auth_header == "Bearer test-token"
    session.headers.update.assert_called_once()
    assert session.headers.update.call_args[0][0]["Authorization"] == "Bearer test-token"


def test_init_reads_token_file_when_env_missing(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    token_file = tmp_path / "token.txt"
    token_file.write_text("file-token\n")
    monkeypatch.delenv("TORROW_TOKEN", raising=False)
    monkeypatch.setattr("torrow_mcp.config.API_TOKEN_FILES", [tmp_path / "missing", token_file])

    with patch("torrow_mcp.api.requests.Session"):
        api = TorrowApi()

    assert api.auth_header == "Bearer file-token"


def test_init_raises_without_token(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("TORROW_TOKEN", raising=False)
    monkeypatch.setattr("torrow_mcp.config.API_TOKEN_FILES", [tmp_path / "missing"])

    with pytest.raises(AuthenticationError, match="TORROW_TOKEN"):
        TorrowApi()


def test_call_returns_json(api_with_mock_session: tuple[TorrowApi, MagicMock]) -> None:
    api, session = api_with_mock_session
    session.request.return_value = _make_response({"id": "n1"})

    result = api.call("GET", "/api/v1/notes/n1", params={"a": "b"})

    assert result == {"id": "n1"}
    method, url = session.request.call_args[0]
    assert method == "GET"
    assert url == "https://example.test/api/v1/notes/n1"
    assert session.request.call_args[1]["params"] == {"a": "b"}


def test_call_returns_none_for_empty_body(
    api_with_mock_session: tuple[TorrowApi, MagicMock],
) -> None:
    api, session = api_with_mock_session
    session.request.return_value = _make_response(None)
    assert api.call("DELETE", "/api/v1/notes/n1") is None


def test_call_raises_with_server_message(
    api_with_mock_session: tuple[TorrowApi, MagicMock],
) -> None:
    api, session = api_with_mock_session
    session.request.return_value = _make_response({"message": "No such note"}, 404)

    with pytest.raises(TorrowApiError, match="No such note") as exc_info:
        api.call("GET", "/api/v1/notes/n1")
    assert exc_info.value.status_code == 404


def test_call_wraps_connection_errors(
    api_with_mock_session: tuple[TorrowApi, MagicMock],
) -> None:
    api, session = api_with_mock_session
    session.request.side_effect = requests.ConnectionError("refused")

    with pytest.raises(TorrowApiError, match="refused") as exc_info:
        api.call("GET", "/api/v1/notes/n1")
    assert exc_info.value.status_code is None
