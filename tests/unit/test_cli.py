"""Tests for the torrow-mcp CLI."""

import json
from collections.abc import Iterator
from dataclasses import replace
from unittest.mock import MagicMock, patch

import pytest
from typer.testing import CliRunner

from tests.unit.fakes import FakeNoteStore
from torrow_mcp.cli import app
from torrow_mcp.core.service import TorrowService
from torrow_mcp.errors import AuthenticationError, TorrowApiError
from torrow_mcp.models.note import CreateNoteInfo

runner = CliRunner()


@pytest.fixture
def fake_store() -> Iterator[FakeNoteStore]:
    """Route the archives command to an in-memory store instead of the network."""
    store = FakeNoteStore()
    with (
        patch("torrow_mcp.api.TorrowApi", return_value=MagicMock()),
        patch("torrow_mcp.core.store.client.TorrowClient", return_value=store),
    ):
        yield store


def test_parse_prints_fields() -> None:
    result = runner.invoke(app, ["parse", "Pasta.Boil 10 min.#Food"])

    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data == {"name": "Pasta", "text": "Boil 10 min.", "tags": ["Food"]}


def test_parse_without_dot_has_no_text() -> None:
    result = runner.invoke(app, ["parse", "Groceries #Shopping #Weekly"])

    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data["text"] is None
    assert data["tags"] == ["Shopping", "Weekly"]


@pytest.mark.parametrize("phrase", ["   ", "#only #tags"])
def test_parse_rejects_phrase_without_name(phrase: str) -> None:
    result = runner.invoke(app, ["parse", phrase])
    assert result.exit_code == 1
    assert "cannot be empty" in result.stdout


def test_serve_passes_transport_and_verbosity() -> None:
    with patch("torrow_mcp.mcp.server.run_mcp_server") as run:
        result = runner.invoke(app, ["--verbose", "serve", "--transport", "streamable-http"])

    assert result.exit_code == 0
    run.assert_called_once_with("streamable-http", verbose=True)


def test_archives_lists_names(fake_store: FakeNoteStore) -> None:
    archive = TorrowService(fake_store).create_archive(CreateNoteInfo(name="Recipes"))
    fake_store.records[archive.id] = replace(fake_store.records[archive.id], tags=("Food",))

    result = runner.invoke(app, ["archives"])

    assert result.exit_code == 0
    assert "1 archives" in result.stdout
    assert "Recipes #Food" in result.stdout


def test_archives_json(fake_store: FakeNoteStore) -> None:
    TorrowService(fake_store).create_archive(CreateNoteInfo(name="Recipes"))

    result = runner.invoke(app, ["archives", "--json"])

    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data["count"] == 1
    assert data["archives"][0]["type"] == "archive"


def test_archives_reports_listing_failure(fake_store: FakeNoteStore) -> None:
    fake_store.failures["list_members"] = TorrowApiError("unavailable", 503)

    result = runner.invoke(app, ["archives"])

    assert result.exit_code == 1
    assert "Could not list archives" in result.stdout


def test_archives_without_token_exits() -> None:
    with patch("torrow_mcp.api.TorrowApi", side_effect=AuthenticationError("no token")):
        result = runner.invoke(app, ["archives"])
    assert result.exit_code == 1


def test_archives_passes_explicit_token() -> None:
    with (
        patch("torrow_mcp.api.TorrowApi", return_value=MagicMock()) as api_cls,
        patch("torrow_mcp.core.store.client.TorrowClient", return_value=FakeNoteStore()),
    ):
        result = runner.invoke(app, ["archives", "--token", "alice-token"])

    assert result.exit_code == 0
    api_cls.assert_called_once_with("alice-token")
