"""Tests for TorrowClient request shapes."""

from unittest.mock import MagicMock

import pytest

from torrow_mcp.core.store.client import TorrowClient
from torrow_mcp.errors import TorrowApiError
from torrow_mcp.models.note import Archive, CreateNoteInfo, Note


def test_create_note_posts_under_parent() -> None:
    mock_api = MagicMock()
    mock_api.call.return_value = {"id": "n1", "name": "Pasta"}

    note = TorrowClient(mock_api).create_note(
        CreateNoteInfo(name="Pasta", text="Boil", tags=("Food",)), "a1"
    )

    assert isinstance(note, Note)
    method, path = mock_api.call.call_args[0]
    kwargs = mock_api.call.call_args[1]
    assert (method, path) == ("POST", "/api/v1/notes")
    assert kwargs["params"] == {"parentId": "a1"}
    assert kwargs["body"]["name"] == "Pasta"
    assert kwargs["body"]["data"] == "Boil"
    assert kwargs["body"]["discriminator"] == "NoteItem"
    assert "tags" not in kwargs["body"]


def test_get_note_returns_none_on_404() -> None:
    mock_api = MagicMock()
    mock_api.call.side_effect = TorrowApiError("missing", 404)
    assert TorrowClient(mock_api).get_note("n1") is None


def test_get_note_reraises_other_errors() -> None:
    mock_api = MagicMock()
    mock_api.call.side_effect = TorrowApiError("server", 500)
    with pytest.raises(TorrowApiError):
        TorrowClient(mock_api).get_note("n1")


def test_set_as_group_sends_public_reader_role() -> None:
    mock_api = MagicMock()
    TorrowClient(mock_api).set_as_group("n1")
    method, path = mock_api.call.call_args[0]
    assert (method, path) == ("PUT", "/api/v1/notes/n1/group/set")
    assert "PublicReader" in mock_api.call.call_args[1]["body"]["rolesToSearchItems"]


def test_add_to_group_includes_note_with_tags() -> None:
    mock_api = MagicMock()
    TorrowClient(mock_api).add_to_group("n1", "a1", ("Food", "Quick"))
    kwargs = mock_api.call.call_args[1]
    assert mock_api.call.call_args[0] == ("PUT", "/api/v1/notes/n1/updategroups")
    assert kwargs["params"] == {"parentId": "a1"}
    assert kwargs["body"] == [{"groupId": "a1", "include": True, "tags": ["Food", "Quick"]}]


def test_search_notes_builds_query_and_maps_views() -> None:
    mock_api = MagicMock()
    mock_api.call.return_value = [
        {"itemObject": {"id": "n1"}, "name": "Pasta"},
        {"itemObject": {"id": "a1"}, "name": "Recipes", "groupInfo": {"rolesToSearchItems": ["PublicReader"]}},
        {"name": "broken, no id"},
    ]

    results = TorrowClient(mock_api).search_notes("pasta", 5, None, "a1", ["Food", "Quick"], 2)

    params = mock_api.call.call_args[1]["params"]
    assert params == {
        "take": "5",
        "skip": "0",
        "text": "pasta",
        "groupIds": "a1",
        "tags": "Food,Quick",
        "distance": "2",
    }
    assert [type(r) for r in results] == [Note, Archive]


def test_delete_note_passes_cascade() -> None:
    mock_api = MagicMock()
    TorrowClient(mock_api).delete_note("a1", True)
    assert mock_api.call.call_args[1]["params"] == {"cascade": "true"}


def test_list_members_uses_default_paging() -> None:
    mock_api = MagicMock()
    mock_api.call.return_value = None
    assert TorrowClient(mock_api).list_members("ctx") == []
    assert mock_api.call.call_args[0] == ("GET", "/api/v1/notes/ctx/views/user")
    assert mock_api.call.call_args[1]["params"] == {"take": "10", "skip": "0"}


def test_create_context_requires_an_id() -> None:
    mock_api = MagicMock()
    mock_api.call.return_value = {}
    with pytest.raises(TorrowApiError):
        TorrowClient(mock_api).create_context("MCP")
