"""Shared test fixtures."""

import pytest

from tests.unit.fakes import FakeNoteStore
from torrow_mcp.core.service import TorrowService
from torrow_mcp.mcp.server import SessionState, new_session_state
from torrow_mcp.models.note import CreateNoteInfo


@pytest.fixture
def store() -> FakeNoteStore:
    return FakeNoteStore()


@pytest.fixture
def service(store: FakeNoteStore) -> TorrowService:
    return TorrowService(store)


@pytest.fixture
def state(store: FakeNoteStore) -> SessionState:
    return new_session_state(store)


@pytest.fixture
def recipes_id(service: TorrowService) -> str:
    """Id of an archive named "Recipes"."""
    return service.create_archive(CreateNoteInfo(name="Recipes", text="Dishes")).id
