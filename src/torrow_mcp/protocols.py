"""Protocols for dependency injection in the service layer."""

from typing import Any, Protocol, runtime_checkable

from torrow_mcp.models.note import CreateNoteInfo, Entity, RootContext


@runtime_checkable
class ApiProtocol(Protocol):
    """Protocol for Torrow HTTP transports."""

    def call(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, str] | None = None,
        body: Any = None,
    ) -> Any:
        """Invoke an API endpoint and return the decoded JSON response."""
        ...


@runtime_checkable
class NoteStoreProtocol(Protocol):
    """Protocol for the flat remote note store."""

    def create_note(self, info: CreateNoteInfo, parent_id: str | None = None) -> Entity | None:
        """Create a note, optionally inside a parent context or group."""
        ...

    def update_note(self, note_id: str, fields: dict[str, Any]) -> Entity | None:
        """Replace the writable fields of a note."""
        ...

    def delete_note(self, note_id: str, cascade: bool | None = None) -> None:
        """Delete a note; cascade asks the server to delete group members too."""
        ...

    def get_note(self, note_id: str) -> Entity | None:
        """Fetch a single record, or None if it does not exist."""
        ...

    def set_as_group(self, note_id: str) -> None:
        """Convert a note into a group (archive). One-way."""
        ...

    def add_to_group(self, note_id: str, group_id: str, tags: tuple[str, ...] = ()) -> None:
        """Include a note into a group with group-scoped tags."""
        ...

    def search_notes(
        self,
        text: str | None = None,
        take: int | None = None,
        skip: int | None = None,
        group_id: str | None = None,
        tags: tuple[str, ...] | list[str] | None = None,
        distance: int | None = None,
    ) -> list[Entity]:
        """Search notes, optionally scoped to a group and filtered by tags."""
        ...

    def list_contexts(self) -> list[RootContext]:
        """List the caller's contexts."""
        ...

    def create_context(self, name: str) -> RootContext:
        """Create a new context."""
        ...

    def list_members(
        self, parent_id: str, take: int | None = None, skip: int | None = None
    ) -> list[Entity]:
        """List direct members of a context or group."""
        ...

    def list_pinned(
        self, parent_id: str, take: int | None = None, skip: int | None = None
    ) -> list[Entity]:
        """List pinned members of a context or group."""
        ...
