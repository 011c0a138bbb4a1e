"""Per-connection selection state (current archive and note)."""

from dataclasses import dataclass, replace

from torrow_mcp.errors import MissingSelectionError


@dataclass
class ContextSnapshot:
    """The caller's current selection."""

    root_context_id: str | None = None
    archive_id: str | None = None
    archive_name: str | None = None
    note_id: str | None = None
    note_name: str | None = None


class SessionContext:
    """Mutable cursor over the caller's selected archive and note.

    One instance per client session; it has no owner key of its own.
    """

    def __init__(self) -> None:
        self._state = ContextSnapshot()

    @property
    def root_context_id(self) -> str | None:
        return self._state.root_context_id

    @property
    def archive_id(self) -> str | None:
        return self._state.archive_id

    @property
    def archive_name(self) -> str | None:
        return self._state.archive_name

    @property
    def note_id(self) -> str | None:
        return self._state.note_id

    @property
    def note_name(self) -> str | None:
        return self._state.note_name

    def set_root_context_id(self, context_id: str | None) -> None:
        self._state.root_context_id = context_id

    def set_archive(self, archive_id: str | None, archive_name: str | None = None) -> None:
        """Select an archive (or none). The selected note is always cleared."""
        self._state.archive_id = archive_id
        self._state.archive_name = archive_name
        self._state.note_id = None
        self._state.note_name = None

    def set_note(self, note_id: str | None, note_name: str | None = None) -> None:
        self._state.note_id = note_id
        self._state.note_name = note_name

    def snapshot(self) -> ContextSnapshot:
        """Return a copy of the current state."""
        return replace(self._state)

    def clear(self) -> None:
        self._state = ContextSnapshot()

    def has_archive(self) -> bool:
        return bool(self._state.archive_id)

    def has_note(self) -> bool:
        return bool(self._state.note_id)

    def require_archive_id(self) -> str:
        if not self._state.archive_id:
            raise MissingSelectionError(
                "No archive selected. Select an existing archive or create a new one first."
            )
        return self._state.archive_id

    def require_note_id(self) -> str:
        if not self._state.note_id:
            raise MissingSelectionError("No note selected. Select or create a note first.")
        return self._state.note_id
