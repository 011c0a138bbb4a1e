"""Archive and note semantics on top of the flat Torrow note store.

The store only knows notes and group links. This layer imposes the hierarchy
root context -> archives -> notes, with these rules:

* an archive is a note whose search roles contain ``PublicReader``; every
  operation that takes an id re-fetches the record and checks its kind;
* at most ``max_archives`` archives live under the root context;
* archive names are unique within the root context and note names within
  their archive (case-insensitive), checked at creation only.
"""

from dataclasses import replace
from typing import Any

from loguru import logger

from torrow_mcp.config import MAX_ARCHIVES, ROOT_CONTEXT_NAME
from torrow_mcp.errors import (
    ConsistencyError,
    DuplicateNameError,
    NotFoundError,
    QuotaExceededError,
    TorrowApiError,
    TorrowError,
    WrongKindError,
)
from torrow_mcp.models.note import (
    ARCHIVE_ROLE,
    Archive,
    CreateNoteInfo,
    Entity,
    Note,
    RootContext,
    SearchResult,
    entity_to_payload,
    has_archive_role,
)
from torrow_mcp.protocols import NoteStoreProtocol

ARCHIVE_LIST_TAKE = 20
EXISTS_SEARCH_TAKE = 20
FIND_SEARCH_TAKE = 50


def _same_name(a: str | None, b: str | None) -> bool:
    return (a or "").lower() == (b or "").lower()


class TorrowService:
    """Domain operations for archives and notes.

    One instance per client session: it caches the root context id.
    """

    def __init__(
        self,
        client: NoteStoreProtocol,
        *,
        root_context_name: str = ROOT_CONTEXT_NAME,
        max_archives: int = MAX_ARCHIVES,
        verify_created_archives: bool = True,
    ) -> None:
        self._client = client
        self.root_context_name = root_context_name
        self.max_archives = max_archives
        self.verify_created_archives = verify_created_archives
        self._root_context: RootContext | None = None

    @property
    def root_context(self) -> RootContext | None:
        """The root context once resolved, without a remote call."""
        return self._root_context

    # --- Kind checks ---

    @staticmethod
    def is_archive(entity: Entity) -> bool:
        return has_archive_role(entity.search_roles)

    def get_note(self, note_id: str) -> Note:
        entity = self._client.get_note(note_id)
        if entity is None:
            raise NotFoundError(f'Note with ID "{note_id}" not found.')
        if isinstance(entity, Archive) or self.is_archive(entity):
            raise WrongKindError(f'ID "{note_id}" is an archive, not a note.')
        return entity

    def get_archive(self, archive_id: str) -> Archive:
        entity = self._client.get_note(archive_id)
        if entity is None:
            raise NotFoundError(f'Archive with ID "{archive_id}" not found.')
        if not isinstance(entity, Archive) or not self.is_archive(entity):
            raise WrongKindError(f'ID "{archive_id}" is not an archive.')
        return entity

    # --- Notes ---

    def create_note_in_archive(self, info: CreateNoteInfo, archive_id: str) -> Note:
        """Create a note and link it into an archive with its tags.

        The create and link calls are separate; if linking fails the new note
        stays orphaned. It is logged and the error is re-raised.
        """
        archive = self.get_archive(archive_id)

        if self.note_exists_in_archive(info.name, archive.id):
            raise DuplicateNameError(
                f'A note named "{info.name}" already exists in archive "{archive.name}".'
            )

        created = self._client.create_note(info, archive.id)
        if created is None:
            raise NotFoundError(f'Failed to create note in archive "{archive.name}".')

        try:
            self._client.add_to_group(created.id, archive.id, info.tags)
        except TorrowApiError:
            logger.warning(
                "Note {} was created but could not be linked to archive {}", created.id, archive.id
            )
            raise

        logger.info("Created note {!r} ({}) in archive {!r}", info.name, created.id, archive.name)
        return Note(
            id=created.id,
            name=created.name or info.name,
            body=created.body if created.body is not None else info.text,
            tags=info.tags or created.tags,
            note_type=created.note_type,
            meta=created.meta,
            search_roles=created.search_roles,
            raw=created.raw,
            archive_id=archive.id,
            archive_name=archive.name,
        )

    def update_note(
        self,
        note_id: str,
        name: str | None = None,
        text: str | None = None,
        tags: list[str] | tuple[str, ...] | None = None,
    ) -> Note:
        """Apply the given fields to a note; None (and an empty tag list) means unchanged."""
        note = self.get_note(note_id)
        updated = replace(note, **self._changes(name, text, tags))
        self._client.update_note(note_id, entity_to_payload(updated))
        return updated

    def delete_note(self, note_id: str) -> Note:
        """Delete a note and return it as it was before deletion."""
        note = self.get_note(note_id)
        self._client.delete_note(note_id)
        logger.info("Deleted note {!r} ({})", note.name, note_id)
        return note

    def get_notes(
        self, archive_id: str, take: int | None = None, skip: int | None = None
    ) -> list[Entity]:
        return self._client.list_members(archive_id, take, skip)

    def get_pinned_notes(
        self, archive_id: str, take: int | None = None, skip: int | None = None
    ) -> list[Entity]:
        return self._client.list_pinned(archive_id, take, skip)

    def search_notes(
        self,
        text: str | None = None,
        take: int | None = None,
        skip: int | None = None,
        archive_id: str | None = None,
        tags: list[str] | tuple[str, ...] | None = None,
        distance: int | None = None,
    ) -> SearchResult:
        items = self._client.search_notes(text, take, skip, archive_id, tags, distance)
        return SearchResult(items=tuple(items), total_count=len(items))

    # --- Archives ---

    def create_archive(self, info: CreateNoteInfo) -> Archive:
        """Create an archive under the root context.

        Raises:
            QuotaExceededError: the root context already holds max_archives.
            DuplicateNameError: an archive with the same name exists.
            ConsistencyError: the new archive is not listed after creation.
        """
        existing = self.get_archives()
        if len(existing) >= self.max_archives:
            raise QuotaExceededError(
                f"Archive limit reached (at most {self.max_archives} archives)."
            )
        if any(_same_name(a.name, info.name) for a in existing):
            raise DuplicateNameError(f'An archive named "{info.name}" already exists.')

        root = self.find_or_create_root_context()
        created = self._client.create_note(info, root.id)
        if created is None:
            raise NotFoundError(f'Failed to create archive "{info.name}".')
        self._client.set_as_group(created.id)

        search_roles: tuple[str, ...] = (ARCHIVE_ROLE,)
        if self.verify_created_archives:
            listed = next((a for a in self.get_archives() if a.id == created.id), None)
            if listed is None:
                raise ConsistencyError(
                    f'Archive "{info.name}" was created but is not listed in the '
                    f'"{root.name}" context yet. Try again shortly.'
                )
            if self.is_archive(listed):
                search_roles = listed.search_roles

        logger.info("Created archive {!r} ({})", info.name, created.id)
        return Archive(
            id=created.id,
            name=created.name or info.name,
            body=created.body if created.body is not None else info.text,
            tags=info.tags or created.tags,
            note_type=created.note_type,
            meta=created.meta,
            search_roles=search_roles,
            raw=created.raw,
        )

    def update_archive(
        self,
        archive_id: str,
        name: str | None = None,
        text: str | None = None,
        tags: list[str] | tuple[str, ...] | None = None,
    ) -> Archive:
        archive = self.get_archive(archive_id)
        updated = replace(archive, **self._changes(name, text, tags))
        self._client.update_note(archive_id, entity_to_payload(updated))
        return updated

    def delete_archive(self, archive_id: str, cascade: bool | None = None) -> Archive:
        """Delete an archive; with cascade the server also deletes its notes."""
        archive = self.get_archive(archive_id)
        self._client.delete_note(archive_id, cascade)
        logger.info("Deleted archive {!r} ({}), cascade={}", archive.name, archive_id, cascade)
        return archive

    def get_archives(self) -> list[Entity]:
        """List the direct members of the root context, provisioning it if needed."""
        root = self.find_or_create_root_context()
        try:
            return self._client.list_members(root.id, ARCHIVE_LIST_TAKE, 0)
        except TorrowApiError as e:
            raise NotFoundError(f"Could not list archives: {e}") from e

    # --- Lookups ---
    # These back "does X exist" decisions, so a failed remote call and an
    # empty result both come back as None / False.

    def find_archive_by_name(self, name: str) -> Entity | None:
        try:
            archives = self.get_archives()
        except TorrowError as e:
            logger.debug("Archive lookup for {!r} failed: {}", name, e)
            return None
        return next((a for a in archives if _same_name(a.name, name)), None)

    def find_note_by_name(self, name: str, archive_id: str) -> Note | None:
        try:
            result = self.search_notes(name, FIND_SEARCH_TAKE, 0, archive_id, None, 0)
        except TorrowError as e:
            logger.debug("Note lookup for {!r} failed: {}", name, e)
            return None
        return next(
            (n for n in result.items if isinstance(n, Note) and _same_name(n.name, name)), None
        )

    def note_exists_in_archive(self, name: str, archive_id: str | None = None) -> bool:
        try:
            result = self.search_notes(name, EXISTS_SEARCH_TAKE, 0, archive_id, None, 0)
        except TorrowError as e:
            logger.debug("Duplicate check for {!r} failed, allowing creation: {}", name, e)
            return False
        return any(_same_name(n.name, name) for n in result.items)

    def find_or_create_root_context(self) -> RootContext:
        """Return the root context, creating it on first use.

        The result is kept for the lifetime of this instance: a root context
        renamed or deleted elsewhere is not noticed until a new instance is made.
        """
        if self._root_context is not None:
            return self._root_context

        contexts = self._client.list_contexts()
        found = next((c for c in contexts if c.name == self.root_context_name), None)
        if found is None:
            found = self._client.create_context(self.root_context_name)
            logger.info("Created root context {!r} ({})", found.name, found.id)
        self._root_context = found
        return found

    @staticmethod
    def _changes(
        name: str | None, text: str | None, tags: list[str] | tuple[str, ...] | None
    ) -> dict[str, Any]:
        changes: dict[str, Any] = {}
        if name is not None:
            changes["name"] = name
        if text is not None:
            changes["body"] = text
        if tags:
            changes["tags"] = tuple(tags)
        return changes
