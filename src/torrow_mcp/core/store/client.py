"""Note-store operations against the Torrow API."""

from typing import Any

from loguru import logger

from torrow_mcp.errors import TorrowApiError
from torrow_mcp.models.note import (
    CreateNoteInfo,
    Entity,
    RootContext,
    context_from_payload,
    entity_from_payload,
)
from torrow_mcp.protocols import ApiProtocol

# Role lists sent when a note becomes a group. PublicReader in the search roles
# is what later identifies the note as an archive.
GROUP_ROLES: dict[str, list[str] | None] = {
    "rolesToInclude": ["Owner", "Manager"],
    "rolesToReadItems": ["Owner", "Editor", "Manager", "Reader", "PublicReader"],
    "rolesToReadSubscribers": None,
    "rolesToSearchItems": ["Owner", "Editor", "Manager", "Reader", "PublicReader"],
    "rolesToSearchSubscribers": None,
    "rolesToUpdateItems": ["Owner", "Manager"],
}

DEFAULT_TAKE = 10


def _paging(take: int | None, skip: int | None) -> dict[str, str]:
    return {
        "take": str(take if take is not None else DEFAULT_TAKE),
        "skip": str(skip if skip is not None else 0),
    }


def _entities(rows: Any) -> list[Entity]:
    entities = []
    for row in rows or []:
        entity = entity_from_payload(row)
        if entity is not None:
            entities.append(entity)
    return entities


class TorrowClient:
    """Flat CRUD, search and group operations over a Torrow API transport."""

    def __init__(self, api: ApiProtocol) -> None:
        self._api = api

    def create_note(self, info: CreateNoteInfo, parent_id: str | None = None) -> Entity | None:
        """Create a note, optionally inside a context or group.

        Tags are not sent here: they are attached when the note joins a group.
        """
        params: dict[str, str] = {}
        if parent_id:
            params["parentId"] = parent_id

        body: dict[str, Any] = {
            "name": info.name,
            "noteType": info.note_type or "Text",
            "discriminator": "NoteItem",
            "files": [],
            "imagePreviewSize": "Small",
            "publicityType": "Link",
        }
        if info.text is not None:
            body["data"] = info.text

        return entity_from_payload(self._api.call("POST", "/api/v1/notes", params=params, body=body))

    def update_note(self, note_id: str, fields: dict[str, Any]) -> Entity | None:
        payload = {**fields, "id": note_id}
        return entity_from_payload(self._api.call("PUT", f"/api/v1/notes/{note_id}", body=payload))

    def delete_note(self, note_id: str, cascade: bool | None = None) -> None:
        params: dict[str, str] = {}
        if cascade is not None:
            params["cascade"] = "true" if cascade else "false"
        self._api.call("DELETE", f"/api/v1/notes/{note_id}", params=params)

    def get_note(self, note_id: str) -> Entity | None:
        """Fetch a record by id; None when the server has no such record."""
        try:
            data = self._api.call("GET", f"/api/v1/notes/{note_id}")
        except TorrowApiError as e:
            if e.status_code == 404:
                logger.debug("Note {} not found", note_id)
                return None
            raise
        return entity_from_payload(data)

    def set_as_group(self, note_id: str) -> None:
        self._api.call("PUT", f"/api/v1/notes/{note_id}/group/set", body=GROUP_ROLES)

    def add_to_group(self, note_id: str, group_id: str, tags: tuple[str, ...] = ()) -> None:
        body = [{"groupId": group_id, "include": True, "tags": list(tags)}]
        self._api.call(
            "PUT",
            f"/api/v1/notes/{note_id}/updategroups",
            params={"parentId": group_id},
            body=body,
        )

    def search_notes(
        self,
        text: str | None = None,
        take: int | None = None,
        skip: int | None = None,
        group_id: str | None = None,
        tags: tuple[str, ...] | list[str] | None = None,
        distance: int | None = None,
    ) -> list[Entity]:
        params = _paging(take, skip)
        if text:
            params["text"] = text
        if group_id:
            params["groupIds"] = group_id
        if tags:
            params["tags"] = ",".join(tags)
        if distance:
            params["distance"] = str(distance)
        return _entities(self._api.call("GET", "/api/v1/search/notes", params=params))

    def list_contexts(self) -> list[RootContext]:
        params = {
            "take": "20",
            "skip": "0",
            "lmfrom": "1970-01-01T00:00:00.000Z",
            "includeDeleted": "false",
            "sort": "OrderDesc",
        }
        rows = self._api.call("GET", "/api/v1/contexts/personallist", params=params)
        return [context_from_payload(row) for row in rows or [] if row.get("id")]

    def create_context(self, name: str) -> RootContext:
        data = self._api.call(
            "POST", "/api/v1/contexts", body={"name": name, "discriminator": "ContextItem"}
        )
        if not data or not data.get("id"):
            msg = f"Context {name!r} was not created"
            raise TorrowApiError(msg)
        return context_from_payload(data)

    def list_members(
        self, parent_id: str, take: int | None = None, skip: int | None = None
    ) -> list[Entity]:
        rows = self._api.call(
            "GET", f"/api/v1/notes/{parent_id}/views/user", params=_paging(take, skip)
        )
        return _entities(rows)

    def list_pinned(
        self, parent_id: str, take: int | None = None, skip: int | None = None
    ) -> list[Entity]:
        rows = self._api.call(
            "GET", f"/api/v1/notes/{parent_id}/views/pinned", params=_paging(take, skip)
        )
        return _entities(rows)
