"""Domain models for the Torrow note store."""

from dataclasses import dataclass, field
from typing import Any

# Search role whose presence marks a note as an archive (a group).
ARCHIVE_ROLE = "PublicReader"


@dataclass(frozen=True)
class NoteMeta:
    """Server-maintained record metadata."""

    version: int
    created_at: str | None = None
    modified_at: str | None = None


@dataclass(frozen=True)
class Note:
    """A plain note, optionally annotated with the archive it was created in."""

    id: str
    name: str
    body: str | None = None
    tags: tuple[str, ...] = ()
    note_type: str = "Text"
    meta: NoteMeta | None = None
    search_roles: tuple[str, ...] = ()
    archive_id: str | None = None
    archive_name: str | None = None
    # The record as fetched; updates are written on top of it.
    raw: dict[str, Any] = field(default_factory=dict, compare=False, repr=False)


@dataclass(frozen=True)
class Archive:
    """A note converted to a group; it holds member notes."""

    id: str
    name: str
    body: str | None = None
    tags: tuple[str, ...] = ()
    note_type: str = "Text"
    meta: NoteMeta | None = None
    search_roles: tuple[str, ...] = ()
    raw: dict[str, Any] = field(default_factory=dict, compare=False, repr=False)


Entity = Note | Archive


@dataclass(frozen=True)
class RootContext:
    """A Torrow context ("section") that archives are created under."""

    id: str
    name: str


@dataclass(frozen=True)
class CreateNoteInfo:
    """Fields for a new note or archive."""

    name: str
    text: str | None = None
    tags: tuple[str, ...] = ()
    note_type: str = "Text"


@dataclass(frozen=True)
class ParsedPhrase:
    """A free-text phrase split into name, body text and tags."""

    name: str
    text: str | None = None
    tags: tuple[str, ...] = ()


@dataclass(frozen=True)
class SearchResult:
    """Records returned by a search, with the number of hits."""

    items: tuple[Entity, ...]
    total_count: int


def has_archive_role(roles: tuple[str, ...] | list[str]) -> bool:
    return ARCHIVE_ROLE in roles


def _meta_from_payload(raw: dict[str, Any] | None) -> NoteMeta | None:
    if not raw:
        return None
    return NoteMeta(
        version=int(raw.get("version") or 0),
        created_at=raw.get("createdDate"),
        modified_at=raw.get("modifiedDate"),
    )


def entity_from_payload(data: dict[str, Any] | None) -> Entity | None:
    """Build a Note or Archive from an API record.

    Accepts both plain records (``/notes/{id}``) and view records
    (``/views/user``, search) whose id and meta live under ``itemObject``.
    A view's own top-level id is not the record id and is ignored.
    Returns None when the payload carries no id.
    """
    if not data:
        return None
    item_object = data.get("itemObject") or {}
    entity_id = item_object.get("id") if item_object else data.get("id")
    if not entity_id:
        return None

    roles = tuple((data.get("groupInfo") or {}).get("rolesToSearchItems") or ())
    fields: dict[str, Any] = {
        "id": entity_id,
        "name": data.get("name") or "",
        "body": data.get("data"),
        "tags": tuple(data.get("tags") or ()),
        "note_type": data.get("noteType") or "Text",
        "meta": _meta_from_payload(data.get("meta") or item_object.get("meta")),
        "search_roles": roles,
        "raw": dict(data),
    }
    if has_archive_role(roles):
        return Archive(**fields)
    return Note(**fields)


def entity_to_payload(entity: Entity) -> dict[str, Any]:
    """Serialize a record for ``PUT /notes/{id}``.

    The modelled fields are written over the record as fetched, so fields this
    package does not model (publicity, files, the full group role lists) go
    back unchanged.
    """
    payload: dict[str, Any] = dict(entity.raw)
    payload.update(
        {
            "id": entity.id,
            "name": entity.name,
            "data": entity.body,
            "tags": list(entity.tags),
            "noteType": entity.note_type,
        }
    )
    if entity.search_roles:
        group_info = dict(payload.get("groupInfo") or {})
        group_info["rolesToSearchItems"] = list(entity.search_roles)
        payload["groupInfo"] = group_info
    return payload


def context_from_payload(data: dict[str, Any]) -> RootContext:
    return RootContext(id=str(data["id"]), name=data.get("name") or "")
