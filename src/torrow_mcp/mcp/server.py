"""MCP server exposing Torrow archives and notes as tools, resources and prompts."""

import functools
import json
import weakref
from collections import Counter
from collections.abc import AsyncIterator, Callable
from contextlib import asynccontextmanager
from dataclasses import asdict, dataclass, field
from typing import Any, ParamSpec

from loguru import logger
from mcp.server.fastmcp import Context, FastMCP

from torrow_mcp.config import SERVER_NAME
from torrow_mcp.core.phrase import parse_phrase, validate_name
from torrow_mcp.core.service import TorrowService
from torrow_mcp.core.session import SessionContext
from torrow_mcp.errors import AuthenticationError, NotFoundError, TorrowError
from torrow_mcp.models.note import Archive, CreateNoteInfo, Entity, Note, ParsedPhrase
from torrow_mcp.protocols import NoteStoreProtocol

P = ParamSpec("P")

# Archive stats read at most this many notes; hitting it means "more than".
MAX_STATS_NOTES = 101


@dataclass
class SessionState:
    """Selection cursor and domain service owned by one client session."""

    service: TorrowService
    context: SessionContext = field(default_factory=SessionContext)
    # Bearer token the session was opened with; None when it uses the process token.
    token: str | None = None


def new_session_state(client: NoteStoreProtocol, *, token: str | None = None) -> SessionState:
    return SessionState(service=TorrowService(client), token=token)


def _remember_root(state: SessionState) -> None:
    """Copy the service's resolved root context id into the session cursor."""
    root = state.service.root_context
    if root is not None:
        state.context.set_root_context_id(root.id)


def _entity_dict(entity: Entity) -> dict[str, Any]:
    entry: dict[str, Any] = {
        "id": entity.id,
        "name": entity.name,
        "text": entity.body,
        "tags": list(entity.tags),
        "type": "archive" if isinstance(entity, Archive) else "note",
    }
    if entity.meta is not None:
        entry["meta"] = asdict(entity.meta)
    if isinstance(entity, Note) and entity.archive_id:
        entry["archive_id"] = entity.archive_id
        entry["archive_name"] = entity.archive_name
    return entry


def _tags_suffix(entity: Entity) -> str:
    return " #" + " #".join(entity.tags) if entity.tags else ""


def _reports_errors(func: Callable[P, dict[str, Any]]) -> Callable[P, dict[str, Any]]:
    """Render domain errors as ``{"error": message}`` results."""

    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> dict[str, Any]:
        try:
            return func(*args, **kwargs)
        except TorrowError as e:
            logger.debug("{} failed: {}", func.__name__, e)
            return {"error": str(e)}

    return wrapper


def _new_fields(
    phrase: str | None, name: str | None, text: str | None, tags: list[str] | None
) -> ParsedPhrase:
    """Fields for a new record, from a phrase or from explicit arguments."""
    if phrase:
        parsed = parse_phrase(phrase)
    else:
        parsed = ParsedPhrase(name=(name or "").strip(), text=text, tags=tuple(tags or ()))
    validate_name(parsed.name)
    return parsed


def _changed_fields(
    phrase: str | None, name: str | None, text: str | None, tags: list[str] | None
) -> ParsedPhrase | None:
    """Fields for an update; None name means "keep the current name"."""
    if phrase:
        parsed = parse_phrase(phrase)
        validate_name(parsed.name)
        return parsed
    if name is not None:
        validate_name(name)
    return None


# --- Core tool functions (testable without MCP context) ---


@_reports_errors
def torrow_create_archive(
    state: SessionState,
    *,
    phrase: str | None = None,
    name: str | None = None,
    text: str | None = None,
    tags: list[str] | None = None,
) -> dict[str, Any]:
    """Create an archive and make it the current one.

    Args:
        phrase: "<name>.<text> #tag" phrase; overrides name/text/tags.
        name: Archive name.
        text: Archive description.
        tags: Archive tags.
    """
    fields = _new_fields(phrase, name, text, tags)
    archive = state.service.create_archive(
        CreateNoteInfo(name=fields.name, text=fields.text, tags=fields.tags)
    )
    _remember_root(state)
    state.context.set_archive(archive.id, archive.name)
    return {
        "success": True,
        "message": f'Archive "{archive.name}" created. ID: {archive.id}',
        "archive": _entity_dict(archive),
    }


@_reports_errors
def torrow_select_archive(
    state: SessionState, *, archive_id: str | None = None, name: str | None = None
) -> dict[str, Any]:
    """Make an archive current, by id or by name. Clears the current note."""
    if not archive_id:
        validate_name(name)
        found = state.service.find_archive_by_name(name or "")
        if found is None:
            raise NotFoundError(f'Archive "{name}" not found.')
        archive_id = found.id
    archive = state.service.get_archive(archive_id)
    _remember_root(state)
    state.context.set_archive(archive.id, archive.name)
    return {
        "success": True,
        "message": f'Archive "{archive.name}" selected.',
        "archive": _entity_dict(archive),
    }


@_reports_errors
def torrow_list_archives(state: SessionState) -> dict[str, Any]:
    """List archives under the root context."""
    archives = state.service.get_archives()
    _remember_root(state)
    return {
        "archives": [_entity_dict(a) for a in archives],
        "count": len(archives),
        "current_archive_id": state.context.archive_id,
    }


@_reports_errors
def torrow_update_archive(
    state: SessionState,
    *,
    archive_id: str | None = None,
    phrase: str | None = None,
    name: str | None = None,
    text: str | None = None,
    tags: list[str] | None = None,
) -> dict[str, Any]:
    """Update an archive (the current one unless archive_id is given)."""
    target_id = archive_id or state.context.require_archive_id()
    parsed = _changed_fields(phrase, name, text, tags)
    if parsed is not None:
        updated = state.service.update_archive(
            target_id, parsed.name, parsed.text, list(parsed.tags)
        )
    else:
        updated = state.service.update_archive(target_id, name, text, tags)

    if target_id == state.context.archive_id:
        note_id, note_name = state.context.note_id, state.context.note_name
        state.context.set_archive(updated.id, updated.name)
        state.context.set_note(note_id, note_name)
    return {
        "success": True,
        "message": f'Archive "{updated.name}" updated.',
        "archive": _entity_dict(updated),
    }


@_reports_errors
def torrow_delete_archive(
    state: SessionState, *, archive_id: str | None = None, cascade: bool = False
) -> dict[str, Any]:
    """Delete an archive (the current one unless archive_id is given)."""
    target_id = archive_id or state.context.require_archive_id()
    archive = state.service.delete_archive(target_id, cascade)
    if target_id == state.context.archive_id:
        state.context.set_archive(None)
    suffix = " with all its notes" if cascade else ""
    return {
        "success": True,
        "message": f'Archive "{archive.name}" deleted{suffix}.',
        "archive_id": archive.id,
    }


@_reports_errors
def torrow_create_note(
    state: SessionState,
    *,
    phrase: str | None = None,
    name: str | None = None,
    text: str | None = None,
    tags: list[str] | None = None,
    archive_id: str | None = None,
) -> dict[str, Any]:
    """Create a note in an archive (the current one unless archive_id is given).

    The note becomes the current note.
    """
    target_id = archive_id or state.context.require_archive_id()
    fields = _new_fields(phrase, name, text, tags)
    note = state.service.create_note_in_archive(
        CreateNoteInfo(name=fields.name, text=fields.text, tags=fields.tags), target_id
    )
    if target_id != state.context.archive_id:
        state.context.set_archive(note.archive_id, note.archive_name)
    state.context.set_note(note.id, note.name)
    return {
        "success": True,
        "message": f'Note "{note.name}" created in archive "{note.archive_name}". ID: {note.id}',
        "note": _entity_dict(note),
    }


@_reports_errors
def torrow_select_note(
    state: SessionState,
    *,
    note_id: str | None = None,
    name: str | None = None,
    archive_id: str | None = None,
) -> dict[str, Any]:
    """Make a note current, by id or by name within an archive."""
    if note_id:
        note = state.service.get_note(note_id)
    else:
        validate_name(name)
        target_id = archive_id or state.context.require_archive_id()
        found = state.service.find_note_by_name(name or "", target_id)
        if found is None:
            raise NotFoundError(f'Note "{name}" not found.')
        note = state.service.get_note(found.id)
        if target_id != state.context.archive_id:
            archive = state.service.get_archive(target_id)
            state.context.set_archive(archive.id, archive.name)
    state.context.set_note(note.id, note.name)
    return {
        "success": True,
        "message": f'Note "{note.name}" selected.',
        "note": _entity_dict(note),
    }


@_reports_errors
def torrow_update_note(
    state: SessionState,
    *,
    note_id: str | None = None,
    phrase: str | None = None,
    name: str | None = None,
    text: str | None = None,
    tags: list[str] | None = None,
) -> dict[str, Any]:
    """Update a note (the current one unless note_id is given)."""
    target_id = note_id or state.context.require_note_id()
    parsed = _changed_fields(phrase, name, text, tags)
    if parsed is not None:
        updated = state.service.update_note(target_id, parsed.name, parsed.text, list(parsed.tags))
    else:
        updated = state.service.update_note(target_id, name, text, tags)

    if target_id == state.context.note_id:
        state.context.set_note(updated.id, updated.name)
    return {
        "success": True,
        "message": f'Note "{updated.name}" updated.',
        "note": _entity_dict(updated),
    }


@_reports_errors
def torrow_delete_note(state: SessionState, *, note_id: str | None = None) -> dict[str, Any]:
    """Delete a note (the current one unless note_id is given)."""
    target_id = note_id or state.context.require_note_id()
    note = state.service.delete_note(target_id)
    if target_id == state.context.note_id:
        state.context.set_note(None)
    return {"success": True, "message": f'Note "{note.name}" deleted.', "note_id": note.id}


@_reports_errors
def torrow_search_notes(
    state: SessionState,
    *,
    phrase: str | None = None,
    tags: list[str] | None = None,
    archive_id: str | None = None,
    limit: int = 10,
    skip: int = 0,
    distance: int = 0,
) -> dict[str, Any]:
    """Search notes in an archive (the current one unless archive_id is given).

    Args:
        phrase: Search text.
        tags: Only notes carrying these tags.
        archive_id: Archive to search in.
        limit: Max results (1-50, default 10).
        skip: Pagination offset.
        distance: Fuzziness of the text match (0 = exact words).
    """
    limit = max(1, min(limit, 50))
    target_id = archive_id or state.context.archive_id
    if target_id:
        state.service.get_archive(target_id)
    result = state.service.search_notes(phrase, limit, skip, target_id, tags, distance)
    notes = [n for n in result.items if not state.service.is_archive(n)]
    output: dict[str, Any] = {
        "results": [_entity_dict(n) for n in notes],
        "count": len(notes),
        "archive_id": target_id,
    }
    if not notes:
        output["message"] = "No notes found."
    return output


def torrow_get_context(state: SessionState) -> dict[str, Any]:
    """Return the current selection."""
    return asdict(state.context.snapshot())


def torrow_clear_context(state: SessionState) -> dict[str, Any]:
    state.context.clear()
    return {"success": True, "message": "Context cleared."}


# --- Core resource functions ---


def torrow_read_archives(state: SessionState) -> dict[str, Any]:
    archives = state.service.get_archives()
    _remember_root(state)
    return {"archives": [_entity_dict(a) for a in archives], "count": len(archives)}


def torrow_read_archive(state: SessionState, archive_id: str) -> dict[str, Any]:
    return _entity_dict(state.service.get_archive(archive_id))


def torrow_read_archive_notes(
    state: SessionState, archive_id: str, *, limit: int | None = 50, skip: int | None = 0
) -> dict[str, Any]:
    archive = state.service.get_archive(archive_id)
    result = state.service.search_notes(None, limit, skip, archive.id)
    return {
        "notes": [_entity_dict(n) for n in result.items],
        "count": len(result.items),
        "total_count": result.total_count,
        "archive_id": archive.id,
    }


def torrow_read_note(state: SessionState, note_id: str) -> dict[str, Any]:
    return _entity_dict(state.service.get_note(note_id))


# --- Core prompt functions ---


def prompt_list_archives(state: SessionState) -> str:
    archives = state.service.get_archives()
    _remember_root(state)
    if not archives:
        return "No archives found. Create one with the create_archive tool."
    lines = [
        f'{i}. "{a.name}" (ID: {a.id}){_tags_suffix(a)}' for i, a in enumerate(archives, start=1)
    ]
    return f"Archives found: {len(archives)}\n\n" + "\n".join(lines)


def prompt_search_notes(
    state: SessionState,
    archive_id: str,
    *,
    phrase: str | None = None,
    tags: list[str] | None = None,
    limit: int | None = None,
    skip: int | None = None,
    distance: int | None = None,
) -> str:
    archive = state.service.get_archive(archive_id)
    result = state.service.search_notes(phrase, limit, skip, archive.id, tags, distance)
    if not result.items:
        return f'No notes in archive "{archive.name}" match these parameters.'
    lines = [
        f'{i}. "{n.name}" (ID: {n.id}){_tags_suffix(n)}' for i, n in enumerate(result.items, start=1)
    ]
    return f'Notes found: {len(result.items)} in archive "{archive.name}"\n\n' + "\n".join(lines)


def prompt_archive_stats(state: SessionState, archive_id: str) -> str:
    archive = state.service.get_archive(archive_id)
    result = state.service.search_notes(None, MAX_STATS_NOTES, None, archive.id)

    tag_counts = Counter(tag for note in result.items for tag in note.tags)
    total = result.total_count
    total_str = f"more than {total}" if total >= MAX_STATS_NOTES else str(total)

    text = (
        f'Statistics for archive "{archive.name}" (ID: {archive.id}):\n\n'
        f"Total notes: {total_str}\n"
        f"Unique tags: {len(tag_counts)}\n"
    )
    if tag_counts:
        top = "\n".join(f"  - {tag}: {count}" for tag, count in tag_counts.most_common(10))
        text += f"\nTop 10 tags:\n{top}"
    else:
        text += "\nNo tags."
    return text


# --- MCP Server Setup ---


def _client_for_token(token: str) -> NoteStoreProtocol:
    from torrow_mcp.api import TorrowApi
    from torrow_mcp.core.store.client import TorrowClient

    return TorrowClient(TorrowApi(token))


@dataclass
class ServerContext:
    """Shared resources for the MCP server lifetime.

    Each client session gets its own SessionState; it is dropped with the session.
    A session opened with a bearer token talks to Torrow as that token's account;
    otherwise it uses the process-wide ``client`` (stdio, or no header sent).
    """

    client: NoteStoreProtocol | None
    client_for_token: Callable[[str], NoteStoreProtocol] = _client_for_token
    sessions: "weakref.WeakKeyDictionary[Any, SessionState]" = field(
        default_factory=weakref.WeakKeyDictionary
    )

    def state_for(self, session: Any, token: str | None = None) -> SessionState:
        state = self.sessions.get(session)
        if state is not None:
            if state.token is not None and token != state.token:
                raise AuthenticationError("Authorization token does not match this session.")
            return state

        if token:
            client = self.client_for_token(token)
        elif self.client is not None:
            client = self.client
        else:
            raise AuthenticationError(
                "Authorization required: send an 'Authorization: Bearer <token>' header."
            )
        state = new_session_state(client, token=token or None)
        self.sessions[session] = state
        logger.debug(
            "New session state ({} active, {} token)",
            len(self.sessions),
            "own" if token else "process",
        )
        return state


@asynccontextmanager
async def server_lifespan(_server: FastMCP) -> AsyncIterator[ServerContext]:
    """Open the process-wide Torrow API session if a token is configured."""
    from torrow_mcp.api import TorrowApi
    from torrow_mcp.core.store.client import TorrowClient

    api: TorrowApi | None
    try:
        api = TorrowApi()
    except AuthenticationError:
        logger.info("No TORROW_TOKEN configured; clients must send a bearer token")
        api = None
    try:
        yield ServerContext(client=TorrowClient(api) if api is not None else None)
    finally:
        if api is not None:
            api.sess.close()


mcp_server = FastMCP(
    SERVER_NAME,
    instructions="""\
Torrow stores notes in archives (catalogs). The server remembers the current
archive and the current note between calls, so most tools work without ids.

## Workflow
1. list_archives to see what exists, then select_archive (by name or id), or
   create_archive to start a new one (at most 10 archives).
2. create_note / search_notes / select_note work inside the current archive.
3. update_note / delete_note act on the current note unless note_id is given.

## Phrases
Tools that take a `phrase` accept "<name>.<text> #tag #tag": everything before
the first dot is the name, the rest is the text, and #words are tags.
Example: "Pasta. Boil 10 min. #Food".
""",
    lifespan=server_lifespan,
)


def _bearer_token(mcp_ctx: Context) -> str | None:
    """Token from the HTTP ``Authorization: Bearer`` header; None over stdio."""
    request = mcp_ctx.request_context.request
    if request is None:
        return None
    scheme, _, token = (request.headers.get("authorization") or "").partition(" ")
    if scheme != "Bearer" or not token.strip():
        return None
    return token.strip()


def _state(mcp_ctx: Context) -> SessionState:
    server_ctx: ServerContext = mcp_ctx.request_context.lifespan_context  # type: ignore[assignment]
    return server_ctx.state_for(mcp_ctx.session, _bearer_token(mcp_ctx))


def _split_tags(tags: str | None) -> list[str] | None:
    if not tags:
        return None
    return [t.strip().lstrip("#") for t in tags.split(",") if t.strip()]


# --- MCP Tool Wrappers ---


@mcp_server.tool()
async def create_archive(
    ctx: Context,
    phrase: str | None = None,
    name: str | None = None,
    text: str | None = None,
    tags: list[str] | None = None,
) -> dict[str, Any]:
    """Create a new archive (catalog) and make it the current archive.

    Pass either a phrase "<name>.<text> #tag" or name/text/tags.

    Args:
        phrase: Free-text phrase with name, text and tags.
        name: Archive name (max 100 characters).
        text: Description. Light HTML is allowed.
        tags: Tags for the archive.
    """
    return torrow_create_archive(_state(ctx), phrase=phrase, name=name, text=text, tags=tags)


@mcp_server.tool()
async def select_archive(
    ctx: Context, archive_id: str | None = None, name: str | None = None
) -> dict[str, Any]:
    """Make an archive current, by ID or by name (case-insensitive).

    Selecting an archive clears the current note.
    """
    return torrow_select_archive(_state(ctx), archive_id=archive_id, name=name)


@mcp_server.tool()
async def list_archives(ctx: Context) -> dict[str, Any]:
    """List all archives with their IDs, names and tags."""
    return torrow_list_archives(_state(ctx))


@mcp_server.tool()
async def update_archive(
    ctx: Context,
    archive_id: str | None = None,
    phrase: str | None = None,
    name: str | None = None,
    text: str | None = None,
    tags: list[str] | None = None,
) -> dict[str, Any]:
    """Update an archive. Defaults to the current archive.

    Args:
        archive_id: Archive to update (default: current archive).
        phrase: Free-text phrase with name, text and tags.
        name: New name.
        text: New description.
        tags: New tags (an empty list keeps the existing tags).
    """
    return torrow_update_archive(
        _state(ctx), archive_id=archive_id, phrase=phrase, name=name, text=text, tags=tags
    )


@mcp_server.tool()
async def delete_archive(
    ctx: Context, archive_id: str | None = None, cascade: bool = False
) -> dict[str, Any]:
    """Delete an archive. Defaults to the current archive.

    Args:
        archive_id: Archive to delete (default: current archive).
        cascade: Also delete all notes in the archive.
    """
    return torrow_delete_archive(_state(ctx), archive_id=archive_id, cascade=cascade)


@mcp_server.tool()
async def create_note(
    ctx: Context,
    phrase: str | None = None,
    name: str | None = None,
    text: str | None = None,
    tags: list[str] | None = None,
    archive_id: str | None = None,
) -> dict[str, Any]:
    """Create a note in the current archive (or archive_id) and make it current.

    Note names are unique within an archive.

    Args:
        phrase: Free-text phrase "<name>.<text> #tag".
        name: Note name (max 100 characters).
        text: Note text. Light HTML including <img> and <a> is allowed.
        tags: Tags used to group and filter notes in the archive.
        archive_id: Archive to create the note in (default: current archive).
    """
    return torrow_create_note(
        _state(ctx), phrase=phrase, name=name, text=text, tags=tags, archive_id=archive_id
    )


@mcp_server.tool()
async def select_note(
    ctx: Context,
    note_id: str | None = None,
    name: str | None = None,
    archive_id: str | None = None,
) -> dict[str, Any]:
    """Make a note current, by ID or by name within the current archive."""
    return torrow_select_note(_state(ctx), note_id=note_id, name=name, archive_id=archive_id)


@mcp_server.tool()
async def update_note(
    ctx: Context,
    note_id: str | None = None,
    phrase: str | None = None,
    name: str | None = None,
    text: str | None = None,
    tags: list[str] | None = None,
) -> dict[str, Any]:
    """Update a note. Defaults to the current note.

    Args:
        note_id: Note to update (default: current note).
        phrase: Free-text phrase with name, text and tags.
        name: New name.
        text: New text.
        tags: New tags (an empty list keeps the existing tags).
    """
    return torrow_update_note(
        _state(ctx), note_id=note_id, phrase=phrase, name=name, text=text, tags=tags
    )


@mcp_server.tool()
async def delete_note(ctx: Context, note_id: str | None = None) -> dict[str, Any]:
    """Delete a note. Defaults to the current note."""
    return torrow_delete_note(_state(ctx), note_id=note_id)


@mcp_server.tool()
async def search_notes(
    ctx: Context,
    phrase: str | None = None,
    tags: list[str] | None = None,
    archive_id: str | None = None,
    limit: int = 10,
    skip: int = 0,
    distance: int = 0,
) -> dict[str, Any]:
    """Search notes by text and tags in the current archive (or archive_id).

    Args:
        phrase: Search text.
        tags: Only notes with these tags.
        archive_id: Archive to search (default: current archive).
        limit: Max results (1-50, default 10).
        skip: Number of results to skip.
        distance: Fuzziness of the text match (default 0).
    """
    return torrow_search_notes(
        _state(ctx),
        phrase=phrase,
        tags=tags,
        archive_id=archive_id,
        limit=limit,
        skip=skip,
        distance=distance,
    )


@mcp_server.tool()
async def get_context(ctx: Context) -> dict[str, Any]:
    """Show the current archive and note."""
    return torrow_get_context(_state(ctx))


@mcp_server.tool()
async def clear_context(ctx: Context) -> dict[str, Any]:
    """Forget the current archive and note."""
    return torrow_clear_context(_state(ctx))


# --- MCP Resources ---


@mcp_server.resource("torrow://archives/list", mime_type="application/json")
def archives_list_resource() -> str:
    """All archives under the root context."""
    state = _state(mcp_server.get_context())
    return json.dumps(torrow_read_archives(state), ensure_ascii=False, indent=2)


@mcp_server.resource("torrow://archives/{archive_id}", mime_type="application/json")
def archive_resource(archive_id: str) -> str:
    """A single archive."""
    state = _state(mcp_server.get_context())
    return json.dumps(torrow_read_archive(state, archive_id), ensure_ascii=False, indent=2)


@mcp_server.resource("torrow://archives/{archive_id}/notes", mime_type="application/json")
def archive_notes_resource(archive_id: str) -> str:
    """Notes in an archive."""
    state = _state(mcp_server.get_context())
    return json.dumps(torrow_read_archive_notes(state, archive_id), ensure_ascii=False, indent=2)


@mcp_server.resource("torrow://notes/{note_id}", mime_type="application/json")
def note_resource(note_id: str) -> str:
    """A single note."""
    state = _state(mcp_server.get_context())
    return json.dumps(torrow_read_note(state, note_id), ensure_ascii=False, indent=2)


# --- MCP Prompts ---


@mcp_server.prompt(name="list_archives")
def list_archives_prompt() -> str:
    """List all available archives with their details."""
    return prompt_list_archives(_state(mcp_server.get_context()))


@mcp_server.prompt(name="search_notes")
def search_notes_prompt(
    archive_id: str,
    phrase: str | None = None,
    tags: str | None = None,
    limit: str | None = None,
    skip: str | None = None,
    distance: str | None = None,
) -> str:
    """Search notes in an archive by text and comma-separated tags."""
    return prompt_search_notes(
        _state(mcp_server.get_context()),
        archive_id,
        phrase=phrase,
        tags=_split_tags(tags),
        limit=int(limit) if limit else 20,
        skip=int(skip) if skip else 0,
        distance=int(distance) if distance else 0,
    )


@mcp_server.prompt(name="archive_stats")
def archive_stats_prompt(archive_id: str) -> str:
    """Number of notes and the most used tags in an archive."""
    return prompt_archive_stats(_state(mcp_server.get_context()), archive_id)


def run_mcp_server(transport: str = "stdio", *, verbose: bool = False) -> None:
    """Run the MCP server with the given transport."""
    from torrow_mcp.logging_config import configure_logging

    configure_logging(verbose=verbose)
    mcp_server.run(transport=transport)  # type: ignore[arg-type]
