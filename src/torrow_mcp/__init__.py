"""Torrow archives and notes for MCP clients."""

from torrow_mcp.api import TorrowApi
from torrow_mcp.core.phrase import parse_phrase, validate_name
from torrow_mcp.core.service import TorrowService
from torrow_mcp.core.session import SessionContext
from torrow_mcp.core.store.client import TorrowClient
from torrow_mcp.protocols import ApiProtocol, NoteStoreProtocol

__all__ = [
    "ApiProtocol",
    "NoteStoreProtocol",
    "SessionContext",
    "TorrowApi",
    "TorrowClient",
    "TorrowService",
    "parse_phrase",
    "validate_name",
]
