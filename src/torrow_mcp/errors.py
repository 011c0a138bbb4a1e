"""Error taxonomy for torrow-mcp.

Every message is written to be shown to the user as-is.
"""


class TorrowError(Exception):
    """Base class for all errors raised by torrow-mcp."""


class EmptyInputError(TorrowError, ValueError):
    """A phrase was empty or whitespace only."""


class InvalidNameError(TorrowError, ValueError):
    """A name is blank or too long."""


class EmptyNameError(InvalidNameError):
    """A phrase had no name before its first dot."""


class NotFoundError(TorrowError, LookupError):
    """A record does not exist, or could not be listed."""


class WrongKindError(NotFoundError):
    """An archive was requested as a note, or a note as an archive."""


class DuplicateNameError(TorrowError):
    """A sibling with the same name (case-insensitive) already exists."""


class QuotaExceededError(TorrowError):
    """The root context already holds the maximum number of archives."""


class ConsistencyError(TorrowError):
    """A freshly created record is not visible where it should be."""


class MissingSelectionError(TorrowError):
    """An operation needed a current archive or note, and none is selected."""


class AuthenticationError(TorrowError):
    """No API token is available."""


class TorrowApiError(TorrowError):
    """The note store rejected a request or could not be reached."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(f"Torrow API error: {message}")
        self.status_code = status_code
