"""Split a free-text phrase into note fields.

Format: ``<name>.<text> #tag #tag``. Example::

    >>> parse_phrase("Recipes. Dishes and how to cook them. #Food")
    ParsedPhrase(name='Recipes', text='Dishes and how to cook them.', tags=('Food',))
"""

import re

from torrow_mcp.config import MAX_NAME_LENGTH
from torrow_mcp.errors import EmptyInputError, EmptyNameError, InvalidNameError
from torrow_mcp.models.note import ParsedPhrase

_TAG_RE = re.compile(r"#([^#\s]+)")


def parse_phrase(phrase: str) -> ParsedPhrase:
    """Parse a phrase into name, body text and tags.

    Tags are every ``#word`` anywhere in the phrase, in order, duplicates kept.
    The first dot separates name from text. Without a dot the text is None;
    with a dot and nothing after it the text is the empty string.

    Raises:
        EmptyInputError: the phrase is blank.
        EmptyNameError: nothing precedes the first dot.
    """
    trimmed = (phrase or "").strip()
    if not trimmed:
        raise EmptyInputError("Phrase cannot be empty.")

    tags = tuple(_TAG_RE.findall(trimmed))
    without_tags = _TAG_RE.sub("", trimmed).strip()

    name, dot, rest = without_tags.partition(".")
    text = rest.strip() if dot else None
    name = name.strip()
    if not name:
        raise EmptyNameError("Name cannot be empty: put the name before the first dot.")

    return ParsedPhrase(name=name, text=text, tags=tags)


def validate_name(name: str | None) -> None:
    """Reject blank names and names longer than MAX_NAME_LENGTH characters."""
    if not name or not name.strip():
        raise InvalidNameError("Name cannot be empty.")
    if len(name) > MAX_NAME_LENGTH:
        msg = f"Name cannot be longer than {MAX_NAME_LENGTH} characters ({len(name)} given)."
        raise InvalidNameError(msg)
