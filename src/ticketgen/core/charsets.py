"""Named character domains shared by the generators."""

import string
from collections.abc import Mapping
from types import MappingProxyType

from ticketgen.core.errors import InvalidCharset

ALPHANUMERIC = string.ascii_uppercase + string.ascii_lowercase + string.digits
ALPHABETIC = string.ascii_uppercase + string.ascii_lowercase
NUMERIC = string.digits
HEX = string.digits + "abcdef"

CHARSETS: Mapping[str, str] = MappingProxyType(
    {
        "alphanumeric": ALPHANUMERIC,
        "alphabetic": ALPHABETIC,
        "numeric": NUMERIC,
        "hex": HEX,
    }
)


def resolve_charset(selector: str) -> str:
    """Return the table entry for a charset name, or the selector itself.

    Anything that is not a known name is treated as a literal set of
    characters. Raises InvalidCharset when the result would be empty.
    """
    if not isinstance(selector, str):
        raise InvalidCharset(
            f"charset must be a name or a string of characters, "
            f"got {type(selector).__name__}"
        )
    charset = CHARSETS.get(selector, selector)
    if not charset:
        raise InvalidCharset(
            f"charset must be one of {sorted(CHARSETS)} or a non-empty "
            "string of characters"
        )
    return charset


def require_literal_charset(charset: str) -> str:
    """Validate a literal charset without consulting the table."""
    if not isinstance(charset, str):
        raise InvalidCharset(
            f"charset must be a string, got {type(charset).__name__}"
        )
    if not charset:
        raise InvalidCharset("charset must contain at least one character")
    return charset
