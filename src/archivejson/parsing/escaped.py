from __future__ import annotations

"""
escaped – split strings on an unescaped delimiter.

Values such as `importpath=id` may carry the delimiter (or the escape
character itself) on either side. The escape character makes the next
character literal; it never appears in the output unless escaped itself.

    >>> split_escaped(r"a\\=b=c", "=", "\\\\")
    ['a=b', 'c']
"""

from typing import List, Tuple

from archivejson.constants import PAIR_DELIM, PAIR_ESCAPE
from archivejson.parsing.args_parser import ArgsParseError


class MalformedPairError(ArgsParseError):
    """Raised when a value does not decode to exactly one key and one value."""

    def __init__(self, value: str) -> None:
        super().__init__(f"malformed key=value pair {value!r}")
        self.value = value


def _check_rune(name: str, ch: str) -> None:
    if len(ch) != 1:
        raise ValueError(f"{name} must be a single character, got {ch!r}")


def split_escaped(value: str, delimiter: str, escape: str) -> List[str]:
    """Split *value* on every unescaped *delimiter*.

    The result always holds at least one field, and exactly one more field
    than there are unescaped delimiters. A dangling escape at the very end of
    *value* is dropped without error.

    Args:
        value: String to split.
        delimiter: Single field separator character.
        escape: Single escape character, distinct from *delimiter*.

    Returns:
        The ordered list of fields.
    """
    _check_rune("delimiter", delimiter)
    _check_rune("escape", escape)
    if delimiter == escape:
        raise ValueError("delimiter and escape must differ")

    fields: List[str] = []
    current: List[str] = []
    escaped = False
    for ch in value:
        if escaped:
            current.append(ch)
            escaped = False
        elif ch == escape:
            escaped = True
        elif ch == delimiter:
            fields.append("".join(current))
            current = []
        else:
            current.append(ch)
    fields.append("".join(current))
    return fields


def split_key_value(
    token: str, delimiter: str = PAIR_DELIM, escape: str = PAIR_ESCAPE
) -> Tuple[str, str]:
    """Decode an escaped `key=value` token into its two parts."""
    fields = split_escaped(token, delimiter, escape)
    if len(fields) != 2:
        raise MalformedPairError(token)
    return fields[0], fields[1]
