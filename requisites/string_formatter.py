"""
Lightweight positional string formatter.

Substitutes ``{}`` and ``%s`` placeholders, left to right, with positional
arguments. Meant for building diagnostic messages, so it never raises:
surplus arguments are dropped and surplus placeholders are left as text.

Example:
- ``format("{} is not %s", "x", "valid")`` -> ``"x is not valid"``
"""

from __future__ import annotations

from typing import Any, NamedTuple, Optional

PLACEHOLDER_LEN = 2
PLACEHOLDERS = ("{}", "%s")

# Start char -> matching end char.
_TOKEN_PAIRS = {"{": "}", "%": "s"}

NULL_TEXT = "null"


class FormatState(NamedTuple):
    """The partially substituted text and the offset scanning resumes from."""

    text: str
    cursor: int = 0


def _as_text(value: Any) -> str:
    if value is None:
        return NULL_TEXT
    return str(value)


def _placeholder_at(text: str, offset: int) -> bool:
    end = _TOKEN_PAIRS.get(text[offset])
    return end is not None and offset + 1 < len(text) and text[offset + 1] == end


def find_placeholder(text: str, start: int = 0) -> int:
    """Return the index of the first placeholder at or after ``start``, or -1."""
    for offset in range(max(start, 0), len(text) - 1):
        if _placeholder_at(text, offset):
            return offset
    return -1


def count_placeholders(template: Optional[str]) -> int:
    """Count non-overlapping placeholder tokens in ``template``."""
    if not template:
        return 0
    count = 0
    offset = find_placeholder(template)
    while offset >= 0:
        count += 1
        offset = find_placeholder(template, offset + PLACEHOLDER_LEN)
    return count


def inject_placeholder(state: FormatState, arg: Any) -> FormatState:
    """Replace the next placeholder at or after the cursor with ``arg``.

    The returned cursor points one past the inserted text, so the
    replacement is never scanned again. If no placeholder remains the
    state comes back unchanged and ``arg`` is dropped.
    """
    text, cursor = state
    found = find_placeholder(text, cursor)
    if found < 0:
        return state

    old_len = len(text)
    text = text[:found] + _as_text(arg) + text[found + PLACEHOLDER_LEN:]
    return FormatState(text, found + PLACEHOLDER_LEN + (len(text) - old_len))


def format(template: Optional[str], *args: Any) -> Optional[str]:
    """Substitute ``args`` into the placeholders of ``template`` in order.

    ``None``, empty and whitespace-only templates are returned unchanged.
    """
    if not args or not template or template.isspace():
        return template

    state = FormatState(template)
    for arg in args:
        state = inject_placeholder(state, arg)
    return state.text
