"""
Boolean argument predicates.

None of these raise. "Positive" predicates (``is_email``, ``is_not_blank``,
``has_length`` ...) return False for None; "negative" ones (``is_null``,
``is_empty``, ``is_blank``) return True for None.

Bare iterators are consumed, but only as far as a check needs.
"""

from __future__ import annotations

import itertools
import json
import os
import re
from datetime import date, datetime, time
from pathlib import Path
from typing import Any, Callable, Dict, Optional, Pattern, Union
from xml.etree import ElementTree

PathArg = Union[str, "os.PathLike[str]"]

# Lenient on purpose: catches typos like a double @ or a trailing dot.
EMAIL_PATTERN = re.compile(r"^[^\s@]+@([^\s@.,]+\.)+[^\s@.,]{2,}$", re.IGNORECASE)
URL_PATTERN = re.compile(r"^https?://.+$", re.IGNORECASE)
HOSTNAME_PATTERN = re.compile(r"^[a-z0-9.-]+$", re.IGNORECASE)
HOST_PORT_PATTERN = re.compile(r"^[a-z0-9.-]+:\d+$", re.IGNORECASE)
IP4_ADDRESS_PATTERN = re.compile(r"^((25[0-5]|(2[0-4]|1\d|[1-9]|)\d)\.?\b){4}$")
IP6_ADDRESS_PATTERN = re.compile(r"^([a-f0-9:]+:+)+[a-f0-9]+$", re.IGNORECASE)
UUID_PATTERN = re.compile(
    r"^[a-f0-9]{8}-[a-f0-9]{4}-[a-f0-9]{4}-[a-f0-9]{4}-[a-f0-9]{12}$", re.IGNORECASE
)


# ----------------- Null and truth -----------------


def is_true(condition: Any) -> bool:
    return condition is True


def is_false(condition: Any) -> bool:
    return condition is False


def is_null(value: Any) -> bool:
    return value is None


def is_not_null(value: Any) -> bool:
    return value is not None


# ----------------- Emptiness and length -----------------


def _length_at_least(value: Any, count: int) -> Optional[int]:
    """Return ``min(len(value), count)``, or None if ``value`` has no length.

    Plain iterables are consumed only up to ``count`` items; a negative
    ``count`` is treated as zero.
    """
    count = max(count, 0)
    if value is None:
        return None
    if hasattr(value, "__len__"):
        return min(len(value), count)
    try:
        iterator = iter(value)
    except TypeError:
        return None
    return sum(1 for _ in itertools.islice(iterator, count))


def length_of(value: Any) -> Optional[int]:
    if value is None:
        return None
    if hasattr(value, "__len__"):
        return len(value)
    try:
        return sum(1 for _ in iter(value))
    except TypeError:
        return None


def is_empty(value: Any) -> bool:
    """True if the value is None or has no items."""
    return value is None or _length_at_least(value, 1) == 0


def is_not_empty(value: Any) -> bool:
    """True if the value has at least one item or character."""
    return not is_empty(value)


def is_blank(value: Optional[str]) -> bool:
    """True if the string is None, empty, or whitespace only."""
    return value is None or len(value) == 0 or value.isspace()


def is_not_blank(value: Optional[str]) -> bool:
    """True if the string has at least one non-whitespace character."""
    return not is_blank(value)


def has_length(value: Any, length: int) -> bool:
    size = _length_at_least(value, length + 1)
    return size is not None and size == length


def has_length_greater_than(value: Any, min_length: int) -> bool:
    size = _length_at_least(value, min_length + 1)
    return size is not None and size > min_length


def has_length_greater_or_equal_to(value: Any, min_length: int) -> bool:
    size = _length_at_least(value, min_length)
    return size is not None and size >= min_length


def has_length_less_than(value: Any, max_length: int) -> bool:
    size = _length_at_least(value, max_length)
    return size is not None and size < max_length


def has_length_less_or_equal_to(value: Any, max_length: int) -> bool:
    size = _length_at_least(value, max_length + 1)
    return size is not None and size <= max_length


def has_length_between(value: Any, min_length: int, max_length: int) -> bool:
    """Inclusive on both ends."""
    size = _length_at_least(value, max_length + 1)
    return size is not None and min_length <= size <= max_length


# ----------------- String content -----------------


def matches_regex(regex: Union[str, Pattern[str], None], value: Optional[str]) -> bool:
    """True if the whole string matches ``regex``."""
    if regex is None or value is None:
        return False
    return re.fullmatch(regex, value) is not None


def contains_regex(regex: Union[str, Pattern[str], None], value: Optional[str]) -> bool:
    """True if ``regex`` matches anywhere in the string."""
    if regex is None or value is None:
        return False
    return re.search(regex, value) is not None


def is_numbers_only(value: Optional[str]) -> bool:
    """True if every character is a digit."""
    return value is not None and all(ch.isdigit() for ch in value)


def is_alphas_only(value: Optional[str]) -> bool:
    """True if every character is a letter."""
    return value is not None and all(ch.isalpha() for ch in value)


def is_alphanumeric_only(value: Optional[str]) -> bool:
    """True if every character is a letter or a digit."""
    return value is not None and all(ch.isalnum() for ch in value)


def is_email(value: Optional[str]) -> bool:
    """True if the string looks like an email address."""
    return value is not None and EMAIL_PATTERN.fullmatch(value) is not None


def is_url(value: Optional[str]) -> bool:
    """True if the string starts with http:// or https:// and names a host."""
    return value is not None and URL_PATTERN.fullmatch(value) is not None


def is_hostname(value: Optional[str]) -> bool:
    """True if the string looks like a hostname."""
    return value is not None and HOSTNAME_PATTERN.fullmatch(value) is not None


def is_host_port(value: Optional[str]) -> bool:
    """True if the string looks like host:port."""
    return value is not None and HOST_PORT_PATTERN.fullmatch(value) is not None


def is_ipv4_address(value: Optional[str]) -> bool:
    """True if the string is a dotted-quad IPv4 address."""
    return value is not None and IP4_ADDRESS_PATTERN.fullmatch(value) is not None


def is_ipv6_address(value: Optional[str]) -> bool:
    """True if the string looks like an IPv6 address."""
    return value is not None and IP6_ADDRESS_PATTERN.fullmatch(value) is not None


def is_ip_address(value: Optional[str]) -> bool:
    """True if the string is an IPv4 or IPv6 address."""
    return is_ipv4_address(value) or is_ipv6_address(value)


def is_uuid(value: Optional[str]) -> bool:
    """True if the string is a hyphenated UUID."""
    return value is not None and UUID_PATTERN.fullmatch(value) is not None


def is_json(value: Optional[str]) -> bool:
    """True if the string parses as a JSON object or array."""
    if is_empty(value):
        return False
    stripped = value.strip()
    if (stripped[:1], stripped[-1:]) not in (("{", "}"), ("[", "]")):
        return False
    try:
        json.loads(stripped)
    except ValueError:
        return False
    return True


def is_xml(value: Optional[str]) -> bool:
    """True if the string parses as an XML document."""
    if is_empty(value):
        return False
    try:
        ElementTree.fromstring(value)
    except ElementTree.ParseError:
        return False
    return True


# ----------------- Paths -----------------


def path_exists(path: Optional[PathArg]) -> bool:
    """True if the path exists."""
    return path is not None and Path(path).exists()


def path_not_exists(path: Optional[PathArg]) -> bool:
    """True if the path does not exist."""
    return path is not None and not Path(path).exists()


def is_regular_file(path: Optional[PathArg]) -> bool:
    """True if the path is an existing regular file."""
    return path is not None and Path(path).is_file()


def is_directory(path: Optional[PathArg]) -> bool:
    """True if the path is an existing directory."""
    return path is not None and Path(path).is_dir()


# ----------------- Time -----------------

Temporal = Union[datetime, date, time]


def _now_like(value: Temporal) -> Temporal:
    # datetime is a subclass of date, so it has to be tested first.
    if isinstance(value, datetime):
        return datetime.now(value.tzinfo)
    if isinstance(value, date):
        return date.today()
    return datetime.now(value.tzinfo).timetz() if value.tzinfo else datetime.now().time()


def is_future(value: Optional[Temporal]) -> bool:
    return value is not None and value > _now_like(value)


def is_now_or_future(value: Optional[Temporal]) -> bool:
    return value is not None and value >= _now_like(value)


def is_past(value: Optional[Temporal]) -> bool:
    return value is not None and value < _now_like(value)


def is_now_or_past(value: Optional[Temporal]) -> bool:
    return value is not None and value <= _now_like(value)


# Single-string predicates addressable by name from the CLI and the API.
NAMED_STRING_CHECKS: Dict[str, Callable[[Optional[str]], bool]] = {
    "not_blank": is_not_blank,
    "not_empty": is_not_empty,
    "blank": is_blank,
    "empty": is_empty,
    "numbers_only": is_numbers_only,
    "alphas_only": is_alphas_only,
    "alphanumeric_only": is_alphanumeric_only,
    "email": is_email,
    "url": is_url,
    "hostname": is_hostname,
    "host_port": is_host_port,
    "ipv4": is_ipv4_address,
    "ipv6": is_ipv6_address,
    "ip": is_ip_address,
    "uuid": is_uuid,
    "json": is_json,
    "xml": is_xml,
    "path_exists": path_exists,
    "path_not_exists": path_not_exists,
    "file": is_regular_file,
    "directory": is_directory,
}
