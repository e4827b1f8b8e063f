from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from pathlib import Path

import pytest

from requisites import checks


@pytest.mark.unit
def test_null_and_truth():
    assert checks.is_null(None)
    assert not checks.is_null(0)
    assert checks.is_not_null("")
    assert checks.is_true(True)
    assert not checks.is_true(1)
    assert checks.is_false(False)


@pytest.mark.unit
def test_empty_and_blank():
    assert checks.is_empty(None)
    assert checks.is_empty("")
    assert checks.is_empty([])
    assert checks.is_empty({})
    assert checks.is_empty(iter(()))
    assert not checks.is_empty("x")
    assert not checks.is_empty(5)
    assert checks.is_not_empty((1,))
    assert checks.is_not_empty({"k": 1})

    assert checks.is_blank(None)
    assert checks.is_blank("")
    assert checks.is_blank(" \t\n")
    assert not checks.is_blank(" hi ")
    assert checks.is_not_blank("hi")
    assert not checks.is_not_blank("  ")


@pytest.mark.unit
def test_lengths():
    assert checks.has_length("abc", 3)
    assert not checks.has_length(None, 0)
    assert checks.has_length_greater_than([1, 2], 1)
    assert not checks.has_length_greater_than([1, 2], 2)
    assert checks.has_length_greater_or_equal_to("ab", 2)
    assert checks.has_length_less_than("ab", 3)
    assert not checks.has_length_less_than("abc", 3)
    assert checks.has_length_less_or_equal_to("abc", 3)
    assert checks.has_length_between("abc", 3, 3)
    assert not checks.has_length_between("abcd", 1, 3)
    assert not checks.has_length_between(None, 0, 3)


@pytest.mark.unit
def test_length_of_generators_is_lazy_for_minimums():
    consumed: list[int] = []

    def numbers():
        for n in range(1000):
            consumed.append(n)
            yield n

    assert checks.has_length_greater_or_equal_to(numbers(), 3)
    assert len(consumed) == 3


@pytest.mark.unit
@pytest.mark.parametrize(
    "predicate,args,pulled",
    [
        (checks.has_length, (2,), 3),
        (checks.has_length_less_than, (2,), 2),
        (checks.has_length_less_or_equal_to, (2,), 3),
        (checks.has_length_between, (1, 2), 3),
    ],
)
def test_upper_bound_lengths_stop_after_the_bound(predicate, args, pulled):
    consumed: list[int] = []

    def numbers():
        for n in range(1000):
            consumed.append(n)
            yield n

    assert not predicate(numbers(), *args)
    assert len(consumed) == pulled


@pytest.mark.unit
def test_upper_bound_lengths_on_sized_values():
    assert checks.has_length([1, 2], 2)
    assert not checks.has_length([1, 2, 3], 2)
    assert checks.has_length_less_or_equal_to([1, 2], 2)
    assert not checks.has_length_less_than("", 0)
    assert checks.has_length_greater_or_equal_to("", -1)
    assert checks.has_length_greater_than("", -1)


@pytest.mark.unit
@pytest.mark.parametrize(
    "predicate,value",
    [
        (checks.is_email, "a@example.com\n"),
        (checks.is_url, "http://x\n"),
        (checks.is_hostname, "example.com\n"),
        (checks.is_host_port, "host:80\n"),
        (checks.is_ipv4_address, "10.0.0.1\n"),
        (checks.is_ipv6_address, "fe80::1\n"),
        (checks.is_uuid, "123e4567-e89b-12d3-a456-426614174000\n"),
    ],
)
def test_pattern_predicates_reject_trailing_newline(predicate, value):
    assert predicate(value.rstrip("\n"))
    assert not predicate(value)


@pytest.mark.unit
def test_regexes():
    assert checks.matches_regex(r"\d+", "123")
    assert not checks.matches_regex(r"\d+", "123a")
    assert checks.contains_regex(r"\d", "abc1")
    assert not checks.contains_regex(None, "abc")
    assert not checks.matches_regex(r".*", None)


@pytest.mark.unit
@pytest.mark.parametrize(
    "predicate,good,bad",
    [
        (checks.is_numbers_only, "0123", "12a"),
        (checks.is_alphas_only, "abcXYZ", "ab1"),
        (checks.is_alphanumeric_only, "ab12", "ab-12"),
        (checks.is_email, "user@example.com", "user@@example.com"),
        (checks.is_url, "https://example.com/x", "ftp://example.com"),
        (checks.is_hostname, "api.example-1.com", "bad host"),
        (checks.is_host_port, "localhost:8080", "localhost"),
        (checks.is_ipv4_address, "192.168.0.1", "256.1.1.1"),
        (checks.is_ipv6_address, "fe80::1", "fe80"),
        (checks.is_ip_address, "10.0.0.1", "example.com"),
        (checks.is_uuid, "123e4567-e89b-12d3-a456-426614174000", "123e4567e89b"),
        (checks.is_json, '{"a": [1, 2]}', "{not json}"),
        (checks.is_xml, "<a><b/></a>", "<a><b></a>"),
    ],
)
def test_string_content_predicates(predicate, good, bad):
    assert predicate(good)
    assert not predicate(bad)
    assert not predicate(None)


@pytest.mark.unit
def test_json_requires_object_or_array():
    assert checks.is_json("[]")
    assert not checks.is_json("42")
    assert not checks.is_json("   ")


@pytest.mark.unit
def test_paths(tmp_path: Path):
    file_path = tmp_path / "data.txt"
    file_path.write_text("x", encoding="utf-8")
    missing = tmp_path / "missing"

    assert checks.path_exists(file_path)
    assert checks.path_exists(str(tmp_path))
    assert checks.path_not_exists(missing)
    assert not checks.path_not_exists(None)
    assert checks.is_regular_file(str(file_path))
    assert not checks.is_regular_file(tmp_path)
    assert checks.is_directory(tmp_path)
    assert not checks.is_directory(file_path)
    assert not checks.path_exists(None)


@pytest.mark.unit
def test_time_predicates():
    tomorrow = date.today() + timedelta(days=1)
    yesterday = date.today() - timedelta(days=1)
    assert checks.is_future(tomorrow)
    assert checks.is_past(yesterday)
    assert checks.is_now_or_future(date.today())
    assert checks.is_now_or_past(date.today())

    later = datetime.now(timezone.utc) + timedelta(hours=1)
    earlier = datetime.now() - timedelta(hours=1)
    assert checks.is_future(later)
    assert not checks.is_past(later)
    assert checks.is_past(earlier)
    assert not checks.is_future(None)


@pytest.mark.unit
def test_named_checks_are_single_argument_predicates():
    assert checks.NAMED_STRING_CHECKS["email"] is checks.is_email
    for name, predicate in checks.NAMED_STRING_CHECKS.items():
        assert predicate.__doc__, name
        assert isinstance(predicate(None), bool)
