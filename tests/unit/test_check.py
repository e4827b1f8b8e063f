from __future__ import annotations

from datetime import date, datetime, time, timezone
from pathlib import Path

import pytest

from requisites import check


@pytest.mark.unit
def test_value_or_none():
    assert check.check("x", True) == "x"
    assert check.check("x", False) is None
    assert check.check_not_null(0) == 0
    assert check.check_not_empty([]) is None
    assert check.check_not_empty([1]) == [1]
    assert check.check_not_blank("  ") is None
    assert check.check_not_blank(" a ") == " a "


@pytest.mark.unit
def test_lengths_and_ranges():
    assert check.check_length("abc", 2) == "abc"
    assert check.check_length("abc", 4) is None
    assert check.check_length("abc", 1, 2) is None
    assert check.check_length(None, 0) is None

    assert check.check_min(5, 5) == 5
    assert check.check_min(4, 5) is None
    assert check.check_max(6, 5) is None
    assert check.check_min_max(3, 1, 5) == 3
    assert check.check_min_max(0, 1, 5) is None
    assert check.check_min_max(None, 1, 5) is None
    assert (check.check_min_max(70000, 1, 65535) or 8000) == 8000


@pytest.mark.unit
def test_paths(tmp_path: Path):
    target = tmp_path / "f.txt"
    target.write_text("x", encoding="utf-8")

    assert check.check_regular_file(str(target)) == target
    assert check.check_regular_file(tmp_path) is None
    assert check.check_directory(str(tmp_path)) == tmp_path
    assert check.check_exists(target) == target
    assert check.check_exists(tmp_path / "nope") is None
    assert check.check_not_exists(str(tmp_path / "nope")) == tmp_path / "nope"
    assert check.check_not_exists(None) is None


@pytest.mark.unit
def test_temporal_parsing():
    assert check.check_datetime("2024-01-02T03:04:05") == datetime(2024, 1, 2, 3, 4, 5)
    assert check.check_datetime("02/01/2024 03:04", "%d/%m/%Y %H:%M") == datetime(2024, 1, 2, 3, 4)
    assert check.check_datetime("yesterday") is None
    assert check.check_date("2024-02-29") == date(2024, 2, 29)
    assert check.check_date("2023-02-29") is None
    assert check.check_date("29.02.2024", "%d.%m.%Y") == date(2024, 2, 29)
    assert check.check_time("13:45:00") == time(13, 45)
    assert check.check_time("25:00") is None
    assert check.check_time(None) is None


@pytest.mark.unit
def test_instant_requires_a_timezone():
    assert check.check_instant("2024-01-02T03:04:05Z") == datetime(
        2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc
    )
    assert check.check_instant("2024-01-02T03:04:05+00:00") is not None
    assert check.check_instant("2024-01-02T03:04:05") is None
    assert check.check_instant("not a date") is None
    assert check.check_instant(None) is None


@pytest.mark.unit
def test_one_shot_iterators_are_rejected_untouched():
    items = iter([1, 2, 3])
    with pytest.raises(TypeError, match="list_iterator"):
        check.check_not_empty(items)
    with pytest.raises(TypeError):
        check.check_length(items, 1)
    assert list(items) == [1, 2, 3]
    assert check.check_not_empty(range(3)) == range(3)
