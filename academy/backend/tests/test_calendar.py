from datetime import date

import pytest

from app.services.calendar import (
    day_matches,
    describe_weekdays,
    format_date,
    iter_dates,
    parse_date_only,
    parse_weekdays,
    weekday_index,
)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("2024-06-03", date(2024, 6, 3)),
        (" 2024-06-03 ", date(2024, 6, 3)),
        ("03/06/2024", date(2024, 6, 3)),
        ("03-06-2024", date(2024, 6, 3)),
        (date(2024, 6, 3), date(2024, 6, 3)),
    ],
)
def test_parse_date_only_accepts_iso_and_day_first(raw, expected):
    assert parse_date_only(raw) == expected


@pytest.mark.parametrize(
    "raw", ["not-a-date", "", None, "2024-02-30", "2024-6-3", "31/02/2024", "06/03/24"]
)
def test_parse_date_only_rejects_garbage(raw):
    assert parse_date_only(raw) is None


def test_format_date_normalizes_day_first_input():
    assert format_date(parse_date_only("05/01/2025")) == "2025-01-05"
    assert format_date(parse_date_only("2025-01-05")) == "2025-01-05"
    assert format_date(date(987, 3, 9)) == "0987-03-09"


def test_weekday_index_starts_on_sunday():
    assert weekday_index(date(2024, 6, 2)) == 0
    assert weekday_index(date(2024, 6, 3)) == 1
    assert weekday_index(date(2024, 6, 6)) == 4
    assert weekday_index(date(2024, 6, 8)) == 6


def test_day_matches_uses_first_three_letters():
    assert day_matches("Mon", 1)
    assert day_matches("monday", 1)
    assert day_matches("THURSDAY", 4)
    assert not day_matches("Mon", 2)


@pytest.mark.parametrize("label", [None, "", "Weekend", "??"])
def test_day_matches_is_permissive_without_a_known_day(label):
    assert all(day_matches(label, weekday) for weekday in range(7))


def test_iter_dates_is_inclusive():
    days = list(iter_dates(date(2024, 2, 27), date(2024, 3, 1)))
    assert days == [date(2024, 2, 27), date(2024, 2, 28), date(2024, 2, 29), date(2024, 3, 1)]
    assert list(iter_dates(date(2024, 3, 2), date(2024, 3, 1))) == []


def test_parse_weekdays():
    assert parse_weekdays("thu,fri") == frozenset({4, 5})
    assert parse_weekdays(" Sunday , sat ") == frozenset({0, 6})
    assert parse_weekdays("") == frozenset()
    with pytest.raises(ValueError):
        parse_weekdays("thu,holiday")


def test_describe_weekdays():
    assert describe_weekdays(frozenset({5, 4})) == "Thursday and Friday"
    assert describe_weekdays(frozenset({1})) == "Monday"
    assert describe_weekdays(frozenset({0, 3, 6})) == "Sunday, Wednesday and Saturday"
