from __future__ import annotations

from datetime import date

import pytest

from src.school_attendance.school_attendance.holidays.classifier import (
    HOLIDAY_TABLE,
    HolidayClassifier,
    HolidayKind,
    match_kind,
)
from src.school_attendance.school_attendance.holidays.model import RawEvent


def _classify(description: str):
    return HolidayClassifier().classify(RawEvent(description=description, date=date(2026, 9, 12)))


def test_every_table_kind_matches_its_own_description():
    for kind in HOLIDAY_TABLE:
        assert match_kind(kind.value) is kind


@pytest.mark.parametrize(
    "description,hebrew_name,closes",
    [
        ("Rosh Hashana I", "ראש השנה א׳", True),
        ("Yom Kippur", "יום כיפור", True),
        ("Chanukah: 3 Candles", "חנוכה", False),
        ("Chanukah: 8th Day", "זאת חנוכה", False),
        ("Tu BiShvat", "ט״ו בשבט", False),
        ("Purim", "פורים", True),
        ("Yom HaAtzma'ut", "יום העצמאות", True),
        ("Lag BaOmer", "ל״ג בעומר", False),
    ],
)
def test_exact_descriptions(description, hebrew_name, closes):
    result = _classify(description)

    assert result is not None
    assert result.hebrew_name == hebrew_name
    assert result.is_school_holiday is closes


def test_chanukah_family_is_observed_but_open():
    result = _classify("Chanukah: 9 Candles")

    assert result.kind is HolidayKind.CHANUKAH
    assert result.is_school_holiday is False


@pytest.mark.parametrize(
    "description,kind",
    [
        ("Pesach VIII", HolidayKind.PESACH),
        ("Sukkot VII", HolidayKind.SUKKOT),
        ("Rosh Hashana 5787", HolidayKind.ROSH_HASHANA),
    ],
)
def test_closing_families(description, kind):
    result = _classify(description)

    assert result.kind is kind
    assert result.is_school_holiday is True


def test_family_order_prefers_chanukah():
    # Matches both "Chanukah" and "Pesach"; the first family in order wins.
    assert match_kind("Chanukah Pesach") is HolidayKind.CHANUKAH


@pytest.mark.parametrize("description", ["Erev Shavuot", "Tu B'Av", "Parashat Bereshit", "", "   "])
def test_unrecognized_events_are_dropped(description):
    assert match_kind(description) is HolidayKind.UNRECOGNIZED
    assert _classify(description) is None


def test_exact_match_ignores_surrounding_whitespace():
    assert match_kind("  Yom Kippur ") is HolidayKind.YOM_KIPPUR
