"""Hebrew calendar events for a Gregorian year.

pyluach does the Hebrew <-> Gregorian conversion; which events exist on which
Hebrew day (and their postponement rules) is decided here. Descriptions follow
the usual English transliterations ("Sukkot III (CH''M)", "Chanukah: 2 Candles").
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Iterator, List, Tuple

from pyluach import dates, hebrewcal

from ..common.datetime_utils import day_of_week
from ..core.constants import DEFAULT_HOLIDAY_LOCATION, FRIDAY, SATURDAY
from ..core.exceptions import HolidayProviderError
from .model import RawEvent

logger = logging.getLogger(__name__)

# pyluach month numbers (Nisan first).
NISAN, IYAR, SIVAN, TAMMUZ, AV, ELUL = 1, 2, 3, 4, 5, 6
TISHREI, CHESHVAN, KISLEV, TEVET, SHVAT, ADAR, ADAR_II = 7, 8, 9, 10, 11, 12, 13

SUNDAY, MONDAY = 0, 1

HEBREW_YEAR_OFFSET = 3760

_ROMAN = ("I", "II", "III", "IV", "V", "VI", "VII", "VIII")
_CHOL_HAMOED = "(CH''M)"


def is_hebrew_leap_year(hebrew_year: int) -> bool:
    return hebrewcal.Year(hebrew_year).leap


@dataclass(frozen=True)
class HolidayCalendarConfig:
    """`location` is informational; no location-dependent events (candle lighting) are produced."""

    location: str = DEFAULT_HOLIDAY_LOCATION
    israel: bool = True
    include_minor_fasts: bool = False
    include_modern: bool = True


class HebrewCalendarProvider:
    """Produces raw holiday events; no I/O, same output for the same year."""

    def __init__(self, config: HolidayCalendarConfig | None = None):
        self._config = config or HolidayCalendarConfig()

    @property
    def config(self) -> HolidayCalendarConfig:
        return self._config

    def list_events(self, year: int) -> Iterator[RawEvent]:
        if not 1 <= int(year) <= 9998:
            raise HolidayProviderError(f"Year out of range for the Hebrew calendar: {year}")

        logger.debug("Computing holidays for %s (location=%s, israel=%s)", year, self._config.location, self._config.israel)
        try:
            events: List[RawEvent] = []
            for hebrew_year in (year + HEBREW_YEAR_OFFSET, year + HEBREW_YEAR_OFFSET + 1):
                events.extend(self._events_for_hebrew_year(hebrew_year))
        except Exception as e:
            raise HolidayProviderError(f"Hebrew calendar computation failed for {year}: {e}") from e

        events.sort(key=lambda ev: ev.date)
        for ev in events:
            if ev.date.year == year:
                yield ev

    def _events_for_hebrew_year(self, hy: int) -> List[RawEvent]:
        out: List[RawEvent] = []

        def on(month: int, day: int) -> date:
            return dates.HebrewDate(hy, month, day).to_pydate()

        def add(when: date, description: str) -> None:
            out.append(RawEvent(description=description, date=when))

        israel = self._config.israel
        minor = self._config.include_minor_fasts
        purim_month = ADAR_II if is_hebrew_leap_year(hy) else ADAR

        # Tishrei
        add(on(TISHREI, 1), "Rosh Hashana I")
        add(on(TISHREI, 2), "Rosh Hashana II")
        if minor:
            add(*_observed_fast(hy, TISHREI, 3))
        add(on(TISHREI, 9), "Erev Yom Kippur")
        add(on(TISHREI, 10), "Yom Kippur")
        add(on(TISHREI, 14), "Erev Sukkot")
        sukkot_i = on(TISHREI, 15)
        for n in range(7):
            add(sukkot_i + timedelta(days=n), _festival_day_name("Sukkot", n, israel, hoshana_raba=n == 6))
        add(on(TISHREI, 22), "Shmini Atzeret")
        if not israel:
            add(on(TISHREI, 23), "Simchat Torah")

        # Kislev / Tevet
        first_candle = on(KISLEV, 24)
        for n in range(1, 9):
            label = "1 Candle" if n == 1 else f"{n} Candles"
            add(first_candle + timedelta(days=n - 1), f"Chanukah: {label}")
        add(first_candle + timedelta(days=8), "Chanukah: 8th Day")
        if minor:
            add(*_observed_fast(hy, TEVET, 10))

        # Shvat / Adar
        add(on(SHVAT, 15), "Tu BiShvat")
        if purim_month == ADAR_II:
            add(on(ADAR, 14), "Purim Katan")
        if minor:
            add(*_observed_fast(hy, purim_month, 13))
        add(on(purim_month, 14), "Purim")
        add(on(purim_month, 15), "Shushan Purim")

        # Nisan
        add(on(NISAN, 14), "Erev Pesach")
        pesach_i = on(NISAN, 15)
        for n in range(7 if israel else 8):
            add(pesach_i + timedelta(days=n), _festival_day_name("Pesach", n, israel))
        if self._config.include_modern:
            out.extend(_modern_days(hy, on))

        # Iyar
        add(on(IYAR, 14), "Pesach Sheni")
        add(on(IYAR, 18), "Lag BaOmer")

        # Sivan
        add(on(SIVAN, 5), "Erev Shavuot")
        if israel:
            add(on(SIVAN, 6), "Shavuot")
        else:
            add(on(SIVAN, 6), "Shavuot I")
            add(on(SIVAN, 7), "Shavuot II")

        # Tammuz / Av
        if minor:
            add(*_observed_fast(hy, TAMMUZ, 17))
        tisha_bav, name = _observed_fast(hy, AV, 9)
        if tisha_bav != on(AV, 9):
            name = f"{name} (observed)"
        add(tisha_bav - timedelta(days=1), "Erev Tish'a B'Av")
        add(tisha_bav, name)
        add(on(AV, 15), "Tu B'Av")

        # Elul
        add(on(ELUL, 29), "Erev Rosh Hashana")

        return out


# pyluach fast names -> event descriptions.
_FAST_NAMES = {
    "Tzom Gedalia": "Tzom Gedaliah",
    "10 of Teves": "Asara B'Tevet",
    "Taanis Esther": "Ta'anit Esther",
    "17 of Tamuz": "Tzom Tammuz",
    "9 of Av": "Tish'a B'Av",
}

# A fast off Shabbat is postponed a day, except Esther which moves back to Thursday.
_FAST_SHIFTS = (0, 1, -2)


def _observed_fast(hy: int, month: int, day: int) -> Tuple[date, str]:
    """Date and description of the fast nominally on day/month of hy."""
    nominal = dates.HebrewDate(hy, month, day)
    for shift in _FAST_SHIFTS:
        candidate = nominal + shift
        name = candidate.fast_day()
        if name is not None:
            return candidate.to_pydate(), _FAST_NAMES[name]
    raise ValueError(f"No fast observed near {nominal!r}")


def _festival_day_name(festival: str, n: int, israel: bool, *, hoshana_raba: bool = False) -> str:
    """Name of day n (0-based) of Sukkot or Pesach."""
    numeral = _ROMAN[n]
    if hoshana_raba:
        return f"{festival} {numeral} (Hoshana Raba)"
    yom_tov_days = (0,) if israel else (0, 1)
    last_days = (6,) if israel else (6, 7)
    if n in yom_tov_days or (festival == "Pesach" and n in last_days):
        return f"{festival} {numeral}"
    return f"{festival} {numeral} {_CHOL_HAMOED}"


def _modern_days(hy: int, on) -> List[RawEvent]:
    """Israeli national days with their weekday postponements."""
    out: List[RawEvent] = []

    if hy >= 5711:
        shoah = on(NISAN, 27)
        dow = day_of_week(shoah)
        if dow == FRIDAY:
            shoah -= timedelta(days=1)
        elif dow == SUNDAY:
            shoah += timedelta(days=1)
        out.append(RawEvent("Yom HaShoah", shoah))

    if hy >= 5708:
        atzmaut = on(IYAR, 5)
        dow = day_of_week(atzmaut)
        if dow == FRIDAY:
            atzmaut -= timedelta(days=1)
        elif dow == SATURDAY:
            atzmaut -= timedelta(days=2)
        elif dow == MONDAY and hy >= 5764:
            atzmaut += timedelta(days=1)
        out.append(RawEvent("Yom HaZikaron", atzmaut - timedelta(days=1)))
        out.append(RawEvent("Yom HaAtzma'ut", atzmaut))

    if hy >= 5728:
        out.append(RawEvent("Yom Yerushalayim", on(IYAR, 28)))

    return out
