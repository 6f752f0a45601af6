"""Maps raw calendar event descriptions to school-relevant holidays.

Matching is total: every description resolves to a HolidayKind, where
UNRECOGNIZED means the event is not relevant to attendance and is dropped.
Order: exact description, then the multi-day festival families.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple

from .model import RawEvent


class HolidayKind(Enum):
    ROSH_HASHANA = "Rosh Hashana"
    ROSH_HASHANA_I = "Rosh Hashana I"
    ROSH_HASHANA_II = "Rosh Hashana II"
    EREV_YOM_KIPPUR = "Erev Yom Kippur"
    YOM_KIPPUR = "Yom Kippur"
    SUKKOT = "Sukkot"
    SUKKOT_I = "Sukkot I"
    SUKKOT_II = "Sukkot II"
    SUKKOT_II_CHM = "Sukkot II (CH''M)"
    SUKKOT_III_CHM = "Sukkot III (CH''M)"
    SUKKOT_IV_CHM = "Sukkot IV (CH''M)"
    SUKKOT_V_CHM = "Sukkot V (CH''M)"
    SUKKOT_VI_CHM = "Sukkot VI (CH''M)"
    HOSHANA_RABA = "Sukkot VII (Hoshana Raba)"
    SHMINI_ATZERET = "Shmini Atzeret"
    SIMCHAT_TORAH = "Simchat Torah"
    CHANUKAH = "Chanukah"
    CHANUKAH_1 = "Chanukah: 1 Candle"
    CHANUKAH_2 = "Chanukah: 2 Candles"
    CHANUKAH_3 = "Chanukah: 3 Candles"
    CHANUKAH_4 = "Chanukah: 4 Candles"
    CHANUKAH_5 = "Chanukah: 5 Candles"
    CHANUKAH_6 = "Chanukah: 6 Candles"
    CHANUKAH_7 = "Chanukah: 7 Candles"
    CHANUKAH_8 = "Chanukah: 8 Candles"
    CHANUKAH_8TH_DAY = "Chanukah: 8th Day"
    TU_BISHVAT = "Tu BiShvat"
    PURIM = "Purim"
    SHUSHAN_PURIM = "Shushan Purim"
    PESACH = "Pesach"
    PESACH_I = "Pesach I"
    PESACH_II_CHM = "Pesach II (CH''M)"
    PESACH_III_CHM = "Pesach III (CH''M)"
    PESACH_IV_CHM = "Pesach IV (CH''M)"
    PESACH_V_CHM = "Pesach V (CH''M)"
    PESACH_VI_CHM = "Pesach VI (CH''M)"
    PESACH_VII = "Pesach VII"
    YOM_HASHOAH = "Yom HaShoah"
    YOM_HAZIKARON = "Yom HaZikaron"
    YOM_HAATZMAUT = "Yom HaAtzma'ut"
    PESACH_SHENI = "Pesach Sheni"
    LAG_BAOMER = "Lag BaOmer"
    YOM_YERUSHALAYIM = "Yom Yerushalayim"
    SHAVUOT = "Shavuot"
    SHAVUOT_I = "Shavuot I"
    SHAVUOT_II = "Shavuot II"
    TISHA_BAV = "Tish'a B'Av"
    TISHA_BAV_OBSERVED = "Tish'a B'Av (observed)"
    EREV_TISHA_BAV = "Erev Tish'a B'Av"
    UNRECOGNIZED = ""


# kind -> (hebrew name, closes school)
HOLIDAY_TABLE: Dict[HolidayKind, Tuple[str, bool]] = {
    HolidayKind.ROSH_HASHANA: ("ראש השנה", True),
    HolidayKind.ROSH_HASHANA_I: ("ראש השנה א׳", True),
    HolidayKind.ROSH_HASHANA_II: ("ראש השנה ב׳", True),
    HolidayKind.EREV_YOM_KIPPUR: ("ערב יום כיפור", True),
    HolidayKind.YOM_KIPPUR: ("יום כיפור", True),
    HolidayKind.SUKKOT: ("סוכות", True),
    HolidayKind.SUKKOT_I: ("סוכות א׳", True),
    HolidayKind.SUKKOT_II: ("סוכות ב׳", True),
    HolidayKind.SUKKOT_II_CHM: ("חול המועד סוכות", True),
    HolidayKind.SUKKOT_III_CHM: ("חול המועד סוכות", True),
    HolidayKind.SUKKOT_IV_CHM: ("חול המועד סוכות", True),
    HolidayKind.SUKKOT_V_CHM: ("חול המועד סוכות", True),
    HolidayKind.SUKKOT_VI_CHM: ("חול המועד סוכות", True),
    HolidayKind.HOSHANA_RABA: ("הושענא רבה", True),
    HolidayKind.SHMINI_ATZERET: ("שמיני עצרת", True),
    HolidayKind.SIMCHAT_TORAH: ("שמחת תורה", True),
    HolidayKind.CHANUKAH: ("חנוכה", False),
    HolidayKind.CHANUKAH_1: ("חנוכה - נר ראשון", False),
    HolidayKind.CHANUKAH_2: ("חנוכה", False),
    HolidayKind.CHANUKAH_3: ("חנוכה", False),
    HolidayKind.CHANUKAH_4: ("חנוכה", False),
    HolidayKind.CHANUKAH_5: ("חנוכה", False),
    HolidayKind.CHANUKAH_6: ("חנוכה", False),
    HolidayKind.CHANUKAH_7: ("חנוכה", False),
    HolidayKind.CHANUKAH_8: ("חנוכה", False),
    HolidayKind.CHANUKAH_8TH_DAY: ("זאת חנוכה", False),
    HolidayKind.TU_BISHVAT: ("ט״ו בשבט", False),
    HolidayKind.PURIM: ("פורים", True),
    HolidayKind.SHUSHAN_PURIM: ("שושן פורים", False),
    HolidayKind.PESACH: ("פסח", True),
    HolidayKind.PESACH_I: ("פסח א׳", True),
    HolidayKind.PESACH_II_CHM: ("חול המועד פסח", True),
    HolidayKind.PESACH_III_CHM: ("חול המועד פסח", True),
    HolidayKind.PESACH_IV_CHM: ("חול המועד פסח", True),
    HolidayKind.PESACH_V_CHM: ("חול המועד פסח", True),
    HolidayKind.PESACH_VI_CHM: ("חול המועד פסח", True),
    HolidayKind.PESACH_VII: ("שביעי של פסח", True),
    HolidayKind.YOM_HASHOAH: ("יום השואה", True),
    HolidayKind.YOM_HAZIKARON: ("יום הזיכרון", True),
    HolidayKind.YOM_HAATZMAUT: ("יום העצמאות", True),
    HolidayKind.PESACH_SHENI: ("פסח שני", False),
    HolidayKind.LAG_BAOMER: ("ל״ג בעומר", False),
    HolidayKind.YOM_YERUSHALAYIM: ("יום ירושלים", False),
    HolidayKind.SHAVUOT: ("שבועות", True),
    HolidayKind.SHAVUOT_I: ("שבועות", True),
    HolidayKind.SHAVUOT_II: ("שבועות", True),
    HolidayKind.TISHA_BAV: ("תשעה באב", True),
    HolidayKind.TISHA_BAV_OBSERVED: ("תשעה באב", True),
    HolidayKind.EREV_TISHA_BAV: ("ערב תשעה באב", False),
}

# Families of multi-day festivals whose individual days are not all listed.
FESTIVAL_FAMILIES: Tuple[Tuple[str, HolidayKind], ...] = (
    ("Chanukah", HolidayKind.CHANUKAH),
    ("Pesach", HolidayKind.PESACH),
    ("Sukkot", HolidayKind.SUKKOT),
    ("Rosh Hashana", HolidayKind.ROSH_HASHANA),
)

_BY_DESCRIPTION: Dict[str, HolidayKind] = {kind.value: kind for kind in HOLIDAY_TABLE}


@dataclass(frozen=True)
class HolidayClassification:
    kind: HolidayKind
    hebrew_name: str
    is_school_holiday: bool


def match_kind(description: str) -> HolidayKind:
    description = (description or "").strip()
    if not description:
        return HolidayKind.UNRECOGNIZED

    kind = _BY_DESCRIPTION.get(description)
    if kind is not None:
        return kind

    for fragment, family in FESTIVAL_FAMILIES:
        if fragment in description:
            return family
    return HolidayKind.UNRECOGNIZED


class HolidayClassifier:
    def classify(self, event: RawEvent) -> Optional[HolidayClassification]:
        kind = match_kind(event.description)
        if kind is HolidayKind.UNRECOGNIZED:
            return None
        hebrew_name, closes_school = HOLIDAY_TABLE[kind]
        return HolidayClassification(kind=kind, hebrew_name=hebrew_name, is_school_holiday=closes_school)
