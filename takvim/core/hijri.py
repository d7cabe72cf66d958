"""ヒジュラ暦（表式太陰暦）⇔ 西暦 変換

ユリウス通日（JDN）を中間表現として双方向に変換する。
どちらの変換も純粋関数で、入力検証は行わない（不正値はそのまま計算される）。
検証付きの入口は core/validation.py を参照。

暦法改正の境界:
    JDN 2299160 = 1582-10-04（ユリウス暦の最終日）
    JDN 2299161 = 1582-10-15（グレゴリオ暦の初日）
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date
from typing import Final, Protocol

# ── 定数 ─────────────────────────────────────────────────────────────────────

GREGORIAN_REFORM_JDN: Final[int] = 2299160   # これ以下はユリウス暦で分解する
HIJRI_EPOCH_JDN: Final[int] = 1948440        # 1 Muharrem 1 = 622-07-16 (ユリウス暦)
HIJRI_CYCLE_DAYS: Final[int] = 10631         # 30 年周期 = 354 * 30 + 11

HIJRI_MONTHS: Final[tuple[str, ...]] = (
    'Muharrem', 'Safer', 'Rebiülevvel', 'Rebiülahir',
    'Cemaziyelevvel', 'Cemaziyelahir', 'Recep', 'Şaban',
    'Ramazan', 'Şevval', 'Zilkade', 'Zilhicce',
)

GREGORIAN_MONTHS: Final[tuple[str, ...]] = (
    'Ocak', 'Şubat', 'Mart', 'Nisan', 'Mayıs', 'Haziran',
    'Temmuz', 'Ağustos', 'Eylül', 'Ekim', 'Kasım', 'Aralık',
)


# ── 日付レコード ─────────────────────────────────────────────────────────────

class DateLike(Protocol):
    year: int
    month: int
    day: int


@dataclass(frozen=True, slots=True)
class HijriDate:
    """ヒジュラ暦の日付（年・月 1〜12・日 1〜30）。"""
    year: int
    month: int
    day: int

    def to_gregorian(self) -> GregorianDate:
        return to_gregorian(self.year, self.month, self.day)


@dataclass(frozen=True, slots=True)
class GregorianDate:
    """西暦の日付。

    1582-10-04 以前はユリウス暦、1582-10-15 以降はグレゴリオ暦の日付を表す。
    年は天文学的年号（紀元前 1 年 = 0）で、datetime.date の範囲外も扱える。
    """
    year: int
    month: int
    day: int

    @classmethod
    def from_date(cls, value: DateLike) -> GregorianDate:
        """date / datetime / Timestamp などから年月日だけを取り出す。"""
        return cls(int(value.year), int(value.month), int(value.day))

    def to_date(self) -> date:
        """datetime.date に変換する。範囲外（1〜9999 年以外）は ValueError。"""
        return date(self.year, self.month, self.day)


# ── 西暦 ⇔ JDN ──────────────────────────────────────────────────────────────

def gregorian_to_jdn(year: int, month: int, day: int) -> int:
    """西暦の年月日からユリウス通日を求める。

    1〜2 月は前年の 13・14 月として扱う。補正項 b は
    1583 年より前は 0（ユリウス暦）、1582-10-15 以降は -10 となる。
    """
    y, m = year, month
    if m < 3:
        y -= 1
        m += 12

    a = y // 100
    b = 2 - a + a // 4
    if y < 1583:
        b = 0
    if y == 1582:
        if m > 10:
            b = -10
        if m == 10 and day > 14:
            b = -10

    return math.floor(365.25 * (y + 4716)) + math.floor(30.6001 * (m + 1)) + day + b - 1524


def jdn_to_gregorian(jd: int) -> GregorianDate:
    """ユリウス通日から西暦の日付を求める。

    JDN 2299160 以下はユリウス暦、それより後はグレゴリオ暦の規則で分解する。
    """
    if jd > GREGORIAN_REFORM_JDN:
        l = jd + 68569
        n = (4 * l) // 146097
        l = l - (146097 * n + 3) // 4
        i = (4000 * (l + 1)) // 1461001
        l = l - (1461 * i) // 4 + 31
        j = (80 * l) // 2447
        day = l - (2447 * j) // 80
        l = j // 11
        month = j + 2 - 12 * l
        year = 100 * (n - 49) + i + l
        return GregorianDate(year, month, day)

    # ユリウス暦: 3 月始まりの年で 4 年周期（365, 365, 365, 366 日）
    j = jd + 1402
    k = (j - 1) // 1461
    l = j - 1461 * k
    n = (l - 1) // 365
    if n > 3:
        n = 3  # 周期最終日（2 月 29 日）
    m = l - 365 * n
    i = (5 * (m - 1) + 2) // 153
    day = m - (153 * i + 2) // 5
    month = i + 3
    year = 4 * k + n - 4716
    if month > 12:
        month -= 12
        year += 1
    return GregorianDate(year, month, day)


# ── ヒジュラ暦 ⇔ JDN ────────────────────────────────────────────────────────

def hijri_to_jdn(year: int, month: int, day: int) -> int:
    """ヒジュラ暦の年月日からユリウス通日を求める。"""
    return ((11 * year + 3) // 30 + 354 * year + 30 * month
            - (month - 1) // 2 + day + HIJRI_EPOCH_JDN - 385)


def jdn_to_hijri(jd: int) -> HijriDate:
    """ユリウス通日からヒジュラ暦の日付を求める。

    hijri_to_jdn() の厳密な逆変換。周期 0 は AH -29 年から始まる。
    閏年の 355 日目は月の式が 13 になるため 12 月 30 日に丸める。
    """
    ijd = jd - HIJRI_EPOCH_JDN + HIJRI_CYCLE_DAYS + 1
    n = (ijd - 1) // HIJRI_CYCLE_DAYS
    ijd = ijd - HIJRI_CYCLE_DAYS * n
    # 周期内の年番号（0〜29）。年初日は floor((10631*j + 14) / 30)
    j = (30 * (ijd - 1) + 15) // HIJRI_CYCLE_DAYS
    ijd = ijd - (HIJRI_CYCLE_DAYS * j + 14) // 30

    h_year = n * 30 + j - 29
    h_month = math.floor((ijd + 28.5001) / 29.5)
    if h_month == 13:
        h_month = 12
    h_day = ijd - math.floor(h_month * 29.5 - 28.999)
    return HijriDate(h_year, h_month, h_day)


# ── 公開 API ─────────────────────────────────────────────────────────────────

def to_hijri(value: DateLike) -> HijriDate:
    """西暦の日付をヒジュラ暦に変換する。

    value は year / month / day 属性を持つもの（date, datetime, GregorianDate）。
    時刻は無視する。入力検証は行わない。

    Examples:
        >>> to_hijri(GregorianDate(2024, 7, 8))
        HijriDate(year=1446, month=1, day=1)
    """
    # 逆変換用の中間値 (b1, bb, cc, dd, ee) は結果に影響しないため計算しない
    return jdn_to_hijri(gregorian_to_jdn(value.year, value.month, value.day))


def to_gregorian(year: int, month: int, day: int) -> GregorianDate:
    """ヒジュラ暦の年月日を西暦に変換する。入力検証は行わない。

    Examples:
        >>> to_gregorian(1446, 1, 1)
        GregorianDate(year=2024, month=7, day=8)
    """
    return jdn_to_gregorian(hijri_to_jdn(year, month, day))
