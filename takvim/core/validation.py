"""日付の範囲検証と検証付き変換

core/hijri.py の変換関数は不正な入力でも黙って計算する。
呼び出し側で不正値を弾きたい場合はこのモジュールの *_checked を使う。
"""

from __future__ import annotations

import logging

from core.hijri import (
    DateLike,
    GregorianDate,
    HijriDate,
    to_gregorian,
    to_hijri,
)

logger = logging.getLogger(__name__)

_GREGORIAN_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


class CalendarValidationError(ValueError):
    """年月日が暦の範囲外。"""

    def __init__(self, calendar: str, year: int, month: int, day: int, reason: str) -> None:
        super().__init__(f'{calendar} {year}-{month}-{day}: {reason}')
        self.calendar = calendar
        self.year = year
        self.month = month
        self.day = day


# ── 月の日数 ─────────────────────────────────────────────────────────────────

def is_hijri_leap_year(year: int) -> bool:
    """30 年周期の閏年（355 日）なら True。2, 5, 7, 10, 13, 16, 18, 21, 24, 26, 29 年目。"""
    return (11 * year + 14) % 30 < 11


def hijri_month_length(year: int, month: int) -> int:
    """奇数月は 30 日、偶数月は 29 日。閏年の 12 月のみ 30 日。"""
    if month % 2 == 1:
        return 30
    if month == 12 and is_hijri_leap_year(year):
        return 30
    return 29


def _is_gregorian_leap_year(year: int) -> bool:
    if year < 1582:
        return year % 4 == 0  # ユリウス暦
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def gregorian_month_length(year: int, month: int) -> int:
    """月の日数。1582 年より前はユリウス暦の閏年規則で数える。"""
    if month == 2 and _is_gregorian_leap_year(year):
        return 29
    return _GREGORIAN_DAYS[month - 1]


# ── 検証 ─────────────────────────────────────────────────────────────────────

def _reject(calendar: str, year: int, month: int, day: int, reason: str) -> CalendarValidationError:
    logger.debug('日付検証エラー: %s %s-%s-%s (%s)', calendar, year, month, day, reason)
    return CalendarValidationError(calendar, year, month, day, reason)


def validate_hijri(year: int, month: int, day: int) -> None:
    """ヒジュラ暦の年月日を検証する。

    Raises:
        CalendarValidationError: 月が 1〜12 以外、日が 0 以下、または月の日数を超える
    """
    if not 1 <= month <= 12:
        raise _reject('hijri', year, month, day, '月は 1〜12 で指定してください')
    if day < 1:
        raise _reject('hijri', year, month, day, '日は 1 以上で指定してください')
    length = hijri_month_length(year, month)
    if day > length:
        raise _reject('hijri', year, month, day, f'この月は {length} 日までです')


def validate_gregorian(year: int, month: int, day: int) -> None:
    """西暦の年月日を検証する。改暦で欠落した 1582-10-05〜14 も不正とする。

    Raises:
        CalendarValidationError: 範囲外の月・日、または改暦で存在しない日
    """
    if not 1 <= month <= 12:
        raise _reject('gregorian', year, month, day, '月は 1〜12 で指定してください')
    if day < 1:
        raise _reject('gregorian', year, month, day, '日は 1 以上で指定してください')
    length = gregorian_month_length(year, month)
    if day > length:
        raise _reject('gregorian', year, month, day, f'この月は {length} 日までです')
    if year == 1582 and month == 10 and 4 < day < 15:
        raise _reject('gregorian', year, month, day, '改暦により存在しない日です')


# ── 検証付き変換 ─────────────────────────────────────────────────────────────

def to_hijri_checked(value: DateLike) -> HijriDate:
    """検証してから to_hijri() を呼ぶ。"""
    validate_gregorian(value.year, value.month, value.day)
    return to_hijri(value)


def to_gregorian_checked(year: int, month: int, day: int) -> GregorianDate:
    """検証してから to_gregorian() を呼ぶ。"""
    validate_hijri(year, month, day)
    return to_gregorian(year, month, day)
