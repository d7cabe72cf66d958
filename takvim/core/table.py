"""DataFrame の日付列をまとめて変換する

Excel / CSV から読み込んだ表に、ヒジュラ暦・西暦の列を追加する。
元の DataFrame は変更せず、列を追加したコピーを返す。
"""

from __future__ import annotations

import logging
from typing import Any

import pandas as pd

from core.hijri import GregorianDate, HijriDate, to_gregorian, to_hijri
from core.validation import to_gregorian_checked, to_hijri_checked
from utils.date_fmt import format_iso, parse_date
from utils.hijri_fmt import format_gregorian, format_hijri

logger = logging.getLogger(__name__)


def _is_missing(val: Any) -> bool:
    if val is None:
        return True
    try:
        return bool(pd.isna(val))
    except (TypeError, ValueError):
        return False


def _cell_to_gregorian(val: Any) -> GregorianDate | None:
    """セル値（date / Timestamp / 文字列 / Excel シリアル値）を GregorianDate に変換する。"""
    if _is_missing(val):
        return None
    if isinstance(val, GregorianDate):
        return val
    if all(hasattr(val, attr) for attr in ('year', 'month', 'day')):
        return GregorianDate.from_date(val)
    return parse_date(str(val))


def _cell_to_int(val: Any) -> int | None:
    if _is_missing(val):
        return None
    try:
        return int(float(val))
    except (TypeError, ValueError, OverflowError):
        return None


def add_hijri_columns(
    df: pd.DataFrame, column: str, *, prefix: str = 'hicri_', strict: bool = False,
) -> pd.DataFrame:
    """西暦の日付列からヒジュラ暦の列を追加した DataFrame を返す。

    追加列:
        {prefix}yil / {prefix}ay / {prefix}gun: 年・月・日（Int64、変換不能は <NA>）
        {prefix}tarih: 「1 Muharrem 1446」形式（変換不能は空文字）

    Raises:
        KeyError: column が存在しない
        CalendarValidationError: strict=True で範囲外の日付がある
    """
    if column not in df.columns:
        raise KeyError(column)
    convert = to_hijri_checked if strict else to_hijri

    results: list[HijriDate | None] = []
    for val in df[column]:
        g = _cell_to_gregorian(val)
        if g is None:
            if not _is_missing(val):
                logger.debug('日付として解釈できません: %r', val)
            results.append(None)
            continue
        results.append(convert(g))

    out = df.copy()
    out[f'{prefix}yil'] = pd.array([h.year if h else None for h in results], dtype='Int64')
    out[f'{prefix}ay'] = pd.array([h.month if h else None for h in results], dtype='Int64')
    out[f'{prefix}gun'] = pd.array([h.day if h else None for h in results], dtype='Int64')
    out[f'{prefix}tarih'] = [format_hijri(h) if h else '' for h in results]
    return out


def add_gregorian_columns(
    df: pd.DataFrame,
    year_col: str,
    month_col: str,
    day_col: str,
    *,
    prefix: str = 'miladi_',
    strict: bool = False,
) -> pd.DataFrame:
    """ヒジュラ暦の年・月・日列から西暦の列を追加した DataFrame を返す。

    追加列:
        {prefix}tarih: YYYY-MM-DD 形式
        {prefix}etiket: 「8 Temmuz 2024」形式
    年・月・日のいずれかが欠損している行は空文字になる。
    """
    for col in (year_col, month_col, day_col):
        if col not in df.columns:
            raise KeyError(col)
    convert = to_gregorian_checked if strict else to_gregorian

    iso: list[str] = []
    labels: list[str] = []
    for y, m, d in zip(df[year_col], df[month_col], df[day_col]):
        parts = (_cell_to_int(y), _cell_to_int(m), _cell_to_int(d))
        if None in parts:
            iso.append('')
            labels.append('')
            continue
        g = convert(*parts)
        iso.append(format_iso(g))
        labels.append(format_gregorian(g))

    out = df.copy()
    out[f'{prefix}tarih'] = iso
    out[f'{prefix}etiket'] = labels
    return out
