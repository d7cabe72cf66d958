"""日付文字列の解析・フォーマットユーティリティ"""

import re
from datetime import datetime, timedelta

from core.hijri import GregorianDate

_ISO_RE = re.compile(r'(-?\d{1,4})[-/](\d{1,2})[-/](\d{1,2})(?:[ T].*)?$')


def parse_date(s: str) -> GregorianDate | None:
    """日付文字列を GregorianDate に変換する。変換不能なら None を返す。

    対応形式:
        - "2024-07-08" / "2024/7/8" / "2024-07-08 00:00:00"
        - Excel シリアル値 ("45481.0")
    """
    s = s.strip()
    m = _ISO_RE.match(s)
    if m:
        y, mo, d = int(m.group(1)), int(m.group(2)), int(m.group(3))
        return GregorianDate(y, mo, d)
    # Excel serial number (float string like "45481.0")
    try:
        serial = float(s)
    except ValueError:
        return None
    if 1 < serial < 100000:
        base = datetime(1899, 12, 30)
        dt = base + timedelta(days=int(serial))
        return GregorianDate.from_date(dt)
    return None


def format_iso(g: GregorianDate) -> str:
    """YYYY-MM-DD 形式で返す。0 年以前は符号付き。

    Examples:
        >>> format_iso(GregorianDate(2024, 7, 8))
        '2024-07-08'
        >>> format_iso(GregorianDate(-44, 3, 15))
        '-0044-03-15'
    """
    sign = '-' if g.year < 0 else ''
    return f'{sign}{abs(g.year):04d}-{g.month:02d}-{g.day:02d}'
