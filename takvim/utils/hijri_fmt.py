"""ヒジュラ暦 / 西暦 → 表示文字列ユーティリティ"""

from core.hijri import GREGORIAN_MONTHS, HIJRI_MONTHS, GregorianDate, HijriDate


def hijri_month_name(month: int) -> str:
    """
    ヒジュラ暦の月番号（1〜12）を月名に変換する。

    Examples:
        >>> hijri_month_name(1)
        'Muharrem'
        >>> hijri_month_name(9)
        'Ramazan'
    """
    if not 1 <= month <= 12:
        raise ValueError(f'月番号が範囲外です: {month}')
    return HIJRI_MONTHS[month - 1]


def gregorian_month_name(month: int) -> str:
    """
    西暦の月番号（1〜12）を月名に変換する。

    Examples:
        >>> gregorian_month_name(7)
        'Temmuz'
    """
    if not 1 <= month <= 12:
        raise ValueError(f'月番号が範囲外です: {month}')
    return GREGORIAN_MONTHS[month - 1]


def format_hijri(h: HijriDate) -> str:
    """
    「日 月名 年」形式で返す。

    Examples:
        >>> format_hijri(HijriDate(1446, 1, 1))
        '1 Muharrem 1446'
    """
    return f'{h.day} {hijri_month_name(h.month)} {h.year}'


def format_gregorian(g: GregorianDate) -> str:
    """
    「日 月名 年」形式で返す。date / datetime も受け付ける。

    Examples:
        >>> format_gregorian(GregorianDate(2024, 7, 8))
        '8 Temmuz 2024'
    """
    return f'{g.day} {gregorian_month_name(g.month)} {g.year}'
