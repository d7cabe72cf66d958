"""core/table.py のテスト"""

from datetime import date, datetime

import pandas as pd
import pytest

from core.config import table_prefixes
from core.table import add_gregorian_columns, add_hijri_columns
from core.validation import CalendarValidationError


class TestAddHijriColumns:
    def _df(self):
        return pd.DataFrame({
            'ad': ['Ali', 'Ayşe', 'Can', 'Deniz', 'Ece'],
            'tarih': [
                date(2024, 7, 8),
                pd.Timestamp('2025-03-01 15:30'),
                '2024-07-07',
                45481.0,   # Excel serial = 2024-07-08
                None,
            ],
        })

    def test_adds_columns(self):
        out = add_hijri_columns(self._df(), 'tarih')
        for col in ('hicri_yil', 'hicri_ay', 'hicri_gun', 'hicri_tarih'):
            assert col in out.columns

    def test_values(self):
        out = add_hijri_columns(self._df(), 'tarih')
        assert out['hicri_tarih'].tolist() == [
            '1 Muharrem 1446',
            '1 Ramazan 1446',
            '30 Zilhicce 1445',
            '1 Muharrem 1446',
            '',
        ]
        assert out.loc[0, 'hicri_yil'] == 1446
        assert out.loc[2, 'hicri_gun'] == 30

    def test_missing_cell_is_na(self):
        out = add_hijri_columns(self._df(), 'tarih')
        assert pd.isna(out.loc[4, 'hicri_yil'])
        assert str(out['hicri_yil'].dtype) == 'Int64'

    def test_unparseable_cell(self):
        df = pd.DataFrame({'tarih': ['bilinmiyor', datetime(2024, 7, 8)]})
        out = add_hijri_columns(df, 'tarih')
        assert out['hicri_tarih'].tolist() == ['', '1 Muharrem 1446']

    def test_original_not_mutated(self):
        df = self._df()
        add_hijri_columns(df, 'tarih')
        assert list(df.columns) == ['ad', 'tarih']

    def test_custom_prefix_from_config(self):
        prefix, _ = table_prefixes({'table': {'hijri_prefix': 'h_'}})
        out = add_hijri_columns(self._df(), 'tarih', prefix=prefix)
        assert 'h_tarih' in out.columns

    def test_unknown_column(self):
        with pytest.raises(KeyError):
            add_hijri_columns(self._df(), 'yok')

    def test_strict_rejects_invalid(self):
        df = pd.DataFrame({'tarih': ['2023-02-29']})
        with pytest.raises(CalendarValidationError):
            add_hijri_columns(df, 'tarih', strict=True)

    def test_permissive_accepts_invalid(self):
        df = pd.DataFrame({'tarih': ['2023-02-29']})
        out = add_hijri_columns(df, 'tarih')
        assert out.loc[0, 'hicri_tarih'] != ''


class TestAddGregorianColumns:
    def _df(self):
        return pd.DataFrame({
            'yil': [1446, 1445, 990, None],
            'ay': [1, 12, 9, 1],
            'gun': [1, 30, 16, 1],
        })

    def test_values(self):
        out = add_gregorian_columns(self._df(), 'yil', 'ay', 'gun')
        assert out['miladi_tarih'].tolist() == [
            '2024-07-08', '2024-07-07', '1582-10-04', '',
        ]
        assert out['miladi_etiket'].tolist() == [
            '8 Temmuz 2024', '7 Temmuz 2024', '4 Ekim 1582', '',
        ]

    def test_original_not_mutated(self):
        df = self._df()
        add_gregorian_columns(df, 'yil', 'ay', 'gun')
        assert list(df.columns) == ['yil', 'ay', 'gun']

    def test_unknown_column(self):
        with pytest.raises(KeyError):
            add_gregorian_columns(self._df(), 'yil', 'ay', 'yok')

    def test_strict_rejects_invalid(self):
        df = pd.DataFrame({'yil': [1446], 'ay': [2], 'gun': [30]})
        with pytest.raises(CalendarValidationError):
            add_gregorian_columns(df, 'yil', 'ay', 'gun', strict=True)

    def test_custom_prefix(self):
        out = add_gregorian_columns(self._df(), 'yil', 'ay', 'gun', prefix='g_')
        assert 'g_tarih' in out.columns
        assert 'g_etiket' in out.columns

    def test_infinite_cell_is_empty(self):
        """inf や '1e400' のように整数にできないセルは空になる。"""
        df = pd.DataFrame({
            'yil': [1446.0, float('inf'), '1e400'],
            'ay': [1, 1, 1],
            'gun': [1, 1, 1],
        })
        out = add_gregorian_columns(df, 'yil', 'ay', 'gun')
        assert out['miladi_tarih'].tolist() == ['2024-07-08', '', '']
        assert out['miladi_etiket'].tolist() == ['8 Temmuz 2024', '', '']
