"""設定ファイル（config.json）管理"""

import json
import logging
import os
from typing import Any, Callable

from core.hijri import to_gregorian, to_hijri
from core.validation import to_gregorian_checked, to_hijri_checked

logger = logging.getLogger(__name__)

CONFIG_ENV = 'TAKVIM_CONFIG'


def _get_app_dir() -> str:
    """アプリのルートディレクトリを返す。"""
    return os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


def _get_config_path() -> str:
    """config.json の絶対パスを返す。

    環境変数 TAKVIM_CONFIG が設定されていればそれを優先する。
    """
    override = os.environ.get(CONFIG_ENV, '')
    if override:
        return os.path.abspath(override)
    return os.path.join(_get_app_dir(), 'config.json')


def _default_config() -> dict[str, Any]:
    """デフォルト設定を返す。"""
    return {
        'app_version': '1.0.0',
        'validation': {
            'strict': False,    # True: 範囲外の年月日を CalendarValidationError にする
        },
        'table': {
            'hijri_prefix': 'hicri_',
            'gregorian_prefix': 'miladi_',
        },
    }


def _deep_merge(base: dict, override: dict) -> dict:
    """ネストした辞書を再帰的にマージする。override が優先。"""
    result = dict(base)
    for k, v in override.items():
        if k in result and isinstance(result[k], dict) and isinstance(v, dict):
            result[k] = _deep_merge(result[k], v)
        else:
            result[k] = v
    return result


def load_config() -> dict[str, Any]:
    """config.json を読み込む。存在しない / 不正な場合はデフォルト値を返す。"""
    defaults = _default_config()
    path = _get_config_path()
    if not os.path.exists(path):
        return defaults
    try:
        with open(path, encoding='utf-8') as f:
            data = json.load(f)
    except (json.JSONDecodeError, OSError):
        logger.warning('設定ファイルを読み込めません。デフォルト値を使用します: %s', path)
        return defaults
    if not isinstance(data, dict):
        logger.warning('設定ファイルの形式が不正です: %s', path)
        return defaults
    return _deep_merge(defaults, data)


def save_config(config: dict[str, Any]) -> None:
    """config を config.json に保存する。"""
    path = _get_config_path()
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(config, f, ensure_ascii=False, indent=2)


def is_strict(config: dict[str, Any]) -> bool:
    """検証付き変換を使う設定かどうか。"""
    return bool(config.get('validation', {}).get('strict', False))


def get_converters(config: dict[str, Any]) -> tuple[Callable, Callable]:
    """設定に応じた (西暦→ヒジュラ暦, ヒジュラ暦→西暦) 変換関数の組を返す。"""
    if is_strict(config):
        return to_hijri_checked, to_gregorian_checked
    return to_hijri, to_gregorian


def table_prefixes(config: dict[str, Any]) -> tuple[str, str]:
    """表変換で追加する列の接頭辞 (ヒジュラ暦, 西暦) を返す。"""
    table = config.get('table', {})
    return (
        table.get('hijri_prefix', 'hicri_'),
        table.get('gregorian_prefix', 'miladi_'),
    )
