"""フラグ値を参照するキー・バリュー名前空間"""

from __future__ import annotations

import os
import threading
from collections.abc import Mapping
from typing import Protocol


class KeyValueNamespace(Protocol):
    """読み取り専用のキー・バリュー名前空間プロトコル。"""

    def get(self, key: str) -> str | None:
        """キーに完全一致する値を返す。存在しなければ None。"""
        ...


class EnvironNamespace:
    """プロセス環境変数を参照する名前空間。

    呼び出しのたびに参照するため、環境変数の変更は即座に反映される。
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = environ if environ is not None else os.environ

    def get(self, key: str) -> str | None:
        return self._environ.get(key)


class InMemoryNamespace:
    """テスト用スレッドセーフなインメモリ名前空間。"""

    def __init__(self, values: Mapping[str, str] | None = None) -> None:
        self._lock = threading.Lock()
        self._values: dict[str, str] = dict(values or {})

    def set(self, key: str, value: str) -> None:
        """値を設定する。"""
        with self._lock:
            self._values[key] = value

    def unset(self, key: str) -> bool:
        """値を削除する。削除できたら True。"""
        with self._lock:
            return self._values.pop(key, None) is not None

    def get(self, key: str) -> str | None:
        with self._lock:
            return self._values.get(key)
