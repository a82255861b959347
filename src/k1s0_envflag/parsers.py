"""スカラー型ごとのパース戦略

各パーサーは文字列を受け取り、不正な入力に対しては ValueError を送出する。
"""

from __future__ import annotations

import math
import re
from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import Any

from openfeature.flag_evaluation import FlagType

Parser = Callable[[str], Any]

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

_TRUE_TOKENS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_TOKENS = frozenset({"0", "f", "F", "FALSE", "false", "False"})

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_DECIMAL_FLOAT_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_HEX_FLOAT_RE = re.compile(
    r"[+-]?0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)[pP][+-]?[0-9]+"
)
_SPECIAL_FLOAT_RE = re.compile(r"[+-]?(?:inf|infinity)|nan", re.IGNORECASE)


def parse_boolean(raw: str) -> bool:
    """真偽値トークンをパースする。"""
    if raw in _TRUE_TOKENS:
        return True
    if raw in _FALSE_TOKENS:
        return False
    raise ValueError(f"invalid boolean: {raw!r}")


def parse_integer(raw: str) -> int:
    """10 進の符号付き 64bit 整数をパースする。"""
    if not _INTEGER_RE.fullmatch(raw):
        raise ValueError(f"invalid integer: {raw!r}")
    value = int(raw)
    if not INT64_MIN <= value <= INT64_MAX:
        raise ValueError(f"integer out of range: {raw!r}")
    return value


def parse_float(raw: str) -> float:
    """64bit 浮動小数点数をパースする。

    10 進表記、指数必須の 16 進表記、inf / infinity / nan を受け付ける。
    符号を付けられるのは inf / infinity のみ。数字区切りの "_" は受け付けない。
    有限の表記がオーバーフローして無限大になる場合は不正とみなす。
    """
    if _SPECIAL_FLOAT_RE.fullmatch(raw):
        return float(raw)
    if _HEX_FLOAT_RE.fullmatch(raw):
        try:
            return float.fromhex(raw)
        except OverflowError as e:
            raise ValueError(f"float out of range: {raw!r}") from e
    if not _DECIMAL_FLOAT_RE.fullmatch(raw):
        raise ValueError(f"invalid float: {raw!r}")
    value = float(raw)
    if math.isinf(value):
        raise ValueError(f"float out of range: {raw!r}")
    return value


def parse_string(raw: str) -> str:
    return raw


SCALAR_PARSERS: Mapping[FlagType, Parser] = MappingProxyType(
    {
        FlagType.BOOLEAN: parse_boolean,
        FlagType.STRING: parse_string,
        FlagType.FLOAT: parse_float,
        FlagType.INTEGER: parse_integer,
    }
)
