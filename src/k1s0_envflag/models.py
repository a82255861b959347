"""envflag データモデル"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from openfeature.flag_evaluation import FlagResolutionDetails

ENV_VAR_VARIANT = "env-var"
DEFAULT_VARIANT = "default-variant"

# flag_metadata に格納するフォールバック原因のキー
FALLBACK_CAUSE_KEY = "fallback_cause"

# プロバイダーが返す解決結果
ResolutionResult = FlagResolutionDetails


class FallbackCause(StrEnum):
    """デフォルト値にフォールバックした原因（診断用）。"""

    NOT_FOUND = "NOT_FOUND"
    MALFORMED = "MALFORMED"
    UNSUPPORTED_TYPE = "UNSUPPORTED_TYPE"


def fallback_cause_of(details: Any) -> FallbackCause | None:
    """解決結果・評価結果の flag_metadata からフォールバック原因を取り出す。"""
    cause = details.flag_metadata.get(FALLBACK_CAUSE_KEY)
    if cause is None:
        return None
    return FallbackCause(cause)
