"""EnvVarProvider 実装"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, TypeVar

from openfeature.evaluation_context import EvaluationContext
from openfeature.flag_evaluation import FlagResolutionDetails, FlagType, Reason
from openfeature.hook import Hook
from openfeature.provider import AbstractProvider, Metadata

from .config import ProviderConfig
from .models import DEFAULT_VARIANT, ENV_VAR_VARIANT, FALLBACK_CAUSE_KEY, FallbackCause
from .namespace import EnvironNamespace, KeyValueNamespace
from .naming import to_namespace_key
from .parsers import SCALAR_PARSERS

T = TypeVar("T")

PROVIDER_NAME = "EnvVarProvider"


def _default_result(default_value: T, cause: FallbackCause) -> FlagResolutionDetails[T]:
    return FlagResolutionDetails(
        value=default_value,
        variant=DEFAULT_VARIANT,
        reason=Reason.DEFAULT,
        flag_metadata={FALLBACK_CAUSE_KEY: str(cause)},
    )


class EnvVarProvider(AbstractProvider):
    """環境変数からフラグ値を解決する OpenFeature プロバイダー。

    値が存在しない、空文字列、または要求された型としてパースできない場合は
    例外を送出せずデフォルト値を返す。状態を持たないため、複数スレッドから
    同時に呼び出しても互いに干渉しない。
    """

    def __init__(
        self,
        prefix: str = "",
        namespace: KeyValueNamespace | None = None,
    ) -> None:
        super().__init__()
        self._config = ProviderConfig(prefix=prefix)
        self._namespace: KeyValueNamespace = (
            namespace if namespace is not None else EnvironNamespace()
        )

    @classmethod
    def from_config(
        cls,
        config: ProviderConfig,
        namespace: KeyValueNamespace | None = None,
    ) -> EnvVarProvider:
        return cls(prefix=config.prefix, namespace=namespace)

    @property
    def config(self) -> ProviderConfig:
        return self._config

    @property
    def prefix(self) -> str:
        return self._config.prefix

    def get_metadata(self) -> Metadata:
        return Metadata(name=PROVIDER_NAME)

    def get_provider_hooks(self) -> list[Hook]:
        return []

    def resolve(
        self, flag_type: FlagType, flag_key: str, default_value: T
    ) -> FlagResolutionDetails[T]:
        """フラグを解決する。

        Args:
            flag_type: 要求する値の型
            flag_key: フラグキー
            default_value: 値が得られない場合に返すデフォルト値

        Returns:
            解決結果。名前空間の値をパースできた場合は variant="env-var"、
            それ以外は variant="default-variant" となり、flag_metadata に
            フォールバック原因が入る。
        """
        # 環境変数は構造化データを表現できないため常にデフォルト
        if flag_type is FlagType.OBJECT:
            return _default_result(default_value, FallbackCause.UNSUPPORTED_TYPE)

        raw = self._namespace.get(to_namespace_key(flag_key, self.prefix))
        if not raw:
            return _default_result(default_value, FallbackCause.NOT_FOUND)

        try:
            value = SCALAR_PARSERS[flag_type](raw)
        except ValueError:
            return _default_result(default_value, FallbackCause.MALFORMED)

        return FlagResolutionDetails(
            value=value,
            variant=ENV_VAR_VARIANT,
            reason=Reason.TARGETING_MATCH,
        )

    def resolve_boolean_details(
        self,
        flag_key: str,
        default_value: bool,
        evaluation_context: EvaluationContext | None = None,
    ) -> FlagResolutionDetails[bool]:
        return self.resolve(FlagType.BOOLEAN, flag_key, default_value)

    def resolve_string_details(
        self,
        flag_key: str,
        default_value: str,
        evaluation_context: EvaluationContext | None = None,
    ) -> FlagResolutionDetails[str]:
        return self.resolve(FlagType.STRING, flag_key, default_value)

    def resolve_integer_details(
        self,
        flag_key: str,
        default_value: int,
        evaluation_context: EvaluationContext | None = None,
    ) -> FlagResolutionDetails[int]:
        return self.resolve(FlagType.INTEGER, flag_key, default_value)

    def resolve_float_details(
        self,
        flag_key: str,
        default_value: float,
        evaluation_context: EvaluationContext | None = None,
    ) -> FlagResolutionDetails[float]:
        return self.resolve(FlagType.FLOAT, flag_key, default_value)

    def resolve_object_details(
        self,
        flag_key: str,
        default_value: Sequence[Any] | Mapping[str, Any],
        evaluation_context: EvaluationContext | None = None,
    ) -> FlagResolutionDetails[Sequence[Any] | Mapping[str, Any]]:
        return self.resolve(FlagType.OBJECT, flag_key, default_value)
