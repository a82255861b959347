"""ログ付きフィーチャーフラグサービス"""

from __future__ import annotations

from typing import Any

import structlog
from openfeature import api
from openfeature.client import OpenFeatureClient
from openfeature.flag_evaluation import FlagType
from openfeature.provider import FeatureProvider

from .config import FeatureFlagConfig
from .exceptions import FeatureFlagError, FeatureFlagErrorCodes
from .logger import new_logger
from .models import FallbackCause, fallback_cause_of
from .namespace import KeyValueNamespace
from .provider import EnvVarProvider


class FeatureFlagService:
    """OpenFeature クライアントのフラグ評価結果をログに記録するサービス。"""

    def __init__(
        self,
        client: OpenFeatureClient,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        self._client = client
        self._log = logger if logger is not None else structlog.stdlib.get_logger(__name__)

    @classmethod
    def create(
        cls,
        prefix: str = "",
        *,
        namespace: KeyValueNamespace | None = None,
        client_name: str = "frontend",
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> FeatureFlagService:
        """EnvVarProvider を client_name のドメインに登録し、サービスを構築する。

        Raises:
            FeatureFlagError: プロバイダーの登録に失敗した場合
        """
        return cls.register(
            EnvVarProvider(prefix, namespace), client_name=client_name, logger=logger
        )

    @classmethod
    def register(
        cls,
        provider: FeatureProvider,
        *,
        client_name: str = "frontend",
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> FeatureFlagService:
        """プロバイダーを初期化完了まで待って登録し、そのドメインのクライアントでサービスを構築する。

        Raises:
            FeatureFlagError: プロバイダーの登録・初期化に失敗した場合
        """
        try:
            api.set_provider_and_wait(provider, domain=client_name)
        except Exception as e:
            raise FeatureFlagError(
                code=FeatureFlagErrorCodes.PROVIDER_REGISTRATION_ERROR,
                message=f"Failed to register feature flag provider: {e}",
                cause=e,
            ) from e

        service = cls(api.get_client(client_name), logger)
        service._log.info(
            "Feature flag service initialized successfully",
            client=client_name,
            provider=provider.get_metadata().name,
        )
        return service

    @classmethod
    def from_config(
        cls,
        config: FeatureFlagConfig,
        *,
        namespace: KeyValueNamespace | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> FeatureFlagService:
        """設定からサービスを構築する。logger 省略時は config.log で設定したロガーを使う。"""
        if logger is None:
            logger = new_logger(config.log, config.client_name)
        return cls.create(
            config.provider.prefix,
            namespace=namespace,
            client_name=config.client_name,
            logger=logger,
        )

    @property
    def client(self) -> OpenFeatureClient:
        return self._client

    def _evaluate(self, flag_type: FlagType, flag_key: str, default_value: Any) -> Any:
        details = self._client.evaluate_flag_details(flag_type, flag_key, default_value)
        if details.error_code is not None:
            self._log.warning(
                f"Failed to evaluate {flag_type.value.lower()} flag, using default",
                flag_key=flag_key,
                default=default_value,
                error=f"{details.error_code}: {details.error_message}",
            )
            return details.value
        if fallback_cause_of(details) is FallbackCause.MALFORMED:
            self._log.warning(
                "Malformed flag value ignored, using default",
                flag_key=flag_key,
                default=default_value,
            )
            return details.value
        self._log.info(
            "Feature flag evaluated",
            flag_key=flag_key,
            value=details.value,
            variant=details.variant,
            reason=str(details.reason),
        )
        return details.value

    def get_boolean_flag(self, flag_key: str, default_value: bool) -> bool:
        return self._evaluate(FlagType.BOOLEAN, flag_key, default_value)

    def get_string_flag(self, flag_key: str, default_value: str) -> str:
        return self._evaluate(FlagType.STRING, flag_key, default_value)

    def get_float_flag(self, flag_key: str, default_value: float) -> float:
        return self._evaluate(FlagType.FLOAT, flag_key, default_value)

    def get_integer_flag(self, flag_key: str, default_value: int) -> int:
        return self._evaluate(FlagType.INTEGER, flag_key, default_value)

    def get_object_flag(self, flag_key: str, default_value: Any) -> Any:
        return self._evaluate(FlagType.OBJECT, flag_key, default_value)
