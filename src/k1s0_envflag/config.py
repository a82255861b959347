"""設定型定義と設定ファイル読み込み"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .exceptions import FeatureFlagError, FeatureFlagErrorCodes

CONFIG_SECTION = "featureflag"


class ProviderConfig(BaseModel):
    """プロバイダー設定。構築後は変更不可。"""

    model_config = ConfigDict(frozen=True)

    prefix: str = ""


class LogSection(BaseModel):
    """ログ設定。"""

    level: str = "INFO"
    format: Literal["json", "text"] = "json"


class FeatureFlagConfig(BaseModel):
    """フィーチャーフラグ設定全体。"""

    provider: ProviderConfig = Field(default_factory=ProviderConfig)
    client_name: str = Field(default="frontend", min_length=1)
    log: LogSection = Field(default_factory=LogSection)


def load_config(path: Path) -> FeatureFlagConfig:
    """YAML ファイルの featureflag セクションを読み込んで FeatureFlagConfig を返す。

    セクションが存在しない場合はデフォルト設定を返す。

    Raises:
        FeatureFlagError: 読み込み・パース・検証に失敗した場合 (CONFIG_ERROR)
    """
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise FeatureFlagError(
            code=FeatureFlagErrorCodes.CONFIG_ERROR,
            message=f"Failed to read config file: {path}",
            cause=e,
        ) from e
    try:
        data: dict[str, Any] = yaml.safe_load(text) or {}
    except yaml.YAMLError as e:
        raise FeatureFlagError(
            code=FeatureFlagErrorCodes.CONFIG_ERROR,
            message=f"Failed to parse YAML: {path}",
            cause=e,
        ) from e
    if not isinstance(data, dict):
        raise FeatureFlagError(
            code=FeatureFlagErrorCodes.CONFIG_ERROR,
            message=f"Config root must be a mapping: {path}",
        )
    try:
        return FeatureFlagConfig.model_validate(data.get(CONFIG_SECTION) or {})
    except ValidationError as e:
        raise FeatureFlagError(
            code=FeatureFlagErrorCodes.CONFIG_ERROR,
            message=f"Config validation failed: {e}",
            cause=e,
        ) from e
