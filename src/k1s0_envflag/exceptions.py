"""envflag ライブラリの例外型定義"""

from __future__ import annotations


class FeatureFlagError(Exception):
    """envflag ライブラリのエラー基底クラス。

    フラグの解決自体は決して例外を送出しない。
    送出されるのはプロバイダー登録時と設定読み込み時のみ。
    """

    def __init__(
        self,
        code: str,
        message: str,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return f"{self.code}: {super().__str__()}"


class FeatureFlagErrorCodes:
    """エラーコード定数。"""

    PROVIDER_REGISTRATION_ERROR: str = "PROVIDER_REGISTRATION_ERROR"
    CONFIG_ERROR: str = "CONFIG_ERROR"
