"""フラグキーから名前空間キーへの変換"""

from __future__ import annotations

_REPLACED_CHARS = str.maketrans({"-": "_", ".": "_"})


def to_namespace_key(flag_key: str, prefix: str = "") -> str:
    """フラグキーを名前空間（環境変数）のキーに変換する。

    大文字化し、"-" と "." を "_" に置換する。prefix が空でなければ
    "<prefix>_" を先頭に付与する。prefix 自体は変換しない。
    それ以外の文字はそのまま残るため、名前空間で使えない文字を
    含めないのは呼び出し側の責任。

    例: to_namespace_key("my-flag.v2", "APP") -> "APP_MY_FLAG_V2"
    """
    key = flag_key.upper().translate(_REPLACED_CHARS)
    if prefix:
        return f"{prefix}_{key}"
    return key
