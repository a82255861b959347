"""名前空間実装のユニットテスト"""

import pytest
from k1s0_envflag import EnvironNamespace, InMemoryNamespace


def test_in_memory_set_and_get() -> None:
    """設定した値を取得できること。"""
    ns = InMemoryNamespace()
    ns.set("KEY", "value")
    assert ns.get("KEY") == "value"


def test_in_memory_missing_key() -> None:
    """存在しないキーは None になること。"""
    assert InMemoryNamespace().get("MISSING") is None


def test_in_memory_initial_values_are_copied() -> None:
    """初期値は複製されて保持されること。"""
    initial = {"KEY": "a"}
    ns = InMemoryNamespace(initial)
    initial["KEY"] = "b"
    assert ns.get("KEY") == "a"


def test_in_memory_unset() -> None:
    """削除できたら True、存在しなければ False を返すこと。"""
    ns = InMemoryNamespace({"KEY": "value"})
    assert ns.unset("KEY") is True
    assert ns.unset("KEY") is False
    assert ns.get("KEY") is None


def test_in_memory_exact_match() -> None:
    """キーは完全一致で参照されること。"""
    ns = InMemoryNamespace({"KEY": "value"})
    assert ns.get("key") is None


def test_environ_reads_supplied_mapping() -> None:
    """指定したマッピングを参照すること。"""
    ns = EnvironNamespace({"FEATURE_X": "on"})
    assert ns.get("FEATURE_X") == "on"
    assert ns.get("FEATURE_Y") is None


def test_environ_reads_os_environ_live(monkeypatch: pytest.MonkeyPatch) -> None:
    """os.environ の変更が即座に反映されること。"""
    ns = EnvironNamespace()
    monkeypatch.delenv("K1S0_TEST_LIVE", raising=False)
    assert ns.get("K1S0_TEST_LIVE") is None
    monkeypatch.setenv("K1S0_TEST_LIVE", "1")
    assert ns.get("K1S0_TEST_LIVE") == "1"
