"""envflag テスト共通フィクスチャ"""

from collections.abc import Iterator

import pytest
import structlog
from openfeature import api
from k1s0_envflag import EnvVarProvider, InMemoryNamespace


@pytest.fixture(autouse=True)
def reset_structlog() -> Iterator[None]:
    """テストごとに structlog の設定を初期化する。"""
    yield
    structlog.reset_defaults()


@pytest.fixture
def namespace() -> InMemoryNamespace:
    return InMemoryNamespace()


@pytest.fixture
def provider(namespace: InMemoryNamespace) -> EnvVarProvider:
    return EnvVarProvider(namespace=namespace)


@pytest.fixture(autouse=True)
def reset_openfeature() -> Iterator[None]:
    """テストごとに OpenFeature のプロバイダー登録を解除する。"""
    yield
    api.shutdown()
