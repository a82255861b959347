"""k1s0 envflag library."""

from .config import FeatureFlagConfig, LogSection, ProviderConfig, load_config
from .exceptions import FeatureFlagError, FeatureFlagErrorCodes
from .logger import new_logger
from .models import (
    DEFAULT_VARIANT,
    ENV_VAR_VARIANT,
    FALLBACK_CAUSE_KEY,
    FallbackCause,
    ResolutionResult,
    fallback_cause_of,
)
from .namespace import EnvironNamespace, InMemoryNamespace, KeyValueNamespace
from .naming import to_namespace_key
from .provider import EnvVarProvider
from .service import FeatureFlagService

__all__ = [
    "DEFAULT_VARIANT",
    "ENV_VAR_VARIANT",
    "FALLBACK_CAUSE_KEY",
    "EnvVarProvider",
    "EnvironNamespace",
    "FallbackCause",
    "FeatureFlagConfig",
    "FeatureFlagError",
    "FeatureFlagErrorCodes",
    "FeatureFlagService",
    "InMemoryNamespace",
    "KeyValueNamespace",
    "LogSection",
    "ProviderConfig",
    "ResolutionResult",
    "fallback_cause_of",
    "load_config",
    "new_logger",
    "to_namespace_key",
]
