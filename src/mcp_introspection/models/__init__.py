from .config import Config
from .introspection_config import (
    TOOL_NAMES,
    ExecuteConfig,
    Introspection,
    IntrospectConfig,
    SearchConfig,
    ValidateConfig,
    resolve_execute_hints,
)

__all__ = [
    "Config",
    "Introspection",
    "ExecuteConfig",
    "IntrospectConfig",
    "SearchConfig",
    "ValidateConfig",
    "TOOL_NAMES",
    "resolve_execute_hints",
]
