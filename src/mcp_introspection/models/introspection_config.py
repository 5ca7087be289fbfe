"""Introspection tool configuration models.

The introspection capability group exposes four optional tools to MCP
clients: ``execute``, ``introspect``, ``search`` and ``validate``. Each
tool has its own option group, and every field carries its default in its
``Field`` declaration so that the same value is used when deserializing
partial config and when publishing the JSON schema.
"""

import logging
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from mcp_introspection.logging import get_logger

logger = get_logger("introspection_config")

TOOL_NAMES = ("execute", "introspect", "search", "validate")


class ExecuteConfig(BaseModel):
    """Configuration for the execute tool.

    Attributes:
        enabled: Whether the execute tool is registered.
        hints: Additional hints appended to the execute tool description.
        hints_file: Path to a file holding additional hints. When both
            ``hints`` and ``hints_file`` are set, ``hints_file`` takes
            precedence. The path is relative to the config file location.
    """

    model_config = ConfigDict(frozen=True)

    enabled: bool = Field(
        default=False,
        strict=True,
        description="Enable introspection for execution",
    )
    hints: str | None = Field(
        default=None,
        strict=True,
        description="Additional hints to append to the execute tool description",
    )
    hints_file: str | None = Field(
        default=None,
        strict=True,
        description=(
            "Path to a file containing additional hints to append to the execute "
            "tool description. Takes precedence over hints. Relative to the "
            "configuration file location."
        ),
    )

    def resolve_hints(
        self,
        config_dir: str | Path | None = None,
        log: logging.Logger | None = None,
    ) -> str | None:
        """
        Return the effective hint text for the execute tool.

        If ``hints_file`` is set it always wins: the file is read in full
        (joined onto ``config_dir`` when given). An ``OSError`` or
        ``UnicodeDecodeError`` is logged and re-raised rather than falling
        back to inline ``hints``. The file is re-read on every call.
        """
        if self.hints_file is None:
            return self.hints

        if log is None:
            log = logger

        if config_dir is not None:
            hints_path = Path(config_dir) / self.hints_file
        else:
            hints_path = Path(self.hints_file)

        try:
            content = hints_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            log.warning(f"Failed to read hints file '{hints_path}': {e}")
            raise

        log.info(f"Loaded hints from file: {hints_path}")
        return content


class IntrospectConfig(BaseModel):
    """Configuration for the introspect tool."""

    model_config = ConfigDict(frozen=True)

    enabled: bool = Field(default=False, strict=True, description="Enable introspection requests")
    minify: bool = Field(default=False, strict=True, description="Minify introspection results")


class SearchConfig(BaseModel):
    """Configuration for the search tool.

    Attributes:
        enabled: Whether the search tool is registered.
        index_memory_bytes: Memory budget for building the search index.
        leaf_depth: Depth of subtype information included for matching
            types. 1 is just the matching type, 2 adds the types it
            references, and so on.
        minify: Whether search results are minified.
    """

    model_config = ConfigDict(frozen=True)

    enabled: bool = Field(default=False, strict=True, description="Enable search tool")
    index_memory_bytes: int = Field(
        default=50_000_000,
        ge=0,
        strict=True,
        description="The amount of memory used for indexing (in bytes)",
    )
    leaf_depth: int = Field(
        default=1,
        ge=0,
        strict=True,
        description=(
            "The depth of subtype information to include from matching types "
            "(1 is just the matching type, 2 is the matching type plus the types "
            "it references, etc.)"
        ),
    )
    minify: bool = Field(default=False, strict=True, description="Minify search results")


class ValidateConfig(BaseModel):
    """Configuration for the validate tool."""

    model_config = ConfigDict(frozen=True)

    enabled: bool = Field(default=False, strict=True, description="Enable validation tool")


class Introspection(BaseModel):
    """Configuration for the introspection capability group.

    Example:
        {
            "execute": {"enabled": True, "hints_file": "hints.md"},
            "search": {"enabled": True, "leaf_depth": 2}
        }
    """

    model_config = ConfigDict(
        frozen=True,
        validate_by_name=True,
        validate_by_alias=True,
        serialize_by_alias=True,
    )

    execute: ExecuteConfig = Field(
        default=ExecuteConfig(),
        description="Execution configuration for introspection",
    )
    introspect: IntrospectConfig = Field(
        default=IntrospectConfig(),
        description="Introspect configuration for allowing clients to run introspection",
    )
    search: SearchConfig = Field(
        default=SearchConfig(),
        description="Search tool configuration",
    )
    validate_: ValidateConfig = Field(
        default=ValidateConfig(),
        alias="validate",
        description="Validate configuration for checking operations before execution",
    )

    def enabled_tools(self) -> list[str]:
        """Return the names of enabled tools, in registration order."""
        flags = (
            self.execute.enabled,
            self.introspect.enabled,
            self.search.enabled,
            self.validate_.enabled,
        )
        return [name for name, enabled in zip(TOOL_NAMES, flags) if enabled]

    def any_enabled(self) -> bool:
        """Check if any introspection tools are enabled."""
        return (
            self.execute.enabled
            or self.introspect.enabled
            or self.search.enabled
            or self.validate_.enabled
        )


def resolve_execute_hints(
    introspection: Introspection,
    config_dir: str | Path | None = None,
) -> str | None:
    """Resolve execute hints, or None when the execute tool is disabled."""
    if not introspection.execute.enabled:
        return None
    return introspection.execute.resolve_hints(config_dir)
