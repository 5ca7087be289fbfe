"""Shared pytest fixtures."""

import json
import logging

import pytest


@pytest.fixture
def sample_config_data():
    """Sample configuration data for tests."""
    return {
        "introspection": {
            "execute": {
                "enabled": True,
                "hints": "Inline hints",
                "hints_file": "execute-hints.md",
            },
            "introspect": {"enabled": True, "minify": True},
            "search": {"enabled": False, "leaf_depth": 2},
        },
    }


@pytest.fixture
def config_file(tmp_path, sample_config_data):
    """Write the sample config and its hints file into a temporary directory."""
    path = tmp_path / "mcp_introspection_config.json"
    path.write_text(json.dumps(sample_config_data))
    (tmp_path / "execute-hints.md").write_text("Hints from file\n")
    return path


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo handler and level changes made by configure_logging."""
    logger = logging.getLogger("mcp_introspection")
    level, handlers = logger.level, logger.handlers[:]
    yield
    logger.setLevel(level)
    logger.handlers[:] = handlers
