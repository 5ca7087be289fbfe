from . import models
from .json_schema import SchemaGenerationError, schema_for, schema_from_type
from .models import Introspection
from .utils import config_dir_for, load_config

__all__ = [
    "Introspection",
    "SchemaGenerationError",
    "config_dir_for",
    "load_config",
    "schema_for",
    "schema_from_type",
    "models",
]
