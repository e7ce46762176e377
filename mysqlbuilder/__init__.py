"""mysqlbuilder: INSERT and upsert statement building for MySQL with named parameters."""

from mysqlbuilder import exceptions
from mysqlbuilder.__metadata__ import __version__
from mysqlbuilder.builder import InsertQuery, SafeQuery, insert
from mysqlbuilder.config import BuilderConfig, get_global_config, load_config_from_env, set_global_config
from mysqlbuilder.typing import DBNull

__all__ = (
    "BuilderConfig",
    "DBNull",
    "InsertQuery",
    "SafeQuery",
    "exceptions",
    "get_global_config",
    "insert",
    "load_config_from_env",
    "set_global_config",
    "__version__",
)
