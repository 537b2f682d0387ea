"""Core infrastructure layer - no business logic dependencies.

This module provides foundation-level services:
- Configuration management (TOML)
- Database operations (SQLite)
- Console and log output (Rich, Loguru)
"""

# Configuration
from .config import (
    Config,
    load_config,
    get_config_dir,
    get_config_path,
    get_data_dir,
    get_runtime_dir,
    get_stations_path,
    create_default_config,
    ensure_directories,
)

# Database
from .database import (
    get_database_path,
    get_db_connection,
    init_database,
)

# Console
from .console import get_console, safe_print

__all__ = [
    # Config
    "Config",
    "load_config",
    "get_config_dir",
    "get_config_path",
    "get_data_dir",
    "get_runtime_dir",
    "get_stations_path",
    "create_default_config",
    "ensure_directories",
    # Database
    "get_database_path",
    "get_db_connection",
    "init_database",
    # Console
    "get_console",
    "safe_print",
]
