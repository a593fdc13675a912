"""
envkit - Namespaced Environment Variables
=========================================

Typed access to environment variables namespaced by environment name.

Modules:
- config: settings file loading, options and the typed accessor
- utils: logging setup
- settings: process-wide accessor, loaded on import
"""

__version__ = "1.0.0"

from .config.accessor import EnvironmentVariables, Lookup
from .config.errors import EnvkitError, MissingEnvironmentVariableError
from .config.options import EnvkitOptions, load_options
from .config.store import EnvStore, LoadResult, bootstrap, settings_file_path
from .utils.logger import setup_logging

__all__ = [
    "EnvironmentVariables",
    "Lookup",
    "EnvkitError",
    "MissingEnvironmentVariableError",
    "EnvkitOptions",
    "load_options",
    "EnvStore",
    "LoadResult",
    "bootstrap",
    "settings_file_path",
    "setup_logging",
]
