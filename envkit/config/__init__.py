"""Configuration package.

Settings file loading (EnvStore/bootstrap), envkit options and the typed
EnvironmentVariables accessor.
"""
from .accessor import EnvironmentVariables, Lookup  # noqa: F401
from .errors import EnvkitError, MissingEnvironmentVariableError  # noqa: F401
from .options import EnvkitOptions, load_options  # noqa: F401
from .store import EnvStore, LoadResult, bootstrap, settings_file_path  # noqa: F401
