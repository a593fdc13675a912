"""
Variable Store
==============

Wraps the process-wide variable table and seeds it from a dotenv
settings file named after the active environment.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, MutableMapping, Optional

from dotenv import dotenv_values

from .options import EnvkitOptions

logger = logging.getLogger(__name__)


@dataclass
class LoadResult:
    """Outcome of loading a settings file."""
    path: Path
    loaded: bool = False
    added: List[str] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)
    error: Optional[Exception] = None

    @property
    def failed(self) -> bool:
        return self.error is not None


class EnvStore:
    """
    Read-mostly view over a string-to-string variable table.

    By default this is ``os.environ``; tests and embedding applications
    can hand in any mutable mapping instead.
    """

    def __init__(self, environ: Optional[MutableMapping[str, str]] = None):
        self.environ = os.environ if environ is None else environ

    def get(self, key: str) -> Optional[str]:
        return self.environ.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self.environ

    def environment_name(self, options: Optional[EnvkitOptions] = None) -> str:
        """Active environment name, from the selector variable or the default."""
        options = options or EnvkitOptions()
        return self.environ.get(options.selector_variable) or options.default_environment

    def load(self, path: str | os.PathLike[str]) -> LoadResult:
        """
        Merge a dotenv file into the table without overriding existing keys.

        Args:
            path: Settings file path

        Returns:
            LoadResult describing what was added. Failures are logged and
            reported through ``LoadResult.error``, never raised.
        """
        result = LoadResult(path=Path(path))

        try:
            if not result.path.is_file():
                raise FileNotFoundError(f"Settings file not found: {result.path}")
            values = dotenv_values(result.path, interpolate=False, encoding='utf-8')
        except Exception as e:
            logger.error(f"Error loading environment variables from {result.path}: {e}")
            result.error = e
            return result

        for key, value in values.items():
            # "KEY" with no "=" parses to None
            if value is None:
                continue
            if key in self.environ:
                result.skipped.append(key)
                continue
            self.environ[key] = value
            result.added.append(key)

        result.loaded = True
        logger.debug(
            f"Loaded {len(result.added)} variables from {result.path} "
            f"({len(result.skipped)} already set)"
        )
        return result


def settings_file_path(
    environment_name: str,
    cwd: Optional[str | os.PathLike[str]] = None,
    options: Optional[EnvkitOptions] = None,
) -> Path:
    """Path of the settings file for an environment: ``<cwd>/.env.<name>``."""
    options = options or EnvkitOptions()
    base = Path(cwd) if cwd is not None else Path.cwd()
    return base / f"{options.file_prefix}.{environment_name}"


def bootstrap(
    store: Optional[EnvStore] = None,
    cwd: Optional[str | os.PathLike[str]] = None,
    options: Optional[EnvkitOptions] = None,
) -> LoadResult:
    """
    Run-once startup step: load the settings file of the active environment.

    Args:
        store: Store to seed (defaults to one over os.environ)
        cwd: Directory holding the settings files (defaults to the CWD)
        options: envkit options

    Returns:
        LoadResult of the load attempt
    """
    store = store if store is not None else EnvStore()
    options = options or EnvkitOptions()

    path = settings_file_path(store.environment_name(options), cwd=cwd, options=options)
    logger.info(f"Loading environment file {path}")
    return store.load(path)


__all__ = ["EnvStore", "LoadResult", "bootstrap", "settings_file_path"]
