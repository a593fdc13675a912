#!/usr/bin/env python3
"""Options controlling how envkit picks and names its settings files.

Options come from an optional YAML file:
- `ENVKIT_CONFIG` environment variable, if set
- otherwise `envkit.yaml` in the current working directory

Example::

    selector_variable: APP_ENV
    default_environment: development
    file_prefix: .env
    logging:
      level: DEBUG
      file: logs/envkit.log
      configure: true

If the file does not exist, the defaults below are used so that importing
`envkit.settings` never fails because of a missing options file.
"""
from __future__ import annotations
import os
import logging
import yaml
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

logger = logging.getLogger(__name__)

OPTIONS_PATH_VARIABLE = "ENVKIT_CONFIG"
DEFAULT_OPTIONS_FILE = "envkit.yaml"


@dataclass
class EnvkitOptions:
    """Resolved envkit options."""
    selector_variable: str = "APP_ENV"
    default_environment: str = "development"
    file_prefix: str = ".env"
    logging: Dict[str, Any] = field(default_factory=dict)

    @property
    def configure_logging(self) -> bool:
        return bool(self.logging.get('configure', False))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "EnvkitOptions":
        defaults = cls()
        logging_cfg = data.get('logging') or {}
        if not isinstance(logging_cfg, dict):
            logger.warning("Ignoring non-mapping 'logging' section in envkit options")
            logging_cfg = {}
        return cls(
            selector_variable=str(data.get('selector_variable') or defaults.selector_variable),
            default_environment=str(data.get('default_environment') or defaults.default_environment),
            file_prefix=str(data.get('file_prefix') or defaults.file_prefix),
            logging=dict(logging_cfg),
        )


# ------------------------------------------------------------------
def _load_yaml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        return {}
    try:
        with path.open('r', encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.warning(f"Could not read envkit options from {path}: {e}")
        return {}
    if not isinstance(data, dict):
        logger.warning(f"envkit options in {path} are not a mapping, using defaults")
        return {}
    return data


# ------------------------------------------------------------------
def load_options(
    path: Optional[str | os.PathLike[str]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> EnvkitOptions:
    """
    Load envkit options from YAML.

    Args:
        path: Explicit options file. Relative paths resolve against the CWD.
        environ: Mapping consulted for `ENVKIT_CONFIG` (defaults to os.environ)

    Returns:
        EnvkitOptions, falling back to defaults when no usable file exists
    """
    if environ is None:
        environ = os.environ
    if path is None:
        path = environ.get(OPTIONS_PATH_VARIABLE) or DEFAULT_OPTIONS_FILE

    options_path = Path(path)
    if not options_path.is_absolute():
        options_path = Path.cwd() / options_path

    options = EnvkitOptions.from_dict(_load_yaml(options_path))
    logger.debug(f"envkit options: {options}")
    return options


__all__ = ["EnvkitOptions", "load_options", "OPTIONS_PATH_VARIABLE", "DEFAULT_OPTIONS_FILE"]
