"""
Environment Accessor
====================

Typed, defaulted read access to namespaced environment variables.

A key requested as ``"port"`` while running in ``production`` is read from
``PRODUCTION_PORT``. Every getter falls back to its default when the
variable is unset or empty; only :meth:`EnvironmentVariables.get_or_throw`
raises.
"""

from __future__ import annotations

import json
import logging
import math
import re
from dataclasses import dataclass
from typing import Any, Callable, List, Optional

from .errors import MissingEnvironmentVariableError
from .options import EnvkitOptions
from .store import EnvStore

logger = logging.getLogger(__name__)

# Longest numeric prefix accepted by a leading-numeric float parse
_NUMERIC_PREFIX = re.compile(
    r"[+-]?(?:Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)"
)


def parse_float(text: str) -> float:
    """
    Parse the leading numeric part of a string.

    Leading whitespace is skipped and anything after the number is ignored,
    so ``"3000ms"`` gives ``3000.0``. Strings without a numeric prefix give
    ``nan``.
    """
    match = _NUMERIC_PREFIX.match(text.lstrip())
    if not match:
        return math.nan
    number = match.group(0)
    if number.endswith("Infinity"):
        return -math.inf if number.startswith("-") else math.inf
    return float(number)


@dataclass(frozen=True)
class Lookup:
    """Value-or-absent result of a variable lookup."""
    value: Any = None
    present: bool = False

    @classmethod
    def of(cls, value: Any) -> "Lookup":
        return cls(value=value, present=True)

    def map(self, fn: Callable[[Any], Any]) -> "Lookup":
        return Lookup.of(fn(self.value)) if self.present else self

    def unwrap_or(self, default: Any = None) -> Any:
        return self.value if self.present else default


ABSENT = Lookup()


class EnvironmentVariables:
    """
    Accessor for environment variables namespaced by environment name.
    """

    def __init__(
        self,
        env: Optional[str] = None,
        store: Optional[EnvStore] = None,
        options: Optional[EnvkitOptions] = None,
    ):
        """
        Args:
            env: Environment name (e.g. 'production'). Read from the
                selector variable, then the configured default, when omitted.
            store: Variable store to read (defaults to one over os.environ)
            options: envkit options
        """
        self.store = store if store is not None else EnvStore()
        self.options = options or EnvkitOptions()
        self._env = env or self.store.environment_name(self.options)

    @property
    def env(self) -> str:
        return self._env

    def namespaced_key(self, key: str) -> str:
        return f"{self._env.upper()}_{key.upper()}"

    # ------------------------------------------------------------------
    # Result-typed lookups

    def lookup(self, key: str) -> Lookup:
        """Look up a raw value. Empty strings count as absent."""
        env_key = self.namespaced_key(key)
        try:
            value = self.store.get(env_key)
        except Exception as e:
            logger.error(f"Error getting {key}: {e}")
            return ABSENT
        return Lookup.of(value) if value else ABSENT

    def lookup_string(self, key: str) -> Lookup:
        return self.lookup(key).map(str)

    def lookup_boolean(self, key: str) -> Lookup:
        return self.lookup_string(key).map(lambda value: value.lower() == "true")

    def lookup_number(self, key: str) -> Lookup:
        return self.lookup_string(key).map(parse_float)

    def lookup_array(self, key: str, separator: str = ",") -> Lookup:
        def split(value: str) -> List[str]:
            # str.split rejects an empty separator; split into characters instead
            return list(value) if separator == "" else value.split(separator)

        return self.lookup_string(key).map(split)

    def lookup_object(self, key: str) -> Lookup:
        found = self.lookup_string(key)
        if not found.present:
            return ABSENT
        try:
            return Lookup.of(json.loads(found.value))
        except (ValueError, RecursionError) as e:
            logger.error(f"Error parsing JSON for {key}: {e}")
            return ABSENT

    # ------------------------------------------------------------------
    # Defaulting getters

    def get(self, key: str, default: Any = None) -> Any:
        return self.lookup(key).unwrap_or(default)

    def get_string(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self.lookup_string(key).unwrap_or(default)

    def get_boolean(self, key: str, default: Optional[bool] = None) -> Optional[bool]:
        """True only for "true" in any case; any other set value is False."""
        return self.lookup_boolean(key).unwrap_or(default)

    def get_number(self, key: str, default: Optional[float] = None) -> Optional[float]:
        """Leading-numeric parse; may return nan for non-numeric values."""
        return self.lookup_number(key).unwrap_or(default)

    def get_array(
        self,
        key: str,
        separator: str = ",",
        default: Optional[List[str]] = None,
    ) -> Optional[List[str]]:
        return self.lookup_array(key, separator).unwrap_or(default)

    def get_object(self, key: str, default: Any = None) -> Any:
        return self.lookup_object(key).unwrap_or(default)

    def get_or_throw(self, key: str, throw_error: bool = True) -> Any:
        """
        Get a required value.

        Raises:
            MissingEnvironmentVariableError: if the value is unset or empty
                and ``throw_error`` is true
        """
        value = self.get(key)
        if value is None and throw_error:
            raise MissingEnvironmentVariableError(key)
        return value

    def __repr__(self) -> str:
        return f"EnvironmentVariables(env={self._env!r})"


__all__ = ["EnvironmentVariables", "Lookup", "ABSENT", "parse_float"]
