"""Exceptions raised by envkit."""


class EnvkitError(Exception):
    """Base class for envkit errors."""


class MissingEnvironmentVariableError(EnvkitError):
    """Raised by strict retrieval when a required variable has no value."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Environment variable '{key}' not found.")


__all__ = ["EnvkitError", "MissingEnvironmentVariableError"]
