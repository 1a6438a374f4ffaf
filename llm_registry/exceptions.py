# -*- coding: utf-8 -*-
"""
Exceptions raised by the registry.

Everything derives from ``RegistryError`` so callers (the HTTP layer, the
CLI, the refresh job) can choose between targeted and blanket handling.
"""

from typing import Optional


class RegistryError(Exception):
    """Base class for all registry errors."""

    def __init__(self, message: str = "Registry error."):
        super().__init__(message)


class UpstreamUnavailableError(RegistryError):
    """Raised when the base dataset cannot be fetched or parsed."""

    def __init__(self, source: str = "upstream", message: str = "Fetch failed."):
        self.source = source
        super().__init__(f"Error fetching from '{source}': {message}")


class StorageError(RegistryError):
    """Base class for manifest storage failures."""

    def __init__(self, message: str = "Storage error."):
        super().__init__(message)


class ManifestNotFoundError(StorageError):
    """Raised when no manifest has been published yet."""

    def __init__(self, key: str = "manifest"):
        self.key = key
        super().__init__(f"Manifest not found in storage (key: '{key}')")


class ManifestCorruptError(StorageError):
    """Raised when stored manifest bytes fail to parse or validate."""

    def __init__(self, key: str = "manifest", message: str = "Invalid data."):
        self.key = key
        super().__init__(f"Stored manifest '{key}' is unreadable: {message}")


class ManifestWriteError(StorageError):
    """Raised when the manifest cannot be written to storage."""

    def __init__(self, key: str = "manifest", message: str = "Write failed."):
        self.key = key
        super().__init__(f"Cannot write manifest '{key}': {message}")


class OverrideResolutionError(RegistryError):
    """Raised in strict mode when a model override cannot be resolved."""

    def __init__(self, target: str, message: str = "Unresolvable override."):
        self.target = target
        super().__init__(f"Override for '{target}': {message}")


class ConfigError(RegistryError):
    """Raised when required configuration (e.g. an API key) is missing."""

    def __init__(self, message: str = "Configuration error."):
        super().__init__(message)


class RegistryClientError(RegistryError):
    """Raised by ``RegistryClient`` when the API cannot answer a request."""

    def __init__(
        self,
        message: str = "Request failed.",
        status_code: Optional[int] = None,
    ):
        self.status_code = status_code
        super().__init__(message)
