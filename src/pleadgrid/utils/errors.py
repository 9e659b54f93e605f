"""Typed exceptions for layout configuration, rendering and storage."""


class PleadgridError(Exception):
    """Base class for all package errors."""


class ConfigurationError(PleadgridError, ValueError):
    """Raised when page geometry or layout settings are unusable."""


class RenderError(PleadgridError, RuntimeError):
    """Raised when the rendering backend fails to produce a document."""


class StorageError(PleadgridError, OSError):
    """Raised when a stored attachment record cannot be read back."""
