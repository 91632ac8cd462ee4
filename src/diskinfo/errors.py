"""Exceptions raised by diskinfo."""


class DiskInfoError(Exception):
    """Base exception for diskinfo errors."""
    pass


class ProviderError(DiskInfoError):
    """The operating system could not answer a partition or usage query."""
    pass


class RenderError(DiskInfoError):
    """A report could not be serialized or rendered."""
    pass
