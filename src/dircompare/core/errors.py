"""
Copyright (c) 2026 dircompare contributors
Licensed under the MIT License

core/errors.py
Exception hierarchy for the comparison engine.

ConfigurationError is raised before any scanning starts; FileAccessError aborts
a run that is already in progress. Neither is retried.
"""
from typing import Optional


class DirCompareError(Exception):
    """Base class for all errors raised by dircompare."""


class ConfigurationError(DirCompareError, ValueError):
    """Invalid or contradictory parameters (flags, directory list, widths)."""


class FileAccessError(DirCompareError):
    """A file or directory could not be read during enumeration or fingerprinting."""

    def __init__(self, path: str, reason: Optional[str] = None):
        self.path = path
        self.reason = reason
        message = f"Cannot read {path}"
        if reason:
            message += f": {reason}"
        super().__init__(message)
