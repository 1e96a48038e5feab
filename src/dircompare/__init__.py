"""
dircompare — compare the contents of several directories.

Core features:
- Groups every file of every directory by content, regardless of name
- Three report modes: ALL, COMMON_ONLY (content shared by 2+ directories),
  DIFF_ONLY (content missing somewhere, renamed, or duplicated in one directory)
- Exact byte comparison by default, SHA-256 or xxHash digests on request
- Read-only: input directories are never modified
"""

# Get version
try:
    from importlib.metadata import version as _version, PackageNotFoundError
    __version__ = _version("dircompare")
except PackageNotFoundError:
    import tomllib
    from pathlib import Path

    with open(Path(__file__).resolve().parents[2] / "pyproject.toml", "rb") as f:
        __version__ = tomllib.load(f)["project"]["version"]

# Public API, only what users should import directly
from dircompare.commands import ComparisonCommand
from dircompare.core import (
    ComparisonParams, ComparisonReport, ReportMode, FingerprintMode,
    EquivalenceClass, Occurrence, Directory, Fingerprint,
    DirCompareError, ConfigurationError, FileAccessError)
from dircompare.services import TableRenderer

__all__ = [
    "ComparisonCommand",
    "ComparisonParams",
    "ComparisonReport",
    "ReportMode",
    "FingerprintMode",
    "EquivalenceClass",
    "Occurrence",
    "Directory",
    "Fingerprint",
    "DirCompareError",
    "ConfigurationError",
    "FileAccessError",
    "TableRenderer",
    "__version__",
]
