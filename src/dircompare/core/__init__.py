"""
Core comparison engine: scanner, fingerprinter, classifier, report filter and pipeline.

- DirectoryScannerImpl: per-directory file listing with extension filter
- FingerprinterImpl: exact-content, SHA-256 or xxHash fingerprints
- EquivalenceClassifierImpl: partition of all files by content
- ReportFilterImpl: all / commononly / diffonly selection policy
- DirectoryComparatorImpl: scan → fingerprint → classify → filter
- Models: Directory, Fingerprint, EquivalenceClass and configuration objects

No terminal or rendering code lives here.
"""

from .errors import DirCompareError, ConfigurationError, FileAccessError
from .scanner import DirectoryScannerImpl
from .hasher import (
    FingerprinterImpl, ExactContentAlgorithmImpl, SHA256AlgorithmImpl,
    XXHashAlgorithmImpl, make_fingerprinter)
from .classifier import EquivalenceClassifierImpl
from .report_filter import ReportFilterImpl
from .comparator import DirectoryComparatorImpl
from .models import (
    Directory, Fingerprint, FileEntry, Occurrence, EquivalenceClass,
    ComparisonParams, ComparisonReport, ComparisonStats, ReportMode, FingerprintMode)

__all__ = [
    "DirCompareError",
    "ConfigurationError",
    "FileAccessError",
    "DirectoryScannerImpl",
    "FingerprinterImpl",
    "ExactContentAlgorithmImpl",
    "SHA256AlgorithmImpl",
    "XXHashAlgorithmImpl",
    "make_fingerprinter",
    "EquivalenceClassifierImpl",
    "ReportFilterImpl",
    "DirectoryComparatorImpl",
    "Directory",
    "Fingerprint",
    "FileEntry",
    "Occurrence",
    "EquivalenceClass",
    "ComparisonParams",
    "ComparisonReport",
    "ComparisonStats",
    "ReportMode",
    "FingerprintMode",
]
