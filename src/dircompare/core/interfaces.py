"""
Copyright (c) 2026 dircompare contributors
Licensed under the MIT License

interfaces.py

Defines core interfaces (Protocols) used throughout the comparison engine.
Structural typing keeps the pipeline stages swappable and testable in isolation.

Key Components:
---------------
- FileEnumerator: lists candidate files of one input directory.
- HashAlgorithm: incremental content digest (exact bytes, SHA-256, xxHash).
- Fingerprinter: turns a file path into a comparable Fingerprint.
- EquivalenceClassifier: partitions fingerprinted files by content.
- ReportFilter: applies the all / commononly / diffonly selection policy.
- DirectoryComparator: runs the whole pipeline and collects statistics.
"""

from typing import Protocol, List, Tuple, Optional, Callable, Iterable
from dircompare.core.models import (
    ComparisonParams,
    ComparisonReport,
    ComparisonStats,
    EquivalenceClass,
    FileEntry,
    Fingerprint,
    ReportMode,
)


class FileEnumerator(Protocol):
    """Interface for listing the files of a single directory."""
    def scan(self) -> List[Tuple[str, str]]:
        """
        Returns:
            (name, path) pairs for every file passing the extension filter.
        """
        ...


class HashAlgorithm(Protocol):
    """
    Interface for incremental content digests.

    `name` is recorded in every Fingerprint so that fingerprints produced by
    different algorithms never compare equal.
    """
    name: str

    def new(self) -> "HashState":
        ...


class HashState(Protocol):
    def update(self, data: bytes) -> None: ...
    def digest(self) -> bytes: ...


class Fingerprinter(Protocol):
    """Interface for fingerprinting file content."""
    def fingerprint(self, path: str) -> Fingerprint: ...


class EquivalenceClassifier(Protocol):
    """Interface for partitioning files into content-equivalence classes."""
    def classify(self, entries: Iterable[FileEntry]) -> List[EquivalenceClass]: ...


class ReportFilter(Protocol):
    """Interface for the report selection policy."""
    def is_common(self, equivalence_class: EquivalenceClass) -> bool: ...
    def is_different(self, equivalence_class: EquivalenceClass) -> bool: ...
    def select(
        self,
        classes: Iterable[EquivalenceClass],
        mode: ReportMode
    ) -> List[EquivalenceClass]: ...


class DirectoryComparator(Protocol):
    """
    Interface for the main comparison engine.

    Coordinates scan → fingerprint → classify → filter and collects statistics.
    """
    def compare(
        self,
        params: ComparisonParams,
        progress_callback: Optional[Callable[[str, int, Optional[int]], None]] = None
    ) -> Tuple[ComparisonReport, ComparisonStats]:
        """
        Run the full comparison.

        Args:
            params: Validated comparison parameters.
            progress_callback: Optional callback for progress updates (stage, current, total).

        Returns:
            The report and the statistics collected during processing.
        """
        ...
