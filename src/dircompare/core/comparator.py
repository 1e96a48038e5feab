"""
Copyright (c) 2026 dircompare contributors
Licensed under the MIT License

comparator.py
Implements the pipeline that turns a list of directories into a report:
    scan → fingerprint → classify → filter

Fingerprinting may run on a thread pool. Classification only starts once
every file has been fingerprinted; the first read error aborts the run.
"""
import logging
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, List, Optional, Sequence, Tuple

from dircompare.core.classifier import EquivalenceClassifierImpl
from dircompare.core.hasher import make_fingerprinter
from dircompare.core.interfaces import (
    DirectoryComparator,
    EquivalenceClassifier,
    FileEnumerator,
    Fingerprinter,
    ReportFilter,
)
from dircompare.core.models import (
    ComparisonParams,
    ComparisonReport,
    ComparisonStats,
    Directory,
    FileEntry,
)
from dircompare.core.report_filter import ReportFilterImpl
from dircompare.core.scanner import DirectoryScannerImpl

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[str, int, Optional[int]], None]

# (directory, name, path) of a file waiting to be fingerprinted
Candidate = Tuple[Directory, str, str]

# (path, extension, recursive) -> enumerator for one directory
ScannerFactory = Callable[[str, Optional[str], bool], FileEnumerator]

# number of input directories -> selection policy
ReportFilterFactory = Callable[[int], ReportFilter]


class DirectoryComparatorImpl(DirectoryComparator):
    """
    Runs the comparison pipeline and records timing per stage.
    Every stage can be injected for testing. By default the fingerprinter
    follows params.fingerprint_mode.
    """
    def __init__(
        self,
        fingerprinter: Optional[Fingerprinter] = None,
        classifier: Optional[EquivalenceClassifier] = None,
        scanner_factory: Optional[ScannerFactory] = None,
        report_filter_factory: Optional[ReportFilterFactory] = None
    ):
        self.fingerprinter = fingerprinter
        self.classifier = classifier or EquivalenceClassifierImpl()
        self.scanner_factory = scanner_factory or _default_scanner
        self.report_filter_factory = report_filter_factory or ReportFilterImpl

    def compare(
        self,
        params: ComparisonParams,
        progress_callback: Optional[ProgressCallback] = None
    ) -> Tuple[ComparisonReport, ComparisonStats]:
        stats = ComparisonStats()
        total_start_time = time.time()
        directories = params.as_directories()
        fingerprinter = self.fingerprinter or make_fingerprinter(params.fingerprint_mode)

        start_time = time.time()
        candidates = self._scan(directories, params, progress_callback)
        stats.update_stage("scan", len(candidates), time.time() - start_time)

        start_time = time.time()
        entries = self._fingerprint(candidates, fingerprinter, params.workers, progress_callback)
        stats.update_stage("fingerprint", len(entries), time.time() - start_time)

        start_time = time.time()
        classes = self.classifier.classify(entries)
        # Deterministic output: order classes by their digest label
        classes.sort(key=lambda c: c.fingerprint.hexdigest)
        stats.update_stage("classify", len(classes), time.time() - start_time)

        start_time = time.time()
        selected = self.report_filter_factory(len(directories)).select(classes, params.mode)
        stats.update_stage("filter", len(selected), time.time() - start_time)

        stats.total_time = time.time() - total_start_time
        logger.info(f"Compared {len(entries)} files in {len(directories)} directories: "
                    f"{len(classes)} classes, {len(selected)} reported ({params.mode.value})")

        report = ComparisonReport(
            directories=directories,
            classes=tuple(classes),
            selected=tuple(selected),
            mode=params.mode,
            fingerprint_mode=params.fingerprint_mode,
        )
        return report, stats

    def _scan(
        self,
        directories: Sequence[Directory],
        params: ComparisonParams,
        progress_callback: Optional[ProgressCallback]
    ) -> List[Candidate]:
        candidates = []
        for directory in directories:
            scanner = self.scanner_factory(directory.path, params.extension, params.recursive)
            for name, path in scanner.scan():
                candidates.append((directory, name, path))
            if progress_callback:
                progress_callback("Scanning", directory.index + 1, len(directories))
        return candidates

    @staticmethod
    def _fingerprint(
        candidates: Sequence[Candidate],
        fingerprinter: Fingerprinter,
        workers: int,
        progress_callback: Optional[ProgressCallback]
    ) -> List[FileEntry]:
        total = len(candidates)
        paths = [path for _, _, path in candidates]

        if workers > 1 and total > 1:
            logger.debug(f"Fingerprinting {total} files with {workers} workers")
            with ThreadPoolExecutor(max_workers=workers) as executor:
                # map() yields in submission order and re-raises the first failure
                fingerprints = list(_track(executor.map(fingerprinter.fingerprint, paths),
                                           total, progress_callback))
        else:
            fingerprints = list(_track(map(fingerprinter.fingerprint, paths),
                                       total, progress_callback))

        return [
            FileEntry(directory=directory, name=name, fingerprint=fingerprint)
            for (directory, name, _), fingerprint in zip(candidates, fingerprints)
        ]


def _default_scanner(path: str, extension: Optional[str], recursive: bool) -> FileEnumerator:
    return DirectoryScannerImpl(path, extension=extension, recursive=recursive)


def _track(results, total: int, progress_callback: Optional[ProgressCallback]):
    """Passes results through while reporting fingerprinting progress."""
    for done, fingerprint in enumerate(results, 1):
        if progress_callback:
            progress_callback("Fingerprinting", done, total)
        yield fingerprint
