"""
Unified command orchestrator for directory comparison.
This is the single entry point for business logic used by the CLI and by library callers.
"""
from typing import Callable, Optional, Tuple

from dircompare.core.comparator import DirectoryComparatorImpl
from dircompare.core.interfaces import DirectoryComparator
from dircompare.core.models import ComparisonParams, ComparisonReport, ComparisonStats


class ComparisonCommand:
    """
    Orchestrates the whole comparison workflow:
    1. Enumerate the files of every directory
    2. Fingerprint them (optionally in parallel)
    3. Classify by content and apply the report mode

    Usage:
        params = ComparisonParams(directories=("backup", "laptop"), mode=ReportMode.DIFF_ONLY)
        command = ComparisonCommand()
        report, stats = command.execute(params, progress_callback=cli_progress_printer)
    """

    def __init__(self, comparator: Optional[DirectoryComparator] = None):
        self.comparator = comparator or DirectoryComparatorImpl()
        self.report: Optional[ComparisonReport] = None
        self.stats: Optional[ComparisonStats] = None

    def execute(
            self,
            params: ComparisonParams,
            progress_callback: Optional[Callable[[str, int, Optional[int]], None]] = None
    ) -> Tuple[ComparisonReport, ComparisonStats]:
        """
        Execute the comparison with given parameters.

        Args:
            params: Validated comparison parameters
            progress_callback: (stage: str, current: int, total: Optional[int]) -> None

        Returns:
            Tuple of (report, statistics)

        Raises:
            ConfigurationError: If the parameters cannot produce a meaningful report
            FileAccessError: If a directory or file cannot be read
        """
        self.report, self.stats = self.comparator.compare(params, progress_callback=progress_callback)
        return self.report, self.stats
