"""
Copyright (c) 2026 dircompare contributors
Licensed under the MIT License

core/report_filter.py
Selection policy deciding which equivalence classes are reported.

Common:    the content occurs in at least two directories.
Different: the content is missing from some directory, carries different names,
           or occurs more than once inside one directory.

The two predicates are not complements. A class found in every directory once,
but under two names, is both common and different.
"""

from typing import Iterable, List

from dircompare.core.errors import ConfigurationError
from dircompare.core.interfaces import ReportFilter
from dircompare.core.models import EquivalenceClass, ReportMode


class ReportFilterImpl(ReportFilter):
    """
    Applies a ReportMode to a set of classes.

    Args:
        directory_count: number of input directories (duplicates included)
    """

    def __init__(self, directory_count: int):
        if directory_count < 1:
            raise ConfigurationError("At least one directory is required")
        self.directory_count = directory_count

    def is_common(self, equivalence_class: EquivalenceClass) -> bool:
        return equivalence_class.distinct_dirs >= 2

    def is_different(self, equivalence_class: EquivalenceClass) -> bool:
        distinct_dirs = equivalence_class.distinct_dirs
        return (
            distinct_dirs < self.directory_count
            or not equivalence_class.consistent_naming
            or equivalence_class.total_occurrences > distinct_dirs
        )

    def select(self, classes: Iterable[EquivalenceClass], mode: ReportMode) -> List[EquivalenceClass]:
        if mode.requires_multiple_directories and self.directory_count < 2:
            raise ConfigurationError(
                f"--{mode.value} needs at least two directories to compare"
            )

        if mode == ReportMode.COMMON_ONLY:
            return [c for c in classes if self.is_common(c)]
        if mode == ReportMode.DIFF_ONLY:
            return [c for c in classes if self.is_different(c)]
        return list(classes)
