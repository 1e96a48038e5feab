"""
Copyright (c) 2026 dircompare contributors
Licensed under the MIT License

core/classifier.py
Partitions fingerprinted files into content-equivalence classes.

Unlike a duplicate finder, nothing is dropped here: a file whose content
occurs exactly once still forms its own class.
"""

from collections import defaultdict
from typing import Dict, Iterable, List

from dircompare.core.interfaces import EquivalenceClassifier
from dircompare.core.models import EquivalenceClass, FileEntry, Fingerprint, Occurrence


class EquivalenceClassifierImpl(EquivalenceClassifier):
    """
    Groups entries by fingerprint equality with a dict, so classification is
    linear in the number of files. Occurrences keep their input order.
    """

    def classify(self, entries: Iterable[FileEntry]) -> List[EquivalenceClass]:
        groups: Dict[Fingerprint, List[Occurrence]] = defaultdict(list)
        for entry in entries:
            groups[entry.fingerprint].append(Occurrence(entry.directory, entry.name))

        return [
            EquivalenceClass(fingerprint=fingerprint, occurrences=tuple(occurrences))
            for fingerprint, occurrences in groups.items()
        ]
