"""
Copyright (c) 2026 dircompare contributors
Licensed under the MIT License

services/table_renderer.py
Renders a ComparisonReport as a fixed-column-width ASCII table.

Layout (tab separated):
    #   SHA256 ...                          dir_a               dir_b
    1   0A1B...                             x.txt               –
    2   9F8E...                             (2 files)           y.txt
"""
import sys
from typing import List, TextIO

import regex

from dircompare.core.models import (
    ComparisonReport, Directory, EquivalenceClass, FingerprintMode)

ABSENT_MARKER = "–"

DIGEST_HEADERS = {
    FingerprintMode.EXACT: ("SHA256", 64),
    FingerprintMode.SHA256: ("SHA256", 64),
    FingerprintMode.XXHASH: ("XXH128", 32),
}


class TableRenderer:
    """
    Builds the table line by line; render() returns text, write() prints it.
    """

    def __init__(self, column_width: int = 20):
        if column_width < 1:
            raise ValueError("Column width must be a positive number")
        self.column_width = column_width

    @staticmethod
    def graphemes(text: str) -> List[str]:
        """
        Splits text into extended grapheme clusters (user-perceived characters):
        combining marks, flags, emoji ZWJ sequences and Hangul jamo stay whole.
        """
        return regex.findall(r"\X", text)

    @classmethod
    def fixed_length(cls, text: str, width: int, padding: str = " ") -> str:
        """Cuts text to `width` characters or pads it with `padding`."""
        clusters = cls.graphemes(text)[:width]
        return "".join(clusters) + padding * (width - len(clusters))

    @staticmethod
    def cell_text(equivalence_class: EquivalenceClass, directory: Directory) -> str:
        """Absent → '–', once → the file name, several times → '(N files)'."""
        names = equivalence_class.names_in(directory)
        if not names:
            return ABSENT_MARKER
        if len(names) == 1:
            return names[0]
        return f"({len(names)} files)"

    def header_line(self, report: ComparisonReport) -> str:
        title, digest_width = DIGEST_HEADERS[report.fingerprint_mode]
        columns = [self.fixed_length(d.label, self.column_width) for d in report.directories]
        return f"#\t{title}{' ' * (digest_width - len(title))}\t" + "\t".join(columns)

    def row_line(self, counter: int, equivalence_class: EquivalenceClass,
                 directories) -> str:
        columns = [
            self.fixed_length(self.cell_text(equivalence_class, d), self.column_width)
            for d in directories
        ]
        return f"{counter}\t{equivalence_class.fingerprint.hexdigest}\t" + "\t".join(columns)

    def render(self, report: ComparisonReport) -> str:
        lines = ["", self.header_line(report)]
        for counter, equivalence_class in enumerate(report.selected, 1):
            lines.append(self.row_line(counter, equivalence_class, report.directories))
        lines.append("")
        return "\n".join(lines) + "\n"

    def write(self, report: ComparisonReport, stream: TextIO = None) -> None:
        (stream or sys.stdout).write(self.render(report))
