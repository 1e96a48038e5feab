"""
Copyright (c) 2026 dircompare contributors
Licensed under the MIT License

core/models.py
Data models for directory content comparison.

Everything here is built fresh for one comparison run and never mutated
afterwards: FileEntry, Occurrence and EquivalenceClass are frozen dataclasses,
and ComparisonParams validates itself once on construction.
"""

import hashlib
import os
from dataclasses import dataclass
from functools import cached_property
from enum import Enum
from typing import Dict, List, Optional, Tuple, Union

from dircompare.core.errors import ConfigurationError


# =============================
# Enums
# =============================

class ReportMode(Enum):
    """
    Selection policy applied to equivalence classes before rendering.
    """
    ALL = "all"
    COMMON_ONLY = "commononly"
    DIFF_ONLY = "diffonly"

    @property
    def display_name(self) -> str:
        """Human-readable name for console output."""
        mapping = {
            ReportMode.ALL: "All",
            ReportMode.COMMON_ONLY: "Common only",
            ReportMode.DIFF_ONLY: "Differences only",
        }
        return mapping.get(self, self.value)

    @property
    def requires_multiple_directories(self) -> bool:
        return self is not ReportMode.ALL

    @classmethod
    def from_flags(cls, commononly: bool, diffonly: bool) -> "ReportMode":
        """Map the two boolean CLI flags to a single mode."""
        if commononly and diffonly:
            raise ConfigurationError("--commononly and --diffonly cannot be used together")
        if commononly:
            return cls.COMMON_ONLY
        if diffonly:
            return cls.DIFF_ONLY
        return cls.ALL

    def __repr__(self) -> str:
        return self.value


class FingerprintMode(Enum):
    """
    How file contents are compared.
    EXACT keeps the raw bytes, the others keep a digest.
    """
    EXACT = "exact"
    SHA256 = "sha256"
    XXHASH = "xxhash"

    @property
    def description(self) -> str:
        """Detailed description for help text."""
        mapping = {
            FingerprintMode.EXACT:
                "Byte-for-byte comparison (default, no false positives)",
            FingerprintMode.SHA256:
                "SHA-256 digest (low memory, negligible collision risk)",
            FingerprintMode.XXHASH:
                "xxHash 128-bit digest (fastest; a collision would merge distinct files)",
        }
        return mapping.get(self, self.value)

    def __repr__(self) -> str:
        return self.value


# ======================
#  Core Data Models
# ======================

@dataclass(frozen=True)
class Directory:
    """
    One input directory. Identity is its position in the input list, so the
    same path given twice yields two distinct directories (two columns).
    """
    index: int
    path: str

    @property
    def label(self) -> str:
        name = os.path.basename(os.path.normpath(self.path))
        if name in ("", ".", ".."):
            return "???"
        return name

    def __repr__(self):
        return f"<Directory #{self.index} {self.path}>"


@dataclass(frozen=True)
class Fingerprint:
    """
    Comparable stand-in for a file's content.
    Two fingerprints are equal iff algorithm and value are equal.
    """
    algorithm: str
    value: bytes

    def __post_init__(self):
        if not isinstance(self.value, bytes):
            raise ValueError("Fingerprint value must be bytes")

    @property
    def is_exact(self) -> bool:
        return self.algorithm == FingerprintMode.EXACT.value

    @cached_property
    def hexdigest(self) -> str:
        """Uppercase hex label, used for display and for sorting classes. Computed once."""
        if self.is_exact:
            return hashlib.sha256(self.value).hexdigest().upper()
        return self.value.hex().upper()

    def __repr__(self):
        return f"<Fingerprint {self.algorithm}:{self.hexdigest[:12]}>"


@dataclass(frozen=True)
class FileEntry:
    """A single enumerated and fingerprinted file."""
    directory: Directory
    name: str
    fingerprint: Fingerprint


@dataclass(frozen=True)
class Occurrence:
    """One (directory, filename) pairing of a file inside an equivalence class."""
    directory: Directory
    name: str


@dataclass(frozen=True)
class EquivalenceClass:
    """
    All files sharing one fingerprint.
    occurrences is a tuple, not a set: the same directory may hold the content
    several times under different names and every one of them is kept.
    """
    fingerprint: Fingerprint
    occurrences: Tuple[Occurrence, ...]

    @property
    def distinct_dirs(self) -> int:
        return len({occ.directory for occ in self.occurrences})

    @property
    def total_occurrences(self) -> int:
        return len(self.occurrences)

    @property
    def consistent_naming(self) -> bool:
        """True if every occurrence uses the same file name."""
        return len({occ.name for occ in self.occurrences}) <= 1

    def names_in(self, directory: Directory) -> List[str]:
        return [occ.name for occ in self.occurrences if occ.directory == directory]

    def __repr__(self):
        return (f"<EquivalenceClass {self.fingerprint.hexdigest[:12]} "
                f"dirs={self.distinct_dirs} count={self.total_occurrences}>")


@dataclass(frozen=True)
class ComparisonReport:
    """Result of one comparison run: every class plus the selected subset."""
    directories: Tuple[Directory, ...]
    classes: Tuple[EquivalenceClass, ...]
    selected: Tuple[EquivalenceClass, ...]
    mode: ReportMode
    fingerprint_mode: FingerprintMode = FingerprintMode.EXACT

    @property
    def file_count(self) -> int:
        return sum(c.total_occurrences for c in self.classes)


class ComparisonStats:
    """
    Statistics collected during a comparison run.
    """
    def __init__(self):
        self.total_time: float = 0.0
        self.stage_stats: Dict[str, Dict[str, Union[int, float]]] = {}

    def update_stage(self, stage_name: str, items: int, duration: float) -> None:
        if stage_name not in self.stage_stats:
            self.stage_stats[stage_name] = {"items": 0, "time": 0.0}
        self.stage_stats[stage_name]["items"] += items
        self.stage_stats[stage_name]["time"] += duration

    def print_summary(self) -> str:
        labels = {
            "scan": "📁 Files enumerated",
            "fingerprint": "🔍 Files fingerprinted",
            "classify": "🧩 Content classes",
            "filter": "📄 Classes reported",
        }

        lines = [
            "📊 Comparison Statistics:",
            f"Total Execution Time: {self.total_time:.3f}s\n",
            "Stage: ITEMS / TIME",
        ]

        for stage, data in self.stage_stats.items():
            label = labels.get(stage, stage.title())
            lines.append(f"{label}: {data['items']} / {data['time']:.3f}s")

        return "\n".join(lines)


"""
DTO for comparison parameters with built-in validation.
Built once from CLI flags and passed explicitly to the engine.
"""

DEFAULT_COLUMN_WIDTH = 20


@dataclass(frozen=True)
class ComparisonParams:
    """Parameters for one comparison run, validated on creation."""
    directories: Tuple[str, ...]
    extension: Optional[str] = None
    mode: ReportMode = ReportMode.ALL
    fingerprint_mode: FingerprintMode = FingerprintMode.EXACT
    recursive: bool = False
    workers: int = 1
    column_width: int = DEFAULT_COLUMN_WIDTH

    def __post_init__(self):
        """Validate parameters immediately after creation."""
        object.__setattr__(self, "directories", tuple(self.directories))

        if not self.directories:
            raise ConfigurationError("At least one directory is required")

        if self.mode.requires_multiple_directories and len(self.directories) < 2:
            raise ConfigurationError(
                f"--{self.mode.value} needs at least two directories to compare"
            )

        if self.column_width < 1:
            raise ConfigurationError("Column width must be a positive number")

        if self.workers < 1:
            raise ConfigurationError("Worker count must be a positive number")

        # Normalize extension: "txt" and ".txt" mean the same suffix
        if self.extension is not None:
            ext = self.extension[1:] if self.extension.startswith(".") else self.extension
            if not ext or "." in ext or os.sep in ext:
                raise ConfigurationError(f"Invalid extension: '{self.extension}'")
            object.__setattr__(self, "extension", ext)

        for path in self.directories:
            if not os.path.exists(path):
                raise ConfigurationError(f"Directory not found: {path}")
            if not os.path.isdir(path):
                raise ConfigurationError(f"Path is not a directory: {path}")

    def as_directories(self) -> Tuple[Directory, ...]:
        return tuple(Directory(index=i, path=p) for i, p in enumerate(self.directories))
