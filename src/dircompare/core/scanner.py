"""
Copyright (c) 2026 dircompare contributors
Licensed under the MIT License

core/scanner.py
Implements per-directory file enumeration using pathlib.
Features:
- Lists the direct children of a directory (or walks it with recursive=True)
- Applies the optional extension filter
- Follows symlinks to regular files, fails loudly on dangling ones
- Returns (name, path) pairs sorted by name
"""

import os
from typing import List, Optional, Tuple
from pathlib import Path
import logging

logger = logging.getLogger(__name__)

# Local imports
from dircompare.core.errors import FileAccessError
from dircompare.core.interfaces import FileEnumerator


class DirectoryScannerImpl(FileEnumerator):
    """
    Lists the regular files of one input directory.

    Attributes:
        directory: Directory to scan
        extension: Allowed extension without the dot (e.g. "txt"), None for all files
        recursive: Descend into subdirectories; names become relative paths
    """

    def __init__(
        self,
        directory: str,
        extension: Optional[str] = None,
        recursive: bool = False
    ):
        self.directory = directory
        self.extension = extension
        self.recursive = recursive

    def scan(self) -> List[Tuple[str, str]]:
        logger.debug(f"Scanning directory: {self.directory} "
                     f"(extension={self.extension}, recursive={self.recursive})")

        root_path = Path(self.directory)
        if not root_path.is_dir():
            raise FileAccessError(self.directory, "not a directory")

        try:
            if self.recursive:
                found = self._walk(root_path)
            else:
                found = self._list(root_path)
        except OSError as e:
            raise FileAccessError(e.filename or self.directory, e.strerror or str(e)) from e

        found.sort(key=lambda item: item[0])
        logger.debug(f"Scan of {self.directory} completed. Found {len(found)} matching files.")
        return found

    def _list(self, root_path: Path) -> List[Tuple[str, str]]:
        found = []
        with os.scandir(root_path) as entries:
            for entry in entries:
                path = Path(entry.path)
                if self._accept(path):
                    found.append((entry.name, str(path)))
        return found

    def _walk(self, root_path: Path) -> List[Tuple[str, str]]:
        found = []

        def on_error(error: OSError):
            raise error

        for root, dirs, files in os.walk(str(root_path), onerror=on_error):
            dirs.sort()
            for filename in files:
                path = Path(root) / filename
                if self._accept(path):
                    name = path.relative_to(root_path).as_posix()
                    found.append((name, str(path)))
        return found

    def _accept(self, path: Path) -> bool:
        """
        Decide whether an entry takes part in the comparison.
        Raises FileAccessError for symlinks that cannot be resolved.
        """
        if path.is_symlink() and not path.exists():
            raise FileAccessError(str(path), "dangling or cyclic symbolic link")

        if not path.is_file():
            logger.debug(f"Skipping non-regular entry: {path}")
            return False

        if not self._extension_passes(path.name):
            logger.debug(f"Skipping {path} (extension not allowed)")
            return False

        logger.debug(f"Accepted file: {path.name}")
        return True

    def _extension_passes(self, filename: str) -> bool:
        """
        Case-sensitive match on the suffix after the last dot.
        Names without a dot, or whose only dot is the leading one, have no extension.
        """
        if self.extension is None:
            return True
        stem, dot, suffix = filename.rpartition(".")
        if not dot or not stem:
            return False
        return suffix == self.extension
