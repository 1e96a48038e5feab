"""
Shared fixtures for comparison tests.
Creates isolated temporary directories with controlled folder contents.
"""
import pytest
import tempfile
from pathlib import Path
from typing import Callable, Dict
import sys

# Add src/ to sys.path so 'dircompare' is importable without installation
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))


@pytest.fixture
def temp_dir():
    """Creates isolated temporary directory, auto-cleanup after test."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def make_folder(temp_dir) -> Callable[[str, Dict[str, bytes]], Path]:
    """
    Factory: make_folder("D1", {"x.txt": b"A"}) creates temp_dir/D1 with the given files.
    Names containing '/' create subfolders.
    """
    def _make(name: str, files: Dict[str, bytes]) -> Path:
        folder = temp_dir / name
        folder.mkdir(parents=True, exist_ok=True)
        for filename, content in files.items():
            path = folder / filename
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(content)
        return folder
    return _make


@pytest.fixture
def two_folders(make_folder):
    """
    The reference scenario:
    - D1 = {x.txt: "A", y.txt: "B"}
    - D2 = {x.txt: "A", z.txt: "C"}
    """
    d1 = make_folder("D1", {"x.txt": b"A", "y.txt": b"B"})
    d2 = make_folder("D2", {"x.txt": b"A", "z.txt": b"C"})
    return d1, d2
