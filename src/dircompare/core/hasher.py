"""
Copyright (c) 2026 dircompare contributors
Licensed under the MIT License

hasher.py
Implements content fingerprinting for the comparison engine.

Each file is read in fixed-size blocks and streamed into a HashAlgorithm:
- ExactContentAlgorithmImpl keeps the bytes themselves (exact, default)
- SHA256AlgorithmImpl keeps a SHA-256 digest
- XXHashAlgorithmImpl keeps an xxHash3 128-bit digest (fastest)

Fingerprints depend on file bytes only, never on names or paths.
Read errors are raised as FileAccessError and never swallowed.
"""

import hashlib
import logging

import xxhash

from dircompare.core.errors import FileAccessError
from dircompare.core.interfaces import Fingerprinter, HashAlgorithm, HashState
from dircompare.core.models import Fingerprint, FingerprintMode

logger = logging.getLogger(__name__)

READ_BLOCK_SIZE = 64 * 1024


class _ContentBuffer:
    """HashState that accumulates the raw content."""

    def __init__(self):
        self._chunks = []

    def update(self, data: bytes) -> None:
        self._chunks.append(data)

    def digest(self) -> bytes:
        return b"".join(self._chunks)


class ExactContentAlgorithmImpl(HashAlgorithm):
    """Identity 'hash': the fingerprint is the file content itself."""
    name = FingerprintMode.EXACT.value

    def new(self) -> HashState:
        return _ContentBuffer()


class SHA256AlgorithmImpl(HashAlgorithm):
    """SHA-256 digest, 32 bytes."""
    name = FingerprintMode.SHA256.value

    def new(self) -> HashState:
        return hashlib.sha256()


class XXHashAlgorithmImpl(HashAlgorithm):
    """
    xxHash3 128-bit digest, 16 bytes.
    Non-cryptographic: distinct contents sharing a digest would be merged.
    """
    name = FingerprintMode.XXHASH.value

    def new(self) -> HashState:
        return xxhash.xxh3_128()


class FingerprinterImpl(Fingerprinter):
    """
    Concrete Fingerprinter using an injected HashAlgorithm.
    Stateless apart from the algorithm, so one instance can be shared by worker threads.
    """

    def __init__(self, algorithm: HashAlgorithm = None, block_size: int = READ_BLOCK_SIZE):
        self.algorithm = algorithm or ExactContentAlgorithmImpl()
        self.block_size = block_size

    def fingerprint(self, path: str) -> Fingerprint:
        """
        Reads the whole file and returns its fingerprint.

        Raises:
            FileAccessError: If the file cannot be opened or read
        """
        state = self.algorithm.new()
        try:
            with open(path, "rb") as f:
                while True:
                    chunk = f.read(self.block_size)
                    if not chunk:
                        break
                    state.update(chunk)
        except OSError as e:
            logger.debug(f"Failed to read {path}: {e}")
            raise FileAccessError(path, e.strerror or str(e)) from e

        return Fingerprint(algorithm=self.algorithm.name, value=state.digest())


ALGORITHMS = {
    FingerprintMode.EXACT: ExactContentAlgorithmImpl,
    FingerprintMode.SHA256: SHA256AlgorithmImpl,
    FingerprintMode.XXHASH: XXHashAlgorithmImpl,
}


def make_fingerprinter(mode: FingerprintMode = FingerprintMode.EXACT) -> FingerprinterImpl:
    """Builds a fingerprinter for the requested comparison mode."""
    return FingerprinterImpl(ALGORITHMS[mode]())
