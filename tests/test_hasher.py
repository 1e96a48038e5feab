"""
Unit tests for FingerprinterImpl and its algorithms.
Verifies fingerprints depend on content only and that read errors propagate.
"""
import hashlib
import pytest
from dircompare.core.errors import FileAccessError
from dircompare.core.hasher import (
    FingerprinterImpl, ExactContentAlgorithmImpl, SHA256AlgorithmImpl,
    XXHashAlgorithmImpl, make_fingerprinter)
from dircompare.core.models import FingerprintMode


ALL_ALGORITHMS = [ExactContentAlgorithmImpl, SHA256AlgorithmImpl, XXHashAlgorithmImpl]


class TestFingerprinterImpl:
    """Test fingerprinting with block-wise reading."""

    @pytest.mark.parametrize("algorithm", ALL_ALGORITHMS)
    def test_same_content_different_names_same_fingerprint(self, temp_dir, algorithm):
        """Names and locations must not influence the fingerprint."""
        content = b"test content " * 1000
        (temp_dir / "sub").mkdir()
        first = temp_dir / "a.txt"
        second = temp_dir / "sub" / "completely_different.bin"
        first.write_bytes(content)
        second.write_bytes(content)

        fingerprinter = FingerprinterImpl(algorithm())
        assert fingerprinter.fingerprint(str(first)) == fingerprinter.fingerprint(str(second))

    @pytest.mark.parametrize("algorithm", ALL_ALGORITHMS)
    def test_different_content_different_fingerprint(self, temp_dir, algorithm):
        first = temp_dir / "a.txt"
        second = temp_dir / "b.txt"
        first.write_bytes(b"A" * 1024)
        second.write_bytes(b"A" * 1023 + b"B")

        fingerprinter = FingerprinterImpl(algorithm())
        assert fingerprinter.fingerprint(str(first)) != fingerprinter.fingerprint(str(second))

    def test_exact_fingerprint_holds_content(self, temp_dir):
        """Content spanning several read blocks is reassembled in order."""
        content = bytes(range(256)) * 1000
        path = temp_dir / "data.bin"
        path.write_bytes(content)

        fp = FingerprinterImpl(ExactContentAlgorithmImpl(), block_size=4096).fingerprint(str(path))
        assert fp.algorithm == "exact"
        assert fp.value == content

    def test_sha256_matches_hashlib(self, temp_dir):
        content = b"hello world" * 10000
        path = temp_dir / "data.bin"
        path.write_bytes(content)

        fp = FingerprinterImpl(SHA256AlgorithmImpl()).fingerprint(str(path))
        assert fp.value == hashlib.sha256(content).digest()
        assert fp.hexdigest == hashlib.sha256(content).hexdigest().upper()

    def test_xxhash_digest_length(self, temp_dir):
        path = temp_dir / "data.bin"
        path.write_bytes(b"xyz")

        fp = FingerprinterImpl(XXHashAlgorithmImpl()).fingerprint(str(path))
        assert fp.algorithm == "xxhash"
        assert len(fp.value) == 16  # xxh3_128 = 16 bytes

    def test_empty_file(self, temp_dir):
        path = temp_dir / "empty.txt"
        path.write_bytes(b"")

        fp = FingerprinterImpl().fingerprint(str(path))
        assert fp.value == b""

    def test_missing_file_raises_file_access_error(self, temp_dir):
        """Read errors must propagate, naming the offending path."""
        missing = temp_dir / "deleted.txt"

        with pytest.raises(FileAccessError) as exc_info:
            FingerprinterImpl().fingerprint(str(missing))

        assert exc_info.value.path == str(missing)
        assert str(missing) in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, OSError)

    def test_directory_raises_file_access_error(self, temp_dir):
        with pytest.raises(FileAccessError):
            FingerprinterImpl(SHA256AlgorithmImpl()).fingerprint(str(temp_dir))


class TestMakeFingerprinter:

    @pytest.mark.parametrize("mode, algorithm", [
        (FingerprintMode.EXACT, ExactContentAlgorithmImpl),
        (FingerprintMode.SHA256, SHA256AlgorithmImpl),
        (FingerprintMode.XXHASH, XXHashAlgorithmImpl),
    ])
    def test_maps_mode_to_algorithm(self, mode, algorithm):
        assert isinstance(make_fingerprinter(mode).algorithm, algorithm)

    def test_default_is_exact(self):
        assert isinstance(make_fingerprinter().algorithm, ExactContentAlgorithmImpl)
