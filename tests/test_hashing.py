"""Tests for matchkey.core.hashing."""
from __future__ import annotations

import hashlib
from types import SimpleNamespace

import pytest

from matchkey.core import hashing
from matchkey.core.hashing import DigestError, digest, is_digest

_SHA256_EMPTY = "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
_SHA256_ABC = "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"


class TestDigest:
    def test_known_vector_empty(self) -> None:
        assert digest("") == _SHA256_EMPTY

    def test_known_vector_abc(self) -> None:
        assert digest("abc") == _SHA256_ABC

    def test_matches_hashlib_on_utf8(self) -> None:
        value = "josé@example.com"
        assert digest(value) == hashlib.sha256(value.encode("utf-8")).hexdigest()

    def test_deterministic(self) -> None:
        assert digest("john@example.com") == digest("john@example.com")

    def test_distinct_inputs_distinct_digests(self) -> None:
        corpus = ["john@example.com", "jane@example.com", "+15551234567", "m", "f", ""]
        assert len({digest(v) for v in corpus}) == len(corpus)

    @pytest.mark.parametrize("value", ["", "a", "john@example.com", "日本", "x" * 10_000])
    def test_output_has_digest_shape(self, value: str) -> None:
        assert is_digest(digest(value))


class TestDigestFailure:
    def test_unencodable_value_raises(self) -> None:
        with pytest.raises(DigestError):
            digest("bad\ud800value")

    def test_backend_unavailable_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        def _unsupported(name: str, data: bytes = b""):
            raise ValueError(f"unsupported hash type {name}")

        monkeypatch.setattr(hashing, "hashlib", SimpleNamespace(new=_unsupported))

        with pytest.raises(DigestError) as excinfo:
            digest("john@example.com")
        assert isinstance(excinfo.value.__cause__, ValueError)

    def test_digest_error_is_runtime_error(self) -> None:
        assert issubclass(DigestError, RuntimeError)


class TestIsDigest:
    def test_accepts_valid_digest(self) -> None:
        assert is_digest(_SHA256_ABC) is True

    def test_rejects_short_string(self) -> None:
        assert is_digest("abc123") is False

    def test_rejects_uppercase_hex(self) -> None:
        assert is_digest(_SHA256_ABC.upper()) is False

    def test_rejects_65_characters(self) -> None:
        assert is_digest(_SHA256_ABC + "0") is False

    def test_rejects_trailing_newline(self) -> None:
        assert is_digest(_SHA256_ABC + "\n") is False

    def test_rejects_non_hex_character(self) -> None:
        assert is_digest("g" + _SHA256_ABC[1:]) is False

    @pytest.mark.parametrize("value", [None, 123, b"ab" * 32])
    def test_rejects_non_string(self, value) -> None:
        assert is_digest(value) is False
