"""Tests for error types."""

from __future__ import annotations

from pathlib import Path

from tokenbuild.core.errors import (
    ErrorContext,
    ManifestError,
    TokenBuildError,
    TokenSourceError,
    make_manifest_error,
    make_source_error,
)


class TestErrorContext:
    def test_with_location(self) -> None:
        assert ErrorContext(Path("a.json"), 3, 7).format() == "a.json:3:7"

    def test_without_location(self) -> None:
        assert ErrorContext(Path("a.json")).format() == "a.json"


class TestErrors:
    def test_source_error_message(self) -> None:
        error = make_source_error("Invalid JSON: Expecting value", Path("a.json"), 2, 5)

        assert isinstance(error, TokenSourceError)
        assert isinstance(error, TokenBuildError)
        assert str(error) == "a.json:2:5\nInvalid JSON: Expecting value"

    def test_manifest_error_without_file(self) -> None:
        error = make_manifest_error("Unknown format")

        assert isinstance(error, ManifestError)
        assert error.context is None
        assert str(error) == "Unknown format"
