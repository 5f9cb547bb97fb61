"""Tests for the error taxonomy.

Covers:
- Class hierarchy (ScannerError base, builtin TypeError/ValueError mixins)
- TypeMismatchError attributes and message wording for read/write,
  NodeKind and Python-type expectations
- InvalidPathError default and custom messages
- AccessMode StrEnum values
"""

from __future__ import annotations

import pytest

from json_tree_scanner import (
    AccessMode,
    InvalidArgumentError,
    InvalidPathError,
    NodeKind,
    ScannerError,
    TypeMismatchError,
)


class TestHierarchy:
    @pytest.mark.parametrize(
        ("error_type", "builtin"),
        [
            (TypeMismatchError, TypeError),
            (InvalidPathError, ValueError),
            (InvalidArgumentError, ValueError),
        ],
    )
    def test_subclasses(self, error_type: type, builtin: type) -> None:
        assert issubclass(error_type, ScannerError)
        assert issubclass(error_type, builtin)


class TestAccessMode:
    def test_values(self) -> None:
        assert AccessMode.READ == "read"
        assert AccessMode.WRITE == "write"


class TestTypeMismatchError:
    def test_write_message(self) -> None:
        error = TypeMismatchError(
            "phoneNumbers", "phoneNumbers.lada", NodeKind.MAPPING, [], AccessMode.WRITE
        )
        assert str(error) == (
            'Field "phoneNumbers" was expected to be a mapping, but got list '
            'when trying to write a value into "phoneNumbers.lada"'
        )

    def test_read_is_default(self) -> None:
        error = TypeMismatchError("a", "a[0]", NodeKind.LIST, {})
        assert error.mode is AccessMode.READ
        assert 'when trying to read a value from "a[0]"' in str(error)

    def test_attributes(self) -> None:
        error = TypeMismatchError("f", "f.g", NodeKind.MAPPING, "text")
        assert error.field == "f"
        assert error.path == "f.g"
        assert error.expected is NodeKind.MAPPING
        assert error.actual == "text"
        assert error.actual_kind is NodeKind.SCALAR

    def test_python_type_expectation(self) -> None:
        error = TypeMismatchError("n", "n", int, "1")
        assert "expected to be an instance of int, but got str" in str(error)

    def test_tuple_expectation(self) -> None:
        error = TypeMismatchError("n", "n", (int, float), "1")
        assert "expected to be one of int, float" in str(error)

    def test_scalar_expectation(self) -> None:
        error = TypeMismatchError("n", "n", NodeKind.SCALAR, {})
        assert "expected to be a scalar, but got dict" in str(error)


class TestInvalidPathError:
    def test_default_message(self) -> None:
        error = InvalidPathError("skills", "skills[].name")
        assert error.field == "skills"
        assert error.path == "skills[].name"
        assert "the index was not specified" in str(error)

    def test_custom_message(self) -> None:
        error = InvalidPathError("a[9]", "a[9]", "too far")
        assert str(error) == "too far"
