"""Tests for the one-shot public API: get_value, has_value, with_value, without_value.

Verifies:
- All four functions are importable from the top-level package
- Reads do not copy or mutate the caller's tree
- Writes return an independent tree and leave the input untouched
- Optional expected-shape checks on get_value
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any

import pytest

from json_tree_scanner import (
    InvalidPathError,
    NodeKind,
    ScannerConfig,
    TypeMismatchError,
    get_value,
    has_value,
    with_value,
    without_value,
)


class TestGetValue:
    def test_nested_read(self, person_tree: dict[str, Any]) -> None:
        assert get_value(person_tree, "person.skills[1].name") == "Run fast"

    def test_missing(self, person_tree: dict[str, Any]) -> None:
        assert get_value(person_tree, "person.spouse.name") is None

    def test_returns_live_reference(self, person_tree: dict[str, Any]) -> None:
        assert get_value(person_tree, "person.address") is person_tree["person"]["address"]

    def test_expected_kind(self, person_tree: dict[str, Any]) -> None:
        assert get_value(person_tree, "phoneNumbers", NodeKind.LIST) is not None
        with pytest.raises(TypeMismatchError):
            get_value(person_tree, "phoneNumbers", NodeKind.MAPPING)

    def test_read_only_mapping(self) -> None:
        tree = MappingProxyType({"a": MappingProxyType({"b": 1})})
        assert get_value(tree, "a.b") == 1


class TestHasValue:
    def test_present_and_absent(self, person_tree: dict[str, Any]) -> None:
        assert has_value(person_tree, "person.lastName")
        assert not has_value(person_tree, "person.middleName")

    def test_does_not_mutate(self, person_tree: dict[str, Any]) -> None:
        has_value(person_tree, "a.b.c")
        assert "a" not in person_tree


class TestWithValue:
    def test_returns_updated_copy(self, person_tree: dict[str, Any]) -> None:
        updated = with_value(person_tree, "person.address.city", "Springfield")
        assert updated["person"]["address"]["city"] == "Springfield"
        assert "city" not in person_tree["person"]["address"]

    def test_copy_is_independent(self, person_tree: dict[str, Any]) -> None:
        updated = with_value(person_tree, "content", "other")
        updated["person"]["skills"].clear()
        assert len(person_tree["person"]["skills"]) == 3

    def test_config_forwarded(self, person_tree: dict[str, Any]) -> None:
        with pytest.raises(InvalidPathError):
            with_value(person_tree, "phoneNumbers[50]", "x", ScannerConfig(max_index=10))


class TestWithoutValue:
    def test_returns_pruned_copy(self, person_tree: dict[str, Any]) -> None:
        pruned = without_value(person_tree, "person.skills[].level")
        assert all("level" not in skill for skill in pruned["person"]["skills"])
        assert all("level" in skill for skill in person_tree["person"]["skills"])

    def test_missing_path(self, person_tree: dict[str, Any]) -> None:
        assert without_value(person_tree, "nothing.here") == person_tree
