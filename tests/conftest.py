"""Shared fixtures: a small person record with nested mappings and lists."""

from __future__ import annotations

from typing import Any

import pytest

from json_tree_scanner import TreeScanner


def make_person_tree() -> dict[str, Any]:
    """Build a fresh sample tree (new objects on every call)."""
    return {
        "phoneNumbers": ["4665435677", "3455677889", "8776554434"],
        "person": {
            "firstName": "Aidan",
            "lastName": "Proud",
            "address": {"street": "5th Avenue", "number": "525"},
            "skills": [
                {"name": "Jump high", "level": "pro"},
                {"name": "Run fast", "level": "intermediate"},
                {"name": "Eat a lot", "level": "rookie"},
            ],
        },
        "content": "person",
    }


@pytest.fixture
def person_tree() -> dict[str, Any]:
    """A fresh sample tree for each test."""
    return make_person_tree()


@pytest.fixture
def scanner(person_tree: dict[str, Any]) -> TreeScanner:
    """An owning TreeScanner over the sample tree."""
    return TreeScanner(person_tree)


@pytest.fixture
def empty() -> TreeScanner:
    """An owning TreeScanner over an empty mapping."""
    return TreeScanner()


@pytest.fixture
def assert_intact() -> Any:
    """Callable checking that the sample tree's original values survived."""
    return _assert_original_fields_intact


def _assert_original_fields_intact(scanner: TreeScanner) -> None:
    """Check that every value of the sample tree is still readable."""
    assert scanner.get("content") == "person"
    phones = scanner.get_as("phoneNumbers", list)
    assert {"4665435677", "3455677889", "8776554434"} <= set(phones)
    assert scanner.get("person.firstName") == "Aidan"
    assert scanner.get("person.lastName") == "Proud"
    assert scanner.get("person.address.street") == "5th Avenue"
    assert scanner.get("person.address.number") == "525"
    for i, (name, level) in enumerate(
        [("Jump high", "pro"), ("Run fast", "intermediate"), ("Eat a lot", "rookie")]
    ):
        assert scanner.field_exists(f"person.skills[{i}]")
        assert scanner.get(f"person.skills[{i}].name") == name
        assert scanner.get(f"person.skills[{i}].level") == level
