"""
Property-based tests using Hypothesis.

Invariants of flattening and reference rewriting across generated token
trees.
"""

from __future__ import annotations

from typing import Any

from hypothesis import given, settings
from hypothesis import strategies as st

from tokenbuild.core.flatten import flatten_tree
from tokenbuild.core.ir import ReferenceMode
from tokenbuild.core.references import resolve_reference

# Keys without separators so that distinct paths give distinct names. Groups
# may contain children named "value" or "unit".
keys = st.one_of(
    st.text(alphabet="abcdefghijklmnopqrstuvwxyz0123456789", min_size=1, max_size=8),
    st.sampled_from(["value", "unit"]),
)
literals = st.from_regex(r"#[0-9a-f]{6}", fullmatch=True)
records = st.builds(lambda v: {"$value": v}, literals)
trees = st.recursive(
    records,
    lambda children: st.dictionaries(keys, children, min_size=1, max_size=4),
    max_leaves=30,
)


def _count_records(node: Any) -> int:
    if "$value" in node:
        return 1
    return sum(_count_records(child) for child in node.values())


class TestFlattenProperties:
    @given(st.dictionaries(keys, trees, max_size=5))
    @settings(max_examples=100)
    def test_one_token_per_record(self, tree: dict[str, Any]) -> None:
        """Invariant: every reachable record yields exactly one token."""
        assert len(flatten_tree(tree)) == sum(_count_records(child) for child in tree.values())

    @given(st.dictionaries(keys, trees, max_size=5))
    @settings(max_examples=100)
    def test_deterministic(self, tree: dict[str, Any]) -> None:
        """Invariant: flattening twice yields identical ordered output."""
        first = flatten_tree(tree)
        second = flatten_tree(tree)
        assert list(first.items()) == list(second.items())

    @given(st.dictionaries(keys, trees, max_size=5))
    @settings(max_examples=50)
    def test_names_are_joined_paths(self, tree: dict[str, Any]) -> None:
        """Invariant: a token's name is its path joined with dashes."""
        for name, token in flatten_tree(tree).items():
            assert name == "-".join(token.path)


class TestReferenceProperties:
    @given(st.lists(keys, min_size=1, max_size=5))
    def test_alias_rewrites(self, path: list[str]) -> None:
        alias = "{" + ".".join(path) + "}"
        name = "-".join(path)
        assert resolve_reference(alias, ReferenceMode.NAME) == name
        assert resolve_reference(alias, ReferenceMode.VAR) == f"var(--{name})"

    @given(literals)
    def test_literals_unchanged(self, value: str) -> None:
        for mode in ReferenceMode:
            assert resolve_reference(value, mode) == value
