# -*- coding: utf-8 -*-
"""
test_merge

Behaviour of the recursive option merge.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from fieldadmin.core.merge import merge_recursive, merge_shallow


class TestMergeRecursive:
    """Mapping, sequence and scalar cases."""

    def test_nested_mappings_are_merged(self) -> None:
        base = {"attr": {"class": "wide", "data": {"a": 1}}}
        incoming = {"attr": {"data": {"b": 2}, "id": "x"}}
        assert merge_recursive(base, incoming) == {
            "attr": {"class": "wide", "data": {"a": 1, "b": 2}, "id": "x"}
        }

    def test_scalars_are_overwritten(self) -> None:
        assert merge_recursive({"label": "Old", "keep": 1}, {"label": "New"}) == {
            "label": "New",
            "keep": 1,
        }

    def test_sequences_are_concatenated(self) -> None:
        assert merge_recursive({"choices": [1, 2]}, {"choices": (3,)}) == {"choices": [1, 2, 3]}

    def test_mapping_replaced_by_scalar(self) -> None:
        assert merge_recursive({"attr": {"a": 1}}, {"attr": None}) == {"attr": None}

    def test_integer_keys_are_appended_and_renumbered(self) -> None:
        base = {0: "a", "name": "x", 5: "b"}
        incoming = {0: "c", "name": "y"}
        assert merge_recursive(base, incoming) == {0: "a", "name": "y", 1: "b", 2: "c"}

    def test_numeric_strings_are_plain_keys(self) -> None:
        assert merge_recursive({"1": "a"}, {"1": "b"}) == {"1": "b"}

    def test_inputs_are_untouched(self) -> None:
        base = {"attr": {"a": 1}, "list": [1]}
        incoming = {"attr": {"b": 2}, "list": [2]}
        merge_recursive(base, incoming)
        assert base == {"attr": {"a": 1}, "list": [1]}
        assert incoming == {"attr": {"b": 2}, "list": [2]}

    def test_key_order(self) -> None:
        result = merge_recursive({"b": 1, "a": 1}, {"c": 1, "a": 2})
        assert list(result) == ["b", "a", "c"]


class TestMergeShallow:
    """One level overlay used by ``merge_option``."""

    def test_incoming_wins_without_recursion(self) -> None:
        assert merge_shallow({"a": {"x": 1}, "b": 1}, {"a": {"y": 2}}) == {
            "a": {"y": 2},
            "b": 1,
        }


# The End
