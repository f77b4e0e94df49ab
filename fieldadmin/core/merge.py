# -*- coding: utf-8 -*-
"""
merge

Recursive and shallow merging of option mappings.

Version: 0.1.0
Author: Timur Kady
Email: timurkady@yandex.com

Values taking part in a merge fall into three kinds:

* mappings: string keys are merged key by key, recursing when both sides
  hold a mapping; integer keys are sequential entries which are appended
  and renumbered from zero;
* sequences (``list``/``tuple``): concatenated, base items first;
* scalars (anything else, strings included): replaced by the incoming value.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

__all__ = ["merge_recursive", "merge_shallow", "is_sequence"]


def is_sequence(value: Any) -> bool:
    """Return ``True`` for values merged by concatenation."""
    return isinstance(value, (list, tuple))


def _is_positional(key: Any) -> bool:
    return isinstance(key, int) and not isinstance(key, bool)


def _merge_value(current: Any, incoming: Any) -> Any:
    if isinstance(current, Mapping) and isinstance(incoming, Mapping):
        return merge_recursive(current, incoming)
    if is_sequence(current) and is_sequence(incoming):
        return [*current, *incoming]
    return incoming


def merge_recursive(base: Mapping[Any, Any], incoming: Mapping[Any, Any]) -> dict[Any, Any]:
    """Return a new mapping with ``incoming`` merged into ``base``.

    Neither argument is modified. Key order follows ``base`` with new keys
    of ``incoming`` appended; integer keys are renumbered in that order.
    """

    result: dict[Any, Any] = {}
    position = 0
    for key, value in base.items():
        if _is_positional(key):
            result[position] = value
            position += 1
        elif key in incoming:
            result[key] = _merge_value(value, incoming[key])
        else:
            result[key] = value
    for key, value in incoming.items():
        if _is_positional(key):
            result[position] = value
            position += 1
        elif key not in base:
            result[key] = value
    return result


def merge_shallow(base: Mapping[Any, Any], incoming: Mapping[Any, Any]) -> dict[Any, Any]:
    """Return ``base`` overlaid with ``incoming`` one level deep."""
    return {**base, **incoming}


# The End
