# -*- coding: utf-8 -*-
"""
choices

Django-like Choices enums and the closed value sets used by field descriptions.

Version: 0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations
from enum import Enum, IntEnum
from typing import Any, Iterable, List, Tuple, cast


class ChoicesMixin:
    """Common helpers for choices-like enums."""

    label: str  # set on each member

    @classmethod
    def choices(cls) -> List[Tuple[Any, str]]:
        members = cast(Iterable[Any], cls)
        return [(m.value, m.label) for m in members]  # type: ignore[attr-defined]

    @classmethod
    def values(cls) -> List[Any]:
        members = cast(Iterable[Any], cls)
        return [m.value for m in members]


class StrChoices(ChoicesMixin, str, Enum):
    """String-based choices: members defined as ('value', 'Label')."""

    def __new__(cls, value: str, label: str):
        obj = str.__new__(cls, value)
        obj._value_ = value
        obj.label = label  # type: ignore[attr-defined]
        return obj

    def __str__(self) -> str:
        return str(self.value)


class IntChoices(ChoicesMixin, IntEnum):
    """Integer-based choices: members defined as (value, 'Label')."""

    def __new__(cls, value: int, label: str):
        obj = int.__new__(cls, value)
        obj._value_ = value
        obj.label = label  # type: ignore[attr-defined]
        return obj

    def __str__(self) -> str:
        return str(self.value)


class AssociationType(IntChoices):
    """Kind of relation a field maps to. Values are bit flags."""

    ONE_TO_ONE = (1, "One to one")
    MANY_TO_ONE = (2, "Many to one")
    ONE_TO_MANY = (4, "One to many")
    MANY_TO_MANY = (8, "Many to many")


class EditMode(StrChoices):
    """How an associated admin is edited from a form."""

    STANDARD = ("standard", "Standard")
    INLINE = ("inline", "Inline")
    LIST = ("list", "List")


class FilterOperator(IntChoices):
    """Comparison operators offered by the choice filter.

    Labels are translation keys, resolved by a translator at build time.
    """

    CONTAINS = (1, "label_type_contains")
    NOT_CONTAINS = (2, "label_type_not_contains")
    EQUAL = (3, "label_type_equals")


class ValueStrategy(StrChoices):
    """How a choice field maps a selected option back to its value."""

    COPY = ("copy", "Copy the choice value")


__all__ = [
    "ChoicesMixin",
    "StrChoices",
    "IntChoices",
    "AssociationType",
    "EditMode",
    "FilterOperator",
    "ValueStrategy",
]

# The End
