# -*- coding: utf-8 -*-
"""
collection

Ordered container of field descriptions for one admin context.

Version: 0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from typing import Iterable, Iterator

from .description import BaseFieldDescription
from .exceptions import FieldNotFoundError


class FieldDescriptionCollection:
    """Field descriptions keyed by name, kept in insertion order."""

    def __init__(self, elements: Iterable[BaseFieldDescription] = ()) -> None:
        self._elements: dict[str, BaseFieldDescription] = {}
        for element in elements:
            self.add(element)

    def add(self, field_description: BaseFieldDescription) -> None:
        """Add or replace the description registered under its name."""
        if not field_description.name:
            raise ValueError("A field description needs a name to be collected")
        self._elements[field_description.name] = field_description

    def get(self, name: str) -> BaseFieldDescription:
        try:
            return self._elements[name]
        except KeyError:
            raise FieldNotFoundError(name, owner=self.__class__.__name__) from None

    def has(self, name: str) -> bool:
        return name in self._elements

    def remove(self, name: str) -> None:
        self._elements.pop(name, None)

    def names(self) -> list[str]:
        return list(self._elements)

    def reorder(self, names: Iterable[str]) -> None:
        """Move ``names`` to the front; unknown names are ignored."""
        ordered: dict[str, BaseFieldDescription] = {}
        for name in names:
            if name in self._elements:
                ordered[name] = self._elements[name]
        for name, element in self._elements.items():
            ordered.setdefault(name, element)
        self._elements = ordered

    def __iter__(self) -> Iterator[BaseFieldDescription]:
        return iter(list(self._elements.values()))

    def __len__(self) -> int:
        return len(self._elements)

    def __contains__(self, name: object) -> bool:
        return name in self._elements


__all__ = ["FieldDescriptionCollection"]


# The End
