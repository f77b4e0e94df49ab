# -*- coding: utf-8 -*-
"""
builder

Declarative form builder recording field declarations.

Version: 0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(slots=True)
class FieldDeclaration:
    """A single ``(name, type, options)`` instruction for a form renderer."""

    name: str
    type: str
    options: dict[str, Any] = field(default_factory=dict)


class FormBuilder:
    """Collect field declarations under one compound form name."""

    def __init__(self, name: str = "") -> None:
        self.name = name
        self._fields: dict[str, FieldDeclaration] = {}

    def add(self, name: str, type: str, options: dict[str, Any] | None = None) -> FormBuilder:
        self._fields[name] = FieldDeclaration(name, type, dict(options or {}))
        return self

    def get(self, name: str) -> FieldDeclaration:
        return self._fields[name]

    def has(self, name: str) -> bool:
        return name in self._fields

    def all(self) -> list[FieldDeclaration]:
        return list(self._fields.values())

    def __len__(self) -> int:
        return len(self._fields)


__all__ = ["FieldDeclaration", "FormBuilder"]


# The End
