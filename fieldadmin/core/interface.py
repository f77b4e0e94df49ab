# -*- coding: utf-8 -*-
"""
interface

Structural types for the collaborators a field description talks to.

Version: 0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .description import BaseFieldDescription


@runtime_checkable
class AdminContext(Protocol):
    """Admin managing one entity type and owning its field descriptions."""

    def set_parent_field_description(self, field_description: BaseFieldDescription) -> None:
        ...


@runtime_checkable
class FormBuilderLike(Protocol):
    """Anything collecting ``(name, type, options)`` field declarations."""

    def add(self, name: str, type: str, options: dict[str, Any] | None = None) -> Any:
        ...


__all__ = ["AdminContext", "FormBuilderLike"]


# The End
