# -*- coding: utf-8 -*-
"""
exceptions

Custom domain exceptions for the field description layer.

Version: 0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations


class AdminError(Exception):
    """Base class for admin-specific exceptions."""


class NoValueError(AdminError):
    """Raised when no accessor or attribute yields a field value."""

    def __init__(self, field_name: str | None, detail: str | None = None) -> None:
        self.field_name = field_name
        message = detail or f"Unable to retrieve the value of `{field_name}`"
        super().__init__(message)


class InvalidStateError(AdminError):
    """Raised when an option holds a value incompatible with the operation."""


class FieldNotFoundError(AdminError, KeyError):
    """Raised when a field is not known to a model or a collection."""

    def __init__(self, field_name: str, owner: str | None = None) -> None:
        self.field_name = field_name
        self.owner = owner
        where = f" on `{owner}`" if owner else ""
        super().__init__(f"Field `{field_name}` does not exist{where}")

    def __str__(self) -> str:
        return str(self.args[0])


__all__ = [
    "AdminError",
    "NoValueError",
    "InvalidStateError",
    "FieldNotFoundError",
]


# The End
