# -*- coding: utf-8 -*-
"""
options

Option records for field descriptions and filter form types.

Version: 0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field as PField

# Keys promoted out of the free-form option mapping
RESERVED_OPTION_KEYS: tuple[str, ...] = ("type", "template", "help")


class FieldOptions(BaseModel):
    """Field options split into promoted attributes and the open remainder."""

    type: Any = None
    template: Any = None
    help: Any = None
    extra: dict[Any, Any] = PField(default_factory=dict)

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any] | None) -> "FieldOptions":
        """Build the record, pulling the reserved keys out of ``options``.

        The input mapping is left untouched. A reserved key holding ``None``
        counts as absent and is dropped.
        """

        remainder = dict(options or {})
        promoted = {}
        for key in RESERVED_OPTION_KEYS:
            value = remainder.pop(key, None)
            if value is not None:
                promoted[key] = value
        return cls(extra=remainder, **promoted)


class ChoiceFilterOptions(BaseModel):
    """Configuration record of the choice filter form type."""

    model_config = ConfigDict(extra="allow")

    field_type: str = "choice"
    field_options: dict[str, Any] = PField(default_factory=dict)


__all__ = ["RESERVED_OPTION_KEYS", "FieldOptions", "ChoiceFilterOptions"]


# The End
