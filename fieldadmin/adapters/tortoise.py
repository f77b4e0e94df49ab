# -*- coding: utf-8 -*-
"""
tortoise

Build field descriptions from Tortoise ORM model metadata.

Version: 0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Type

from tortoise.fields.base import Field
from tortoise.fields.relational import (
    BackwardFKRelation,
    BackwardOneToOneRelation,
    ForeignKeyFieldInstance,
    ManyToManyFieldInstance,
    OneToOneFieldInstance,
)
from tortoise.models import Model

from ..core.choices import AssociationType
from ..core.description import FieldDescription
from ..core.exceptions import FieldNotFoundError
from ..core.interface import AdminContext

logger = logging.getLogger(__name__)

# Subclasses first: o2o fields are fk fields too
_ASSOCIATION_TYPES: tuple[tuple[type, AssociationType], ...] = (
    (OneToOneFieldInstance, AssociationType.ONE_TO_ONE),
    (ForeignKeyFieldInstance, AssociationType.MANY_TO_ONE),
    (ManyToManyFieldInstance, AssociationType.MANY_TO_MANY),
    (BackwardOneToOneRelation, AssociationType.ONE_TO_ONE),
    (BackwardFKRelation, AssociationType.ONE_TO_MANY),
)


def association_type(field: Field) -> AssociationType | None:
    """Return the relation kind of ``field`` or ``None`` for data fields."""
    for cls, kind in _ASSOCIATION_TYPES:
        if isinstance(field, cls):
            return kind
    return None


class TortoiseFieldDescriptionFactory:
    """Create ``FieldDescription`` objects for Tortoise models."""

    description_class: Type[FieldDescription] = FieldDescription

    def create(
        self,
        model: Type[Model],
        name: str,
        options: Mapping[str, Any] | None = None,
        admin: AdminContext | None = None,
    ) -> FieldDescription:
        """Describe ``model.<name>``; dotted names walk through relations."""

        fd = self.description_class(name, options or {}, admin=admin)
        *parents, last = name.split(".")
        current: Type[Model] | None = model
        parent_mappings: list[dict[str, Any]] = []
        for segment in parents:
            field = self._get_field(current, segment)
            mapping = self.association_mapping(field)
            if mapping is None:
                raise FieldNotFoundError(name, owner=model.__name__)
            parent_mappings.append(mapping)
            current = getattr(field, "related_model", None)
            if current is None:
                logger.debug("Related model of %r is not resolved yet", segment)
                break
        if parent_mappings:
            fd.set_parent_association_mappings(parent_mappings)
        if current is None:
            return fd

        field = self._get_field(current, last)
        association = self.association_mapping(field)
        if association is not None:
            fd.set_association_mapping(association)
        else:
            fd.set_field_mapping(self.field_mapping(field))
        logger.debug("Described %s.%s as %r", model.__name__, name, fd.mapping_type)
        return fd

    def field_mapping(self, field: Field) -> dict[str, Any]:
        return {
            "field_name": field.model_field_name,
            "type": field.__class__.__name__,
            "nullable": bool(field.null),
            "unique": bool(field.unique),
            "primary_key": bool(field.pk),
            "max_length": getattr(field, "max_length", None),
        }

    def association_mapping(self, field: Field) -> dict[str, Any] | None:
        kind = association_type(field)
        if kind is None:
            return None
        return {
            "field_name": field.model_field_name,
            "type": kind,
            "target_model": self._target_name(field),
            "source_field": getattr(field, "source_field", None),
        }

    @staticmethod
    def _target_name(field: Field) -> str | None:
        model_name = getattr(field, "model_name", None)
        if model_name:
            return str(model_name)
        related = getattr(field, "related_model", None)
        return related.__name__ if related is not None else None

    @staticmethod
    def _get_field(model: Type[Model], name: str) -> Field:
        fields_map = model._meta.fields_map
        if name not in fields_map:
            raise FieldNotFoundError(name, owner=model.__name__)
        return fields_map[name]


__all__ = ["association_type", "TortoiseFieldDescriptionFactory"]


# The End
