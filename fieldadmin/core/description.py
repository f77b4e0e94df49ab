# -*- coding: utf-8 -*-
"""
description

Field descriptions: metadata about one field of a managed entity.

Version: 0.1.0
Author: Timur Kady
Email: timurkady@yandex.com

A typical admin holds three collections of field descriptions:

- form: used by the edit form
- list: used by the list view
- filter: used by the list filters

Some options are global across the contexts, others are context specific.

Global options:
  - type: the field type (tweaks the form or the list rendering)
  - template: the template used to render the field
  - help: help text displayed next to the field
  - label: label in the form, column title in the list
  - link_parameters: extra parameters added when the related admin builds URLs
  - code: name of the method returning the value
  - associated_tostring: method giving the string form of a related item

Form options:
  - field_type: the widget used to render the field
  - field_options: options passed to the widget
  - edit: ``standard``, ``inline`` or ``list`` (associated admins only)

List options:
  - identifier: render the value as a link to the edit page

Filter options:
  - options: options given to the filter
  - field_type / field_options: the filter form field and its options
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from ..utils.text import camelize as _camelize, trailing_segment
from .choices import AssociationType, EditMode
from .exceptions import InvalidStateError
from .interface import AdminContext
from .merge import merge_recursive, merge_shallow
from .options import FieldOptions
from .resolvers import build_resolver_chain

logger = logging.getLogger(__name__)


class BaseFieldDescription:
    """Hold the information about a single field."""

    def __init__(
        self,
        name: str | None = None,
        options: Mapping[str, Any] | None = None,
        *,
        admin: AdminContext | None = None,
        association_mapping: Mapping[str, Any] | None = None,
        field_mapping: Mapping[str, Any] | None = None,
        parent_association_mappings: list[Mapping[str, Any]] | None = None,
    ) -> None:
        self._name: str | None = None
        self._field_name: str | None = None
        self._type: Any = None
        self._mapping_type: Any = None
        self._template: Any = None
        self._help: Any = None
        self._options: dict[Any, Any] = {}
        self._parent: AdminContext | None = None
        self._admin: AdminContext | None = admin
        self._association_admin: AdminContext | None = None
        self._association_mapping = association_mapping
        self._field_mapping = field_mapping
        self._parent_association_mappings = parent_association_mappings
        if name is not None:
            self.name = name
        if options is not None:
            self.options = options

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self._name!r}>"

    # === Identity ===
    @property
    def name(self) -> str | None:
        return self._name

    @name.setter
    def name(self, name: str) -> None:
        self._name = name
        if not self._field_name:
            self._field_name = trailing_segment(name)

    @property
    def field_name(self) -> str | None:
        return self._field_name

    @field_name.setter
    def field_name(self, field_name: str | None) -> None:
        self._field_name = field_name

    # === Type tags ===
    @property
    def type(self) -> Any:
        return self._type

    @type.setter
    def type(self, value: Any) -> None:
        self._type = value

    @property
    def mapping_type(self) -> Any:
        return self._mapping_type

    @mapping_type.setter
    def mapping_type(self, value: Any) -> None:
        self._mapping_type = value

    # === Display hints ===
    @property
    def template(self) -> Any:
        return self._template

    @template.setter
    def template(self, value: Any) -> None:
        self._template = value

    @property
    def help(self) -> Any:
        return self._help

    @help.setter
    def help(self, value: Any) -> None:
        self._help = value

    @property
    def label(self) -> Any:
        return self.get_option("label")

    # === Options ===
    @property
    def options(self) -> dict[Any, Any]:
        return self._options

    @options.setter
    def options(self, options: Mapping[str, Any]) -> None:
        """Replace all options, promoting ``type``, ``template`` and ``help``."""
        record = FieldOptions.from_mapping(options)
        if record.type is not None:
            self.type = record.type
        if record.template is not None:
            self.template = record.template
        if record.help is not None:
            self.help = record.help
        self._options = record.extra
        logger.debug("Options of %r set: %s", self._name, list(self._options))

    def get_option(self, name: str, default: Any = None) -> Any:
        value = self._options.get(name)
        return default if value is None else value

    def set_option(self, name: str, value: Any) -> None:
        self._options[name] = value

    def merge_option(self, name: str, options: Mapping[str, Any] | None = None) -> None:
        """Shallow-merge ``options`` into the mapping stored at ``name``.

        Raises ``InvalidStateError`` when the stored value is not a mapping.
        """

        current = self._options.get(name)
        if current is None:
            current = {}
        if not isinstance(current, Mapping):
            raise InvalidStateError(f"The key `{name}` does not point to a mapping value")
        self._options[name] = merge_shallow(current, options or {})

    def merge_options(self, options: Mapping[str, Any] | None = None) -> None:
        """Recursively merge ``options`` and re-apply them."""
        self.options = merge_recursive(self._options, options or {})

    # === Admin links ===
    @property
    def parent(self) -> AdminContext | None:
        return self._parent

    @parent.setter
    def parent(self, parent: AdminContext) -> None:
        self._parent = parent

    @property
    def admin(self) -> AdminContext | None:
        return self._admin

    @admin.setter
    def admin(self, admin: AdminContext) -> None:
        self._admin = admin

    @property
    def association_admin(self) -> AdminContext | None:
        return self._association_admin

    def set_association_admin(self, association_admin: AdminContext) -> None:
        """Link the admin of the related entity and point it back at us."""
        self._association_admin = association_admin
        association_admin.set_parent_field_description(self)
        logger.debug("Association admin of %r set to %r", self._name, association_admin)

    def has_association_admin(self) -> bool:
        return self._association_admin is not None

    # === ORM metadata ===
    @property
    def association_mapping(self) -> Mapping[str, Any] | None:
        return self._association_mapping

    @property
    def field_mapping(self) -> Mapping[str, Any] | None:
        return self._field_mapping

    @property
    def parent_association_mappings(self) -> list[Mapping[str, Any]] | None:
        return self._parent_association_mappings

    def is_association(self) -> bool:
        return isinstance(self._mapping_type, AssociationType)

    # === Option shortcuts ===
    def is_sortable(self) -> bool:
        return bool(self.get_option("sortable", False))

    @property
    def sort_field_mapping(self) -> Any:
        return self.get_option("sort_field_mapping")

    @property
    def sort_parent_association_mappings(self) -> Any:
        return self.get_option("sort_parent_association_mappings")

    @property
    def link_parameters(self) -> dict[str, Any]:
        return dict(self.get_option("link_parameters", {}))

    @property
    def associated_tostring(self) -> str | None:
        return self.get_option("associated_tostring")

    @property
    def edit_mode(self) -> EditMode:
        raw = self.get_option("edit", EditMode.STANDARD.value)
        try:
            return EditMode(raw)
        except ValueError as exc:
            raise InvalidStateError(
                f"Unknown edit mode `{raw}` for field `{self._name}`, "
                f"expected one of {EditMode.values()}"
            ) from exc

    def is_identifier(self) -> bool:
        return bool(self.get_option("identifier", False))

    # === Values ===
    def get_field_value(self, obj: Any, field_name: str) -> Any:
        """Read ``field_name`` from ``obj``.

        Tried in order: the method named by the ``code`` option,
        ``get<FieldName>()``, ``is<FieldName>()``, then the attribute itself.
        Raises ``NoValueError`` when nothing matches.
        """

        chain = build_resolver_chain(field_name, code=self.get_option("code"))
        return chain.resolve(obj, label=self._name)

    @staticmethod
    def camelize(value: str) -> str:
        return _camelize(value)


class FieldDescription(BaseFieldDescription):
    """Field description fed from ORM metadata.

    Assigning a mapping fills ``type``, ``mapping_type`` and ``field_name``
    when they are still unset.
    """

    def set_association_mapping(self, mapping: Mapping[str, Any]) -> None:
        self._association_mapping = mapping
        self._fill_from_mapping(mapping)

    def set_field_mapping(self, mapping: Mapping[str, Any]) -> None:
        self._field_mapping = mapping
        self._fill_from_mapping(mapping)

    def set_parent_association_mappings(self, mappings: list[Mapping[str, Any]]) -> None:
        for mapping in mappings:
            if not isinstance(mapping, Mapping):
                raise InvalidStateError("A parent association mapping must be a mapping")
        self._parent_association_mappings = list(mappings)

    def _fill_from_mapping(self, mapping: Mapping[str, Any]) -> None:
        if self._type is None:
            self._type = mapping.get("type")
        if self._mapping_type is None:
            self._mapping_type = mapping.get("type")
        if not self._field_name:
            self._field_name = mapping.get("field_name")

    @property
    def target_model(self) -> str | None:
        if not self._association_mapping:
            return None
        return self._association_mapping.get("target_model")

    def is_primary_key(self) -> bool:
        return bool(self._field_mapping and self._field_mapping.get("primary_key"))

    def get_value(self, obj: Any) -> Any:
        """Walk the parent associations, then read this field."""
        for mapping in self._parent_association_mappings or []:
            obj = self.get_field_value(obj, mapping["field_name"])
        return self.get_field_value(obj, self._field_name or "")


__all__ = ["BaseFieldDescription", "FieldDescription"]


# The End
