# -*- coding: utf-8 -*-
"""
choice

Filter form type pairing a comparison operator with a value field.

Version: 0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from ...conf import FieldAdminSettings, current_settings
from ...core.choices import FilterOperator, ValueStrategy
from ...core.interface import FormBuilderLike
from ...core.options import ChoiceFilterOptions
from ...i18n import Translator
from ..base import BaseFormType
from ..registry import registry

logger = logging.getLogger(__name__)


@registry.register("fieldadmin_type_filter_choice")
class ChoiceFilterType(BaseFormType):
    """Two-field filter: ``type`` picks the operator, ``value`` holds the operand.

    ``field_type`` names the widget used for ``value`` and ``field_options``
    configures it. The plain ``choice`` widget always gets the copy value
    strategy.
    """

    TYPE_CONTAINS = FilterOperator.CONTAINS
    TYPE_NOT_CONTAINS = FilterOperator.NOT_CONTAINS
    TYPE_EQUAL = FilterOperator.EQUAL

    def __init__(self, translator: Translator, settings: FieldAdminSettings | None = None) -> None:
        self.translator = translator
        self._settings = settings

    @property
    def settings(self) -> FieldAdminSettings:
        return self._settings or current_settings()

    def get_default_options(self, options: Mapping[str, Any]) -> dict[str, Any]:
        defaults = {
            "field_type": self.settings.default_filter_field_type,
            "field_options": {},
        }
        return {**defaults, **options}

    def get_choices(self) -> dict[int, str]:
        domain = self.settings.translation_domain
        return {
            value: self.translator.trans(key, {}, domain)
            for value, key in FilterOperator.choices()
        }

    def build_form(self, builder: FormBuilderLike, options: Mapping[str, Any]) -> None:
        config = ChoiceFilterOptions.model_validate(dict(options))
        field_options = {"required": False, **config.field_options}
        if config.field_type == "choice":
            field_options["value_strategy"] = ValueStrategy.COPY

        logger.debug("Building choice filter with value widget %r", config.field_type)
        builder.add(
            "type",
            "choice",
            {
                "choices": self.get_choices(),
                "required": False,
                "value_strategy": ValueStrategy.COPY,
            },
        )
        builder.add("value", config.field_type, field_options)


__all__ = ["ChoiceFilterType"]


# The End
