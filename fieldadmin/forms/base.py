# -*- coding: utf-8 -*-
"""
base

Base form type class.

Version: 0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Mapping

from ..core.interface import FormBuilderLike


class BaseFormType(ABC):
    """
    Base Form Type Class

    Form types declare their child fields on a builder. They keep no state
    between two builds.
    """
    key: str = "base"

    def get_name(self) -> str:
        return self.key

    def get_default_options(self, options: Mapping[str, Any]) -> dict[str, Any]:
        """Return ``options`` completed with this type's defaults."""
        return dict(options)

    @abstractmethod
    def build_form(self, builder: FormBuilderLike, options: Mapping[str, Any]) -> None:
        """Declare the child fields on ``builder``."""
        raise NotImplementedError

    def build(self, builder: FormBuilderLike, options: Mapping[str, Any] | None = None) -> FormBuilderLike:
        """Resolve defaults, then build."""
        self.build_form(builder, self.get_default_options(options or {}))
        return builder

# The End
