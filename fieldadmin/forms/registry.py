# -*- coding: utf-8 -*-
"""
registry

Form type registry.

Version: 0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Type

logger = logging.getLogger(__name__)


class FormTypeRegistry:
    def __init__(self) -> None:
        self._by_key: Dict[str, Type[Any]] = {}

    def register(self, key: str):
        """Decorator to register a form type by key."""
        def _decorator(cls: Type[Any]) -> Type[Any]:
            if key in self._by_key and self._by_key[key] is not cls:
                logger.warning("Form type %r replaced by %s", key, cls.__name__)
            cls.key = key
            self._by_key[key] = cls
            return cls
        return _decorator

    def get(self, key: str) -> Type[Any] | None:
        return self._by_key.get(key)

    def keys(self) -> list[str]:
        return list(self._by_key)


registry = FormTypeRegistry()

# The End
