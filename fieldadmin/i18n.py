# -*- coding: utf-8 -*-
"""
i18n

Translator interface and a dictionary backed implementation.

Version: 0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from typing import Any, Mapping, Protocol, runtime_checkable

DEFAULT_DOMAIN = "FieldAdmin"

DEFAULT_CATALOG: dict[str, dict[str, str]] = {
    DEFAULT_DOMAIN: {
        "label_type_contains": "contains",
        "label_type_not_contains": "does not contain",
        "label_type_equals": "is equal to",
    },
}


@runtime_checkable
class Translator(Protocol):
    """Translation service used to label generated form fields."""

    def trans(
        self,
        key: str,
        parameters: Mapping[str, Any] | None = None,
        domain: str | None = None,
    ) -> str:
        ...


class CatalogTranslator:
    """Look messages up in ``{domain: {key: message}}`` catalogs.

    ``%name%`` placeholders are replaced from ``parameters``; unknown keys
    translate to themselves.
    """

    def __init__(
        self,
        catalogs: Mapping[str, Mapping[str, str]] | None = None,
        default_domain: str = DEFAULT_DOMAIN,
    ) -> None:
        self.catalogs: dict[str, dict[str, str]] = {
            domain: dict(messages) for domain, messages in DEFAULT_CATALOG.items()
        }
        for domain, messages in (catalogs or {}).items():
            self.catalogs.setdefault(domain, {}).update(messages)
        self.default_domain = default_domain

    def trans(
        self,
        key: str,
        parameters: Mapping[str, Any] | None = None,
        domain: str | None = None,
    ) -> str:
        messages = self.catalogs.get(domain or self.default_domain, {})
        message = messages.get(key, key)
        for name, value in (parameters or {}).items():
            message = message.replace(f"%{name}%", str(value))
        return message


__all__ = ["DEFAULT_DOMAIN", "DEFAULT_CATALOG", "Translator", "CatalogTranslator"]


# The End
