# -*- coding: utf-8 -*-
"""
resolvers

Strategies reading a field value from an arbitrary object.

Version: 0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable

from ..utils.text import camelize
from .exceptions import NoValueError

logger = logging.getLogger(__name__)

_MISSING = object()


@dataclass(frozen=True, slots=True)
class Resolution:
    """Outcome of a single resolver attempt."""

    found: bool
    value: Any = None
    source: str | None = None


NOT_FOUND = Resolution(found=False)


class ValueResolver:
    """Base resolver; subclasses look up one named member."""

    def __init__(self, name: str) -> None:
        self.name = name

    def resolve(self, obj: Any) -> Resolution:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.name!r})"


class MethodResolver(ValueResolver):
    """Call ``obj.<name>()`` when it exists and is callable."""

    def resolve(self, obj: Any) -> Resolution:
        member = getattr(obj, self.name, _MISSING)
        if member is _MISSING or not callable(member):
            return NOT_FOUND
        return Resolution(found=True, value=member(), source=self.name)


class AttributeResolver(ValueResolver):
    """Read ``obj.<name>`` when it is set to something other than ``None``."""

    def resolve(self, obj: Any) -> Resolution:
        value = getattr(obj, self.name, None)
        if value is None or callable(value):
            return NOT_FOUND
        return Resolution(found=True, value=value, source=self.name)


class ValueResolverChain:
    """Try resolvers in order; the first hit wins."""

    def __init__(self, resolvers: Iterable[ValueResolver]) -> None:
        self.resolvers = list(resolvers)

    def resolve(self, obj: Any, label: str | None = None) -> Any:
        """Return the first resolved value or raise ``NoValueError``."""
        for resolver in self.resolvers:
            result = resolver.resolve(obj)
            if result.found:
                logger.debug("Resolved %r via %r", label, resolver)
                return result.value
        raise NoValueError(label)


def build_resolver_chain(field_name: str, code: str | None = None) -> ValueResolverChain:
    """Return the lookup order used for ``field_name``.

    ``code`` names a method tried first. Then ``get<Name>``, ``is<Name>``
    and finally the plain attribute.
    """

    camelized = camelize(field_name)
    resolvers: list[ValueResolver] = []
    if code:
        resolvers.append(MethodResolver(code))
    resolvers.append(MethodResolver(f"get{camelized}"))
    resolvers.append(MethodResolver(f"is{camelized}"))
    resolvers.append(AttributeResolver(field_name))
    return ValueResolverChain(resolvers)


__all__ = [
    "Resolution",
    "ValueResolver",
    "MethodResolver",
    "AttributeResolver",
    "ValueResolverChain",
    "build_resolver_chain",
]


# The End
