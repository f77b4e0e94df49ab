# -*- coding: utf-8 -*-
"""
test_resolvers

Ordered value resolution strategies.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from types import SimpleNamespace

import pytest

from fieldadmin.core.exceptions import NoValueError
from fieldadmin.core.resolvers import (
    AttributeResolver,
    MethodResolver,
    ValueResolverChain,
    build_resolver_chain,
)


class TestResolvers:
    def test_method_resolver_ignores_plain_attributes(self) -> None:
        result = MethodResolver("title").resolve(SimpleNamespace(title="Dune"))
        assert result.found is False

    def test_method_resolver_calls(self) -> None:
        result = MethodResolver("upper").resolve("dune")
        assert result.found is True
        assert result.value == "DUNE"
        assert result.source == "upper"

    def test_attribute_resolver_skips_none(self) -> None:
        assert AttributeResolver("title").resolve(SimpleNamespace(title=None)).found is False
        assert AttributeResolver("title").resolve(SimpleNamespace(title=0)).value == 0

    def test_chain_order(self) -> None:
        chain = build_resolver_chain("is_active", code="status")
        assert [repr(resolver) for resolver in chain.resolvers] == [
            "MethodResolver('status')",
            "MethodResolver('getIsActive')",
            "MethodResolver('isIsActive')",
            "AttributeResolver('is_active')",
        ]

    def test_empty_chain_raises(self) -> None:
        with pytest.raises(NoValueError) as info:
            ValueResolverChain([]).resolve(object(), label="price")
        assert info.value.field_name == "price"


# The End
