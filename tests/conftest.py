# -*- coding: utf-8 -*-
"""conftest

Shared testing utilities for FieldAdmin test-suite fixtures.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from typing import Any, Mapping

import pytest

from fieldadmin.conf import reset_settings


class RecordingTranslator:
    """Translator stub remembering every lookup."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, dict[str, Any], str | None]] = []

    def trans(
        self,
        key: str,
        parameters: Mapping[str, Any] | None = None,
        domain: str | None = None,
    ) -> str:
        self.calls.append((key, dict(parameters or {}), domain))
        return f"{domain}:{key}"


class AdminStub:
    """Admin context stub keeping its parent field description."""

    def __init__(self, code: str = "admin") -> None:
        self.code = code
        self.parent_field_description = None

    def set_parent_field_description(self, field_description) -> None:
        self.parent_field_description = field_description


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Make every test start from environment-derived settings."""

    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def translator() -> RecordingTranslator:
    return RecordingTranslator()


__all__ = ["RecordingTranslator", "AdminStub"]


# The End
