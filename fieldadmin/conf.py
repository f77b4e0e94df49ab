# -*- coding: utf-8 -*-
"""
conf

Runtime configuration utilities for the FieldAdmin package.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from threading import RLock
from typing import Mapping


@dataclass
class FieldAdminSettings:
    """Container for field layer configuration derived from environment variables."""

    translation_domain: str = "FieldAdmin"
    default_filter_field_type: str = "choice"

    def __post_init__(self) -> None:
        """Normalize textual settings and restore defaults for blank values."""
        self.translation_domain = self.translation_domain.strip() or "FieldAdmin"
        self.default_filter_field_type = self.default_filter_field_type.strip() or "choice"

    @classmethod
    def from_env(
        cls,
        env: Mapping[str, str] | None = None,
        *,
        prefix: str = "FIELDADMIN_",
    ) -> "FieldAdminSettings":
        """Build a settings instance from environment variables."""
        source = env if env is not None else os.environ
        data = {key[len(prefix) :]: value for key, value in source.items() if key.startswith(prefix)}
        return cls(
            translation_domain=data.get("TRANSLATION_DOMAIN") or "FieldAdmin",
            default_filter_field_type=data.get("DEFAULT_FILTER_FIELD_TYPE") or "choice",
        )


class SettingsManager:
    """Central storage for the active ``FieldAdminSettings`` instance."""

    def __init__(self, initial: FieldAdminSettings | None = None) -> None:
        """Prepare storage with an optional preconfigured ``initial`` settings."""

        self._lock = RLock()
        self._settings = initial

    def configure(self, settings: FieldAdminSettings) -> None:
        """Install a new settings instance."""
        with self._lock:
            self._settings = settings

    def current(self) -> FieldAdminSettings:
        """Return the active settings, lazily initializing from the environment."""
        with self._lock:
            if self._settings is None:
                self._settings = FieldAdminSettings.from_env()
            return self._settings

    def reset(self) -> None:
        """Drop the active settings so the next access reads the environment."""
        with self._lock:
            self._settings = None


_settings_manager = SettingsManager()


def configure(settings: FieldAdminSettings) -> None:
    """Public entry point to install application specific settings."""
    _settings_manager.configure(settings)


def current_settings() -> FieldAdminSettings:
    """Return the active settings instance used by FieldAdmin components."""
    return _settings_manager.current()


def reset_settings() -> None:
    """Forget configured settings; mainly useful in tests."""
    _settings_manager.reset()


__all__ = [
    "FieldAdminSettings",
    "SettingsManager",
    "configure",
    "current_settings",
    "reset_settings",
]


# The End
