# -*- coding: utf-8 -*-
"""
text

String helpers used to derive accessor names.

Version: 0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import re

_CAMELIZE_RE = re.compile(r"(^|[_.])+(.)")


def _camelize_match(match: re.Match[str]) -> str:
    # group(1) is the last delimiter of the run, empty at string start
    prefix = "_" if match.group(1) == "." else ""
    return prefix + match.group(2).upper()


def camelize(value: str) -> str:
    """Convert ``foo_bar.baz`` style paths to ``FooBar_Baz``.

    Each character following a run of ``_``/``.`` (or the start of the
    string) is upper-cased and the run dropped. When the run ends with a
    ``.``, an ``_`` is kept in its place.
    """

    return _CAMELIZE_RE.sub(_camelize_match, value)


def trailing_segment(path: str, separator: str = ".") -> str:
    """Return the part of ``path`` after the last ``separator``."""

    return (separator + path).rsplit(separator, 1)[1]


__all__ = ["camelize", "trailing_segment"]


# The End
