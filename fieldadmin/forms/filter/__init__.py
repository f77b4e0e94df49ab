# -*- coding: utf-8 -*-
"""
filter

Filter form types.

Version: 0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .choice import ChoiceFilterType

__all__ = ["ChoiceFilterType"]

# The End
