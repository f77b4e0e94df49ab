# -*- coding: utf-8 -*-
"""
core

Field description core: options, merging, value resolution.

Version: 0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

# The End
