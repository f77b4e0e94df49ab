# -*- coding: utf-8 -*-
"""
forms

Form types and the declarative form builder.

Version: 0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

# The End
