# -*- coding: utf-8 -*-
"""
adapters

ORM adapters producing field descriptions.

Version: 0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

# The End
