"""
__init__

Field description layer entry point.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .conf import FieldAdminSettings, configure, current_settings
from .core.description import BaseFieldDescription, FieldDescription
from .core.exceptions import InvalidStateError, NoValueError
from .forms.filter.choice import ChoiceFilterType
from .meta import __version__

# The End
