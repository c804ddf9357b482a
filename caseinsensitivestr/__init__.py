"""
Case-insensitive strings that keep their original case.

The fold mode and storage backend are chosen once at import time from the
CISTR_FOLD and CISTR_STORAGE environment variables (see config.py).
"""

from .caseinsensitivedict import CaseInsensitiveDict
from .cistr import CaseInsensitiveString
from .config import settings


__version__ = "0.1.0"

__all__ = ["CaseInsensitiveDict", "CaseInsensitiveString", "settings"]
