"""Utility modules for mathspan.

Provides:
- text: escape_html for markup output
- logger: get_logger for logging
"""

from mathspan.utils.logger import get_logger
from mathspan.utils.text import escape_html

__all__ = [
    "escape_html",
    "get_logger",
]
