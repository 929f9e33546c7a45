"""Utility modules for mdhtml.

Provides:
- logger: get_logger for namespaced logging
"""

from mdhtml.utils.logger import get_logger

__all__ = ["get_logger"]
