"""Core application infrastructure.

Exports configuration settings so that tests and routes can use the short
import path ``from receipt_points.core import settings``.
"""

from .config import settings  # noqa: F401
