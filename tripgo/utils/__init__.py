"""
Utility module for TripGo API
"""

from .custom_logger import get_logger, setup_logger
from .dates import naive_utc
from .pagination import build_pagination, paginate
from .slugs import slugify

__all__ = [
    "build_pagination",
    "get_logger",
    "naive_utc",
    "paginate",
    "setup_logger",
    "slugify",
]
