"""
lithofilter: setting-driven blocking of rendered UI components.
"""

from .config import FilterSettings, Setting
from .filters import FilterEngine, get_filter_engine, reset_filter_engine

__all__ = [
    "FilterEngine",
    "FilterSettings",
    "Setting",
    "get_filter_engine",
    "reset_filter_engine",
]

__version__ = "0.1.0"
