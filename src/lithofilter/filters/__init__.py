"""
Component filtering for lithofilter.

Decides per rendered component descriptor whether it should be blocked,
using setting-gated substring rules grouped into filter categories.
"""

from .base import FilterCategory
from .buttons import ButtonsFilter
from .comments import CommentsFilter
from .engine import FilterEngine, get_filter_engine, reset_filter_engine
from .general_ads import GeneralAdsFilter
from .rules import CustomRule, Rule, RuleRegister

__all__ = [
    "ButtonsFilter",
    "CommentsFilter",
    "CustomRule",
    "FilterCategory",
    "FilterEngine",
    "GeneralAdsFilter",
    "Rule",
    "RuleRegister",
    "get_filter_engine",
    "reset_filter_engine",
]
