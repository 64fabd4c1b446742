"""
Filter engine deciding whether a component descriptor should be blocked.
"""

from __future__ import annotations

import io
import logging
import threading
from collections.abc import Iterable

from lithofilter.config import FilterSettings

from .base import FilterCategory
from .buttons import ButtonsFilter
from .comments import CommentsFilter
from .general_ads import GeneralAdsFilter

logger = logging.getLogger(__name__)


class FilterEngine:
    """Run descriptors through the filter categories in a fixed order.

    The first category deciding to block wins. An allow-listed path in one
    category does not protect it from the categories after it.
    """

    def __init__(
        self,
        settings: FilterSettings | None = None,
        categories: Iterable[FilterCategory] | None = None,
    ) -> None:
        """Initialize the filter engine.

        Args:
            settings: Settings the rules read from. If None, loads them from disk.
            categories: Categories to use instead of the default ones, in order.
        """
        self.settings = settings if settings is not None else FilterSettings.load()

        if categories is None:
            categories = (
                GeneralAdsFilter(self.settings),
                ButtonsFilter(self.settings),
                CommentsFilter(self.settings),
            )
        self._categories: tuple[FilterCategory, ...] = tuple(categories)

        # Statistics
        self._stats_lock = threading.Lock()
        self._descriptors_checked = 0
        self._descriptors_blocked = 0

        logger.info(
            "Filter engine initialized: %d categories, %d rules",
            len(self._categories),
            sum(category.rule_count for category in self._categories),
        )

    @property
    def categories(self) -> tuple[FilterCategory, ...]:
        return self._categories

    def evaluate(self, path: str | io.StringIO, identifier: str | None) -> bool:
        """Decide whether a descriptor should be blocked.

        Args:
            path: Structural path of the component, or a buffer holding it.
            identifier: Component type identifier.

        Returns:
            True if the component should be blocked.
        """
        if isinstance(path, io.StringIO):
            path = path.getvalue()
        if not path:
            return False

        logger.debug("Searching (ID: %s): %s", identifier, path)

        blocked = any(category.decide(path, identifier) for category in self._categories)

        with self._stats_lock:
            self._descriptors_checked += 1
            if blocked:
                self._descriptors_blocked += 1

        return blocked

    def get_stats(self) -> dict[str, int]:
        """Get filtering statistics."""
        with self._stats_lock:
            return {
                "descriptors_checked": self._descriptors_checked,
                "descriptors_blocked": self._descriptors_blocked,
            }


# Singleton instance
_filter_engine: FilterEngine | None = None
_engine_lock = threading.Lock()


def get_filter_engine(settings: FilterSettings | None = None) -> FilterEngine:
    """Get or create the singleton FilterEngine instance.

    Args:
        settings: Settings to build the engine with. Only used on first call.

    Returns:
        The FilterEngine instance.
    """
    global _filter_engine

    with _engine_lock:
        if _filter_engine is None:
            _filter_engine = FilterEngine(settings)

    return _filter_engine


def reset_filter_engine() -> None:
    """Reset the singleton engine so the next call rebuilds every rule."""
    global _filter_engine

    with _engine_lock:
        _filter_engine = None
