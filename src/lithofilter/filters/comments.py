"""
Comments section and comment preview removal.
"""

from __future__ import annotations

import logging

from lithofilter.config import FilterSettings, Setting

from .base import FilterCategory

logger = logging.getLogger(__name__)


class CommentsFilter(FilterCategory):
    """Block the comments section and the preview comment independently."""

    def __init__(self, settings: FilterSettings) -> None:
        super().__init__(settings)

        comments = self._rule(Setting.HIDE_COMMENTS_SECTION, "video_metadata_carousel", "_comments")
        preview_comment = self._rule(
            Setting.HIDE_PREVIEW_COMMENT,
            "carousel_item",
            "comments_entry_point_teaser",
            "comments_entry_point_simplebox",
        )

        self.path_register.register_all(comments, preview_comment)

    def decide(self, path: str, identifier: str | None) -> bool:
        if not self.path_register.any_match(path):
            return False

        logger.debug("Blocked: %s", path)
        return True
