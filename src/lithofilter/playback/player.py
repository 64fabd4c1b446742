"""
Player controls used by playback recovery.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from playwright.async_api import Page

logger = logging.getLogger(__name__)

# Duration and seek scripts for an HTML5 media element
VIDEO_LENGTH_SCRIPT = """
(selector) => {
    const video = document.querySelector(selector);
    if (!video || !Number.isFinite(video.duration)) return 0;
    return Math.floor(video.duration * 1000);
}
"""

SEEK_SCRIPT = """
([selector, position]) => {
    const video = document.querySelector(selector);
    if (!video) return false;
    video.currentTime = position / 1000;
    return true;
}
"""


class PlayerController(Protocol):
    """Host primitives needed to restore a playback position."""

    async def current_video_length(self) -> int:
        """Get the video length in milliseconds, 0 if not known yet."""
        ...

    async def seek_to(self, position_millis: int) -> None:
        """Seek to a position in milliseconds."""
        ...


class PagePlayerController:
    """Player controls for the first matching video element of a page."""

    def __init__(self, page: Page, selector: str = "video") -> None:
        """
        Initialize the controller.

        Args:
            page: Playwright page holding the video element
            selector: CSS selector of the video element
        """
        self._page = page
        self._selector = selector

    async def current_video_length(self) -> int:
        try:
            return int(await self._page.evaluate(VIDEO_LENGTH_SCRIPT, self._selector))
        except Exception as e:
            logger.debug("Failed to read video length: %s", e)
            return 0

    async def seek_to(self, position_millis: int) -> None:
        try:
            found = await self._page.evaluate(SEEK_SCRIPT, [self._selector, position_millis])
        except Exception as e:
            logger.debug("Failed to seek to %d: %s", position_millis, e)
            return

        if not found:
            logger.debug("No video element matching %s", self._selector)
