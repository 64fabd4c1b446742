"""
Action bar button removal.

The share control carries the same generic action button pattern as other
controls in the action bar, so it cannot be told apart by its path. After a
dislike button is seen, the next DO_NOT_BLOCK_COUNT generic action button
occurrences are spared and treated as the share control.
"""

from __future__ import annotations

import logging
import threading

from lithofilter.config import FilterSettings, Setting

from .base import FilterCategory

logger = logging.getLogger(__name__)

DO_NOT_BLOCK_COUNT = 4


class ButtonsFilter(FilterCategory):
    """Block like, dislike, download, playlist and generic action buttons."""

    def __init__(self, settings: FilterSettings) -> None:
        super().__init__(settings)

        like = self._rule(Setting.HIDE_LIKE_BUTTON, "|like_button")
        self._dislike_rule = self._rule(Setting.HIDE_DISLIKE_BUTTON, "dislike_button")
        download = self._rule(Setting.HIDE_DOWNLOAD_BUTTON, "download_button")
        self._action_buttons_rule = self._rule(
            Setting.HIDE_ACTION_BUTTON, "ContainerType|video_action_button"
        )
        playlist = self._rule(Setting.HIDE_PLAYLIST_BUTTON, "save_to_playlist_button")
        self._button_rules = (
            like,
            self._dislike_rule,
            download,
            self._action_buttons_rule,
            playlist,
        )

        self._action_bar_rule = self._rule(None, "video_action_bar")

        self.path_register.register_all(like, self._dislike_rule, download, playlist)

        self._do_not_block_counter = DO_NOT_BLOCK_COUNT
        self._counter_lock = threading.Lock()

    @property
    def do_not_block_counter(self) -> int:
        return self._do_not_block_counter

    def reset_counter(self) -> None:
        with self._counter_lock:
            self._do_not_block_counter = DO_NOT_BLOCK_COUNT

    def _hide_action_bar(self) -> bool:
        return all(rule.enabled() for rule in self._button_rules)

    def decide(self, path: str, identifier: str | None) -> bool:
        if self._hide_action_bar() and self._action_bar_rule.matches(identifier):
            logger.debug("Hiding action bar (ID: %s)", identifier)
            return True

        is_action_button = self._action_buttons_rule.matches(path)

        with self._counter_lock:
            if self._dislike_rule.matches(path):
                self._do_not_block_counter = DO_NOT_BLOCK_COUNT

            protected = False
            if is_action_button:
                protected = self._do_not_block_counter > 0
                self._do_not_block_counter -= 1
            exhausted = self._do_not_block_counter <= 0

        if protected:
            if self.settings.get_bool(Setting.HIDE_SHARE_BUTTON):
                logger.debug("Hiding share button")
                return True
            return False

        if (
            is_action_button and exhausted and self._action_buttons_rule.enabled()
        ) or self.path_register.any_match(path):
            logger.debug("Blocked: %s", path)
            return True

        return False
