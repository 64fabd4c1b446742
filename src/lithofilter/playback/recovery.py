"""
Playback position recovery.

When a new video starts, waits until the player reports a usable length and
then seeks through the end and the start back to the last known position,
which unsticks playback that stalled while loading.
"""

from __future__ import annotations

import asyncio
import logging

from lithofilter.config import FilterSettings, Setting

from .player import PlayerController

logger = logging.getLogger(__name__)

# Delay between player polls (seconds)
POLL_INTERVAL = 0.01


class PlaybackRecovery:
    """Run one recovery task per video, cancelling it when the video changes."""

    def __init__(
        self,
        player: PlayerController,
        settings: FilterSettings,
        poll_interval: float = POLL_INTERVAL,
    ) -> None:
        self._player = player
        self._settings = settings
        self._poll_interval = poll_interval
        self._current_video_id: str | None = None
        self._task: asyncio.Task[None] | None = None
        self.last_known_video_time = 0

    @property
    def current_video_id(self) -> str | None:
        return self._current_video_id

    @property
    def task(self) -> asyncio.Task[None] | None:
        return self._task

    def record_video_time(self, position_millis: int) -> None:
        """Remember the latest playback position reported by the host."""
        self.last_known_video_time = position_millis

    def on_new_video(self, video_id: str | None) -> None:
        """Handle a video change reported by the host.

        Must be called from a running event loop.

        Args:
            video_id: Id of the new video, or None when playback stopped.
        """
        if not self._settings.get_bool(Setting.FIX_PLAYBACK):
            return

        if video_id is None:
            self._current_video_id = None
            self._cancel()
            return

        if video_id == self._current_video_id:
            return

        self._current_video_id = video_id
        self._cancel()
        self._task = asyncio.create_task(self._recover(video_id))
        logger.debug("Started playback recovery for %s", video_id)

    def _cancel(self) -> None:
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = None

    async def close(self) -> None:
        """Cancel the running task and wait for it to finish."""
        task = self._task
        self._current_video_id = None
        self._cancel()
        if task is not None:
            await asyncio.gather(task, return_exceptions=True)

    async def _recover(self, video_id: str) -> None:
        try:
            while True:
                video_length = await self._player.current_video_length()
                last_known = self.last_known_video_time
                if video_length > 1 or last_known > 1:
                    await self._player.seek_to(video_length)
                    await self._player.seek_to(1)
                    await self._player.seek_to(last_known)
                    logger.debug("Restored %s to %d ms", video_id, last_known)
                    return

                await asyncio.sleep(self._poll_interval)
        except asyncio.CancelledError:
            logger.debug("Playback recovery for %s was cancelled", video_id)
            raise
        except Exception as e:
            logger.warning("Playback recovery for %s failed: %s", video_id, e)
