"""Unit tests for playback position recovery."""

from __future__ import annotations

import asyncio
import logging
from unittest.mock import AsyncMock, MagicMock, call

import pytest

from lithofilter.config import FilterSettings, Setting


def make_player(lengths: list[int] | None = None) -> MagicMock:
    """Create a mock player reporting the given lengths, then the last one."""
    lengths = list(lengths or [0])
    player = MagicMock()

    async def current_video_length() -> int:
        if len(lengths) > 1:
            return lengths.pop(0)
        return lengths[0]

    player.current_video_length = AsyncMock(side_effect=current_video_length)
    player.seek_to = AsyncMock()
    return player


class TestPlaybackRecovery:
    """Tests for the PlaybackRecovery class."""

    @pytest.fixture
    def settings(self) -> FilterSettings:
        return FilterSettings({Setting.FIX_PLAYBACK: True})

    @pytest.mark.asyncio
    async def test_seeks_once_length_is_known(self, settings: FilterSettings) -> None:
        """Test the seek sequence after the length becomes usable."""
        from lithofilter.playback.recovery import PlaybackRecovery

        player = make_player([0, 0, 120000])
        recovery = PlaybackRecovery(player, settings, poll_interval=0)

        recovery.on_new_video("abc")
        task = recovery.task
        assert task is not None
        await task

        assert player.seek_to.await_args_list == [call(120000), call(1), call(0)]
        assert player.current_video_length.await_count == 3

    @pytest.mark.asyncio
    async def test_repeated_id_is_noop(self, settings: FilterSettings) -> None:
        """Test that the same video id does not restart the task."""
        from lithofilter.playback.recovery import PlaybackRecovery

        recovery = PlaybackRecovery(make_player(), settings, poll_interval=0)
        recovery.on_new_video("abc")
        first = recovery.task

        recovery.on_new_video("abc")
        assert recovery.task is first
        assert first is not None and not first.done()

        await recovery.close()

    @pytest.mark.asyncio
    async def test_new_id_cancels_previous_task(self, settings: FilterSettings) -> None:
        """Test that a new video cancels the running recovery."""
        from lithofilter.playback.recovery import PlaybackRecovery

        recovery = PlaybackRecovery(make_player(), settings, poll_interval=0)
        recovery.on_new_video("abc")
        first = recovery.task
        await asyncio.sleep(0)

        recovery.on_new_video("def")
        second = recovery.task
        assert second is not first
        assert recovery.current_video_id == "def"

        await asyncio.gather(first, return_exceptions=True)
        assert first is not None and first.cancelled()

        await recovery.close()
        assert second is not None and second.cancelled()

    @pytest.mark.asyncio
    async def test_none_cancels_and_clears(self, settings: FilterSettings) -> None:
        """Test that None stops recovery without starting a new task."""
        from lithofilter.playback.recovery import PlaybackRecovery

        recovery = PlaybackRecovery(make_player(), settings, poll_interval=0)
        recovery.on_new_video("abc")
        first = recovery.task

        recovery.on_new_video(None)
        assert recovery.task is None
        assert recovery.current_video_id is None

        await asyncio.gather(first, return_exceptions=True)
        assert first is not None and first.cancelled()

        # The same id starts again after a reset
        recovery.on_new_video("abc")
        assert recovery.task is not None
        await recovery.close()

    @pytest.mark.asyncio
    async def test_disabled_setting_starts_nothing(self) -> None:
        """Test that nothing runs when the playback fix is off."""
        from lithofilter.playback.recovery import PlaybackRecovery

        player = make_player([1000])
        recovery = PlaybackRecovery(player, FilterSettings(), poll_interval=0)
        recovery.on_new_video("abc")

        assert recovery.task is None
        assert recovery.current_video_id is None
        player.current_video_length.assert_not_called()

    @pytest.mark.asyncio
    async def test_last_known_time_ends_polling(self, settings: FilterSettings) -> None:
        """Test that a known position is enough to seek."""
        from lithofilter.playback.recovery import PlaybackRecovery

        player = make_player([0])
        recovery = PlaybackRecovery(player, settings, poll_interval=0)
        recovery.on_new_video("abc")
        await asyncio.sleep(0)
        recovery.record_video_time(5000)

        task = recovery.task
        assert task is not None
        await asyncio.wait_for(task, timeout=1)

        assert player.seek_to.await_args_list == [call(0), call(1), call(5000)]

    @pytest.mark.asyncio
    async def test_same_id_restarts_after_close(self, settings: FilterSettings) -> None:
        """Test that closing forgets the video so it can be recovered again."""
        from lithofilter.playback.recovery import PlaybackRecovery

        recovery = PlaybackRecovery(make_player(), settings, poll_interval=0)
        recovery.on_new_video("abc")
        first = recovery.task

        await recovery.close()
        assert recovery.current_video_id is None

        recovery.on_new_video("abc")
        assert recovery.task is not None
        assert recovery.task is not first
        assert recovery.current_video_id == "abc"

        await recovery.close()

    @pytest.mark.asyncio
    async def test_player_error_is_logged(
        self, settings: FilterSettings, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Test that a failing player ends the task with a logged warning."""
        from lithofilter.playback.recovery import PlaybackRecovery

        player = make_player()
        player.current_video_length = AsyncMock(side_effect=RuntimeError("player gone"))
        recovery = PlaybackRecovery(player, settings, poll_interval=0)

        with caplog.at_level(logging.WARNING, logger="lithofilter.playback.recovery"):
            recovery.on_new_video("abc")
            task = recovery.task
            assert task is not None
            await task

        assert task.exception() is None
        assert "player gone" in caplog.text
        player.seek_to.assert_not_called()


class TestPagePlayerController:
    """Tests for the Playwright-backed player controls."""

    @pytest.fixture
    def mock_page(self) -> MagicMock:
        """Create a mock Playwright page."""
        page = MagicMock()
        page.evaluate = AsyncMock()
        return page

    @pytest.mark.asyncio
    async def test_current_video_length(self, mock_page: MagicMock) -> None:
        """Test reading the video length from the page."""
        from lithofilter.playback.player import VIDEO_LENGTH_SCRIPT, PagePlayerController

        mock_page.evaluate.return_value = 93000
        controller = PagePlayerController(mock_page, selector="#movie_player video")

        assert await controller.current_video_length() == 93000
        mock_page.evaluate.assert_awaited_once_with(VIDEO_LENGTH_SCRIPT, "#movie_player video")

    @pytest.mark.asyncio
    async def test_length_is_zero_on_failure(self, mock_page: MagicMock) -> None:
        """Test that page errors report an unknown length."""
        from lithofilter.playback.player import PagePlayerController

        mock_page.evaluate.side_effect = RuntimeError("Target page has been closed")
        controller = PagePlayerController(mock_page)

        assert await controller.current_video_length() == 0

    @pytest.mark.asyncio
    async def test_seek_to(self, mock_page: MagicMock) -> None:
        """Test that seeking passes selector and position to the page."""
        from lithofilter.playback.player import SEEK_SCRIPT, PagePlayerController

        mock_page.evaluate.return_value = True
        controller = PagePlayerController(mock_page)

        await controller.seek_to(1500)
        mock_page.evaluate.assert_awaited_once_with(SEEK_SCRIPT, ["video", 1500])

    @pytest.mark.asyncio
    async def test_seek_failure_is_not_raised(self, mock_page: MagicMock) -> None:
        """Test that seek errors are logged rather than raised."""
        from lithofilter.playback.player import PagePlayerController

        mock_page.evaluate.side_effect = RuntimeError("Execution context was destroyed")
        controller = PagePlayerController(mock_page)

        await controller.seek_to(1500)

    @pytest.mark.asyncio
    async def test_recovery_with_page_controller(self, mock_page: MagicMock) -> None:
        """Test the recovery sequence against a page."""
        from lithofilter.playback.player import SEEK_SCRIPT, PagePlayerController
        from lithofilter.playback.recovery import PlaybackRecovery

        mock_page.evaluate.side_effect = lambda script, arg: (
            60000 if not isinstance(arg, list) else True
        )
        recovery = PlaybackRecovery(
            PagePlayerController(mock_page),
            FilterSettings({Setting.FIX_PLAYBACK: True}),
            poll_interval=0,
        )
        recovery.record_video_time(30000)
        recovery.on_new_video("abc")
        assert recovery.task is not None
        await recovery.task

        seeks = [c.args[1][1] for c in mock_page.evaluate.await_args_list if c.args[0] == SEEK_SCRIPT]
        assert seeks == [60000, 1, 30000]
