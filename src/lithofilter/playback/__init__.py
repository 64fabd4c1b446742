"""
Playback position recovery for lithofilter.
"""

from .player import PagePlayerController, PlayerController
from .recovery import PlaybackRecovery

__all__ = ["PagePlayerController", "PlaybackRecovery", "PlayerController"]
