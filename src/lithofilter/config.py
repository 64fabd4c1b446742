"""
Settings and path management for lithofilter.
"""

from __future__ import annotations

import json
import logging
import os
import sys
import warnings
from collections.abc import Mapping
from enum import Enum
from pathlib import Path

logger = logging.getLogger(__name__)

SettingValue = bool | str


class Setting(Enum):
    """Named settings consumed by the filter rules and the playback patch."""

    # General ads
    ADREMOVER_GENERAL_ADS_REMOVAL = ("adremover_general_ads_removal", True)
    ADREMOVER_COMMUNITY_POSTS_REMOVAL = ("adremover_community_posts_removal", True)
    ADREMOVER_COMMUNITY_GUIDELINES_REMOVAL = ("adremover_community_guidelines_removal", True)
    ADREMOVER_COMPACT_BANNER_REMOVAL = ("adremover_compact_banner_removal", True)
    ADREMOVER_FEED_SURVEY_REMOVAL = ("adremover_feed_survey_removal", True)
    ADREMOVER_MEDICAL_PANEL_REMOVAL = ("adremover_medical_panel_removal", True)
    ADREMOVER_PAID_CONTENT_REMOVAL = ("adremover_paid_content_removal", True)
    ADREMOVER_MERCHANDISE_REMOVAL = ("adremover_merchandise_removal", True)
    ADREMOVER_INFO_PANEL_REMOVAL = ("adremover_info_panel_removal", True)
    ADREMOVER_SUGGESTIONS_REMOVAL = ("adremover_suggestions_removal", True)
    ADREMOVER_HIDE_LATEST_POSTS = ("adremover_hide_latest_posts", True)
    ADREMOVER_HIDE_CHANNEL_GUIDELINES = ("adremover_hide_channel_guidelines", True)
    HIDE_ARTIST_CARD = ("hide_artist_card", False)
    ADREMOVER_SELF_SPONSOR_REMOVAL = ("adremover_self_sponsor_removal", True)
    ADREMOVER_CHAPTER_TEASER_REMOVAL = ("adremover_chapter_teaser_removal", True)
    ADREMOVER_MOVIE_REMOVAL = ("adremover_movie_removal", True)
    ADREMOVER_SHORTS_REMOVAL = ("adremover_shorts_removal", True)
    CUSTOM_FILTER = ("custom_filter", False)
    CUSTOM_FILTER_STRINGS = ("custom_filter_strings", "")

    # Buttons
    HIDE_LIKE_BUTTON = ("hide_like_button", False)
    HIDE_DISLIKE_BUTTON = ("hide_dislike_button", False)
    HIDE_DOWNLOAD_BUTTON = ("hide_download_button", False)
    HIDE_ACTION_BUTTON = ("hide_action_button", False)
    HIDE_PLAYLIST_BUTTON = ("hide_playlist_button", False)
    HIDE_SHARE_BUTTON = ("hide_share_button", False)

    # Comments
    HIDE_COMMENTS_SECTION = ("hide_comments_section", False)
    HIDE_PREVIEW_COMMENT = ("hide_preview_comment", False)

    # Playback
    FIX_PLAYBACK = ("fix_playback", False)

    def __init__(self, key: str, default: SettingValue) -> None:
        self.key = key
        self.default = default

    @classmethod
    def from_key(cls, key: str) -> Setting | None:
        """Look up a setting by its key in the settings file."""
        for setting in cls:
            if setting.key == key:
                return setting
        return None


def _accepts(setting: Setting, value: object) -> bool:
    """Check that a value has the same type as the setting's default."""
    return type(value) is type(setting.default)


class FilterSettings:
    """Current values of every setting, falling back to built-in defaults."""

    def __init__(self, values: Mapping[Setting, SettingValue] | None = None) -> None:
        self._values: dict[Setting, SettingValue] = {}
        for setting, value in (values or {}).items():
            self.set(setting, value)

    def get(self, setting: Setting) -> SettingValue:
        """Get the value of a setting, or its default when unset."""
        return self._values.get(setting, setting.default)

    def get_bool(self, setting: Setting) -> bool:
        value = self.get(setting)
        return value if isinstance(value, bool) else False

    def get_string(self, setting: Setting) -> str:
        value = self.get(setting)
        return value if isinstance(value, str) else ""

    def set(self, setting: Setting, value: SettingValue) -> None:
        """Set a setting value.

        Raises:
            TypeError: If the value type does not match the setting's default.
        """
        if not _accepts(setting, value):
            raise TypeError(
                f"{setting.name} expects {type(setting.default).__name__}, "
                f"got {type(value).__name__}"
            )
        self._values[setting] = value

    def to_dict(self) -> dict[str, SettingValue]:
        """Get every setting as a key -> value mapping, defaults included."""
        return {setting.key: self.get(setting) for setting in Setting}

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> FilterSettings:
        """Create settings from a key -> value mapping.

        Unknown keys are reported with a warning, mistyped values are logged
        and left at their defaults.
        """
        unknown = [key for key in data if Setting.from_key(key) is None]
        if unknown:
            warnings.warn(
                f"Unknown setting keys {unknown} are ignored.",
                UserWarning,
                stacklevel=3,
            )

        settings = cls()
        for key, value in data.items():
            setting = Setting.from_key(key)
            if setting is None:
                continue
            if not _accepts(setting, value):
                logger.warning(
                    "Ignoring %s=%r, expected %s", key, value, type(setting.default).__name__
                )
                continue
            settings._values[setting] = value  # type: ignore[assignment]
        return settings

    @classmethod
    def load(cls, path: Path | None = None) -> FilterSettings:
        """Load settings from file."""
        if path is None:
            path = get_settings_path()

        if not path.exists():
            return cls()

        with open(path) as f:
            data = json.load(f)

        return cls.from_dict(data)

    def save(self, path: Path | None = None) -> None:
        """Save settings to file."""
        if path is None:
            path = get_settings_path()

        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w") as f:
            json.dump(self.to_dict(), f, indent=2)


def get_config_dir() -> Path:
    """Get config directory following platform conventions."""
    if sys.platform == "win32":
        base = Path(os.environ.get("LOCALAPPDATA", Path.home() / "AppData" / "Local"))
    elif sys.platform == "darwin":
        base = Path.home() / "Library" / "Application Support"
    else:
        base = Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config"))

    return base / "lithofilter"


def get_settings_path() -> Path:
    """Resolve the settings file location.

    Priority:
    1. LITHOFILTER_SETTINGS environment variable
    2. settings.json in the config directory
    """
    env_path = os.environ.get("LITHOFILTER_SETTINGS")
    if env_path:
        return Path(env_path).expanduser()

    return get_config_dir() / "settings.json"
