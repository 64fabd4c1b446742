"""
Removal of ads, promotions and community clutter.
"""

from __future__ import annotations

import logging

from lithofilter.config import FilterSettings, Setting

from .base import FilterCategory
from .rules import CustomRule

logger = logging.getLogger(__name__)

# Paths containing any of these are never blocked by this category
ALLOWED_PATH_PATTERNS = (
    "home_video_with_context",
    "related_video_with_context",
    "comment_thread",  # anything inside the comments
    "download_",
    "library_recent_shelf",
    "menu",
    "root",
    "-count",
    "-space",
    "-button",
    "playlist_add_to_option_wrapper",  # "add to playlist" flyout
)


class GeneralAdsFilter(FilterCategory):
    """Block ad, upsell and community components by path or identifier."""

    def __init__(self, settings: FilterSettings) -> None:
        super().__init__(settings)

        rule = self._rule
        general_ads = rule(
            Setting.ADREMOVER_GENERAL_ADS_REMOVAL,
            # "full_width_square_image_layout" may be needed as well
            "video_display_full_buttoned_layout",
            "_ad",
            "ad_",
            "ads_video_with_context",
            "banner_text_icon",
            "cell_divider",
            "reels_player_overlay",
            "watch_metadata_app_promo",
            "video_display_full_layout",
        )
        movie_ads = rule(
            Setting.ADREMOVER_MOVIE_REMOVAL,
            "browsy_bar",
            "compact_movie",
            "horizontal_movie_shelf",
            "movie_and_show_upsell_card",
        )
        custom = CustomRule.from_settings(
            settings, Setting.CUSTOM_FILTER, Setting.CUSTOM_FILTER_STRINGS
        )

        self.path_register.register_all(
            general_ads,
            rule(Setting.ADREMOVER_COMMUNITY_POSTS_REMOVAL, "post_base_wrapper"),
            rule(Setting.ADREMOVER_PAID_CONTENT_REMOVAL, "paid_content_overlay"),
            rule(Setting.ADREMOVER_SUGGESTIONS_REMOVAL, "horizontal_video_shelf"),
            rule(Setting.ADREMOVER_HIDE_LATEST_POSTS, "post_shelf"),
            movie_ads,
            rule(Setting.ADREMOVER_CHAPTER_TEASER_REMOVAL, "expandable_metadata"),
            rule(Setting.ADREMOVER_COMMUNITY_GUIDELINES_REMOVAL, "community_guidelines"),
            rule(Setting.ADREMOVER_COMPACT_BANNER_REMOVAL, "compact_banner"),
            rule(Setting.ADREMOVER_FEED_SURVEY_REMOVAL, "in_feed_survey"),
            rule(Setting.ADREMOVER_MEDICAL_PANEL_REMOVAL, "medical_panel"),
            rule(Setting.ADREMOVER_MERCHANDISE_REMOVAL, "product_carousel"),
            rule(
                Setting.ADREMOVER_INFO_PANEL_REMOVAL,
                "publisher_transparency_panel",
                "single_item_information_panel",
            ),
            rule(Setting.ADREMOVER_HIDE_CHANNEL_GUIDELINES, "channel_guidelines_entry_banner"),
            rule(Setting.HIDE_ARTIST_CARD, "official_card"),
            rule(Setting.ADREMOVER_SELF_SPONSOR_REMOVAL, "cta_shelf_card"),
            custom,
        )

        self.identifier_register.register_all(
            rule(Setting.ADREMOVER_SHORTS_REMOVAL, "shorts_shelf", "inline_shorts"),
            rule(Setting.ADREMOVER_GENERAL_ADS_REMOVAL, "carousel_ad"),
        )

    def decide(self, path: str, identifier: str | None) -> bool:
        if any(allowed in path for allowed in ALLOWED_PATH_PATTERNS):
            return False

        matched = self.path_register.first_match(path) or self.identifier_register.first_match(
            identifier
        )
        if matched is None:
            return False

        logger.debug(
            "Blocked by %s (ID: %s): %s",
            matched.setting.key if matched.setting else "rule",
            identifier,
            path,
        )
        return True
