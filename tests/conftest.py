"""Shared fixtures for lithofilter tests."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from lithofilter.config import FilterSettings, Setting


@pytest.fixture
def make_settings() -> Callable[..., FilterSettings]:
    """Build settings with every toggle off except the given ones."""

    def _make(*enabled: Setting, **strings: str) -> FilterSettings:
        values: dict[Setting, bool | str] = {
            setting: False for setting in Setting if isinstance(setting.default, bool)
        }
        values.update({setting: True for setting in enabled})
        for name, value in strings.items():
            values[Setting[name]] = value
        return FilterSettings(values)

    return _make
