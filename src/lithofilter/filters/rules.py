"""
Block rules and rule registers.

A rule is a setting-gated set of literal substrings. Registers group rules
that are checked against the same descriptor signal (path or identifier).
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field

from lithofilter.config import FilterSettings, Setting

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Rule:
    """A rule blocking components whose signal contains any of its patterns.

    Rules without a setting are always enabled, but are never part of an
    aggregate "all enabled" check.
    """

    setting: Setting | None
    patterns: tuple[str, ...]
    settings: FilterSettings | None = field(default=None, repr=False, compare=False)

    def enabled(self) -> bool:
        if self.setting is None:
            return True
        if self.settings is None:
            return bool(self.setting.default)
        return self.settings.get_bool(self.setting)

    def matches(self, candidate: str | None) -> bool:
        """Check if any pattern is a substring of the candidate."""
        if not candidate:
            return False
        return any(pattern in candidate for pattern in self.patterns)


@dataclass(frozen=True)
class CustomRule(Rule):
    """A rule whose patterns are user-supplied, comma-separated block terms."""

    @classmethod
    def from_settings(
        cls,
        settings: FilterSettings,
        setting: Setting,
        strings_setting: Setting,
    ) -> CustomRule:
        """Create the rule from the current value of a string setting.

        The list is read once. Later changes to the setting are only seen
        by a rule created afterwards.
        """
        raw = settings.get_string(strings_setting)
        patterns = tuple(term.strip() for term in raw.split(",") if term.strip())
        logger.debug("Custom rule has %d block terms", len(patterns))
        return cls(setting, patterns, settings)


class RuleRegister:
    """Ordered collection of rules checked against one descriptor signal."""

    def __init__(self, *rules: Rule) -> None:
        self._rules: list[Rule] = list(rules)

    def register_all(self, *rules: Rule) -> None:
        """Append rules, keeping registration order."""
        self._rules.extend(rules)

    def __iter__(self) -> Iterator[Rule]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def first_match(self, candidate: str | None) -> Rule | None:
        """Find the first enabled rule matching the candidate.

        Disabled rules are skipped without being matched.
        """
        for rule in self._rules:
            if not rule.enabled():
                continue
            if rule.matches(candidate):
                return rule
        return None

    def any_match(self, candidate: str | None) -> bool:
        return self.first_match(candidate) is not None
