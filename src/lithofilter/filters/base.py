"""
Base class for filter categories.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from lithofilter.config import FilterSettings, Setting

from .rules import Rule, RuleRegister


class FilterCategory(ABC):
    """A group of related rules producing one block/pass decision.

    Path patterns are checked against the descriptor path, identifier
    patterns against the descriptor identifier.
    """

    def __init__(self, settings: FilterSettings) -> None:
        self.settings = settings
        self.path_register = RuleRegister()
        self.identifier_register = RuleRegister()

    def _rule(self, setting: Setting | None, *patterns: str) -> Rule:
        """Create a rule reading its setting from this category's settings."""
        return Rule(setting, patterns, self.settings)

    @property
    def rule_count(self) -> int:
        return len(self.path_register) + len(self.identifier_register)

    @abstractmethod
    def decide(self, path: str, identifier: str | None) -> bool:
        """Return True if the descriptor should be blocked."""
