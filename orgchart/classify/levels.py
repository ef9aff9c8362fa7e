"""
Seniority level scoring for free-text job titles.

A title is matched against an ordered list of rules; the first rule that
matches decides the level. Ordering is the whole design: compound phrases
("deputy head of division") must precede the generic keywords they contain
("head"), or the compound title is scored by the generic rule.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from orgchart.classify.profiles import LanguageProfile


@dataclass
class LevelRule:
    """A single title pattern and the level it assigns.

    Attributes:
        pattern: Compiled regex, applied to the lower-cased title.
        level: Level assigned on match (1 is the most senior).
        description: Human-readable note for audit output.
    """

    pattern: re.Pattern[str]
    level: int
    description: str = ""

    def matches(self, lowered_title: str) -> bool:
        return self.pattern.search(lowered_title) is not None

    def to_dict(self) -> dict[str, object]:
        """Serialize to dictionary."""
        return {
            "pattern": self.pattern.pattern,
            "level": self.level,
            "description": self.description,
        }


def rule(pattern: str, level: int, description: str = "") -> LevelRule:
    """Shorthand for building a LevelRule from a pattern string."""
    return LevelRule(pattern=re.compile(pattern), level=level, description=description)


class LevelScorer:
    """Maps job titles to integer hierarchy levels.

    Args:
        rules: Ordered rules; the first match wins.
        default_level: Level for titles no rule matches. Defaults to one
            past the highest rule level.

    Example::

        scorer = LevelScorer(profile.level_rules)
        scorer.score("Deputy Head of Division")  # 3
        scorer.score("Gardener")  # default level
    """

    def __init__(self, rules: list[LevelRule], default_level: int | None = None) -> None:
        self._rules = list(rules)
        if default_level is None:
            default_level = max((r.level for r in self._rules), default=0) + 1
        self._default_level = default_level

    @property
    def default_level(self) -> int:
        return self._default_level

    @property
    def rules(self) -> list[LevelRule]:
        return list(self._rules)

    def match(self, title: str | None) -> LevelRule | None:
        """Return the first rule matching the title, or None."""
        if not title:
            return None
        lowered = title.lower()
        for candidate in self._rules:
            if candidate.matches(lowered):
                return candidate
        return None

    def score(self, title: str | None) -> int:
        """Score a title. Total: unknown or empty titles get the default."""
        matched = self.match(title)
        return matched.level if matched else self._default_level


def score_level(title: str | None, profile: LanguageProfile | None = None) -> int:
    """Score a title with the given (or default) language profile."""
    from orgchart.classify.profiles import get_profile

    return (profile or get_profile()).scorer.score(title)
