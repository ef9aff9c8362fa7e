"""
Entity classifiers for single lines and cells.

Predicates decide what a fragment of text is (a person's name, a job title,
an organizational unit, a vacancy marker); extractors pull titles, names,
e-mails and duty lists out of mixed fragments. All of them are bound to a
LanguageProfile so the concrete vocabulary can be swapped.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum

from orgchart.classify.profiles import LanguageProfile, get_profile

_EMAIL_RE = re.compile(r"[\w.+-]+@[\w-]+(?:\.[\w-]+)+")

# Name/title separators: a spaced hyphen, or an en/em dash with optional spaces.
# Hyphenated surnames ("Smith-Jones") are left intact.
_DASH_SEPARATOR_RE = re.compile(r"\s+-\s+|\s*[–—]\s*")

_BULLET_RE = re.compile(r"^\s*[-•·*▪◦]\s*")
_NUMBERED_RE = re.compile(r"^\s*(\d+)[.)]\s*(.+)$")

# Duty lists: semicolons, bullets, line breaks, or a sentence end followed by a capital
_RESPONSIBILITY_SPLIT_RE = re.compile(r"[;•·▪\n]+|(?<=[.!?])\s+(?=[A-ZА-ЯЁ])")

_EDGE_PUNCTUATION = " \t,;:|-–—()"

# Titles scored at or above this level head a unit rather than name one
_MANAGER_LEVEL = 4


class LineKind(str, Enum):
    """What a line of free text most likely holds."""

    VACANCY = "vacancy"
    TITLE_AND_NAME = "title_and_name"
    TITLE = "title"
    DEPARTMENT = "department"
    NAME = "name"
    OTHER = "other"


@dataclass
class EntryParts:
    """Name, title and duties split out of an outline entry.

    Attributes:
        name: Person name (or the whole entry if nothing could be split).
        title: Job title, possibly empty.
        responsibilities: Duties found after a colon.
    """

    name: str
    title: str = ""
    responsibilities: list[str] = field(default_factory=list)


class EntityClassifier:
    """Classifies text fragments using a language profile.

    Args:
        profile: Language profile. Defaults to the registry default.

    Example::

        classifier = EntityClassifier()
        classifier.is_person_name("John Smith")  # True
        classifier.is_position_title("Head of Sales")  # True
        classifier.split_title_and_name("Head of Sales John Smith")
        # ("Head of Sales", "John Smith")
    """

    def __init__(self, profile: LanguageProfile | None = None) -> None:
        self._profile = profile or get_profile()

    @property
    def profile(self) -> LanguageProfile:
        return self._profile

    # ------------------------------------------------------------------
    # Predicates
    # ------------------------------------------------------------------

    def is_person_name(self, text: str | None) -> bool:
        """True iff the trimmed text is 2 or 3 capitalized words."""
        if not text:
            return False
        return self._profile.person_name_re.match(text.strip()) is not None

    def is_position_title(self, text: str | None) -> bool:
        """True iff the text contains a role keyword (substring test).

        Short keywords can match inside longer unrelated words
        ("lead" in "leadership").
        """
        if not text:
            return False
        lowered = text.lower()
        return any(keyword in lowered for keyword in self._profile.position_keywords)

    def is_department_name(self, text: str | None) -> bool:
        """True iff the upper-cased text contains a unit keyword."""
        if not text:
            return False
        upper = text.upper()
        return any(keyword in upper for keyword in self._profile.department_keywords)

    def is_vacancy_marker(self, name: str | None, title: str | None = None) -> bool:
        """True if the name is missing, a dash, or a vacancy keyword, or the
        title mentions a vacancy."""
        stripped = (name or "").strip()
        name_check = (
            not stripped
            or stripped in self._profile.placeholder_dashes
            or stripped.lower() in self._profile.vacancy_names
        )
        return name_check or self.mentions_vacancy(title)

    def _is_bare_name(self, text: str) -> bool:
        # "Sales Department" and "Senior Engineer" are name-shaped too
        return (
            self.is_person_name(text)
            and not self.is_position_title(text)
            and not self.is_department_name(text)
        )

    def is_vacancy_name(self, name: str | None) -> bool:
        """True if the name cell holds a vacancy keyword rather than a person."""
        return (name or "").strip().lower() in self._profile.vacancy_names

    def mentions_vacancy(self, text: str | None) -> bool:
        """True if the text contains a vacancy fragment."""
        if not text:
            return False
        lowered = text.lower()
        return any(fragment in lowered for fragment in self._profile.vacancy_fragments)

    def classify(self, text: str) -> LineKind:
        """Classify a line of free text.

        Precedence is fixed: vacancy, combined title+name, title,
        department, then name. Name-likeness is only considered once the
        title and department tests have failed, so "Senior Engineer" is a
        title and not a person.

        A line that passes both the title and the department test is a
        department when its unit word sits where the language puts it
        ("ENGINEERING DEPARTMENT") and it does not name a head or deputy
        ("Head of the Sales Department").
        """
        if not text or not text.strip():
            return LineKind.OTHER
        if self.mentions_vacancy(text):
            return LineKind.VACANCY
        if self.split_title_and_name(text) is not None:
            return LineKind.TITLE_AND_NAME
        is_unit = self.is_department_name(text)
        if self.is_position_title(text):
            if is_unit and self._reads_as_unit(text):
                return LineKind.DEPARTMENT
            return LineKind.TITLE
        if is_unit:
            return LineKind.DEPARTMENT
        if self.is_person_name(text):
            return LineKind.NAME
        return LineKind.OTHER

    def _reads_as_unit(self, text: str) -> bool:
        words = text.upper().split()
        edge = words[0] if self._profile.unit_keyword_first else words[-1]
        if not any(keyword in edge for keyword in self._profile.department_keywords):
            return False
        matched = self._profile.scorer.match(text)
        return matched is None or matched.level > _MANAGER_LEVEL

    # ------------------------------------------------------------------
    # Extractors
    # ------------------------------------------------------------------

    def extract_title(self, text: str | None, exclude: str = "") -> str:
        """Return the title part of a line once the name is removed.

        Args:
            text: Line that may contain a title.
            exclude: Text to remove first (usually the person's name).

        Returns:
            The remaining text if it reads as a title, else "".
        """
        if not text:
            return ""
        cleaned = text.replace(exclude, " ") if exclude else text
        cleaned = _EMAIL_RE.sub(" ", cleaned)
        cleaned = " ".join(cleaned.split()).strip(_EDGE_PUNCTUATION)
        if cleaned and self.is_position_title(cleaned):
            return cleaned
        return ""

    def extract_department(self, text: str | None) -> str:
        """Return the trimmed text if it names an organizational unit."""
        if text and self.is_department_name(text):
            return " ".join(text.split()).strip(_EDGE_PUNCTUATION)
        return ""

    @staticmethod
    def extract_email(text: str | None) -> str | None:
        """Return the first e-mail address in the text, if any."""
        if not text:
            return None
        match = _EMAIL_RE.search(text)
        return match.group(0) if match else None

    def split_title_and_name(self, text: str | None) -> tuple[str, str] | None:
        """Split a line holding both a title and a name.

        Handles "Title Name", "Name - Title", "Title - Name" and runs where
        slide extraction glued the two together ("Head of SalesJohn Smith").

        Returns:
            (title, name) or None when the line is not a combination.
        """
        if not text:
            return None
        normalized = " ".join(text.split())
        candidates = [normalized]
        unglued = self._profile.glued_boundary_re.sub(r"\1 \2", normalized)
        if unglued != normalized:
            candidates.append(unglued)

        for candidate in candidates:
            parts = _DASH_SEPARATOR_RE.split(candidate, maxsplit=1)
            if len(parts) == 2:
                left, right = parts[0].strip(), parts[1].strip()
                if self._is_bare_name(left) and self.is_position_title(right):
                    return right, left
                if self.is_position_title(left) and self._is_bare_name(right):
                    return left, right

            words = candidate.split()
            for count in self._profile.name_word_counts:
                if len(words) <= count:
                    continue
                tail = " ".join(words[-count:])
                prefix = " ".join(words[:-count]).strip(_EDGE_PUNCTUATION)
                # A prefix ending in a glued word still holds part of the name
                glued = prefix and self._profile.glued_boundary_re.search(prefix.split()[-1])
                if prefix and not glued and self.is_position_title(prefix) and self._is_bare_name(tail):
                    return prefix, tail
                head = " ".join(words[:count])
                rest = " ".join(words[count:]).strip(_EDGE_PUNCTUATION)
                if rest and self._is_bare_name(head) and self.is_position_title(rest):
                    return rest, head
        return None

    def parse_entry(self, text: str) -> EntryParts:
        """Split an outline entry such as "Name - Title: duties".

        A dash separates name from title; without a dash, a colon does.
        When the left side reads as a title and the right side does not,
        the two are swapped ("Head of Sales - John Smith").
        """
        content = " ".join(text.split())
        duties = ""
        parts = _DASH_SEPARATOR_RE.split(content, maxsplit=1)
        if len(parts) == 2:
            left, right = parts
            if ":" in right:
                right, duties = right.split(":", 1)
        elif ":" in content:
            left, right = content.split(":", 1)
        else:
            return EntryParts(name=content.strip(_EDGE_PUNCTUATION))

        left = left.strip(_EDGE_PUNCTUATION)
        right = right.strip(_EDGE_PUNCTUATION)
        if self.is_position_title(left) and not self.is_position_title(right):
            left, right = right, left

        return EntryParts(
            name=left,
            title=right,
            responsibilities=self.split_responsibilities(duties),
        )

    @staticmethod
    def split_responsibilities(text: str | None, min_length: int = 3) -> list[str]:
        """Split a free-text duty description into individual duties."""
        if not text:
            return []
        duties = []
        for part in _RESPONSIBILITY_SPLIT_RE.split(text):
            cleaned = _BULLET_RE.sub("", part).strip().rstrip(".").strip()
            if len(cleaned) >= min_length:
                duties.append(cleaned)
        return duties

    @staticmethod
    def has_entry_separator(text: str) -> bool:
        """True if the text contains a name/title dash or a colon."""
        return ":" in text or _DASH_SEPARATOR_RE.search(text) is not None

    @staticmethod
    def strip_bullet(text: str) -> str | None:
        """Return the text after a leading bullet marker, or None."""
        match = _BULLET_RE.match(text)
        if not match:
            return None
        return text[match.end():].strip()

    @staticmethod
    def match_numbered(text: str) -> tuple[str, str] | None:
        """Match a numbered entry ("3. John Smith - ...").

        Returns:
            (number, body) or None.
        """
        match = _NUMBERED_RE.match(text)
        if not match:
            return None
        return match.group(1), match.group(2).strip()


_default_classifier: EntityClassifier | None = None


def _classifier() -> EntityClassifier:
    global _default_classifier
    if _default_classifier is None:
        _default_classifier = EntityClassifier()
    return _default_classifier


def is_person_name(text: str | None) -> bool:
    """Default-profile shorthand for EntityClassifier.is_person_name."""
    return _classifier().is_person_name(text)


def is_position_title(text: str | None) -> bool:
    """Default-profile shorthand for EntityClassifier.is_position_title."""
    return _classifier().is_position_title(text)


def is_department_name(text: str | None) -> bool:
    """Default-profile shorthand for EntityClassifier.is_department_name."""
    return _classifier().is_department_name(text)


def is_vacancy_marker(name: str | None, title: str | None = None) -> bool:
    """Default-profile shorthand for EntityClassifier.is_vacancy_marker."""
    return _classifier().is_vacancy_marker(name, title)
