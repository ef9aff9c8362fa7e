"""Language profiles for entity classification.

Each profile bundles the vocabulary and orthography a document's language
uses for people, titles, units and vacancies, together with the ordered
title-to-level rules. The pipeline only talks to the contracts
("2-3 capitalized words", "contains a role keyword"); swapping the profile
swaps the concrete tables.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any

from orgchart.classify.levels import LevelRule, LevelScorer, rule

# Column roles recognized in tabular input
COLUMN_ROLES = ("code", "department", "title", "name", "responsibilities", "email")


@dataclass
class LanguageProfile:
    """Pattern tables for one natural language.

    Args:
        name: Profile identifier used in configuration.
        upper: Regex character-class body for capital letters.
        lower: Regex character-class body for lower-case letters.
        position_keywords: Role vocabulary, matched as lower-case substrings.
        department_keywords: Unit vocabulary, matched as upper-case substrings.
        vacancy_names: Name cell values that mean "nobody holds this role".
        vacancy_fragments: Title substrings that mark a vacancy.
        level_rules: Ordered title rules; first match wins.
        column_aliases: Header fragments per column role.
        not_specified: Placeholder name for unnamed records.
        vacancy_label: Label shown instead of a name for vacancies.
        root_label: Label of the synthetic organization root.
        department_label: Title given to department grouping nodes.
        unit_keyword_first: True when unit names open with the unit word
            ("Отдел продаж"), False when they close with it ("Sales Department").
        collation: Character substitutions applied to sort keys.
        description: Human-readable description.
    """

    name: str
    upper: str
    lower: str
    position_keywords: tuple[str, ...]
    department_keywords: tuple[str, ...]
    vacancy_names: tuple[str, ...]
    vacancy_fragments: tuple[str, ...]
    level_rules: list[LevelRule]
    column_aliases: dict[str, tuple[str, ...]]
    not_specified: str
    vacancy_label: str
    root_label: str
    department_label: str
    placeholder_dashes: tuple[str, ...] = ("-", "–", "—")
    name_word_counts: tuple[int, ...] = (2, 3)  # Preferred name lengths, in order
    unit_keyword_first: bool = False
    collation: dict[str, str] = field(default_factory=dict)
    description: str = ""

    def __post_init__(self) -> None:
        word = f"[{self.upper}][{self.lower}]+"
        self.person_name_re = re.compile(rf"^{word}(?:\s+{word}){{1,2}}$")
        # "titleName" glued together by slide text-run extraction
        self.glued_boundary_re = re.compile(rf"([{self.lower}])([{self.upper}])")
        self.scorer = LevelScorer(self.level_rules)

    @property
    def default_level(self) -> int:
        return self.scorer.default_level

    def collation_key(self, text: str) -> str:
        """Deterministic, case-insensitive sort key for names."""
        key = text.casefold()
        for src, dst in self.collation.items():
            key = key.replace(src, dst)
        return key

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "name": self.name,
            "position_keywords": list(self.position_keywords),
            "department_keywords": list(self.department_keywords),
            "vacancy_names": list(self.vacancy_names),
            "vacancy_fragments": list(self.vacancy_fragments),
            "level_rules": [r.to_dict() for r in self.level_rules],
            "default_level": self.default_level,
            "column_aliases": {k: list(v) for k, v in self.column_aliases.items()},
            "labels": {
                "not_specified": self.not_specified,
                "vacancy": self.vacancy_label,
                "root": self.root_label,
                "department": self.department_label,
            },
            "description": self.description,
        }


# -----------------------------------------------------------------
# English
# -----------------------------------------------------------------

_ENGLISH_LEVEL_RULES: list[LevelRule] = [
    rule(r"deputy (general director|chief executive|ceo|managing director|president)|vice[- ]president", 2,
         "Deputy of the top executive"),
    rule(r"general director|chief executive|\bceo\b|\bpresident\b|managing director", 1,
         "Top executive"),
    rule(r"chief \w+ officer|\bc[fiot]o\b", 2, "C-level officer"),
    rule(r"deputy head of (division|directorate)|deputy director of", 3,
         "Deputy head of a division"),
    rule(r"head of (division|directorate)|director of|department director", 2,
         "Head of a division"),
    rule(r"deputy head of (department|unit)", 4, "Deputy head of a department"),
    rule(r"head of (department|unit)", 3, "Head of a department"),
    rule(r"deputy (head|director)", 4, "Generic deputy"),
    rule(r"(project|program|programme|team|group) (lead|leader|manager)|head of (group|sector)", 4,
         "Team or project lead"),
    rule(r"\bhead\b|\bdirector\b", 3, "Generic head"),
    rule(r"\blead\b|\bchief\b|\bprincipal\b", 5, "Lead or chief specialist"),
    rule(r"\bleading\b", 6, "Leading specialist"),
    rule(r"\bsenior\b", 7, "Senior specialist"),
    rule(r"specialist|manager|engineer|analyst|coordinator|consultant", 8, "Specialist"),
]

ENGLISH_PROFILE = LanguageProfile(
    name="english",
    upper="A-Z",
    lower="a-z",
    position_keywords=(
        "head", "deputy", "lead", "director", "manager", "specialist",
        "coordinator", "analyst", "consultant", "chief", "senior",
        "engineer", "officer", "president", "supervisor", "administrator",
        "accountant", "principal", "executive", "ceo", "cfo",
    ),
    department_keywords=(
        "DEPARTMENT", "DIVISION", "DIRECTORATE", "SERVICE", "GROUP",
        "SECTOR", "UNIT",
    ),
    vacancy_names=("vacancy", "vacant", "open", "tbd", "hiring", "needed"),
    vacancy_fragments=("vacan", "open position", "to be hired", "tbd"),
    level_rules=_ENGLISH_LEVEL_RULES,
    column_aliases={
        "code": ("subordination", "code", "№", "#"),
        "department": ("department", "division", "unit", "structure"),
        "title": ("title", "position", "role", "job"),
        "name": ("full name", "name", "employee", "person"),
        "responsibilities": ("responsibilit", "functional", "duties", "description", "function"),
        "email": ("email", "e-mail"),
    },
    not_specified="Not specified",
    vacancy_label="VACANCY",
    root_label="Organization",
    department_label="Department",
    description="English titles and Latin-script names",
)

# -----------------------------------------------------------------
# Russian
# -----------------------------------------------------------------

_RUSSIAN_LEVEL_RULES: list[LevelRule] = [
    rule(r"заместитель.*(генерального|президента)|вице-президент", 2, "Заместитель генерального"),
    rule(r"генеральный|президент", 1, "Генеральный директор"),
    rule(r"начальник управления|директор департамента", 2, "Начальник управления"),
    rule(r"заместитель начальника управления", 3, "Заместитель начальника управления"),
    rule(r"начальник отдела", 3, "Начальник отдела"),
    rule(r"заместитель начальника отдела", 4, "Заместитель начальника отдела"),
    rule(r"руководитель проект|руководитель направления|руководитель группы", 4,
         "Руководитель проектов"),
    rule(r"руководитель|главный", 5, "Руководитель, главный специалист"),
    rule(r"ведущий", 6, "Ведущий специалист"),
    rule(r"старший", 7, "Старший специалист"),
    rule(r"специалист|менеджер|инженер|аналитик", 8, "Специалист"),
]

RUSSIAN_PROFILE = LanguageProfile(
    name="russian",
    upper="А-ЯЁ",
    lower="а-яё",
    position_keywords=(
        "начальник", "заместитель", "руководитель", "директор", "менеджер",
        "специалист", "ведущий", "главный", "старший", "инженер",
        "аналитик", "консультант", "координатор", "администратор",
        "бухгалтер", "юрист", "экономист",
    ),
    department_keywords=(
        "ОТДЕЛ", "УПРАВЛЕНИЕ", "ДЕПАРТАМЕНТ", "НАПРАВЛЕНИЕ", "БЛОК", "СЛУЖБА",
    ),
    vacancy_names=("вакансия", "потребность", "требуется"),
    vacancy_fragments=("вакан", "потребност", "требуется"),
    level_rules=_RUSSIAN_LEVEL_RULES,
    column_aliases={
        "code": ("подчиненность", "код", "№", "subordination"),
        "department": ("подразделение", "отдел", "структура", "department"),
        "title": ("должность", "роль", "position", "title"),
        "name": ("фио", "ф.и.о", "сотрудник", "фамилия", "name"),
        "responsibilities": ("функционал", "обязанности", "функции", "описание"),
        "email": ("email", "почта"),
    },
    not_specified="Не указано",
    vacancy_label="ВАКАНСИЯ",
    root_label="Организация",
    department_label="Подразделение",
    name_word_counts=(3, 2),
    unit_keyword_first=True,
    collation={"ё": "е"},
    description="Russian titles and Cyrillic full names (surname, name, patronymic)",
)


class ProfileRegistry:
    """Registry of language profiles by name.

    Comes pre-loaded with the English and Russian profiles. Custom
    profiles can be registered at runtime.

    Example::

        registry = ProfileRegistry()
        profile = registry.get("russian")
    """

    DEFAULT = "english"

    def __init__(self) -> None:
        self._profiles: dict[str, LanguageProfile] = {}
        for profile in (ENGLISH_PROFILE, RUSSIAN_PROFILE):
            self._profiles[profile.name] = profile

    def get(self, name: str | None = None) -> LanguageProfile:
        """Get a profile by name.

        Raises:
            ValueError: If no profile with that name is registered.
        """
        key = (name or self.DEFAULT).lower()
        profile = self._profiles.get(key)
        if profile is None:
            available = ", ".join(self.available())
            raise ValueError(f"Unknown language profile: {name}. Available: {available}")
        return profile

    def register(self, profile: LanguageProfile) -> None:
        """Register a profile, replacing any with the same name."""
        self._profiles[profile.name.lower()] = profile

    def available(self) -> list[str]:
        return list(self._profiles.keys())


_registry = ProfileRegistry()


def get_profile(name: str | None = None) -> LanguageProfile:
    """Look up a profile in the shared registry."""
    return _registry.get(name)


def register_profile(profile: LanguageProfile) -> None:
    """Add a profile to the shared registry."""
    _registry.register(profile)
