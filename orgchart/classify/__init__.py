"""Line and cell classification: entities, context search, levels, profiles."""

from orgchart.classify.context import ContextMatch, find_in_context
from orgchart.classify.entities import (
    EntityClassifier,
    EntryParts,
    LineKind,
    is_department_name,
    is_person_name,
    is_position_title,
    is_vacancy_marker,
)
from orgchart.classify.levels import LevelRule, LevelScorer, score_level
from orgchart.classify.profiles import (
    ENGLISH_PROFILE,
    RUSSIAN_PROFILE,
    LanguageProfile,
    ProfileRegistry,
    get_profile,
    register_profile,
)

__all__ = [
    "ContextMatch",
    "ENGLISH_PROFILE",
    "EntityClassifier",
    "EntryParts",
    "LanguageProfile",
    "LevelRule",
    "LevelScorer",
    "LineKind",
    "ProfileRegistry",
    "RUSSIAN_PROFILE",
    "find_in_context",
    "get_profile",
    "is_department_name",
    "is_person_name",
    "is_position_title",
    "is_vacancy_marker",
    "register_profile",
    "score_level",
]
