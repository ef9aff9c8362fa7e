"""
Pytest configuration and fixtures for orgchart tests.
"""

import pytest

from orgchart.classify.entities import EntityClassifier
from orgchart.classify.profiles import ENGLISH_PROFILE, RUSSIAN_PROFILE, LanguageProfile
from orgchart.core.config import ParserConfig


@pytest.fixture
def english() -> LanguageProfile:
    return ENGLISH_PROFILE


@pytest.fixture
def russian() -> LanguageProfile:
    return RUSSIAN_PROFILE


@pytest.fixture
def classifier() -> EntityClassifier:
    return EntityClassifier(ENGLISH_PROFILE)


@pytest.fixture
def russian_classifier() -> EntityClassifier:
    return EntityClassifier(RUSSIAN_PROFILE)


@pytest.fixture
def config() -> ParserConfig:
    return ParserConfig()


@pytest.fixture
def coded_csv() -> str:
    """Staff list with subordination codes and one vacancy."""
    return (
        "Subordination,Department,Title,Full name,Functional description\n"
        "1,Management,Chief Executive Officer,Jane Doe,Strategy; Board relations\n"
        "1.1,Sales Department,Head of Sales,John Smith,Revenue plan\n"
        "1.1.1,Sales Department,Senior Account Manager,Ann Lee,Key accounts\n"
        "1.2,Engineering Department,Head of Engineering,,Platform roadmap\n"
        '1.2.1,Engineering Department,Software Engineer,Peter Brown,"Backend services, APIs"\n'
    )


@pytest.fixture
def uncoded_csv() -> str:
    return (
        "Department,Title,Name\n"
        "Sales,Head of Sales,John Smith\n"
        "Sales,Sales Manager,Ann Lee\n"
        "Management,Chief Executive Officer,Jane Doe\n"
    )


@pytest.fixture
def outline_text() -> str:
    """Indented outline, two spaces per level."""
    return (
        "Jane Doe - Chief Executive Officer\n"
        "  John Smith - Head of Sales: pipeline; forecasting\n"
        "    Ann Lee - Senior Account Manager\n"
        "  Peter Brown - Head of Engineering\n"
        "    - owns the platform roadmap\n"
    )


@pytest.fixture
def flat_lines() -> list[str]:
    """Text runs of a single slide."""
    return [
        "SALES DEPARTMENT",
        "Head of Sales",
        "John Smith",
        "Senior Account Manager Ann Lee",
        "Vacancy",
        "Junior Analyst",
    ]
