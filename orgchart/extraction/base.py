"""
Base extractor class and registry.

Every input modality has one extractor that turns its records (rows, lines
or slides) into Employee objects. Extractors register themselves with the
ExtractorRegistry under the modality they handle.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any, ClassVar

from orgchart.classify.entities import EntityClassifier
from orgchart.classify.profiles import LanguageProfile, get_profile
from orgchart.core.config import ParserConfig
from orgchart.core.models import Employee, Modality

logger = logging.getLogger(__name__)


class BaseExtractor(ABC):
    """
    Abstract base class for employee extractors.

    Extractors never raise on missing fields: absent data degrades to
    defaults, and anything worth mentioning goes to ``warnings``.
    """

    MODALITY: ClassVar[Modality]
    EXTRACTOR_NAME: ClassVar[str] = "base"

    def __init__(
        self,
        profile: LanguageProfile | None = None,
        config: ParserConfig | None = None,
    ) -> None:
        self.config = config or ParserConfig()
        self.profile = profile or get_profile(self.config.language)
        self.classifier = EntityClassifier(self.profile)
        self._warnings: list[str] = []

    @abstractmethod
    def extract(self, records: Sequence[Any]) -> list[Employee]:
        """
        Extract employees from modality-specific records.

        Args:
            records: Rows of cells for tables, lines for free text.

        Returns:
            Employees in document order.
        """
        pass

    @property
    def warnings(self) -> list[str]:
        """Warnings recorded during the last extraction."""
        return self._warnings

    def _add_warning(self, warning: str) -> None:
        self._warnings.append(warning)

    def _reset_messages(self) -> None:
        self._warnings = []

    def _make_employee(
        self,
        name: str | None,
        title: str | None = "",
        department: str | None = "",
        parent_code: str | None = None,
        level: int | None = None,
        responsibilities: str | list[str] | None = None,
        email: str | None = None,
    ) -> Employee:
        """Build an Employee, resolving vacancies and placeholders.

        A record is a vacancy when its name cell holds a vacancy keyword,
        when the name is missing but a title is present, or when the title
        mentions a vacancy and the name is not a person. A record with
        neither name nor title gets the "not specified" placeholder.
        """
        name = " ".join((name or "").split())
        title = " ".join((title or "").split())
        department = " ".join((department or "").split())
        classifier = self.classifier

        name_missing = not name or name in self.profile.placeholder_dashes
        is_vacancy = (
            classifier.is_vacancy_name(name)
            or (name_missing and bool(title))
            or (classifier.mentions_vacancy(title) and not classifier.is_person_name(name))
        )
        if is_vacancy:
            name = self.profile.vacancy_label
        elif name_missing:
            name = self.profile.not_specified

        if isinstance(responsibilities, str):
            duties = classifier.split_responsibilities(
                responsibilities, self.config.min_responsibility_length
            )
        else:
            duties = [d.strip() for d in responsibilities or [] if d and d.strip()]

        return Employee(
            name=name,
            title=title,
            department=department,
            parent_code=parent_code,
            level=level if level is not None else self.profile.scorer.score(title),
            responsibilities=duties,
            is_vacancy=is_vacancy,
            email=email,
            vacancy_label=self.profile.vacancy_label,
        )


class ExtractorRegistry:
    """Registry of extractors keyed by input modality."""

    _extractors: ClassVar[dict[Modality, type[BaseExtractor]]] = {}

    @classmethod
    def register(cls, extractor_class: type[BaseExtractor]) -> type[BaseExtractor]:
        """
        Register an extractor class. Can be used as a decorator.

        @ExtractorRegistry.register
        class MyExtractor(BaseExtractor):
            MODALITY = Modality.FLAT_TEXT
        """
        cls._extractors[extractor_class.MODALITY] = extractor_class
        return extractor_class

    @classmethod
    def get_extractor(
        cls,
        modality: Modality | str,
        profile: LanguageProfile | None = None,
        config: ParserConfig | None = None,
    ) -> BaseExtractor:
        """Instantiate the extractor for a modality.

        Raises:
            ValueError: If no extractor handles the modality.
        """
        try:
            key = Modality(modality)
        except ValueError:
            key = None
        extractor_class = cls._extractors.get(key) if key is not None else None
        if extractor_class is None:
            available = ", ".join(cls.available_modalities())
            raise ValueError(f"Unknown modality: {modality}. Available: {available}")
        logger.debug("Using %s for %s", extractor_class.__name__, key.value)
        return extractor_class(profile=profile, config=config)

    @classmethod
    def available_modalities(cls) -> list[str]:
        """Get list of registered modality names."""
        return [m.value for m in cls._extractors]
