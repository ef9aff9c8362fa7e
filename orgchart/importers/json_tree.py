"""
Import of user-supplied JSON trees.

Users can paste or upload a structure they have edited by hand:

    {
      "name": "Jane Doe",
      "position": "Chief Executive Officer",
      "children": [
        {"name": "Sales", "isDepartment": true, "children": [...]}
      ]
    }

Documents are validated with pydantic before being turned into OrgNodes.
Both the camelCase keys of the diagram front-end ("isDepartment",
"position") and the snake_case keys of the JSON exporter are accepted, and
the exporter's envelope ({"root": {...}}) is unwrapped.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError, field_validator

from orgchart.classify.profiles import LanguageProfile, get_profile
from orgchart.core.errors import StructureImportError
from orgchart.core.models import IdSequence
from orgchart.hierarchy.tree import OrgNode

logger = logging.getLogger(__name__)


class NodeModel(BaseModel):
    """Validated shape of one tree node."""

    model_config = ConfigDict(extra="ignore")

    name: str = ""
    title: str = Field(default="", validation_alias=AliasChoices("title", "position"))
    department: str = ""
    email: str | None = None
    responsibilities: list[str] = Field(default_factory=list)
    is_department: bool = Field(
        default=False, validation_alias=AliasChoices("isDepartment", "is_department")
    )
    is_vacancy: bool = Field(
        default=False, validation_alias=AliasChoices("isVacancy", "is_vacancy")
    )
    level: int | None = Field(default=None, ge=1)
    code: str | None = None
    children: list[NodeModel] = Field(default_factory=list)

    @field_validator("name", "title", "department", mode="before")
    @classmethod
    def _none_to_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("responsibilities", mode="before")
    @classmethod
    def _split_responsibilities(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, str):
            return [part.strip() for part in value.split(";") if part.strip()]
        return value

    @field_validator("code", mode="before")
    @classmethod
    def _code_to_str(cls, value: Any) -> Any:
        if isinstance(value, (int, float)):
            return str(value)
        return value


class JsonTreeImporter:
    """
    Converts validated JSON trees to OrgNodes.

    Missing levels are scored from the title; department nodes and a node
    labelled like the organization root keep no level.

    Args:
        profile: Language profile used for level scoring and root label.
    """

    def __init__(self, profile: LanguageProfile | None = None) -> None:
        self.profile = profile or get_profile()

    def load(self, data: dict[str, Any] | str) -> OrgNode:
        """Import a tree from a JSON string or an already-decoded dict.

        Raises:
            StructureImportError: If the document is not valid JSON or does
                not describe a tree.
        """
        if isinstance(data, str):
            try:
                data = json.loads(data)
            except json.JSONDecodeError as e:
                raise StructureImportError("Document is not valid JSON", details=str(e)) from e

        if isinstance(data, dict) and isinstance(data.get("root"), dict):
            data = data["root"]
        if not isinstance(data, dict):
            raise StructureImportError(
                "Structure must be a JSON object",
                details=f"Got {type(data).__name__}",
            )

        try:
            model = NodeModel.model_validate(data)
        except ValidationError as e:
            raise StructureImportError("Invalid organization structure", details=str(e)) from e

        ids = IdSequence()
        root = self._to_node(model, ids)
        logger.info("Imported structure with %s nodes", root.descendant_count + 1)
        return root

    def _to_node(self, model: NodeModel, ids: IdSequence) -> OrgNode:
        level = model.level
        synthetic = model.name == self.profile.root_label and not model.title
        if level is None and not model.is_department and not synthetic:
            level = self.profile.scorer.score(model.title)

        node = OrgNode(
            id=ids.next("dept" if model.is_department else "emp"),
            name=model.name,
            title=model.title,
            department=model.department,
            email=model.email,
            responsibilities=list(model.responsibilities),
            is_department=model.is_department,
            is_vacancy=model.is_vacancy,
            level=level,
            code=model.code,
        )
        for child in model.children:
            node.add_child(self._to_node(child, ids))
        return node


def import_json_tree(data: dict[str, Any] | str, profile: LanguageProfile | None = None) -> OrgNode:
    """Import a JSON tree with the given (or default) language profile."""
    return JsonTreeImporter(profile).load(data)
