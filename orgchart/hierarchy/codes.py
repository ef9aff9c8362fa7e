"""
Subordination code helpers.

A subordination code is a dotted path such as "1.2.3": the employee's own
position in an explicitly coded hierarchy. Stripping the last segment names
the manager's position.
"""

from __future__ import annotations

import re

_CODE_RE = re.compile(r"^\d+(?:\.\d+)*$")


def normalize_code(raw: str | None) -> str | None:
    """Clean a code cell.

    Whitespace is removed and stray leading/trailing dots are dropped
    ("1.2." -> "1.2"). Returns None for empty cells. Malformed codes are
    returned cleaned but otherwise untouched; see CodeValidator.
    """
    if raw is None:
        return None
    code = "".join(str(raw).split()).strip(".")
    return code or None


def is_valid_code(code: str | None) -> bool:
    """True for dotted integer paths ("1", "1.2", "3.10.1")."""
    return bool(code) and _CODE_RE.match(code) is not None


def code_depth(code: str) -> int:
    """Number of segments ("1.2.3" -> 3)."""
    return code.count(".") + 1


def parent_code_of(code: str) -> str | None:
    """Code of the direct manager ("1.2.3" -> "1.2"), None at the top."""
    if "." not in code:
        return None
    return code.rsplit(".", 1)[0]


def ancestor_codes(code: str) -> list[str]:
    """All ancestor codes, nearest first ("1.2.3" -> ["1.2", "1"])."""
    ancestors = []
    current = parent_code_of(code)
    while current:
        ancestors.append(current)
        current = parent_code_of(current)
    return ancestors


class CodeValidator:
    """Validates subordination codes before assembly.

    Issues never stop assembly: duplicates become children of the first
    holder and orphans attach to the nearest registered ancestor.
    """

    @staticmethod
    def validate(codes: list[str | None]) -> list[dict[str, str]]:
        """Check codes for malformed values, duplicates and missing ancestors.

        Args:
            codes: Codes in document order; None entries are ignored.

        Returns:
            List of issue dictionaries with 'type' and 'message' keys.
        """
        issues: list[dict[str, str]] = []
        present = [c for c in codes if c]
        registered = set(present)

        seen: set[str] = set()
        for code in present:
            if not is_valid_code(code):
                issues.append({
                    "type": "malformed_code",
                    "message": f"Malformed subordination code: {code!r}",
                })
                seen.add(code)
                continue

            if code in seen:
                issues.append({
                    "type": "duplicate_code",
                    "message": f"Duplicate subordination code: {code}",
                })
                continue
            seen.add(code)

            parent = parent_code_of(code)
            if parent is not None and parent not in registered:
                issues.append({
                    "type": "missing_ancestor",
                    "message": f"Code {code} has no entry for its manager {parent}",
                })

        return issues
