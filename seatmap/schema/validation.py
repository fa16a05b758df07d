"""
schema/validation.py - Seat layout validation schema v1.0

Validation results are plain return values, never exceptions: every rule
runs and every issue is reported in one pass.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

__all__ = [
    'ValidationCategory',
    'ValidationIssue',
    'ValidationResult',
]


class ValidationCategory:
    """Rule groups, in the order the validator runs them."""
    FLOORS = "floors"
    DIMENSIONS = "dimensions"
    DUPLICATES = "duplicates"
    SEAT_COUNT = "seat_count"
    SEAT_TOTAL = "seat_total"


# =============================================================================
# VALIDATION ISSUE
# =============================================================================

@dataclass
class ValidationIssue:
    """
    A single problem found in a layout.

    Attributes:
        issue_id: Stable identifier of the failed check
        category: Rule group (see ValidationCategory)
        message: Human-readable description, shown to operators as-is
        row: Affected row index, if the issue is row-specific
        labels: Offending seat labels, for duplicate findings
        positions: Grid positions involved, for duplicate findings
    """

    issue_id: str
    category: str
    message: str

    row: Optional[int] = None
    labels: List[str] = field(default_factory=list)
    positions: List[Tuple[int, int]] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "issue_id": self.issue_id,
            "category": self.category,
            "message": self.message,
            "row": self.row,
            "labels": list(self.labels),
            "positions": [list(p) for p in self.positions],
        }


# =============================================================================
# VALIDATION RESULT
# =============================================================================

@dataclass
class ValidationResult:
    """
    Outcome of validating one layout.

    ``errors`` lists issue messages in the order the checks ran;
    ``valid`` is True only when no issue was recorded.
    """

    issues: List[ValidationIssue] = field(default_factory=list)
    checked_rules: List[str] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not self.issues

    @property
    def errors(self) -> List[str]:
        return [i.message for i in self.issues]

    @property
    def error_count(self) -> int:
        return len(self.issues)

    def add_error(
        self,
        issue_id: str,
        category: str,
        message: str,
        **kwargs
    ) -> None:
        """Record an issue."""
        self.issues.append(ValidationIssue(
            issue_id=issue_id,
            category=category,
            message=message,
            **kwargs
        ))

    def get_issues_by_category(self, category: str) -> List[ValidationIssue]:
        return [i for i in self.issues if i.category == category]

    def merge(self, other: "ValidationResult") -> None:
        """Merge another result into this one."""
        self.issues.extend(other.issues)
        self.checked_rules.extend(other.checked_rules)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "valid": self.valid,
            "errors": self.errors,
            "issues": [i.to_dict() for i in self.issues],
            "checked_rules": list(self.checked_rules),
        }
