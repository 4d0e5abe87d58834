# asyncontract/core/diagnostics.py
"""
Diagnostics collected alongside pipeline results.

Conditions that do not stop a pipeline (unmatched patterns, conflicting
classifications, unreadable reference modules, placeholder types) are
recorded here so callers decide how loudly to report them.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List


class Severity(Enum):
    INFO = "info"
    WARNING = "warning"


@dataclass(frozen=True, slots=True)
class Diagnostic:
    severity: Severity
    code: str
    message: str
    subject: str = ""

    @classmethod
    def warning(cls, code: str, message: str, subject: str = "") -> "Diagnostic":
        return cls(Severity.WARNING, code, message, subject)

    @classmethod
    def info(cls, code: str, message: str, subject: str = "") -> "Diagnostic":
        return cls(Severity.INFO, code, message, subject)

    def __str__(self) -> str:
        prefix = f"{self.severity.value}[{self.code}]"
        return f"{prefix} {self.subject}: {self.message}" if self.subject else f"{prefix} {self.message}"


def warnings_in(diagnostics: Iterable[Diagnostic]) -> List[Diagnostic]:
    """Drop informational entries."""
    return [d for d in diagnostics if d.severity is not Severity.INFO]


# Diagnostic codes
UNMATCHED_PATTERN = "unmatched-pattern"
CLASSIFICATION_CONFLICT = "classification-conflict"
UNRESOLVED_REFERENCE = "unresolved-reference"
MODULE_LOAD_FAILED = "module-load-failed"
PLACEHOLDER_TYPE = "placeholder-type"

__all__ = [
    "Severity",
    "Diagnostic",
    "warnings_in",
    "UNMATCHED_PATTERN",
    "CLASSIFICATION_CONFLICT",
    "UNRESOLVED_REFERENCE",
    "MODULE_LOAD_FAILED",
    "PLACEHOLDER_TYPE",
]
