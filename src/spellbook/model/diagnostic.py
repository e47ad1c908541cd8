"""Diagnostic model: structured findings about a spell sheet."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Severity(Enum):
    """Severity level for a diagnostic message."""

    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"


@dataclass(frozen=True)
class Diagnostic:
    """A single finding about one line of a spell sheet.

    Attributes:
        rule: Identifier for the rule that produced this diagnostic.
        severity: How serious the issue is.
        message: Human-readable description of the problem.
        line: 1-based line number in the sheet, if applicable.
        spell: The spell text involved, if applicable.
    """

    rule: str
    severity: Severity
    message: str
    line: int | None = None
    spell: str | None = None

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    @property
    def is_warning(self) -> bool:
        return self.severity is Severity.WARNING

    def to_dict(self) -> dict[str, object]:
        return {
            "rule": self.rule,
            "severity": self.severity.value,
            "message": self.message,
            "line": self.line,
            "spell": self.spell,
        }

    def __str__(self) -> str:
        location = f" [line {self.line}]" if self.line is not None else ""
        return f"{self.severity.value}{location}: {self.message}"
