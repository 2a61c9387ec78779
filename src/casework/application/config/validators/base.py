"""Result types shared by the design checks.

Every check appends findings to a ``ValidationResult`` at one of three
levels: errors (the cabinet cannot be built as drawn), warnings (it can be
built but something is off) and suggestions (standard sizes and similar
tweaks).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class ValidationError:
    """A finding that blocks building the design, such as overlapping drawers.

    Attributes:
        path: Location in the project file, e.g. ``cabinets[0].drawers[1]``.
        message: What is wrong, in shop terms.
        value: The offending value, when there is a single one.
    """

    path: str
    message: str
    value: Any = None


@dataclass
class ValidationWarning:
    """A buildable but questionable choice, with an optional fix."""

    path: str
    message: str
    suggestion: str | None = None


@dataclass
class ValidationSuggestion:
    """An optional improvement, such as moving to a standard size."""

    path: str
    message: str


@dataclass
class ValidationResult:
    """Findings of one validation run, grouped by level."""

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)
    suggestions: list[ValidationSuggestion] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def exit_code(self) -> int:
        """Process exit status for the CLI.

        1 when any error was found, 2 when only warnings were found and 0
        otherwise. Suggestions never change the status.
        """
        if self.errors:
            return 1
        return 2 if self.warnings else 0

    def add_error(self, path: str, message: str, value: Any = None) -> ValidationResult:
        self.errors.append(ValidationError(path, message, value))
        return self

    def add_warning(
        self, path: str, message: str, suggestion: str | None = None
    ) -> ValidationResult:
        self.warnings.append(ValidationWarning(path, message, suggestion))
        return self

    def add_suggestion(self, path: str, message: str) -> ValidationResult:
        """Record a suggestion once; repeats of the same one are ignored."""
        suggestion = ValidationSuggestion(path, message)
        if suggestion not in self.suggestions:
            self.suggestions.append(suggestion)
        return self

    def merge(self, other: ValidationResult) -> ValidationResult:
        """Append another run's findings to this one."""
        self.errors += other.errors
        self.warnings += other.warnings
        self.suggestions += other.suggestions
        return self
