"""
Error handling for the complexpr lexer.

The lexer itself never raises while scanning: an unrecognized character or
unresolved identifier becomes an ERROR token whose value is the message
below, and the parser turns it into a ParseError. ``tokenize_string`` is the
one place that raises LexerError directly.
"""

from typing import Optional, List
from dataclasses import dataclass

from .tokens import SourceLocation


@dataclass
class Diagnostic:
    """A single error or warning with its source location."""
    message: str
    location: SourceLocation
    severity: str  # "error", "warning"
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None

    def __str__(self) -> str:
        result = f"{self.severity.upper()}: {self.message}\n"
        result += f"  --> {self.location}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        if self.suggestions:
            result += "  suggestions:\n"
            for suggestion in self.suggestions:
                result += f"    - {suggestion}\n"

        return result


class LexerError(Exception):
    """
    Exception raised for an ERROR token when tokenizing eagerly.
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="error",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )

    def __str__(self) -> str:
        return str(self.diagnostic)


def invalid_character_message(char: str) -> str:
    if char.isprintable():
        return f"Invalid character: '{char}'"
    return f"Invalid character: U+{ord(char):04X}"


def unknown_identifier_message(name: str) -> str:
    return f"Unknown identifier: '{name}'"


def suggest_names(name: str, candidates: List[str], limit: int = 3) -> List[str]:
    """Names within edit distance 2 of ``name``, closest first."""
    scored = [(_edit_distance(name, candidate), candidate) for candidate in candidates]
    return [candidate for distance, candidate in sorted(scored) if distance <= 2][:limit]


def _edit_distance(s1: str, s2: str) -> int:
    """Calculate Levenshtein distance between two strings."""
    if len(s1) < len(s2):
        return _edit_distance(s2, s1)

    if len(s2) == 0:
        return len(s1)

    previous_row = list(range(len(s2) + 1))
    for i, c1 in enumerate(s1):
        current_row = [i + 1]
        for j, c2 in enumerate(s2):
            insertions = previous_row[j + 1] + 1
            deletions = current_row[j] + 1
            substitutions = previous_row[j] + (c1 != c2)
            current_row.append(min(insertions, deletions, substitutions))
        previous_row = current_row

    return previous_row[-1]
