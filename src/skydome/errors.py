"""Error handling utilities for sky-dome rendering."""

import sys
from typing import Optional


class SkyDomeError(Exception):
    """Base exception for skydome-specific errors."""

    def __init__(self, message: str, suggestions: Optional[list[str]] = None):
        """Initialize with message and optional suggestions.

        Args:
            message: Error description
            suggestions: Optional list of actionable suggestions
        """
        self.message = message
        self.suggestions = suggestions or []
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with suggestions."""
        formatted = f"{self.message}"
        if self.suggestions:
            formatted += "\n\nSuggestions:"
            for suggestion in self.suggestions:
                formatted += f"\n  - {suggestion}"
        return formatted


class TimeParseError(SkyDomeError):
    """Raised when an observation time cannot be parsed."""

    def __init__(self, value: str):
        message = f"Invalid time format: '{value}'"
        suggestions = [
            "Use ISO-8601 format, optionally with a 'Z' suffix (e.g., '2024-06-21T22:00:00Z')",
            "Omit --time to use the current time",
            "Presets: now, midnight, sunset, sunrise",
        ]
        super().__init__(message, suggestions)


class CoordinateError(SkyDomeError):
    """Raised when a latitude or longitude is missing or out of range."""

    def __init__(self, field: str, value: object, reason: str):
        message = f"Invalid {field} '{value}': {reason}"
        suggestions = [
            "Latitude must be between -90 and 90 degrees",
            "Longitude must be between -180 and 180 degrees",
            "Use --city to pick a known location instead",
        ]
        super().__init__(message, suggestions)


class CityNotFoundError(SkyDomeError):
    """Raised when a city name does not resolve to exactly one location."""

    def __init__(self, query: str, candidates: list[str]):
        message = f"Unknown city: '{query}'"
        if candidates:
            suggestions = [
                f"Did you mean: {', '.join(candidates)}",
                "Use the full name as listed by --search",
            ]
        else:
            suggestions = [
                "Run with --search <text> to list matching cities",
                "Pass --lat and --lon for a location that is not listed",
            ]
        super().__init__(message, suggestions)


def print_error(error: Exception) -> None:
    """Print error to stderr with formatted output.

    Args:
        error: Exception to print
    """
    print(f"Error: {error}", file=sys.stderr)

    if isinstance(error, SkyDomeError):
        if error.suggestions:
            print(file=sys.stderr)


def handle_error(error: Exception, context: Optional[str] = None) -> int:
    """Handle an error with optional context and return exit code.

    Args:
        error: Exception that occurred
        context: Optional description of what was being attempted

    Returns:
        Exit code (1 for error)
    """
    if context:
        print(f"Error while {context}:", file=sys.stderr)

    print_error(error)

    import traceback

    if not isinstance(error, SkyDomeError):
        traceback.print_exc()

    return 1
