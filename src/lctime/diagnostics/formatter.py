"""Diagnostic formatting service.

Renders diagnostics in compiler style for Diagnostic.format_error().
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass

from .codes import Diagnostic

__all__ = ["DiagnosticFormatter"]


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Compiler-style diagnostic formatter.

    Example:
        >>> formatter = DiagnosticFormatter()
        >>> diagnostic = ErrorTemplate.invalid_number("abc")
        >>> print(formatter.format(diagnostic))
        error[INVALID_NUMBER]: Invalid number 'abc'
          = help: Pass an integer or a string of decimal digits
    """

    def format(self, diagnostic: Diagnostic) -> str:
        """Format a single diagnostic.

        Args:
            diagnostic: Diagnostic to format

        Returns:
            Header line, then optional locale and help lines
        """
        message = self._escape(diagnostic.message)
        parts = [f"{diagnostic.severity}[{diagnostic.code.name}]: {message}"]

        if diagnostic.locale_code:
            parts.append(f"  --> locale {self._escape(diagnostic.locale_code)}")

        if diagnostic.hint:
            parts.append(f"  = help: {self._escape(diagnostic.hint)}")

        return "\n".join(parts)

    @staticmethod
    def _escape(text: str) -> str:
        """Escape control characters so user input cannot forge log lines."""
        return text.replace("\r", "\\r").replace("\n", "\\n").replace("\t", "\\t")
