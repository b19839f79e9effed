"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Locale resolution errors (unknown codes, malformed data)
        2000-2999: Numeric input errors (ancillary numeral adapters)
        3000-3999: Formatting errors (composite expansion)
    """

    # Locale resolution errors (1000-1999)
    LOCALE_NOT_FOUND = 1001
    LOCALE_DATA_INVALID = 1002
    LOCALE_PATH_INVALID = 1003

    # Numeric input errors (2000-2999)
    INVALID_NUMBER = 2001
    INVALID_DIGIT = 2002

    # Formatting errors (3000-3999)
    MAX_DEPTH_EXCEEDED = 3001


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        locale_code: Locale involved in the failure, when there is one
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    locale_code: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like a compiler error.

        Example output:
            error[LOCALE_NOT_FOUND]: Locale 'xx_YY' not found
              --> locale xx_YY
              = help: Tried: xx_YY, xx

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
