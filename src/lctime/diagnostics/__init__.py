"""Diagnostic system for lctime errors.

Provides structured error diagnostics with codes and hints.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    InvalidNumberError,
    LctimeError,
    LocaleDataError,
    LocaleNotFoundError,
)
from .formatter import DiagnosticFormatter
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "InvalidNumberError",
    "LctimeError",
    "LocaleDataError",
    "LocaleNotFoundError",
]
