"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps messages testable and documents every error case in one place.
    """

    @staticmethod
    def locale_not_found(locale_code: str, tried: tuple[str, ...]) -> Diagnostic:
        """No loader could resolve a locale code.

        Args:
            locale_code: The code requested by the caller
            tried: Normalized codes attempted, most specific first

        Returns:
            Diagnostic for LOCALE_NOT_FOUND
        """
        msg = f"Locale '{locale_code}' not found"
        hint = f"Tried: {', '.join(tried)}" if tried else "Locale code is empty"
        return Diagnostic(
            code=DiagnosticCode.LOCALE_NOT_FOUND,
            message=msg,
            hint=hint,
            locale_code=locale_code,
        )

    @staticmethod
    def locale_data_invalid(field: str, reason: str) -> Diagnostic:
        """Locale data mapping is missing a field or has the wrong type.

        Args:
            field: Mapping key that failed
            reason: What was wrong with it

        Returns:
            Diagnostic for LOCALE_DATA_INVALID
        """
        msg = f"Invalid locale data for '{field}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.LOCALE_DATA_INVALID,
            message=msg,
            hint="Locale files need ShortDays, Days, ShortMonths, Months, AMPM, "
            "Numbers, DateTime, Date, Time and TimeAMPM",
        )

    @staticmethod
    def locale_path_invalid(locale_code: str, reason: str) -> Diagnostic:
        """Locale code cannot be used to build a file path.

        Args:
            locale_code: The rejected code
            reason: Why it was rejected

        Returns:
            Diagnostic for LOCALE_PATH_INVALID
        """
        msg = f"Locale code '{locale_code}' rejected: {reason}"
        return Diagnostic(
            code=DiagnosticCode.LOCALE_PATH_INVALID,
            message=msg,
            hint="Use a BCP-47 or POSIX locale code such as 'en-US' or 'ar_EG'",
            locale_code=locale_code,
        )

    @staticmethod
    def invalid_number(value: str) -> Diagnostic:
        """Value is not an integer or a string of decimal digits.

        Args:
            value: repr-safe text of the rejected input

        Returns:
            Diagnostic for INVALID_NUMBER
        """
        msg = f"Invalid number '{value}'"
        return Diagnostic(
            code=DiagnosticCode.INVALID_NUMBER,
            message=msg,
            hint="Pass an integer or a string of decimal digits",
        )

    @staticmethod
    def invalid_digit(value: str) -> Diagnostic:
        """Value is not a single decimal digit character.

        Args:
            value: The rejected input

        Returns:
            Diagnostic for INVALID_DIGIT
        """
        msg = f"Invalid digit character '{value}'"
        return Diagnostic(
            code=DiagnosticCode.INVALID_DIGIT,
            message=msg,
            hint="Pass exactly one decimal digit character (any script)",
        )

    @staticmethod
    def expansion_depth_exceeded(max_depth: int) -> Diagnostic:
        """Composite directive nesting exceeded the limit.

        Args:
            max_depth: Maximum allowed nesting

        Returns:
            Diagnostic for MAX_DEPTH_EXCEEDED
        """
        msg = f"Maximum composite expansion depth ({max_depth}) exceeded"
        return Diagnostic(
            code=DiagnosticCode.MAX_DEPTH_EXCEEDED,
            message=msg,
            hint="Check for locale templates that reference themselves (e.g. Date='%x')",
        )
