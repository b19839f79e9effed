"""lctime exception hierarchy with structured diagnostics.

Exceptions only arise at the boundary: resolving locale codes, reading
locale data, and the numeral adapters. The formatting path itself is total.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class LctimeError(Exception):
    """Base exception for all lctime errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize LctimeError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class LocaleNotFoundError(LctimeError):
    """No loader could resolve a locale code to a LocaleRecord.

    Attributes:
        locale_code: The code requested by the caller
        tried: Normalized codes attempted, most specific first
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        locale_code: str = "",
        tried: tuple[str, ...] = (),
    ) -> None:
        """Initialize LocaleNotFoundError.

        Args:
            message: Error message string OR Diagnostic object
            locale_code: The code requested by the caller
            tried: Normalized codes attempted, most specific first
        """
        super().__init__(message)
        self.locale_code = locale_code
        self.tried = tried


class LocaleDataError(LctimeError):
    """Locale data mapping cannot be turned into a LocaleRecord.

    Raised for missing keys and wrongly typed values. Array lengths are
    not checked.
    """


class InvalidNumberError(LctimeError):
    """Numeral adapter received non-numeric input.

    Attributes:
        input_value: The value that failed to convert
    """

    def __init__(self, message: str | Diagnostic, *, input_value: object = None) -> None:
        """Initialize InvalidNumberError.

        Args:
            message: Error message string OR Diagnostic object
            input_value: The value that failed to convert
        """
        super().__init__(message)
        self.input_value = input_value
