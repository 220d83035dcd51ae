"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from collections.abc import Sequence

from .codes import Diagnostic, DiagnosticCode, SourceSpan

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    Call sites build a Diagnostic through one of these factories and pass it
    to the exception, which keeps messages consistent and testable.
    """

    @staticmethod
    def escape_unterminated(pattern: str, offset: int, close: str) -> Diagnostic:
        """Escape start delimiter never closed.

        Args:
            pattern: Pattern being tokenized
            offset: Offset of the opening delimiter
            close: Expected closing delimiter

        Returns:
            Diagnostic for ESCAPE_UNTERMINATED
        """
        opener = pattern[offset] if offset < len(pattern) else ""
        msg = f"Escape '{opener}' at offset {offset} is never closed"
        return Diagnostic(
            code=DiagnosticCode.ESCAPE_UNTERMINATED,
            message=msg,
            span=SourceSpan(start=offset, end=len(pattern)),
            pattern=pattern,
            hint=f"Close the escape with '{close}' or remove the '{opener}'",
        )

    @staticmethod
    def pattern_not_string(type_name: str) -> Diagnostic:
        """Pattern argument is not a str.

        Args:
            type_name: Name of the received type

        Returns:
            Diagnostic for PATTERN_NOT_STRING
        """
        msg = f"Format pattern must be str, got {type_name}"
        return Diagnostic(
            code=DiagnosticCode.PATTERN_NOT_STRING,
            message=msg,
            hint="Pass the pattern as text, e.g. 'YYYY-MM-DD'",
        )

    @staticmethod
    def directive_unsupported(
        directive: str, offset: int, pattern: str | None = None
    ) -> Diagnostic:
        """Directive recognized by the vocabulary but not implemented.

        Args:
            directive: Directive string
            offset: Start offset of the directive in the pattern
            pattern: Pattern text, when known

        Returns:
            Diagnostic for DIRECTIVE_UNSUPPORTED
        """
        msg = f"Directive '{directive}' at offset {offset} is not supported yet"
        return Diagnostic(
            code=DiagnosticCode.DIRECTIVE_UNSUPPORTED,
            message=msg,
            span=SourceSpan(start=offset, end=offset + len(directive)),
            pattern=pattern,
            directive=directive,
            hint="Remove the directive, or escape it if the vocabulary supports escapes",
        )

    @staticmethod
    def formatting_failed(what: str, locale_code: str, reason: str) -> Diagnostic:
        """Locale data lookup or conversion failed.

        Args:
            what: Description of the value being rendered (e.g. "month name 13")
            locale_code: Locale in effect
            reason: Underlying error text

        Returns:
            Diagnostic for FORMATTING_FAILED
        """
        msg = f"Formatting {what} failed for locale '{locale_code}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.FORMATTING_FAILED,
            message=msg,
            locale_code=locale_code,
        )

    @staticmethod
    def ordinal_suffix_unavailable(number: int, category: str, locale_code: str) -> Diagnostic:
        """No ordinal suffix for the selected CLDR category.

        Args:
            number: Number being made ordinal
            category: CLDR ordinal category returned by Babel
            locale_code: Locale in effect

        Returns:
            Diagnostic for ORDINAL_SUFFIX_UNAVAILABLE
        """
        msg = f"Unable to get ordinal suffix for {number} (category '{category}')"
        return Diagnostic(
            code=DiagnosticCode.ORDINAL_SUFFIX_UNAVAILABLE,
            message=msg,
            locale_code=locale_code,
            hint="Ordinal suffixes cover the one/two/few/other categories only",
        )

    @staticmethod
    def vocabulary_unknown(name: str, available: Sequence[str]) -> Diagnostic:
        """Vocabulary not registered.

        Args:
            name: Requested vocabulary name
            available: Registered vocabulary names

        Returns:
            Diagnostic for VOCABULARY_UNKNOWN
        """
        msg = f"Token vocabulary '{name}' does not exist"
        return Diagnostic(
            code=DiagnosticCode.VOCABULARY_UNKNOWN,
            message=msg,
            hint=f"Use one of: {', '.join(available)}" if available else None,
        )

    @staticmethod
    def locale_unknown(locale_code: str, reason: str) -> Diagnostic:
        """Locale not present in CLDR data.

        Args:
            locale_code: Requested locale identifier
            reason: Babel error text

        Returns:
            Diagnostic for LOCALE_UNKNOWN
        """
        msg = f"Unknown locale identifier '{locale_code}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.LOCALE_UNKNOWN,
            message=msg,
            locale_code=locale_code,
            hint="Use a BCP-47 or POSIX identifier such as 'en-US' or 'de_DE'",
        )

    @staticmethod
    def locale_invalid(locale_code: str, reason: str) -> Diagnostic:
        """Locale identifier malformed.

        Args:
            locale_code: Requested locale identifier
            reason: Parser error text

        Returns:
            Diagnostic for LOCALE_INVALID
        """
        msg = f"Invalid locale format '{locale_code}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.LOCALE_INVALID,
            message=msg,
            locale_code=locale_code,
        )

    @staticmethod
    def time_zone_unknown(time_zone: str, reason: str) -> Diagnostic:
        """IANA time zone not found.

        Args:
            time_zone: Requested zone key
            reason: zoneinfo error text

        Returns:
            Diagnostic for TIME_ZONE_UNKNOWN
        """
        msg = f"Unknown time zone '{time_zone}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.TIME_ZONE_UNKNOWN,
            message=msg,
            hint="Use an IANA key such as 'UTC' or 'Europe/Riga'",
        )

    @staticmethod
    def value_type_unsupported(type_name: str) -> Diagnostic:
        """Value cannot be converted to a date/time.

        Args:
            type_name: Name of the received type

        Returns:
            Diagnostic for VALUE_TYPE_UNSUPPORTED
        """
        msg = f"Don't know how to format a value of type {type_name}"
        return Diagnostic(
            code=DiagnosticCode.VALUE_TYPE_UNSUPPORTED,
            message=msg,
            hint="Pass a datetime, a date, or an epoch timestamp in seconds",
        )
