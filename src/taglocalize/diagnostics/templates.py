"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This solves EM101/EM102 violations while providing:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    # Base documentation URL
    _DOCS_BASE = "https://angular.dev/guide/i18n"

    @staticmethod
    def translation_not_found(message_id: str, description: str) -> Diagnostic:
        """No catalog entry for a message id.

        Args:
            message_id: The message identifier that was looked up
            description: Human-readable message description (id, text, meaning)

        Returns:
            Diagnostic for TRANSLATION_NOT_FOUND
        """
        msg = f"No translation found for {description}."
        return Diagnostic(
            code=DiagnosticCode.TRANSLATION_NOT_FOUND,
            message=msg,
            hint="Add a translation for this message id to the loaded catalog",
            help_url=f"{ErrorTemplate._DOCS_BASE}/translation-files",
            message_id=message_id,
        )

    @staticmethod
    def placeholder_not_found(
        placeholder_name: str, message_id: str, description: str
    ) -> Diagnostic:
        """Translation references a placeholder the source message lacks.

        Args:
            placeholder_name: The name referenced by the translation
            message_id: The message identifier being translated
            description: Human-readable message description (id, text, meaning)

        Returns:
            Diagnostic for PLACEHOLDER_NOT_FOUND
        """
        msg = f"No placeholder found with name {placeholder_name} in message {description}."
        return Diagnostic(
            code=DiagnosticCode.PLACEHOLDER_NOT_FOUND,
            message=msg,
            hint="Re-extract the source messages and update the translation",
            help_url=f"{ErrorTemplate._DOCS_BASE}/translation-files",
            message_id=message_id,
            placeholder_name=placeholder_name,
        )

    @staticmethod
    def unterminated_block(part: str) -> Diagnostic:
        """Name or metadata block with no closing marker.

        Args:
            part: The offending static part

        Returns:
            Diagnostic for UNTERMINATED_BLOCK
        """
        msg = f'Unterminated name or metadata block in "{part}".'
        return Diagnostic(
            code=DiagnosticCode.UNTERMINATED_BLOCK,
            message=msg,
            hint="Close the block with ':' or escape a literal leading ':' as '\\:'",
            help_url=f"{ErrorTemplate._DOCS_BASE}/manage-marked-text",
        )

    @staticmethod
    def substitution_count_mismatch(part_count: int, substitution_count: int) -> Diagnostic:
        """Static parts and substitutions do not interleave.

        Args:
            part_count: Number of static parts
            substitution_count: Number of substitution values

        Returns:
            Diagnostic for SUBSTITUTION_COUNT_MISMATCH
        """
        msg = (
            f"Template has {part_count} static part(s) but {substitution_count} "
            f"substitution(s); expected {part_count - 1}"
        )
        return Diagnostic(
            code=DiagnosticCode.SUBSTITUTION_COUNT_MISMATCH,
            message=msg,
            hint="A template needs exactly one more static part than substitutions",
        )

    @staticmethod
    def catalog_format_unknown(format_name: str, known: tuple[str, ...]) -> Diagnostic:
        """Catalog format name not registered.

        Args:
            format_name: The requested format name
            known: Registered format names

        Returns:
            Diagnostic for CATALOG_FORMAT_UNKNOWN
        """
        msg = f"Unsupported translation file format '{format_name}'"
        return Diagnostic(
            code=DiagnosticCode.CATALOG_FORMAT_UNKNOWN,
            message=msg,
            hint=f"Use one of: {', '.join(known)}",
        )

    @staticmethod
    def catalog_no_parser(path: str) -> Diagnostic:
        """No registered parser accepts a catalog file.

        Args:
            path: Catalog file path

        Returns:
            Diagnostic for CATALOG_FORMAT_UNKNOWN
        """
        msg = f"There is no parser that can parse this translation file: {path}"
        return Diagnostic(
            code=DiagnosticCode.CATALOG_FORMAT_UNKNOWN,
            message=msg,
            hint="Pass an explicit format name or check the file contents",
            location=path,
        )

    @staticmethod
    def catalog_unparseable(path: str, reason: str) -> Diagnostic:
        """Catalog contents are not valid for the format.

        Args:
            path: Catalog file path
            reason: Underlying decoder error

        Returns:
            Diagnostic for CATALOG_UNPARSEABLE
        """
        msg = f"Unable to parse translation file {path}: {reason}"
        return Diagnostic(
            code=DiagnosticCode.CATALOG_UNPARSEABLE,
            message=msg,
            location=path,
        )

    @staticmethod
    def catalog_invalid_structure(path: str, detail: str) -> Diagnostic:
        """Catalog parses but has the wrong shape.

        Args:
            path: Catalog file path
            detail: What is wrong with the structure

        Returns:
            Diagnostic for CATALOG_INVALID_STRUCTURE
        """
        msg = f"Invalid translation file {path}: {detail}"
        return Diagnostic(
            code=DiagnosticCode.CATALOG_INVALID_STRUCTURE,
            message=msg,
            location=path,
        )

    @staticmethod
    def catalog_too_large(path: str, size: int, limit: int) -> Diagnostic:
        """Catalog exceeds the input size limit.

        Args:
            path: Catalog file path
            size: Actual size in characters
            limit: Maximum allowed size

        Returns:
            Diagnostic for CATALOG_TOO_LARGE
        """
        msg = f"Translation file {path} is {size} characters; limit is {limit}"
        return Diagnostic(
            code=DiagnosticCode.CATALOG_TOO_LARGE,
            message=msg,
            location=path,
        )

    @staticmethod
    def catalog_duplicate_id(message_id: str, location: str | None = None) -> Diagnostic:
        """Same message id appears more than once.

        Args:
            message_id: The duplicated id
            location: Catalog file path (optional)

        Returns:
            Diagnostic for CATALOG_DUPLICATE_ID (warning)
        """
        msg = f"Duplicate message id '{message_id}'; keeping the first occurrence"
        return Diagnostic(
            code=DiagnosticCode.CATALOG_DUPLICATE_ID,
            message=msg,
            message_id=message_id,
            location=location,
            severity="warning",
        )

    @staticmethod
    def catalog_locale_unknown(locale_code: str, reason: str) -> Diagnostic:
        """Catalog declares a locale Babel does not recognize.

        Args:
            locale_code: The declared locale code
            reason: Underlying Babel error

        Returns:
            Diagnostic for CATALOG_LOCALE_UNKNOWN
        """
        msg = f"Unknown locale '{locale_code}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.CATALOG_LOCALE_UNKNOWN,
            message=msg,
            hint="Use a BCP-47 locale code such as 'fr' or 'pt-BR'",
        )

    @staticmethod
    def catalog_missing_target(path: str, message_id: str) -> Diagnostic:
        """Translation unit has a source but no translated target.

        Args:
            path: Catalog file path
            message_id: Id of the untranslated unit

        Returns:
            Diagnostic for CATALOG_MISSING_TARGET (warning)
        """
        msg = f"Missing required <target> element for message '{message_id}'; skipped"
        return Diagnostic(
            code=DiagnosticCode.CATALOG_MISSING_TARGET,
            message=msg,
            message_id=message_id,
            location=path,
            severity="warning",
        )

    @staticmethod
    def asset_write_failed(path: str, reason: str) -> Diagnostic:
        """Copy-through asset could not be written.

        Args:
            path: Output path that failed
            reason: Underlying OS error

        Returns:
            Diagnostic for ASSET_WRITE_FAILED
        """
        msg = f"Unable to write asset file {path}: {reason}"
        return Diagnostic(
            code=DiagnosticCode.ASSET_WRITE_FAILED,
            message=msg,
            location=path,
        )
