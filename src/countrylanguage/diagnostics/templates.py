"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from countrylanguage.constants import MAX_REPORTED_INPUT_LENGTH

from .codes import Diagnostic, ErrorCode

__all__ = ["ErrorTemplate"]


def _clip(value: object) -> str:
    """Render caller input for messages, truncated."""
    text = value if isinstance(value, str) else repr(value)
    if len(text) > MAX_REPORTED_INPUT_LENGTH:
        return text[:MAX_REPORTED_INPUT_LENGTH] + "..."
    return text


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    Keeps messages testable and consistent, and documents every error case.
    """

    @staticmethod
    def empty_input(kind: str) -> Diagnostic:
        """Missing or blank code argument.

        Args:
            kind: What was expected ("country code", "language code", ...)

        Returns:
            Diagnostic for EMPTY_INPUT
        """
        return Diagnostic(
            code=ErrorCode.EMPTY_INPUT,
            message=f"No {kind} provided",
            hint=f"Pass a non-empty string {kind}",
        )

    @staticmethod
    def invalid_country_code(code: str) -> Diagnostic:
        """Country code length is neither 2 nor 3.

        Args:
            code: The offending code

        Returns:
            Diagnostic for INVALID_CODE_FORMAT
        """
        clipped = _clip(code)
        return Diagnostic(
            code=ErrorCode.INVALID_CODE_FORMAT,
            message=f"Wrong type of country code provided: '{clipped}'",
            hint="Country codes are alpha-2 (2 letters) or alpha-3 (3 letters)",
            input_value=clipped,
        )

    @staticmethod
    def invalid_language_code(code: str) -> Diagnostic:
        """Language code length is neither 2 nor 3.

        Args:
            code: The offending code

        Returns:
            Diagnostic for INVALID_CODE_FORMAT
        """
        clipped = _clip(code)
        return Diagnostic(
            code=ErrorCode.INVALID_CODE_FORMAT,
            message=f"Wrong type of language code provided: '{clipped}'",
            hint="Language codes are ISO-639-1 (2 letters) or ISO-639-2/2en/3 (3 letters)",
            input_value=clipped,
        )

    @staticmethod
    def invalid_code_type(kind: str, value: object, choices: str) -> Diagnostic:
        """Code type selector outside the accepted range.

        Args:
            kind: "country" or "language"
            value: The selector the caller passed
            choices: Human-readable list of valid selectors

        Returns:
            Diagnostic for INVALID_CODE_TYPE
        """
        clipped = _clip(value)
        return Diagnostic(
            code=ErrorCode.INVALID_CODE_TYPE,
            message=f"Wrong {kind} code type provided: {clipped}",
            hint=f"Valid values: {choices}",
            input_value=clipped,
        )

    @staticmethod
    def country_not_found(code: str) -> Diagnostic:
        """No country matches a well-formed code.

        Args:
            code: Normalized country code

        Returns:
            Diagnostic for COUNTRY_NOT_FOUND
        """
        clipped = _clip(code)
        return Diagnostic(
            code=ErrorCode.COUNTRY_NOT_FOUND,
            message=f"There is no country with code '{clipped}'",
            hint="Use country_code_exists() to test a code before fetching it",
            input_value=clipped,
        )

    @staticmethod
    def language_not_found(code: str) -> Diagnostic:
        """No language matches a well-formed code.

        Args:
            code: Normalized language code

        Returns:
            Diagnostic for LANGUAGE_NOT_FOUND
        """
        clipped = _clip(code)
        return Diagnostic(
            code=ErrorCode.LANGUAGE_NOT_FOUND,
            message=f"There is no language with code '{clipped}'",
            hint="Use language_code_exists() to test a code before fetching it",
            input_value=clipped,
        )

    @staticmethod
    def unknown_family(family: str) -> Diagnostic:
        """Family name not in the known set.

        Args:
            family: Family name as supplied

        Returns:
            Diagnostic for UNKNOWN_FAMILY
        """
        clipped = _clip(family)
        return Diagnostic(
            code=ErrorCode.UNKNOWN_FAMILY,
            message=f"There is no language family '{clipped}'",
            hint="See get_language_families() for the known family names",
            input_value=clipped,
        )

    @staticmethod
    def dataset_unreadable(source: str, reason: str) -> Diagnostic:
        """Dataset resource could not be read or decoded.

        Args:
            source: Loader description
            reason: Underlying error text

        Returns:
            Diagnostic for DATASET_UNREADABLE
        """
        return Diagnostic(
            code=ErrorCode.DATASET_UNREADABLE,
            message=f"Cannot read dataset from {source}: {reason}",
            hint="Check that the dataset file exists and is valid UTF-8 JSON",
            source=source,
        )

    @staticmethod
    def dataset_malformed(source: str, location: str, reason: str) -> Diagnostic:
        """Dataset structure does not match the expected schema.

        Args:
            source: Loader description
            location: Path to the offending element (e.g. "countries[3].code_2")
            reason: What is wrong with it

        Returns:
            Diagnostic for DATASET_MALFORMED
        """
        return Diagnostic(
            code=ErrorCode.DATASET_MALFORMED,
            message=f"Malformed dataset at {location}: {reason}",
            hint="Compare the record against the bundled data.json layout",
            source=source,
        )

    @staticmethod
    def dataset_family_unknown(source: str, language: str, family: str) -> Diagnostic:
        """Language names a family absent from languageFamilies.

        Args:
            source: Loader description
            language: ISO-639-3 code of the language
            family: The unknown family name

        Returns:
            Diagnostic for DATASET_FAMILY_UNKNOWN
        """
        return Diagnostic(
            code=ErrorCode.DATASET_FAMILY_UNKNOWN,
            message=f"Language '{language}' belongs to unknown family '{family}'",
            hint="Add the family to languageFamilies or fix the language record",
            source=source,
        )

    @staticmethod
    def dangling_language_reference(country: str, language: str) -> Diagnostic:
        """Country lists a language code that resolves to nothing."""
        return Diagnostic(
            code=ErrorCode.DANGLING_LANGUAGE_REFERENCE,
            message=f"Country '{country}' references unknown language '{language}'",
            severity="warning",
        )

    @staticmethod
    def dangling_country_reference(language: str, country: str) -> Diagnostic:
        """Language lists a country code that resolves to nothing."""
        return Diagnostic(
            code=ErrorCode.DANGLING_COUNTRY_REFERENCE,
            message=f"Language '{language}' references unknown country '{country}'",
            severity="warning",
        )

    @staticmethod
    def asymmetric_reference(holder: str, target: str) -> Diagnostic:
        """A record lists another that does not list it back."""
        return Diagnostic(
            code=ErrorCode.ASYMMETRIC_REFERENCE,
            message=f"'{holder}' lists '{target}', but '{target}' does not list '{holder}'",
            severity="warning",
        )
