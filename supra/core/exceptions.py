"""Custom exceptions for the citation preprocessor.

All exceptions are namespaced under SupraError so a caller can catch any
pipeline failure with a single except clause. Fatal conditions propagate
out of ``render_document``; SourceBuildError is the only one the pipeline
catches itself, dropping the offending source from the source map.

Pattern: Namespaced Custom Exceptions
"""

from typing import Any


class SupraError(Exception):
    """Base exception for all preprocessor errors."""

    def __init__(self, message: str, stage: str | None = None) -> None:
        """Initialize preprocessor error.

        Args:
            message: Error description
            stage: Pipeline stage that raised the error
        """
        self.stage = stage
        super().__init__(message)


# =============================================================================
# Lexer Errors
# =============================================================================

class LexerError(SupraError):
    """Raised when the annotated text cannot be tokenized.

    Carries the offending position so the author can find it.
    """

    def __init__(
        self,
        message: str,
        position: int | None = None,
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        """Initialize lexer error.

        Args:
            message: Error description
            position: Offset of the offending character in the input
            line: 1-based line of the offending character
            column: 1-based column of the offending character
        """
        self.position = position
        self.line = line
        self.column = column
        if line is not None and column is not None:
            message = f"{message} (line {line}, column {column})"
        super().__init__(message, stage="lexer")


class UnterminatedFootnoteError(LexerError):
    """Raised when the input ends inside a footnote."""


class UnterminatedCitationError(LexerError):
    """Raised when a citation never reaches its ending punctuation."""


class UnbalancedParenthesisError(LexerError):
    """Raised when a citation parenthetical is never closed."""


# =============================================================================
# Input Data Errors
# =============================================================================

class LibraryError(SupraError):
    """Raised when the bibliography cannot be deserialized."""

    def __init__(
        self,
        message: str,
        errors: list[dict[str, Any]] | None = None,
        cause: Exception | None = None,
    ) -> None:
        """Initialize library error.

        Args:
            message: Error description
            errors: Structured validation errors, if any
            cause: Original exception that caused this error
        """
        self.errors = errors or []
        super().__init__(message, stage="library")
        if cause is not None:
            self.__cause__ = cause


class UserJournalsError(SupraError):
    """Raised when the journal abbreviation table is malformed."""

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        """Initialize user journals error.

        Args:
            message: Error description
            cause: Original exception that caused this error
        """
        super().__init__(message, stage="userjournals")
        if cause is not None:
            self.__cause__ = cause


# =============================================================================
# Source Errors
# =============================================================================

class SourceBuildError(SupraError):
    """Raised when a single cited source cannot be built.

    Recoverable: the source is logged and left out of the source map.
    """

    def __init__(self, message: str, key: str) -> None:
        """Initialize source build error.

        Args:
            message: Error description
            key: Bibliography key of the source
        """
        self.key = key
        super().__init__(message, stage="sourcemap")


class MissingTitleError(SupraError):
    """Raised when a cited source has no title and cannot be cited."""

    def __init__(self, key: str) -> None:
        """Initialize missing title error.

        Args:
            key: Bibliography key of the source
        """
        self.key = key
        super().__init__(
            f"Source '{key}' has no title and cannot be cited",
            stage="sourcemap",
        )
