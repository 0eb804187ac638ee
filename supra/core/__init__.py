"""Core infrastructure: configuration, logging, exceptions and constants."""

from supra.core.config import Settings, get_settings
from supra.core.exceptions import (
    LexerError,
    LibraryError,
    MissingTitleError,
    SourceBuildError,
    SupraError,
    UnbalancedParenthesisError,
    UnterminatedCitationError,
    UnterminatedFootnoteError,
    UserJournalsError,
)
from supra.core.logging import configure_logging, get_logger, log_stage

__all__ = [
    "LexerError",
    "LibraryError",
    "MissingTitleError",
    "Settings",
    "SourceBuildError",
    "SupraError",
    "UnbalancedParenthesisError",
    "UnterminatedCitationError",
    "UnterminatedFootnoteError",
    "UserJournalsError",
    "configure_logging",
    "get_logger",
    "get_settings",
    "log_stage",
]
