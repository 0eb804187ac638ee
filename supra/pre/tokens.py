"""Token types produced by the lexer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TokenKind(str, Enum):
    """Kinds of token in the annotated text."""

    TEXT = "text"
    OPEN_FOOTNOTE = "open_footnote"
    CLOSE_FOOTNOTE = "close_footnote"
    ID = "id"
    SIGNAL = "signal"
    PRE_CITE_PUNCTUATION = "pre_cite_punctuation"
    REFERENCE = "reference"
    PINCITE = "pincite"
    PARENTHETICAL = "parenthetical"
    CITE_PUNCTUATION = "cite_punctuation"
    CROSSREF = "crossref"
    CITE_BREAK = "cite_break"


@dataclass(frozen=True, slots=True)
class Token:
    """A span of the input text with its kind.

    Attributes:
        kind: What the span is
        start: Offset of the first character
        end: Offset one past the last character
        contents: The text of the span
    """

    kind: TokenKind
    start: int
    end: int
    contents: str

    @classmethod
    def from_span(cls, kind: TokenKind, text: str, start: int, end: int) -> Token:
        """Build a token over ``text[start:end]``."""
        return cls(kind, start, end, text[start:end])
