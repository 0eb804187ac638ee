"""Lexer for footnote-annotated markdown.

Two levels of scanning, each an explicit state machine over character
offsets:

- The text lexer finds ``^[...]`` footnotes by bracket balance and
  passes through everything else as text.
- The footnote lexer splits a footnote body into text, footnote ids,
  citations, cross references and cite breaks. Text that precedes a
  citation goes through the pre-cite lexer so a signal or punctuation
  mark can be recognized, and each citation goes through the citation
  lexer to separate reference, pincite, parenthetical and punctuation.

Tokens carry offsets into the original input.

Example:
    >>> [t.kind.value for t in tokenize("Text.^[[@smith2021] at 4.]")]
    ['text', 'open_footnote', 'reference', 'pincite', 'cite_punctuation', 'close_footnote']
"""

from __future__ import annotations

import re
from enum import Enum

from supra.core.constants import (
    CITATION_MARKER,
    CITATION_TERMINATORS,
    CITE_BREAK_MARKER,
    CLAUSE_SIGNALS,
    CROSSREF_MARKER,
    FOOTNOTE_CLOSE,
    FOOTNOTE_OPEN,
    PRE_CITE_PUNCTUATION,
    SIGNALS,
)
from supra.core.exceptions import (
    LexerError,
    UnbalancedParenthesisError,
    UnterminatedCitationError,
    UnterminatedFootnoteError,
)
from supra.core.logging import get_logger
from supra.pre.tokens import Token, TokenKind

logger = get_logger(__name__)


class Context(Enum):
    """What the scanner is currently inside of."""

    TEXT = "text"
    FOOTNOTE = "footnote"
    ID = "id"
    CITATION = "citation"
    CROSSREF = "crossref"
    REFERENCE = "reference"
    PINCITE = "pincite"
    PARENTHETICAL = "parenthetical"
    CITE_PUNCTUATION = "cite_punctuation"
    CITE_BREAK = "cite_break"


# Marker contexts whose token ends at the first closing bracket
_MARKER_KINDS: dict[Context, TokenKind] = {
    Context.ID: TokenKind.ID,
    Context.CROSSREF: TokenKind.CROSSREF,
    Context.CITE_BREAK: TokenKind.CITE_BREAK,
}


def _signal_forms(phrase: str, capitalized: bool = True) -> list[str]:
    """Spell a signal as it may appear before a citation.

    ``See, e.g.`` yields ``*See, e.g.*,``, ``*see, e.g.*,`` and ``see, e.g.,``.
    """
    lower = phrase[0].lower() + phrase[1:]
    forms = [f"*{phrase}*", f"*{lower}*", lower] if capitalized else [f"*{lower}*", lower]
    if phrase.endswith(", e.g."):
        return [f"{form}," for form in forms]
    if phrase == "E.g.":
        return [f"{form}," for form in forms] + forms
    return forms


def _build_signal_pattern() -> re.Pattern[str]:
    forms: list[str] = []
    for phrase in SIGNALS:
        forms.extend(_signal_forms(phrase))
    for phrase in CLAUSE_SIGNALS:
        forms.extend(_signal_forms(phrase, capitalized=False))
    alternation = "|".join(re.escape(form) for form in forms)
    return re.compile(rf"(?<![A-Za-z])(?P<signal>(?:{alternation})+)\s*$")


SIGNAL_PATTERN = _build_signal_pattern()
PUNCTUATION_PATTERN = re.compile(rf"[{re.escape(PRE_CITE_PUNCTUATION)}]\s*$")


class Lexer:
    """Tokenizer over one input string.

    Each ``Lexer`` owns the token list for a single pass; create a new
    one per input.
    """

    def __init__(self, text: str) -> None:
        self.text = text
        self.tokens: list[Token] = []

    # =========================================================================
    # Text level
    # =========================================================================

    def tokenize(self) -> list[Token]:
        """Tokenize the whole input.

        Returns:
            Tokens in document order

        Raises:
            UnterminatedFootnoteError: If the input ends inside a footnote
            UnterminatedCitationError: If a citation has no ending punctuation
            UnbalancedParenthesisError: If a parenthetical never closes
        """
        text = self.text
        context = Context.TEXT
        start = 0
        footnote_start = 0
        depth = 0
        i = 0

        while i < len(text):
            if context is Context.TEXT:
                if text.startswith(FOOTNOTE_OPEN, i):
                    self._emit(TokenKind.TEXT, start, i)
                    context = Context.FOOTNOTE
                    footnote_start = i
                    depth = 0
                    i += len(FOOTNOTE_OPEN)
                    continue
            elif text[i] == "[":
                depth += 1
            elif text[i] == FOOTNOTE_CLOSE:
                if depth:
                    depth -= 1
                else:
                    self._lex_footnote(footnote_start, i + 1)
                    context = Context.TEXT
                    start = i + 1
            i += 1

        if context is Context.FOOTNOTE:
            raise UnterminatedFootnoteError(
                "Input ends with an open footnote",
                *self._locate(footnote_start),
            )
        self._emit(TokenKind.TEXT, start, len(text))
        logger.debug("Tokenized input", tokens=len(self.tokens))
        return self.tokens

    # =========================================================================
    # Footnote level
    # =========================================================================

    def _opening_context(self, position: int) -> Context:
        """Decide what a footnote body starts with."""
        opener = self.text[position:position + 2]
        if opener == CROSSREF_MARKER:
            return Context.ID
        if opener == CITATION_MARKER:
            return Context.CITATION
        if opener == CITE_BREAK_MARKER:
            return Context.CITE_BREAK
        return Context.TEXT

    def _lex_footnote(self, start: int, end: int) -> None:
        """Tokenize the footnote spanning ``text[start:end]``, markers included."""
        text = self.text
        body_start = start + len(FOOTNOTE_OPEN)
        body_end = end - 1

        self._emit(TokenKind.OPEN_FOOTNOTE, start, body_start)

        context = self._opening_context(body_start)
        segment = body_start
        brackets = parens = 0
        paren_at = body_start
        i = body_start

        while i < body_end:
            c = text[i]
            if context in _MARKER_KINDS:
                if c == FOOTNOTE_CLOSE:
                    self._emit(_MARKER_KINDS[context], segment, i + 1)
                    context = Context.TEXT
                    segment = i + 1
            elif context is Context.CITATION:
                if c == "[":
                    brackets += 1
                elif c == "]":
                    brackets -= 1
                elif c == "(":
                    if parens == 0:
                        paren_at = i
                    parens += 1
                elif c == ")":
                    parens -= 1
                elif (
                    c in CITATION_TERMINATORS
                    and brackets == 0
                    and parens == 0
                    and (i + 1 == body_end or text[i + 1].isspace())
                ):
                    self._lex_citation(segment, i + 1)
                    context = Context.TEXT
                    segment = i + 1
            elif c == "[":
                marker = text[i:i + 2]
                if marker == CITATION_MARKER:
                    self._lex_pre_cite(segment, i)
                    context = Context.CITATION
                    segment = i
                    brackets = parens = 0
                    # Re-read the bracket as part of the citation.
                    continue
                if marker == CROSSREF_MARKER:
                    self._emit(TokenKind.TEXT, segment, i)
                    context = Context.CROSSREF
                    segment = i
                elif marker == CITE_BREAK_MARKER:
                    self._lex_pre_cite(segment, i)
                    context = Context.CITE_BREAK
                    segment = i
            i += 1

        if context is Context.CITATION and parens > 0:
            raise UnbalancedParenthesisError(
                "No closing parenthesis found for the parenthetical",
                *self._locate(paren_at),
            )
        if context is Context.CITATION:
            raise UnterminatedCitationError(
                "Citation is not closed by '.', ',' or ';' before the end of its footnote",
                *self._locate(segment),
            )
        if context is not Context.TEXT:
            raise LexerError(
                f"Unclosed {context.value} marker in footnote",
                *self._locate(segment),
            )
        if text[segment:body_end].strip():
            self._emit(TokenKind.TEXT, segment, body_end)

        self._emit(TokenKind.CLOSE_FOOTNOTE, body_end, end)

    def _lex_pre_cite(self, start: int, end: int) -> None:
        """Split the text before a citation into text and a signal or punctuation."""
        segment = self.text[start:end]
        if not segment:
            return

        match = SIGNAL_PATTERN.search(segment)
        kind = TokenKind.SIGNAL
        if match is None:
            match = PUNCTUATION_PATTERN.search(segment)
            kind = TokenKind.PRE_CITE_PUNCTUATION
        if match is None:
            self._emit(TokenKind.TEXT, start, end)
            return

        self._emit(TokenKind.TEXT, start, start + match.start())
        self._emit(kind, start + match.start(), end)

    def _lex_citation(self, start: int, end: int) -> None:
        """Split ``text[start:end]`` into reference, pincite, parenthetical and punctuation.

        The span starts at the reference's opening bracket and ends just
        after the citation's punctuation mark.
        """
        text = self.text
        punctuation = end - 1
        reference_end = text.index("]", start) + 1
        self._emit(TokenKind.REFERENCE, start, reference_end)

        context = Context.PINCITE
        paren_start = punctuation
        depth = 0
        i = reference_end
        while i < punctuation:
            c = text[i]
            if context is Context.PINCITE:
                if c == "(" and (i == reference_end or text[i - 1] == " "):
                    paren_start = i
                    context = Context.PARENTHETICAL
                    depth = 1
            elif c == "(":
                depth += 1
            elif c == ")":
                depth -= 1
            i += 1

        if context is Context.PARENTHETICAL and depth != 0:
            raise UnbalancedParenthesisError(
                "No closing parenthesis found for the parenthetical",
                *self._locate(paren_start),
            )

        pin_end = paren_start - 1 if context is Context.PARENTHETICAL else punctuation
        if text[reference_end:pin_end].strip():
            self._emit(TokenKind.PINCITE, reference_end, pin_end)
        if context is Context.PARENTHETICAL:
            paren_end = paren_start + len(text[paren_start:punctuation].rstrip())
            self._emit(TokenKind.PARENTHETICAL, paren_start, paren_end)
        self._emit(TokenKind.CITE_PUNCTUATION, punctuation, end)

    # =========================================================================
    # Helpers
    # =========================================================================

    def _emit(self, kind: TokenKind, start: int, end: int) -> None:
        if end > start:
            self.tokens.append(Token.from_span(kind, self.text, start, end))

    def _locate(self, position: int) -> tuple[int, int, int]:
        """Return (position, line, column) for an offset, 1-based."""
        line = self.text.count("\n", 0, position) + 1
        column = position - (self.text.rfind("\n", 0, position) + 1) + 1
        return position, line, column


def tokenize(text: str) -> list[Token]:
    """Tokenize annotated markdown.

    Args:
        text: The full manuscript

    Returns:
        Tokens in document order
    """
    return Lexer(text).tokenize()


def split_pre_cite(text: str) -> list[Token]:
    """Run the pre-cite lexer over a standalone string."""
    lexer = Lexer(text)
    lexer._lex_pre_cite(0, len(text))
    return lexer.tokens


def split_citation(text: str) -> list[Token]:
    """Run the citation lexer over a standalone citation.

    Args:
        text: From the reference's opening bracket through the ending punctuation

    Raises:
        UnbalancedParenthesisError: If the parenthetical never closes
    """
    lexer = Lexer(text)
    lexer._lex_citation(0, len(text))
    return lexer.tokens


__all__ = [
    "Context",
    "Lexer",
    "PUNCTUATION_PATTERN",
    "SIGNAL_PATTERN",
    "split_citation",
    "split_pre_cite",
    "tokenize",
]
