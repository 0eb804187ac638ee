"""Parser from the token stream to the syntax tree.

Footnotes are numbered in document order starting after ``offset``.
Inside a footnote, a signal or pre-cite punctuation opens a citation
that the following reference continues; a citation closes on its
ending punctuation.
"""

from __future__ import annotations

from collections.abc import Sequence

from supra.core.constants import PINCITE_KEYWORD
from supra.core.logging import get_logger
from supra.pre.tokens import Token, TokenKind
from supra.pre.tree import (
    Branch,
    CiteBreak,
    Citation,
    CrossRef,
    Footnote,
    PreCite,
    Punctuation,
    Signal,
    Text,
)

logger = get_logger(__name__)


def parse(tokens: Sequence[Token], offset: int = 0) -> list[Branch]:
    """Build the syntax tree.

    Args:
        tokens: Output of the lexer
        offset: Number of footnotes preceding this document

    Returns:
        Top-level branches in document order
    """
    tree: list[Branch] = []
    number = offset
    open_at: int | None = None

    for index, token in enumerate(tokens):
        if token.kind is TokenKind.OPEN_FOOTNOTE:
            open_at = index
            number += 1
        elif token.kind is TokenKind.CLOSE_FOOTNOTE and open_at is not None:
            tree.append(parse_footnote(tokens[open_at + 1:index], number))
            open_at = None
        elif open_at is None and token.kind is TokenKind.TEXT:
            tree.append(Text(token.contents))

    logger.debug("Parsed document", footnotes=number - offset, branches=len(tree))
    return tree


def parse_footnote(tokens: Sequence[Token], number: int) -> Footnote:
    """Build one footnote from the tokens between its brackets."""
    footnote_id: str | None = None
    contents: list[Branch] = []
    pending: PreCite | None = None
    citation: list[Token] = []

    for token in tokens:
        kind = token.kind
        if citation:
            citation.append(token)
            if kind is TokenKind.CITE_PUNCTUATION:
                contents.append(parse_citation(citation, pending))
                citation = []
                pending = None
            continue

        if kind is TokenKind.SIGNAL or kind is TokenKind.PRE_CITE_PUNCTUATION:
            if pending is not None:
                contents.append(Text(pending.contents))
            pending = Signal(token.contents) if kind is TokenKind.SIGNAL else Punctuation(token.contents)
            continue
        if kind is TokenKind.REFERENCE:
            citation.append(token)
            continue

        # Anything else ends a dangling signal; keep its text.
        if pending is not None:
            contents.append(Text(pending.contents))
            pending = None

        if kind is TokenKind.ID:
            footnote_id = token.contents.removeprefix("[?").removesuffix("]")
        elif kind is TokenKind.TEXT:
            contents.append(Text(token.contents))
        elif kind is TokenKind.CROSSREF:
            contents.append(CrossRef(token.contents))
        elif kind is TokenKind.CITE_BREAK:
            contents.append(CiteBreak(token.contents))

    if pending is not None:
        contents.append(Text(pending.contents))
    return Footnote(number=number, contents=contents, id=footnote_id or None)


def parse_citation(tokens: Sequence[Token], pre_cite: PreCite | None = None) -> Citation:
    """Assign citation tokens to the fields of a Citation."""
    reference = ""
    punctuation = ""
    pincite: str | None = None
    parenthetical: str | None = None
    for token in tokens:
        if token.kind is TokenKind.REFERENCE:
            reference = token.contents
        elif token.kind is TokenKind.PINCITE:
            pincite = parse_pincite(token.contents)
        elif token.kind is TokenKind.PARENTHETICAL:
            parenthetical = token.contents
        elif token.kind is TokenKind.CITE_PUNCTUATION:
            punctuation = token.contents
    return Citation(
        reference=reference,
        punctuation=punctuation,
        pre_cite=pre_cite,
        pincite=pincite,
        parenthetical=parenthetical,
    )


def parse_pincite(raw: str) -> str | None:
    """Strip whitespace and a leading "at" from a pincite.

    Example:
        >>> parse_pincite(" at 100")
        '100'
        >>> parse_pincite(" ") is None
        True
    """
    pin = raw.strip()
    keyword, _, rest = pin.partition(" ")
    if keyword == PINCITE_KEYWORD:
        pin = rest.strip()
    return pin or None


__all__ = ["parse", "parse_citation", "parse_footnote", "parse_pincite"]
