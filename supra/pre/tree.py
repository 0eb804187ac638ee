"""Syntax tree produced by the parser.

A document is a list of branches. Footnotes hold their own list of
branches; citations only appear inside footnotes.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True, slots=True)
class Signal:
    """An introductory signal before a citation (``*See* ``)."""

    contents: str


@dataclass(frozen=True, slots=True)
class Punctuation:
    """Punctuation immediately before a citation (``". "``)."""

    contents: str

    @property
    def mark(self) -> str:
        return self.contents.strip()


PreCite = Union[Signal, Punctuation]


@dataclass(frozen=True, slots=True)
class Text:
    """Literal passthrough text."""

    contents: str


@dataclass(frozen=True, slots=True)
class Citation:
    """One citation clause.

    Attributes:
        reference: Raw reference marker, e.g. ``[@smith2021]``
        punctuation: Character ending the citation
        pre_cite: Signal or punctuation immediately before the reference
        pincite: Pinpoint locator with any leading "at" removed
        parenthetical: Explanatory parenthetical, parentheses included
    """

    reference: str
    punctuation: str
    pre_cite: PreCite | None = None
    pincite: str | None = None
    parenthetical: str | None = None

    @property
    def key(self) -> str:
        """Bibliography key without the ``[@`` and ``]`` decoration."""
        return self.reference.removeprefix("[@").removesuffix("]")


@dataclass(frozen=True, slots=True)
class CrossRef:
    """A reference to another footnote by its id."""

    contents: str

    @property
    def target(self) -> str:
        """Footnote id without the ``[?`` and ``]`` decoration."""
        return self.contents.removeprefix("[?").removesuffix("]")


@dataclass(frozen=True, slots=True)
class CiteBreak:
    """Marks that the next citation does not continue the citation history."""

    contents: str = "[$]"


@dataclass(frozen=True, slots=True)
class Footnote:
    """A footnote and its contents.

    Attributes:
        number: Final footnote number (offset included)
        contents: Branches inside the footnote
        id: User-assigned id for cross references
    """

    number: int
    contents: list[Branch] = field(default_factory=list)
    id: str | None = None


Branch = Union[Text, Footnote, Citation, CrossRef, CiteBreak]


def iter_footnotes(tree: list[Branch]) -> Iterator[Footnote]:
    """Yield every footnote in document order."""
    for branch in tree:
        if isinstance(branch, Footnote):
            yield branch


__all__ = [
    "Branch",
    "CiteBreak",
    "Citation",
    "CrossRef",
    "Footnote",
    "PreCite",
    "Punctuation",
    "Signal",
    "Text",
    "iter_footnotes",
]
