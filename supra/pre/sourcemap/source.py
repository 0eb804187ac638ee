"""Resolved sources: one per distinct bibliography entry the document cites."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from supra.core.constants import PINCITE_KEYWORD
from supra.schemas.csl import CSLSource


class SourceType(str, Enum):
    """Kinds of source with their own citation format.

    Values are the CSL ``type`` strings that map to each kind.
    """

    BOOK = "book"
    CHAPTER = "chapter"
    JOURNAL_ARTICLE = "article-journal"
    MANUSCRIPT = "manuscript"
    CASE = "legal_case"
    OTHER = "other"

    @classmethod
    def from_csl(cls, csl_type: str | None) -> SourceType:
        """Map a CSL type to a SourceType, OTHER when unsupported."""
        try:
            return cls(csl_type)
        except ValueError:
            return cls.OTHER


SUPPORTED_TYPES = frozenset(t for t in SourceType if t is not SourceType.OTHER)


@dataclass(slots=True)
class Source:
    """A cited source and its precomputed citation forms.

    Attributes:
        id: Bibliography key
        source_type: Citation format family
        csl: The bibliography record
        all_footnotes: Footnotes citing this source, in document order
        short_author: Short author string (None for cases and authorless sources)
        short_title: Formatted short title, once computed
        hereinafter: Short author is shared with another cited source
        long_cite_no_pin: Full citation without a pincite
        long_cite_with_pin: Full citation split where a pincite goes
        pin_template: How a pincite is spliced into the long form
        short_cite: Short form without a pincite
        short_cite_pre_pin: Case short form up to where "at {pin}" goes
        cited: Whether the renderer has output this source yet
    """

    id: str
    source_type: SourceType
    csl: CSLSource
    all_footnotes: list[int] = field(default_factory=list)
    short_author: str | None = None
    short_title: str | None = None
    hereinafter: bool = False
    long_cite_no_pin: str = ""
    long_cite_with_pin: tuple[str, str] = ("", "")
    pin_template: str = ", {pin}"
    short_cite: str = ""
    short_cite_pre_pin: str = ""
    cited: bool = False

    @property
    def is_case(self) -> bool:
        return self.source_type is SourceType.CASE

    @property
    def first_footnote(self) -> int:
        return self.all_footnotes[0]

    def long_form(self, pincite: str | None = None) -> str:
        """Full citation, with the pincite spliced in if given."""
        if pincite is None:
            return self.long_cite_no_pin
        pre, post = self.long_cite_with_pin
        return f"{pre}{self.pin_template.format(pin=pincite)}{post}"

    def short_form(self, pincite: str | None = None) -> str:
        """Short citation, with the pincite appended if given."""
        if pincite is None:
            return self.short_cite
        if self.is_case:
            return f"{self.short_cite_pre_pin} {PINCITE_KEYWORD} {pincite}"
        return f"{self.short_cite}, {PINCITE_KEYWORD} {pincite}"
