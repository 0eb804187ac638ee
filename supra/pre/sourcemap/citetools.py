"""Formatting helpers shared by the per-type citation builders."""

from __future__ import annotations

import re
from collections.abc import Sequence

from supra.core.constants import SUPREME_COURT
from supra.core.logging import get_logger
from supra.pre.sourcemap.source import SourceType
from supra.schemas.csl import CSLSource, Name

logger = get_logger(__name__)

# Suffixes set off from the name by a comma
COMMA_SUFFIXES = frozenset({"Jr.", "Sr."})

_EDGE_ITALICS = re.compile(r"^<i>|</i>$")
_OPEN_AFTER_SPACE = re.compile(r"(\s+?)<i>")
_CLOSE_BEFORE_SPACE = re.compile(r"</i>(\s+?)")
_BARE_ITALICS = re.compile(r"</?i>")


# =============================================================================
# Markup
# =============================================================================

def bold(text: str) -> str:
    return f"**{text}**"


def italicize(text: str) -> str:
    return f"*{text}*"


def reverse_italicize(title: str) -> str:
    """Italicize a title except for the phrases already italic in it.

    Titles arrive with HTML italics around embedded case names and the
    like; in a citation the title is italic and those phrases are Roman.

    Example:
        >>> reverse_italicize("The Rule in <i>Rooker</i>-<i>Feldman</i>")
        '*The Rule in* Rooker*-*Feldman'
    """
    if not title.startswith("<i>"):
        title = f"*{title}"
    if not title.endswith("</i>"):
        title = f"{title}*"
    title = _EDGE_ITALICS.sub("", title)
    title = _OPEN_AFTER_SPACE.sub(r"*\1", title)
    title = _CLOSE_BEFORE_SPACE.sub(r"\1*", title)
    return _BARE_ITALICS.sub("*", title)


def case_title(title: str) -> str:
    """Italicize procedural phrases in a case name."""
    return title.replace("In re ", "*In re* ").replace(" ex rel. ", " *ex rel.* ")


# =============================================================================
# Names
# =============================================================================

def format_name(name: Name) -> str:
    """Full name: given, particle, family, suffix."""
    if name.literal:
        return name.literal
    full = " ".join(part for part in (name.given, name.non_dropping_particle, name.family) if part)
    if name.suffix:
        separator = ", " if name.suffix in COMMA_SUFFIXES else " "
        full = f"{full}{separator}{name.suffix}"
    return full


def format_surname(name: Name) -> str:
    """Surname as used in short forms: particle and family."""
    if name.literal:
        return name.literal
    return " ".join(part for part in (name.non_dropping_particle, name.family) if part)


def long_author(names: Sequence[Name]) -> str:
    """Join full names: ``A``, ``A & B``, ``A, B & C``.

    Example:
        >>> long_author([Name(given="Sam", family="Johnson", suffix="Jr."), Name(given="Jane", family="Smith")])
        'Sam Johnson, Jr. & Jane Smith'
    """
    formatted = [format_name(name) for name in names]
    if len(formatted) < 2:
        return "".join(formatted)
    return f"{', '.join(formatted[:-1])} & {formatted[-1]}"


def short_author(names: Sequence[Name]) -> str:
    """Surnames for short forms: ``A``, ``A & B`` or ``A et al.``."""
    if len(names) == 1:
        return format_surname(names[0])
    if len(names) == 2:
        return f"{format_surname(names[0])} & {format_surname(names[1])}"
    return f"{format_surname(names[0])} et al."


# =============================================================================
# Titles
# =============================================================================

def format_title(title: str, source_type: SourceType) -> str:
    """Style a title for its source type."""
    if source_type is SourceType.BOOK:
        return bold(title)
    if source_type is SourceType.CASE:
        return case_title(title)
    return reverse_italicize(title)


def format_short_title(csl: CSLSource, source_type: SourceType) -> str:
    """Style the short title, falling back to the full title."""
    title = csl.title_short
    if not title:
        logger.warning(
            "No short title found; using long title for short cites",
            key=csl.id,
        )
        title = csl.title or ""
    if source_type is SourceType.BOOK:
        return bold(title)
    if source_type is SourceType.CASE:
        return italicize(title)
    return reverse_italicize(title)


# =============================================================================
# Parentheticals
# =============================================================================

def end_parenthetical(csl: CSLSource, source_type: SourceType) -> str:
    """Closing parenthetical: court, edition, editors, translators, year.

    Returns an empty string when none of them is present.

    Example:
        ``" (2d ed., Book Editor ed., 2021)"`` or ``" (1st Cir. 1991)"``
    """
    head: list[str] = []
    middle: list[str] = []

    if source_type is SourceType.CASE and csl.authority and csl.authority != SUPREME_COURT:
        head.append(csl.authority)

    if source_type in (SourceType.BOOK, SourceType.CHAPTER):
        if csl.edition:
            head.append(f"{csl.edition} ed.")
        if csl.editor:
            label = "eds." if len(csl.editor) > 1 else "ed."
            middle.append(f"{long_author(csl.editor)} {label}")
        if csl.translator:
            middle.append(f"{long_author(csl.translator)} trans.")

    segments = [" ".join(head)] if head else []
    segments.extend(middle)
    year = csl.year
    if year:
        if segments and not middle:
            segments[-1] = f"{segments[-1]} {year}"
        else:
            segments.append(year)

    if not segments:
        return ""
    return f" ({', '.join(segments)})"


def hereinafter(short_author_text: str, short_title: str) -> str:
    return f" [hereinafter {short_author_text}, {short_title}]"
