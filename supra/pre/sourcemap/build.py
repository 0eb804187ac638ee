"""Long- and short-form citation builders, one per source type.

Each long-form builder returns a (pre-pin, post-pin) pair; the pincite,
formatted with the source's ``pin_template``, goes between them.

Reference: The Bluebook, Rules 10 (cases), 15 (books), 16 (periodicals),
17 (unpublished sources).
"""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping

from supra.core.constants import SUPRA
from supra.core.exceptions import MissingTitleError, SourceBuildError
from supra.core.logging import get_logger
from supra.pre.sourcemap.citetools import (
    bold,
    end_parenthetical,
    format_short_title,
    format_title,
    hereinafter,
    long_author,
    short_author,
)
from supra.pre.sourcemap.journals import build_short_journal
from supra.pre.sourcemap.source import Source, SourceType
from supra.schemas.csl import CSLSource

logger = get_logger(__name__)

UserJournals = Mapping[str, str]

# Journals that number volumes by year omit the date parenthetical
_YEAR_VOLUME = re.compile(r"\d{4}")

_PIN_TEMPLATES: dict[SourceType, str] = {
    SourceType.BOOK: " {pin}",
    SourceType.MANUSCRIPT: " (manuscript at {pin})",
}


def new_source(csl: CSLSource, source_type: SourceType, footnote: int) -> Source:
    """Create a Source at its first citation.

    Raises:
        SourceBuildError: If the record lists authors but none is usable
    """
    source = Source(
        id=csl.id,
        source_type=source_type,
        csl=csl,
        all_footnotes=[footnote],
        pin_template=_PIN_TEMPLATES.get(source_type, ", {pin}"),
    )
    if source_type is not SourceType.CASE and csl.author is not None:
        if not csl.author or all(name.is_empty for name in csl.author):
            raise SourceBuildError("Author list has no usable names", key=csl.id)
        author = short_author(csl.author)
        source.short_author = bold(author) if source_type is SourceType.BOOK else author
    return source


# =============================================================================
# Shared pieces
# =============================================================================

def _join(*parts: str | None) -> str:
    """Join the present parts with single spaces."""
    return " ".join(part for part in parts if part)


def _authors(csl: CSLSource, source_type: SourceType) -> str:
    """Author list followed by a comma, or nothing."""
    if not csl.author:
        return ""
    authors = long_author(csl.author)
    if source_type is SourceType.BOOK:
        authors = bold(authors)
    return f"{authors}, "


def _title(source: Source) -> str:
    if not source.csl.title:
        raise MissingTitleError(source.id)
    return format_title(source.csl.title, source.source_type)


def _short_title(source: Source) -> str:
    if source.short_title is None:
        source.short_title = format_short_title(source.csl, source.source_type)
    return source.short_title


def _hereinafter(source: Source) -> str:
    if source.hereinafter and source.short_author:
        return hereinafter(source.short_author, _short_title(source))
    return ""


def _journal(csl: CSLSource, user_journals: UserJournals | None) -> str | None:
    if csl.container_title_short:
        return bold(csl.container_title_short)
    if csl.container_title:
        return bold(build_short_journal(csl.container_title, user_journals))
    return None


# =============================================================================
# Long forms
# =============================================================================

def _book(source: Source, user_journals: UserJournals | None) -> tuple[str, str]:
    csl = source.csl
    pre = _join(csl.volume, f"{_authors(csl, source.source_type)}{_title(source)}")
    post = end_parenthetical(csl, source.source_type) + _hereinafter(source)
    return pre, post


def _chapter(source: Source, user_journals: UserJournals | None) -> tuple[str, str]:
    csl = source.csl
    pre = f"{_authors(csl, source.source_type)}{_title(source)}"
    container = bold(csl.container_title) if csl.container_title else None
    within = _join(csl.volume, container, csl.page)
    if within:
        pre = f"{pre}, *in* {within}"
    post = end_parenthetical(csl, source.source_type) + _hereinafter(source)
    return pre, post


def _article(source: Source, user_journals: UserJournals | None) -> tuple[str, str]:
    csl = source.csl
    pre = f"{_authors(csl, source.source_type)}{_title(source)}"
    location = _join(csl.volume, _journal(csl, user_journals), csl.page)
    if location:
        pre = f"{pre}, {location}"
    post = ""
    if not (csl.volume and _YEAR_VOLUME.fullmatch(csl.volume)):
        post = end_parenthetical(csl, source.source_type)
    return pre, post + _hereinafter(source)


def _manuscript(source: Source, user_journals: UserJournals | None) -> tuple[str, str]:
    csl = source.csl
    pre = f"{_authors(csl, source.source_type)}{_title(source)}"
    placement = _join(csl.volume, _journal(csl, user_journals))
    if placement:
        pre = f"{pre}, {placement}"
    if csl.year:
        pre = f"{pre} (forthcoming {csl.year})"
    post = _hereinafter(source)
    if csl.url:
        post = f"{post}, {csl.url}"
    return pre, post


def _case(source: Source, user_journals: UserJournals | None) -> tuple[str, str]:
    csl = source.csl
    pre = _title(source)
    reporter = _join(csl.volume, csl.container_title, csl.page)
    if reporter:
        pre = f"{pre}, {reporter}"
    return pre, end_parenthetical(csl, source.source_type)


_LONG_BUILDERS: dict[SourceType, Callable[[Source, UserJournals | None], tuple[str, str]]] = {
    SourceType.BOOK: _book,
    SourceType.CHAPTER: _chapter,
    SourceType.JOURNAL_ARTICLE: _article,
    SourceType.MANUSCRIPT: _manuscript,
    SourceType.CASE: _case,
}


def build_long_cite(source: Source, user_journals: UserJournals | None = None) -> None:
    """Fill in the source's long forms.

    Raises:
        MissingTitleError: If the record has no title
    """
    pre, post = _LONG_BUILDERS[source.source_type](source, user_journals)
    source.long_cite_with_pin = (pre, post)
    source.long_cite_no_pin = f"{pre}{post}"


# =============================================================================
# Short forms
# =============================================================================

def build_short_cite(source: Source) -> None:
    """Fill in the source's short forms.

    Cases: ``*Short Title*, 5 F.3d 555`` (``*Short Title*, 5 F.3d at 12``
    with a pincite). Everything else: ``Author[, Short Title], *supra*
    note N``.
    """
    if source.is_case:
        csl = source.csl
        pre_pin = _short_title(source)
        reporter = _join(csl.volume, csl.container_title)
        if reporter:
            pre_pin = f"{pre_pin}, {reporter}"
        source.short_cite_pre_pin = pre_pin
        source.short_cite = _join(pre_pin, csl.page)
        return

    parts: list[str] = []
    if source.short_author:
        parts.append(source.short_author)
    if source.hereinafter or not source.short_author:
        parts.append(_short_title(source))
    parts.append(f"{SUPRA} note {source.first_footnote}")
    source.short_cite = ", ".join(parts)
