"""Citation preprocessing pipeline.

Stages, in order:
    library   -> CSL-JSON records keyed by id
    lexer     -> tokens
    parser    -> syntax tree
    sourcemap -> built sources
    crossref  -> footnote id map
    render    -> text
    options   -> optional small caps

Example:
    ```python
    from supra.pre import render_document

    text = render_document(markdown, library_json, offset=0, smallcaps=False)
    ```
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from supra.core.config import Settings, get_settings
from supra.core.logging import configure_logging, get_logger, log_stage
from supra.pre.crossref import build_crossref_map
from supra.pre.lexer import tokenize
from supra.pre.options import apply_smallcaps
from supra.pre.parser import parse
from supra.pre.render import render as render_tree
from supra.pre.sourcemap import build_source_map
from supra.pre.tree import iter_footnotes
from supra.pre.userjournals import load_user_journals
from supra.schemas.csl import build_csl_lib

logger = get_logger(__name__)


def render_document(
    markdown_text: str,
    bibliography_json_text: str,
    journal_abbreviations: str | Mapping[str, Any] | None = None,
    offset: int | None = None,
    smallcaps: bool | None = None,
    settings: Settings | None = None,
) -> str:
    """Replace citation and cross-reference markers with final text.

    Args:
        markdown_text: Manuscript with ``^[...]`` footnotes and ``[@key]`` citations
        bibliography_json_text: CSL-JSON array of bibliography records
        journal_abbreviations: YAML/JSON text or mapping of journal
            abbreviations overriding the built-in table
        offset: Footnotes preceding this document (default from settings)
        smallcaps: Rewrite bold spans as small caps (default from settings)
        settings: Settings to use instead of the environment's

    Returns:
        The rendered manuscript

    Raises:
        LibraryError: If the bibliography cannot be read
        UserJournalsError: If the abbreviation table is malformed
        LexerError: If a footnote, citation or parenthetical is unterminated
        MissingTitleError: If a cited source has no title
    """
    configure_logging()
    settings = settings or get_settings()
    offset = settings.footnote_offset if offset is None else offset
    smallcaps = settings.smallcaps if smallcaps is None else smallcaps

    with log_stage("library"):
        library = build_csl_lib(bibliography_json_text)
        user_journals = load_user_journals(journal_abbreviations)
    with log_stage("lexer"):
        tokens = tokenize(markdown_text)
    with log_stage("parser"):
        tree = parse(tokens, offset)
    with log_stage("sourcemap"):
        sources = build_source_map(tree, library, user_journals)
    with log_stage("crossref"):
        crossrefs = build_crossref_map(tree)
    with log_stage("render"):
        text = render_tree(
            tree,
            sources,
            crossrefs,
            offset=offset,
            lookback=settings.case_lookback_footnotes,
        )
    if smallcaps:
        with log_stage("options"):
            text = apply_smallcaps(text, settings.smallcaps_style)

    logger.info(
        "Rendered document",
        sources=len(sources),
        footnotes=sum(1 for _ in iter_footnotes(tree)),
    )
    return text


__all__ = ["render_document"]
