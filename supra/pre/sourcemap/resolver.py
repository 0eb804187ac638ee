"""Source resolution: from citations in the tree to built Sources.

Four passes, each over the complete result of the one before:

1. Discovery: create a Source for each cited key found in the library.
2. Hereinafter: flag sources whose short author is shared.
3. Long cites.
4. Short cites.
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Mapping, Sequence

from supra.core.exceptions import SourceBuildError
from supra.core.logging import get_logger
from supra.pre.sourcemap.build import build_long_cite, build_short_cite, new_source
from supra.pre.sourcemap.source import SUPPORTED_TYPES, Source, SourceType
from supra.pre.tree import Branch, Citation, iter_footnotes
from supra.schemas.csl import CSLSource

logger = get_logger(__name__)

SourceMap = dict[str, Source]


def discover_sources(tree: Sequence[Branch], library: Mapping[str, CSLSource]) -> SourceMap:
    """Create a Source for every resolvable citation, keyed by raw reference.

    Citations that cannot be resolved are logged once per reference and
    left out of the map.
    """
    sources: SourceMap = {}
    skipped: set[str] = set()

    for footnote in iter_footnotes(tree):
        for branch in footnote.contents:
            if not isinstance(branch, Citation):
                continue
            reference = branch.reference
            if reference in sources:
                footnotes = sources[reference].all_footnotes
                if footnotes[-1] != footnote.number:
                    footnotes.append(footnote.number)
                continue
            if reference in skipped:
                continue

            source = _resolve(branch, library, footnote.number)
            if source is None:
                skipped.add(reference)
            else:
                sources[reference] = source

    logger.debug("Discovered sources", sources=len(sources), unresolved=len(skipped))
    return sources


def _resolve(citation: Citation, library: Mapping[str, CSLSource], footnote: int) -> Source | None:
    key = citation.key
    csl = library.get(key)
    if csl is None:
        logger.warning("Source not found in library", key=key, footnote=footnote)
        return None
    if csl.type is None:
        logger.warning("Source has no type", key=key, footnote=footnote)
        return None
    source_type = SourceType.from_csl(csl.type)
    if source_type not in SUPPORTED_TYPES:
        logger.warning("Unsupported source type", key=key, csl_type=csl.type, footnote=footnote)
        return None
    try:
        return new_source(csl, source_type, footnote)
    except SourceBuildError as e:
        logger.warning("Could not build source", key=e.key, reason=str(e), footnote=footnote)
        return None


def mark_hereinafters(sources: SourceMap) -> None:
    """Flag every source whose short author another source shares."""
    groups: dict[str, list[Source]] = defaultdict(list)
    for source in sources.values():
        if source.short_author:
            groups[source.short_author.replace("**", "")].append(source)
    for author, members in groups.items():
        if len(members) > 1:
            logger.debug("Shared short author", author=author, sources=[s.id for s in members])
            for source in members:
                source.hereinafter = True


def build_source_map(
    tree: Sequence[Branch],
    library: Mapping[str, CSLSource],
    user_journals: Mapping[str, str] | None = None,
) -> SourceMap:
    """Resolve and build every cited source.

    Args:
        tree: Parsed document
        library: Bibliography keyed by id
        user_journals: Optional journal abbreviations overriding the built-ins

    Returns:
        Sources keyed by raw reference (``[@key]``)

    Raises:
        MissingTitleError: If a cited source has no title
    """
    sources = discover_sources(tree, library)
    mark_hereinafters(sources)
    for source in sources.values():
        build_long_cite(source, user_journals)
    for source in sources.values():
        build_short_cite(source)
    return sources
