"""Source resolver: builds the long and short citation forms of cited sources."""

from supra.pre.sourcemap.build import build_long_cite, build_short_cite, new_source
from supra.pre.sourcemap.journals import JOURNAL_NAMES, abbreviate_journal, build_short_journal
from supra.pre.sourcemap.resolver import (
    SourceMap,
    build_source_map,
    discover_sources,
    mark_hereinafters,
)
from supra.pre.sourcemap.source import SUPPORTED_TYPES, Source, SourceType

__all__ = [
    "JOURNAL_NAMES",
    "SUPPORTED_TYPES",
    "Source",
    "SourceMap",
    "SourceType",
    "abbreviate_journal",
    "build_long_cite",
    "build_short_cite",
    "build_short_journal",
    "build_source_map",
    "discover_sources",
    "mark_hereinafters",
    "new_source",
]
