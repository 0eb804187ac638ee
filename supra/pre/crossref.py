"""Cross-reference map from footnote ids to footnote numbers."""

from __future__ import annotations

from collections.abc import Sequence

from supra.core.logging import get_logger
from supra.pre.tree import Branch, iter_footnotes

logger = get_logger(__name__)

CrossRefMap = dict[str, int]


def build_crossref_map(tree: Sequence[Branch]) -> CrossRefMap:
    """Map every footnote id to its footnote number.

    Example:
        ``^[[?first] Text.]`` as the third footnote yields ``{"first": 3}``.
    """
    crossrefs: CrossRefMap = {}
    for footnote in iter_footnotes(tree):
        if not footnote.id:
            continue
        if footnote.id in crossrefs:
            logger.warning(
                "Footnote id used twice; cross references go to the first",
                id=footnote.id,
                footnote=footnote.number,
                first=crossrefs[footnote.id],
            )
            continue
        crossrefs[footnote.id] = footnote.number
    return crossrefs
