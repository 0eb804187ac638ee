"""Short journal names.

Lookup order: the caller's own table, then JOURNAL_NAMES, then a name
assembled word by word from the replacement tables.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Final

from supra.core.logging import get_logger
from supra.pre.sourcemap.replacements import (
    ABBREVIATIONS,
    GEOGRAPHY,
    INSTITUTIONS,
    MULTIWORD,
    REMOVALS,
)

logger = get_logger(__name__)

# Journals whose abbreviation cannot be derived from the replacement tables
JOURNAL_NAMES: Final[dict[str, str]] = {
    "ABA Journal": "A.B.A. J.",
    "ABA Journal of Labor & Employment Law": "A.B.A. J. Lab. & Emp. L.",
    "Administrative Law Review": "Admin. L. Rev.",
    "California Law Review": "Calif. L. Rev.",
    "Columbia Law Review": "Colum. L. Rev.",
    "Cornell Law Review": "Cornell L. Rev.",
    "Duke Law Journal": "Duke L.J.",
    "Georgetown Law Journal": "Geo. L.J.",
    "Harvard Journal of Law & Public Policy": "Harv. J.L. & Pub. Pol'y",
    "Harvard Law Review": "Harv. L. Rev.",
    "Journal of Legal Studies": "J. Legal Stud.",
    "Michigan Law Review": "Mich. L. Rev.",
    "New York University Law Review": "N.Y.U. L. Rev.",
    "Northwestern University Law Review": "Nw. U. L. Rev.",
    "Stanford Law Review": "Stan. L. Rev.",
    "Supreme Court Review": "Sup. Ct. Rev.",
    "Texas Law Review": "Tex. L. Rev.",
    "UCLA Law Review": "UCLA L. Rev.",
    "University of Chicago Law Review": "U. Chi. L. Rev.",
    "University of Pennsylvania Law Review": "U. Pa. L. Rev.",
    "Virginia Law Review": "Va. L. Rev.",
    "Yale Law Journal": "Yale L.J.",
}


def abbreviate_journal(long_journal: str) -> str:
    """Build a short journal name from the replacement tables.

    Example:
        >>> abbreviate_journal("Journal of Appellate Practice and Process")
        'J. App. Prac. & Process'
    """
    journal = long_journal
    for phrase, replacement in MULTIWORD.items():
        journal = journal.replace(phrase, replacement)

    words: list[str] = []
    for word in journal.split():
        if word in REMOVALS:
            continue
        words.append(
            INSTITUTIONS.get(word) or ABBREVIATIONS.get(word) or GEOGRAPHY.get(word) or word
        )
    return " ".join(words)


def build_short_journal(
    long_journal: str,
    user_journals: Mapping[str, str] | None = None,
) -> str:
    """Return the short form of a journal name.

    Args:
        long_journal: Full journal name
        user_journals: Caller-supplied abbreviations, consulted first

    Returns:
        The abbreviation, synthesized (with a warning) if no table has it
    """
    if user_journals and long_journal in user_journals:
        return user_journals[long_journal]
    if long_journal in JOURNAL_NAMES:
        return JOURNAL_NAMES[long_journal]

    short_journal = abbreviate_journal(long_journal)
    logger.warning(
        "No short journal name found; using a synthesized abbreviation",
        journal=long_journal,
        short_journal=short_journal,
    )
    return short_journal
