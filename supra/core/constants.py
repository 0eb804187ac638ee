"""Constants for the citation preprocessor.

Centralizes the annotation markers, the signal table and the citation
style conventions so that lexer, resolver and renderer agree on them.

Reference: The Bluebook, Rules 1.2 (signals), 4.1 (id.), 4.2 (supra),
10.9 (short forms for cases).
"""

from typing import Final


# =============================================================================
# Annotation Markers
# =============================================================================

FOOTNOTE_OPEN: Final[str] = "^["
FOOTNOTE_CLOSE: Final[str] = "]"
CITATION_MARKER: Final[str] = "[@"
CROSSREF_MARKER: Final[str] = "[?"
CITE_BREAK_MARKER: Final[str] = "[$"

# Characters that may end a citation inside a footnote
CITATION_TERMINATORS: Final[str] = ".,;"

# Pre-cite punctuation recognized when no signal precedes a citation
PRE_CITE_PUNCTUATION: Final[str] = "?!:;,."

# Punctuation that closes a citation clause
SENTENCE_TERMINATORS: Final[str] = ".!?"

# Punctuation after which a following "id." stays lowercase
CLAUSE_CONTINUERS: Final[str] = ",;:"

PINCITE_KEYWORD: Final[str] = "at"


# =============================================================================
# Signals (Bluebook Rule 1.2)
# =============================================================================

# Order matters: longer phrases must be tried before their prefixes.
SIGNALS: Final[tuple[str, ...]] = (
    "See generally, e.g.",
    "See generally",
    "But cf., e.g.",
    "But cf.",
    "But see, e.g.",
    "But see",
    "Contra",
    "Compare",
    "Cf., e.g.",
    "Cf.",
    "See also, e.g.",
    "See also",
    "See, e.g.",
    "See",
    "Accord",
    "E.g.",
)

# Signals that only ever appear mid-clause and have no capitalized form
CLAUSE_SIGNALS: Final[tuple[str, ...]] = ("with",)


# =============================================================================
# Citation Style
# =============================================================================

# A case cited within this many footnotes may use its short form
DEFAULT_CASE_LOOKBACK: Final[int] = 5

SUPREME_COURT: Final[str] = "U.S. Supreme Court"

SMALLCAPS_STYLE: Final[str] = "True Small Caps"

ID_CAPITALIZED: Final[str] = "*Id.*"
ID_LOWERCASE: Final[str] = "*id.*"
SUPRA: Final[str] = "*supra*"
