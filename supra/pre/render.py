"""Renderer: walks the tree and decides the form of every citation.

The decision for one citation is a pure function of the citation, its
source and the citation history (``RenderState``). ``Renderer`` threads
that state through the tree in document order and assembles the text.

Citation history is tracked by clause. A clause is the run of citations
up to the next one ending in ``.``, ``!`` or ``?``. A citation may be
``Id.`` when the clause before it (still open, or just closed) cites
exactly one source and that source is this one.

Reference: The Bluebook, Rules 4.1 (id.), 4.2 (supra), 10.9 (cases).
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field, replace
from enum import Enum

from supra.core.constants import (
    CLAUSE_CONTINUERS,
    DEFAULT_CASE_LOOKBACK,
    ID_CAPITALIZED,
    ID_LOWERCASE,
    PINCITE_KEYWORD,
    SENTENCE_TERMINATORS,
)
from supra.core.logging import get_logger
from supra.pre.sourcemap.source import Source
from supra.pre.tree import (
    Branch,
    CiteBreak,
    Citation,
    CrossRef,
    Footnote,
    Punctuation,
    Signal,
    Text,
)

logger = get_logger(__name__)


class CiteForm(str, Enum):
    """Forms a citation can take."""

    LONG = "long"
    SHORT = "short"
    ID = "id"


@dataclass(frozen=True, slots=True)
class CitationDecision:
    """The chosen form and the full text of one citation."""

    form: CiteForm
    text: str


@dataclass(frozen=True, slots=True)
class RenderState:
    """Citation history at a point in the document.

    Attributes:
        footnote: Number of the current footnote
        clause_sources: References cited in the current (or last) clause
        clause_closed: The clause ended with sentence punctuation
        last_pincite: Pincite of the most recent citation
        previous_punctuation: Ending punctuation of the citation just
            before, while only whitespace follows it in the footnote
        rendered: Footnotes each reference has been rendered in
    """

    footnote: int = 0
    clause_sources: tuple[str, ...] = ()
    clause_closed: bool = True
    last_pincite: str | None = None
    previous_punctuation: str | None = None
    rendered: Mapping[str, tuple[int, ...]] = field(default_factory=dict)

    def enter_footnote(self) -> RenderState:
        return replace(self, footnote=self.footnote + 1, previous_punctuation=None)

    def after_text(self, text: str) -> RenderState:
        if text.strip() and self.previous_punctuation is not None:
            return replace(self, previous_punctuation=None)
        return self

    def cite_break(self) -> RenderState:
        """Forget the citation history so no Id. can follow."""
        return replace(
            self,
            clause_sources=(),
            clause_closed=True,
            last_pincite=None,
            previous_punctuation=None,
        )

    def was_rendered(self, reference: str) -> bool:
        return reference in self.rendered

    def rendered_since(self, reference: str, earliest: int) -> bool:
        """Whether the reference was rendered in footnote ``earliest`` or later."""
        return any(number >= earliest for number in self.rendered.get(reference, ()))


# =============================================================================
# Decision
# =============================================================================

def _id_text(citation: Citation, state: RenderState) -> str:
    """``*Id.*`` or ``*id.*`` depending on what comes before it."""
    pre_cite = citation.pre_cite
    if isinstance(pre_cite, Signal):
        return ID_LOWERCASE
    if isinstance(pre_cite, Punctuation):
        return ID_LOWERCASE if pre_cite.mark in CLAUSE_CONTINUERS else ID_CAPITALIZED
    if state.previous_punctuation and state.previous_punctuation in CLAUSE_CONTINUERS:
        return ID_LOWERCASE
    return ID_CAPITALIZED


def _choose(
    citation: Citation,
    source: Source,
    state: RenderState,
    lookback: int,
) -> CitationDecision:
    reference = citation.reference
    pincite = citation.pincite

    if state.clause_sources == (reference,):
        text = _id_text(citation, state)
        if pincite is not None and pincite != state.last_pincite:
            text = f"{text} {PINCITE_KEYWORD} {pincite}"
        return CitationDecision(CiteForm.ID, text)

    if source.is_case:
        # The footnote a case first appears in always carries the full cite.
        if state.footnote == source.first_footnote:
            return CitationDecision(CiteForm.LONG, source.long_form(pincite))
        if state.rendered_since(reference, state.footnote - lookback):
            return CitationDecision(CiteForm.SHORT, source.short_form(pincite))
        return CitationDecision(CiteForm.LONG, source.long_form(pincite))

    if state.was_rendered(reference):
        return CitationDecision(CiteForm.SHORT, source.short_form(pincite))
    return CitationDecision(CiteForm.LONG, source.long_form(pincite))


def decide_citation(
    citation: Citation,
    source: Source,
    state: RenderState,
    lookback: int = DEFAULT_CASE_LOOKBACK,
) -> tuple[CitationDecision, RenderState]:
    """Render one citation and advance the citation history.

    Args:
        citation: The citation branch
        source: Its resolved source
        state: History before this citation
        lookback: Footnotes within which a case stays short

    Returns:
        The decision (form and complete text, pre-cite included) and the
        history after this citation
    """
    decision = _choose(citation, source, state, lookback)
    text = decision.text
    bare_id = decision.form is CiteForm.ID and text in (ID_CAPITALIZED, ID_LOWERCASE)

    if citation.parenthetical:
        text = f"{text} {citation.parenthetical}"
        bare_id = False
    # "Id." already ends in a period.
    if not (bare_id and citation.punctuation == "."):
        text = f"{text}{citation.punctuation}"
    if citation.pre_cite is not None:
        text = f"{citation.pre_cite.contents}{text}"

    reference = citation.reference
    if state.clause_closed:
        clause = (reference,)
    elif reference in state.clause_sources:
        clause = state.clause_sources
    else:
        clause = (*state.clause_sources, reference)

    rendered = dict(state.rendered)
    rendered[reference] = (*rendered.get(reference, ()), state.footnote)

    new_state = replace(
        state,
        clause_sources=clause,
        clause_closed=citation.punctuation in SENTENCE_TERMINATORS,
        last_pincite=citation.pincite,
        previous_punctuation=citation.punctuation,
        rendered=rendered,
    )
    return CitationDecision(decision.form, text), new_state


def render_unresolved(citation: Citation) -> str:
    """Reassemble a citation whose source could not be resolved."""
    parts = [citation.pre_cite.contents if citation.pre_cite else "", citation.reference]
    if citation.pincite:
        parts.append(f" {PINCITE_KEYWORD} {citation.pincite}")
    if citation.parenthetical:
        parts.append(f" {citation.parenthetical}")
    parts.append(citation.punctuation)
    return "".join(parts)


# =============================================================================
# Tree walk
# =============================================================================

class Renderer:
    """Renders a parsed document, one run per instance.

    Example:
        ```python
        renderer = Renderer(sources, crossrefs, offset=0)
        text = renderer.render(tree)
        ```
    """

    def __init__(
        self,
        sources: Mapping[str, Source],
        crossrefs: Mapping[str, int],
        offset: int = 0,
        lookback: int = DEFAULT_CASE_LOOKBACK,
    ) -> None:
        self.sources = sources
        self.crossrefs = crossrefs
        self.lookback = lookback
        self.state = RenderState(footnote=offset)

    def render(self, tree: Sequence[Branch]) -> str:
        return "".join(self._render_branch(branch) for branch in tree)

    def _render_branch(self, branch: Branch) -> str:
        if isinstance(branch, Text):
            self.state = self.state.after_text(branch.contents)
            return branch.contents
        if isinstance(branch, Footnote):
            return self._render_footnote(branch)
        if isinstance(branch, Citation):
            return self._render_citation(branch)
        if isinstance(branch, CrossRef):
            return self._render_crossref(branch)
        if isinstance(branch, CiteBreak):
            self.state = self.state.cite_break()
            return ""
        raise TypeError(f"Unknown branch type: {type(branch).__name__}")

    def _render_footnote(self, footnote: Footnote) -> str:
        self.state = self.state.enter_footnote()
        body = "".join(self._render_branch(branch) for branch in footnote.contents)
        return f"^[{body.strip()}]"

    def _render_citation(self, citation: Citation) -> str:
        source = self.sources.get(citation.reference)
        if source is None:
            logger.warning(
                "Citation left unresolved",
                reference=citation.reference,
                footnote=self.state.footnote,
            )
            self.state = self.state.cite_break()
            return render_unresolved(citation)

        decision, self.state = decide_citation(citation, source, self.state, self.lookback)
        source.cited = True
        logger.debug(
            "Rendered citation",
            key=source.id,
            form=decision.form.value,
            footnote=self.state.footnote,
        )
        return decision.text

    def _render_crossref(self, crossref: CrossRef) -> str:
        self.state = self.state.after_text(crossref.contents)
        number = self.crossrefs.get(crossref.target)
        if number is None:
            logger.warning(
                "Cross reference to unknown footnote id",
                id=crossref.target,
                footnote=self.state.footnote,
            )
            return crossref.contents
        return str(number)


def render(
    tree: Sequence[Branch],
    sources: Mapping[str, Source],
    crossrefs: Mapping[str, int],
    offset: int = 0,
    lookback: int = DEFAULT_CASE_LOOKBACK,
) -> str:
    """Render a parsed document to text."""
    return Renderer(sources, crossrefs, offset=offset, lookback=lookback).render(tree)


__all__ = [
    "CitationDecision",
    "CiteForm",
    "RenderState",
    "Renderer",
    "decide_citation",
    "render",
    "render_unresolved",
]
