"""Unit tests for the parser and syntax tree."""

import pytest

from supra.pre.lexer import tokenize
from supra.pre.parser import parse, parse_pincite
from supra.pre.tree import (
    CiteBreak,
    Citation,
    CrossRef,
    Footnote,
    Punctuation,
    Signal,
    Text,
    iter_footnotes,
)


class TestParse:
    """Tests for building the document tree."""

    def test_text_and_footnote(self) -> None:
        """Test that text and footnotes become top-level branches."""
        tree = parse(tokenize("Before.^[Inside.] After."))

        assert tree == [
            Text("Before."),
            Footnote(number=1, contents=[Text("Inside.")]),
            Text(" After."),
        ]

    def test_footnotes_numbered_in_order(self) -> None:
        """Test that footnotes are numbered from one."""
        tree = parse(tokenize("A.^[One.] B.^[Two.] C.^[Three.]"))

        assert [footnote.number for footnote in iter_footnotes(tree)] == [1, 2, 3]

    def test_offset_shifts_numbering(self) -> None:
        """Test that an offset continues numbering from earlier documents."""
        tree = parse(tokenize("A.^[One.] B.^[Two.]"), offset=10)

        assert [footnote.number for footnote in iter_footnotes(tree)] == [11, 12]

    def test_footnote_id(self) -> None:
        """Test that the id marker is stored without its brackets."""
        tree = parse(tokenize("A.^[[?first] Contents.]"))

        footnote = tree[1]
        assert footnote.id == "first"
        assert footnote.contents == [Text(" Contents.")]

    def test_citation_fields(self) -> None:
        """Test that citation tokens fill the Citation fields."""
        tree = parse(tokenize("A.^[*See* [@smith2021] at 4 (discussing it).]"))

        assert tree[1].contents == [
            Citation(
                reference="[@smith2021]",
                punctuation=".",
                pre_cite=Signal("*See* "),
                pincite="4",
                parenthetical="(discussing it)",
            ),
        ]

    def test_punctuation_pre_cite(self) -> None:
        """Test that punctuation before a citation is attached to it."""
        tree = parse(tokenize("A.^[Text. [@smith2021].]"))

        assert tree[1].contents == [
            Text("Text"),
            Citation(reference="[@smith2021]", punctuation=".", pre_cite=Punctuation(". ")),
        ]

    def test_crossref_and_cite_break(self) -> None:
        """Test that cross references and cite breaks become branches."""
        tree = parse(tokenize("A.^[[$] Text, *see* note [?first].]"))

        assert tree[1].contents == [
            CiteBreak("[$]"),
            Text(" Text, *see* note "),
            CrossRef("[?first]"),
            Text("."),
        ]

    def test_signal_before_cite_break_becomes_text(self) -> None:
        """Test that a signal not followed by a reference is kept as text."""
        tree = parse(tokenize("A.^[*See* [$] Other source.]"))

        assert tree[1].contents == [
            Text("*See* "),
            CiteBreak("[$]"),
            Text(" Other source."),
        ]

    def test_text_outside_footnotes_only(self) -> None:
        """Test that citations outside footnotes are left as text."""
        tree = parse(tokenize("Cited [@smith2021] in text."))

        assert tree == [Text("Cited [@smith2021] in text.")]


class TestParsePincite:
    """Tests for pincite normalization."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            (" at 100", "100"),
            (" at 100-05", "100-05"),
            (" 12", "12"),
            (" § 1983(a)", "§ 1983(a)"),
            (" at", None),
            ("   ", None),
            (" attorney 5", "attorney 5"),
        ],
    )
    def test_parse_pincite(self, raw: str, expected: str | None) -> None:
        """Test that only a leading 'at' keyword is removed."""
        assert parse_pincite(raw) == expected


class TestTree:
    """Tests for tree helpers."""

    def test_citation_key(self) -> None:
        """Test that the key drops the reference decoration."""
        citation = Citation(reference="[@smith2021]", punctuation=".")

        assert citation.key == "smith2021"

    def test_crossref_target(self) -> None:
        """Test that the target drops the cross-reference decoration."""
        assert CrossRef("[?first]").target == "first"

    def test_punctuation_mark(self) -> None:
        """Test that the mark is the punctuation without whitespace."""
        assert Punctuation("; ").mark == ";"

    def test_iter_footnotes_skips_text(self) -> None:
        """Test that only footnotes are yielded."""
        tree = [Text("a"), Footnote(number=1), Text("b"), Footnote(number=2)]

        assert [footnote.number for footnote in iter_footnotes(tree)] == [1, 2]
