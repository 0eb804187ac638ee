"""Unit tests for short journal names."""

from unittest.mock import patch

import pytest

from supra.pre.sourcemap.journals import JOURNAL_NAMES, abbreviate_journal, build_short_journal


class TestAbbreviateJournal:
    """Tests for synthesizing journal abbreviations."""

    @pytest.mark.parametrize(
        ("journal", "expected"),
        [
            ("Journal of Appellate Practice and Process", "J. App. Prac. & Process"),
            ("New York Journal of Products Liability Law", "N.Y. J. Prod. Liab. L."),
            ("Boston College Review of Rhode Island Law", "B.C. Rev. R.I. L."),
            ("Not a Journal Title", "Not J. Title"),
            ("University of Manuscripts Law Review", "U. Manuscripts L. Rev."),
            ("The Other Journal of Journal Articles", "The Other J. J. Articles"),
        ],
    )
    def test_abbreviate(self, journal: str, expected: str) -> None:
        """Test abbreviation from the replacement tables."""
        assert abbreviate_journal(journal) == expected


class TestBuildShortJournal:
    """Tests for journal lookup order."""

    def test_user_table_first(self) -> None:
        """Test that a user abbreviation wins over everything else."""
        user_journals = {"Journal of Stuff that Won't Abbreviate": "J. Stuff Won't Abbrev."}

        assert build_short_journal("Journal of Stuff that Won't Abbreviate", user_journals) == (
            "J. Stuff Won't Abbrev."
        )

    def test_user_table_overrides_builtin(self) -> None:
        """Test that the user table overrides the built-in names."""
        assert build_short_journal("Yale Law Journal", {"Yale Law Journal": "YLJ"}) == "YLJ"

    def test_builtin_names(self) -> None:
        """Test a journal whose name cannot be synthesized."""
        assert JOURNAL_NAMES["ABA Journal of Labor & Employment Law"] == "A.B.A. J. Lab. & Emp. L."
        assert build_short_journal("ABA Journal of Labor & Employment Law") == (
            "A.B.A. J. Lab. & Emp. L."
        )

    def test_synthesized_name_warns(self) -> None:
        """Test that falling back to synthesis logs a warning."""
        with patch("supra.pre.sourcemap.journals.logger") as mock_logger:
            short = build_short_journal("Journal of Appellate Practice and Process")

        assert short == "J. App. Prac. & Process"
        mock_logger.warning.assert_called_once()

    def test_table_hit_does_not_warn(self) -> None:
        """Test that a table lookup is silent."""
        with patch("supra.pre.sourcemap.journals.logger") as mock_logger:
            build_short_journal("Harvard Law Review")

        mock_logger.warning.assert_not_called()
