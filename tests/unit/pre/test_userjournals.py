"""Unit tests for user journal abbreviation tables."""

import pytest

from supra.core.exceptions import UserJournalsError
from supra.pre.userjournals import load_user_journals


class TestLoadUserJournals:
    """Tests for load_user_journals."""

    def test_none(self) -> None:
        """Test that no table gives None."""
        assert load_user_journals(None) is None

    def test_yaml_mapping(self) -> None:
        """Test a YAML mapping of names to abbreviations."""
        journals = load_user_journals(
            "Journal of Stuff that Won't Abbreviate: J. Stuff Won't Abbrev.\n"
            "Legal Stuff Law Review: Legal Stuff L. Rev.\n"
        )

        assert journals == {
            "Journal of Stuff that Won't Abbreviate": "J. Stuff Won't Abbrev.",
            "Legal Stuff Law Review": "Legal Stuff L. Rev.",
        }

    def test_json_mapping(self) -> None:
        """Test that JSON text is accepted."""
        assert load_user_journals('{"Journal of Stuff": "J. Stuff"}') == {
            "Journal of Stuff": "J. Stuff",
        }

    def test_mapping_passthrough(self) -> None:
        """Test that an already-built mapping is validated and copied."""
        table = {"Journal of Stuff": "J. Stuff"}

        journals = load_user_journals(table)

        assert journals == table
        assert journals is not table

    def test_empty_document(self) -> None:
        """Test that an empty document gives an empty table."""
        assert load_user_journals("") == {}

    def test_invalid_yaml(self) -> None:
        """Test that unparseable text raises UserJournalsError."""
        with pytest.raises(UserJournalsError) as exc_info:
            load_user_journals("key: [unclosed")

        assert exc_info.value.__cause__ is not None

    def test_not_a_mapping(self) -> None:
        """Test that a list is rejected."""
        with pytest.raises(UserJournalsError, match="mapping"):
            load_user_journals("- Journal of Stuff\n- J. Stuff\n")

    def test_non_string_entry(self) -> None:
        """Test that non-text abbreviations are rejected."""
        with pytest.raises(UserJournalsError, match="text"):
            load_user_journals("Journal of Stuff: 12\n")
