"""Unit tests for CSL-JSON bibliography schemas."""

import json

import pytest
from pydantic import ValidationError

from supra.core.exceptions import LibraryError
from supra.schemas.csl import CSLSource, DateVariable, Name, build_csl_lib


class TestCSLSource:
    """Tests for the CSLSource model."""

    def test_hyphenated_fields(self) -> None:
        """Test that CSL's hyphenated names map to attributes."""
        source = CSLSource.model_validate(
            {
                "id": "a",
                "type": "article-journal",
                "container-title": "Journal of Stuff",
                "container-title-short": "J. Stuff",
                "title-short": "Stuff",
                "URL": "www.example.com",
            }
        )

        assert source.container_title == "Journal of Stuff"
        assert source.container_title_short == "J. Stuff"
        assert source.title_short == "Stuff"
        assert source.url == "www.example.com"

    def test_numbers_coerced_to_text(self) -> None:
        """Test that bare numbers are accepted for numeric variables."""
        source = CSLSource.model_validate({"id": 12, "volume": 99, "page": 1000, "edition": 2})

        assert source.id == "12"
        assert source.volume == "99"
        assert source.page == "1000"
        assert source.edition == "2"

    def test_unknown_fields_ignored(self) -> None:
        """Test that fields outside the model are dropped."""
        source = CSLSource.model_validate({"id": "a", "citation-key": "a", "number": "21-1"})

        assert source.id == "a"

    def test_year(self) -> None:
        """Test that the year comes from the first date part."""
        source = CSLSource.model_validate({"id": "a", "issued": {"date-parts": [[2022, 7, 25]]}})

        assert source.year == "2022"
        assert CSLSource(id="b").year is None

    def test_frozen(self) -> None:
        """Test that records are immutable."""
        source = CSLSource(id="a")

        with pytest.raises(ValidationError):
            source.title = "Changed"


class TestNameAndDate:
    """Tests for Name and DateVariable."""

    def test_particle_alias(self) -> None:
        """Test that the hyphenated particle field is read."""
        name = Name.model_validate({"family": "Beethoven", "non-dropping-particle": "van"})

        assert name.non_dropping_particle == "van"

    def test_empty_name(self) -> None:
        """Test that a name without family or literal is empty."""
        assert Name(given="Only").is_empty
        assert not Name(family="Smith").is_empty
        assert not Name(literal="American Law Institute").is_empty

    def test_date_without_parts(self) -> None:
        """Test a literal date."""
        assert DateVariable(literal="Spring 2021").year is None


class TestBuildCslLib:
    """Tests for loading a bibliography."""

    def test_reference_library(self, library_json: str) -> None:
        """Test that the reference bibliography loads completely."""
        library = build_csl_lib(library_json)

        assert len(library) == len(json.loads(library_json))
        assert library["PlaintiffDefendant1991"].authority == "1st Cir."

    def test_duplicate_id_keeps_first(self) -> None:
        """Test that a repeated id keeps its first record."""
        text = json.dumps([{"id": "a", "title": "First"}, {"id": "a", "title": "Second"}])

        assert build_csl_lib(text)["a"].title == "First"

    def test_malformed_json(self) -> None:
        """Test that invalid JSON raises LibraryError."""
        with pytest.raises(LibraryError) as exc_info:
            build_csl_lib("[{")

        assert exc_info.value.errors
        assert exc_info.value.__cause__ is not None

    def test_invalid_record(self) -> None:
        """Test that a record of the wrong shape names its location."""
        text = json.dumps([{"id": "a"}, {"id": "b", "author": "Not a list"}])

        with pytest.raises(LibraryError, match=r"at 1\.author"):
            build_csl_lib(text)

    def test_not_a_list(self) -> None:
        """Test that a top-level object is rejected."""
        with pytest.raises(LibraryError):
            build_csl_lib('{"id": "a"}')
