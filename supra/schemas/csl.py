"""CSL-JSON bibliography schemas.

Models:
- Name: One author, editor or translator
- DateVariable: A CSL date (``issued``)
- CSLSource: One bibliography record

Only the subset of CSL-JSON the citation formats need is modelled; any
other field in the library is ignored.

Reference: https://citeproc-js.readthedocs.io/en/latest/csl-json/markup.html
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError, field_validator

from supra.core.exceptions import LibraryError
from supra.core.logging import get_logger

logger = get_logger(__name__)


class Name(BaseModel):
    """A CSL name variable.

    Attributes:
        family: Family name
        given: Given name(s)
        non_dropping_particle: Particle kept with the family name ("van")
        suffix: Generational suffix ("Jr.", "III")
        literal: Institutional name, used verbatim
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    family: str | None = None
    given: str | None = None
    non_dropping_particle: str | None = Field(default=None, alias="non-dropping-particle")
    suffix: str | None = None
    literal: str | None = None

    @property
    def is_empty(self) -> bool:
        """True when the name has nothing printable."""
        return not (self.family or self.literal)


class DateVariable(BaseModel):
    """A CSL date variable.

    Attributes:
        date_parts: List of [year, month, day] lists (range = two entries)
        season: Optional season
        literal: Unparsed date string
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    date_parts: list[list[int]] | None = Field(default=None, alias="date-parts")
    season: str | None = None
    literal: str | None = None

    @property
    def year(self) -> str | None:
        """First year in the date, if any."""
        if self.date_parts and self.date_parts[0]:
            return str(self.date_parts[0][0])
        return None


class CSLSource(BaseModel):
    """A single bibliography record.

    Example:
        >>> CSLSource.model_validate({
        ...     "id": "smith2021",
        ...     "type": "book",
        ...     "title": "A Book",
        ...     "author": [{"family": "Smith", "given": "Jane"}],
        ... })
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    id: str
    type: str | None = None
    author: list[Name] | None = None
    editor: list[Name] | None = None
    translator: list[Name] | None = None
    issued: DateVariable | None = None
    container_title: str | None = Field(default=None, alias="container-title")
    container_title_short: str | None = Field(default=None, alias="container-title-short")
    edition: str | None = None
    page: str | None = None
    title: str | None = None
    title_short: str | None = Field(default=None, alias="title-short")
    url: str | None = Field(default=None, alias="URL")
    volume: str | None = None
    authority: str | None = None

    @field_validator("id", "edition", "page", "volume", mode="before")
    @classmethod
    def coerce_number(cls, value: Any) -> Any:
        """CSL-JSON allows bare numbers for numeric variables."""
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    @property
    def year(self) -> str | None:
        """Year the source was issued."""
        return self.issued.year if self.issued else None


_LIBRARY_ADAPTER = TypeAdapter(list[CSLSource])


def build_csl_lib(json_text: str) -> dict[str, CSLSource]:
    """Deserialize a CSL-JSON library into records keyed by id.

    Args:
        json_text: JSON array of CSL records

    Returns:
        Mapping of bibliography key to record

    Raises:
        LibraryError: If the JSON is malformed or a record is invalid
    """
    try:
        records = _LIBRARY_ADAPTER.validate_json(json_text)
    except ValidationError as e:
        first = e.errors()[0]
        location = ".".join(str(part) for part in first["loc"]) or "document"
        raise LibraryError(
            f"Could not read bibliography: {first['msg']} (at {location})",
            errors=e.errors(include_url=False),
            cause=e,
        ) from e

    library: dict[str, CSLSource] = {}
    for record in records:
        if record.id in library:
            logger.warning("Duplicate id in bibliography; keeping the first", key=record.id)
            continue
        library[record.id] = record
    logger.debug("Loaded bibliography", sources=len(library))
    return library


__all__ = ["CSLSource", "DateVariable", "Name", "build_csl_lib"]
