"""User-supplied journal abbreviations.

The table is a YAML mapping (JSON works too) of full journal name to
abbreviation:

    Journal of More Stuff: J. More Stuff
    Legal Stuff Law Review: Legal Stuff L. Rev.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import yaml

from supra.core.exceptions import UserJournalsError
from supra.core.logging import get_logger

logger = get_logger(__name__)


def load_user_journals(source: str | Mapping[str, Any] | None) -> dict[str, str] | None:
    """Load and validate a journal abbreviation table.

    Args:
        source: YAML/JSON text, an already-built mapping, or None

    Returns:
        Full name to abbreviation, or None if no table was given

    Raises:
        UserJournalsError: If the text does not parse or is not a
            mapping of strings to strings
    """
    if source is None:
        return None
    if isinstance(source, str):
        try:
            data = yaml.safe_load(source)
        except yaml.YAMLError as e:
            raise UserJournalsError(f"Could not parse journal abbreviations: {e}", cause=e) from e
    else:
        data = source

    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise UserJournalsError(
            f"Journal abbreviations must be a mapping, got {type(data).__name__}"
        )

    journals: dict[str, str] = {}
    for name, abbreviation in data.items():
        if not isinstance(name, str) or not isinstance(abbreviation, str):
            raise UserJournalsError(
                f"Journal abbreviation entries must be text: {name!r}: {abbreviation!r}"
            )
        journals[name] = abbreviation
    logger.debug("Loaded user journals", journals=len(journals))
    return journals
