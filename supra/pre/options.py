"""Post-processing options applied to rendered text."""

import re

from supra.core.constants import SMALLCAPS_STYLE

BOLD_SPAN = re.compile(r"\*\*(.+?)\*\*")


def apply_smallcaps(text: str, style: str = SMALLCAPS_STYLE) -> str:
    """Rewrite ``**bold**`` spans as spans in a small caps character style.

    Example:
        >>> apply_smallcaps("**Book Author**, **Title**")
        '[Book Author]{custom-style="True Small Caps"}, [Title]{custom-style="True Small Caps"}'
    """
    return BOLD_SPAN.sub(lambda match: f'[{match.group(1)}]{{custom-style="{style}"}}', text)
