"""supra: a legal-citation preprocessor for footnoted markdown.

Rewrites ``[@key]`` citation markers into long-form, short-form and
*Id.* citations from a CSL-JSON bibliography, and resolves footnote
cross references.
"""

from supra.core.exceptions import SupraError
from supra.pre import render_document

__version__ = "0.1.0"

__all__ = ["SupraError", "__version__", "render_document"]
