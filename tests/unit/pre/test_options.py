"""Unit tests for rendering options."""

from supra.pre.options import apply_smallcaps


class TestApplySmallcaps:
    """Tests for the small caps rewrite."""

    def test_bold_spans_rewritten(self) -> None:
        """Test that every bold span becomes a small caps span."""
        text = "**Book Author**, **Book Title** (2021)."

        assert apply_smallcaps(text) == (
            '[Book Author]{custom-style="True Small Caps"}, '
            '[Book Title]{custom-style="True Small Caps"} (2021).'
        )

    def test_italics_untouched(self) -> None:
        """Test that single-asterisk italics are not rewritten."""
        assert apply_smallcaps("*Id.* at 4.") == "*Id.* at 4."

    def test_custom_style(self) -> None:
        """Test that the style name can be changed."""
        assert apply_smallcaps("**J. Articles**", style="Small Caps") == (
            '[J. Articles]{custom-style="Small Caps"}'
        )
