"""Test configuration and shared fixtures.

Pattern: Pytest fixtures, conftest.py
"""

from collections.abc import Callable
from pathlib import Path

import pytest

from supra.core.config import Settings, get_settings
from supra.pre import render_document
from supra.schemas.csl import CSLSource, build_csl_lib

FIXTURES = Path(__file__).parent / "fixtures"


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Keep cached settings from leaking between tests."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def test_settings() -> Settings:
    """Create test settings with safe defaults."""
    return Settings(
        environment="test",
        log_level="DEBUG",
        case_lookback_footnotes=5,
        footnote_offset=0,
        smallcaps=False,
    )


# ============================================================================
# Bibliography Fixtures
# ============================================================================

@pytest.fixture(scope="session")
def library_json() -> str:
    """The reference bibliography: books, chapters, articles, manuscripts and cases."""
    return (FIXTURES / "library.json").read_text(encoding="utf-8")


@pytest.fixture
def library(library_json: str) -> dict[str, CSLSource]:
    """The reference bibliography keyed by id."""
    return build_csl_lib(library_json)


# ============================================================================
# Pipeline Fixtures
# ============================================================================

@pytest.fixture
def render(library_json: str, test_settings: Settings) -> Callable[..., str]:
    """Render markdown against the reference bibliography."""

    def _render(markdown: str, **kwargs) -> str:
        kwargs.setdefault("settings", test_settings)
        return render_document(markdown, library_json, **kwargs)

    return _render
