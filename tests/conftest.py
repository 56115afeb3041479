"""
Pytest configuration and shared fixtures.
"""

import pytest

from hamdoc.document import AsciiDocDocument, Document
from hamdoc.renderers import HtmlRenderer, TextRenderer

from samples import StrongMatcher


# ============================================================================
# Pytest Hooks
# ============================================================================


def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line("markers", "integration: mark as integration test")


# ============================================================================
# Base Fixtures
# ============================================================================


@pytest.fixture
def html_renderer():
    """Create an HTML renderer with default options."""
    return HtmlRenderer()


@pytest.fixture
def text_renderer():
    """Create a normalized-text renderer with default options."""
    return TextRenderer()


@pytest.fixture
def make_asciidoc():
    """Factory building a fresh AsciiDoc document from text."""
    return AsciiDocDocument


@pytest.fixture
def strong_document():
    """Document recognizing only ``*strong*`` spans."""
    return Document("Some *bold* words and *more*.", matchers=[StrongMatcher()])
