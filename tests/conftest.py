"""Shared test fixtures for the mdadf test suite."""

from __future__ import annotations

import pytest

from mdadf.config import MdAdfConfig
from mdadf.converter.adf_to_md import AdfToMarkdownRenderer
from mdadf.converter.md_to_adf import MarkdownToAdfConverter


@pytest.fixture
def config() -> MdAdfConfig:
    """Configuration that reads input as markdown."""
    return MdAdfConfig(markdown=True)


@pytest.fixture
def converter(config: MdAdfConfig) -> MarkdownToAdfConverter:
    """Markdown converter using the default test config."""
    return MarkdownToAdfConverter(config)


@pytest.fixture
def renderer() -> AdfToMarkdownRenderer:
    """Document-to-markdown renderer."""
    return AdfToMarkdownRenderer()
