"""Shared test fixtures for the mdnotion test suite."""

from __future__ import annotations

import pytest

from mdnotion.config import ConverterConfig
from mdnotion.converter.md_to_notion import MarkdownToNotionConverter


@pytest.fixture
def config() -> ConverterConfig:
    """Default converter configuration."""
    return ConverterConfig()


@pytest.fixture
def converter(config: ConverterConfig) -> MarkdownToNotionConverter:
    """Markdown-to-Notion converter using the default config."""
    return MarkdownToNotionConverter(config)
