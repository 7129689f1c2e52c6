"""Pytest configuration and shared fixtures for the ast2latex test suite.

This module provides shared fixtures and test configuration used across the
entire test suite.
"""

import logging
import os

import pytest
from hypothesis import Phase, Verbosity, settings

from ast2latex.ast import (
    Document,
    Emphasis,
    Heading,
    Paragraph,
    Text,
)

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)

# Load profile from environment or use default
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


@pytest.fixture(autouse=True)
def _restore_root_logger():
    """Restore root logger handlers and level after tests that configure logging."""
    root_logger = logging.getLogger()
    saved_handlers = list(root_logger.handlers)
    saved_level = root_logger.level
    yield
    for handler in root_logger.handlers:
        if handler not in saved_handlers:
            handler.close()
    root_logger.handlers[:] = saved_handlers
    root_logger.setLevel(saved_level)


@pytest.fixture
def section_document() -> Document:
    """Provide the heading-plus-paragraph document used in the examples.

    Returns
    -------
    Document
        ``# Section`` followed by ``Some _Markdown_ text.``

    """
    return Document(
        children=[
            Heading(level=1, children=[Text(content="Section")]),
            Paragraph(
                children=[
                    Text(content="Some "),
                    Emphasis(children=[Text(content="Markdown")]),
                    Text(content=" text."),
                ]
            ),
        ]
    )
