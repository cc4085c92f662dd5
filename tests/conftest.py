# tests/conftest.py
"""Shared test fixtures and helpers.

Directives are built the way the recipe runner builds them: arguments are
parsed from an invocation line and passed to initialize().

Hypothesis Configuration:
- "ci" profile: Fast tests for CI (100 examples) - default
- "nightly" profile: Thorough tests (1000 examples)
- "debug" profile: Minimal tests with verbose output (10 examples)

Set profile via environment variable:
    HYPOTHESIS_PROFILE=nightly pytest tests/property/
"""

import logging
import os
from collections.abc import Callable, Iterator

import pytest
import structlog
from hypothesis import Verbosity, settings
from structlog.testing import capture_logs

from wrangler.contracts import ExecutorContext
from wrangler.core.invocation import parse_invocation
from wrangler.directives.extract_xpath import XPathExtractor

settings.register_profile("ci", max_examples=100, deadline=None)
settings.register_profile("nightly", max_examples=1000, deadline=None)
settings.register_profile("debug", max_examples=10, verbosity=Verbosity.verbose, deadline=None)
settings.load_profile(os.environ.get("HYPOTHESIS_PROFILE", "ci"))

BOOKSTORE_XML = "<bookstore><book><title>Dune</title></book></bookstore>"


@pytest.fixture
def ctx() -> ExecutorContext:
    """Create minimal executor context."""
    return ExecutorContext(run_id="test-run", environment="testing")


@pytest.fixture
def make_extractor() -> Iterator[Callable[..., XPathExtractor]]:
    """Factory for initialized XPathExtractor instances.

    Every directive created through the factory is destroyed at teardown.
    """
    created: list[XPathExtractor] = []

    def _make(xpath: str, source: str = "xmlpayload", target: str = "title") -> XPathExtractor:
        directive = XPathExtractor()
        escaped = xpath.replace("\\", "\\\\").replace("'", "\\'")
        directive.initialize(parse_invocation(f"extract-xpath '{escaped}' :{source} :{target}", XPathExtractor.define()))
        created.append(directive)
        return directive

    yield _make

    for directive in created:
        directive.destroy()


@pytest.fixture
def captured_logs() -> Iterator[list[dict[str, object]]]:
    """Capture structlog events emitted during a test."""
    with capture_logs() as logs:
        yield logs


@pytest.fixture
def restore_logging() -> Iterator[None]:
    """Undo configure_logging(): root handlers, root level and structlog config."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers = handlers
    root.setLevel(level)
    structlog.reset_defaults()
