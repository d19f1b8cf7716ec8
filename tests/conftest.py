"""Shared fixtures and helpers for tests."""

from pathlib import Path

import pytest
from tree_sitter import Language, Parser
from tree_sitter_language_pack import get_language, get_parser

from codex_lsp.publish.memory import InMemoryPublisher

_REPO_ROOT = Path(__file__).parent.parent


# ---------------------------------------------------------------------------
# Auto-marker: tag tests as "unit" or "integration" based on directory
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        test_path = Path(str(item.fspath))
        rel = test_path.relative_to(_REPO_ROOT / "tests")
        parts = rel.parts
        if parts and parts[0] == "integration":
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)


# ---------------------------------------------------------------------------
# Sample sources
# ---------------------------------------------------------------------------

CLIENT_SOURCE = """\
using System;

namespace Sample
{
    public class Client
    {
        private readonly ITelemetryLogger<Client> _logger;

        public Client(ITelemetryLogger<Client> logger)
        {
            _logger = logger;
        }

        public void Run(int attempt)
        {
            _logger.Info("starting");
            _logger.Warn("attempt", attempt);
            _logger.Error(new Exception("boom"));
            _logger.Flush();
            Console.WriteLine("done");
        }
    }
}
"""


# ---------------------------------------------------------------------------
# Shared unit-test fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def queries_dir() -> Path:
    """Return the path to the queries directory."""
    return _REPO_ROOT / "src" / "codex_lsp" / "queries"


@pytest.fixture
def csharp_parser() -> Parser:
    """Return a tree-sitter parser for C#."""
    return get_parser("csharp")


@pytest.fixture
def csharp_language() -> Language:
    """Return the tree-sitter C# language."""
    return get_language("csharp")


@pytest.fixture
def client_source() -> str:
    return CLIENT_SOURCE


@pytest.fixture
def publisher() -> InMemoryPublisher:
    return InMemoryPublisher()
