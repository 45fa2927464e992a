"""
Pytest configuration and fixtures for string suggestion tests.
"""
import os
from pathlib import Path
from typing import AsyncGenerator, Generator

import pytest
from httpx import AsyncClient, ASGITransport

# Keep the lifespan from looking for a real word list
os.environ.setdefault("SUGGESTION_ENABLED", "false")

from string_suggestion.main import app
from string_suggestion.services import suggestion as suggestion_module
from string_suggestion.services.suggestion import initialize_suggestion_service


SAMPLE_WORDS = [
    "the",
    "then",
    "hello",
    "house",
    "install",
    "uninstall",
    "package",
    "load",
    "list",
]


@pytest.fixture
def wordlist_path(tmp_path) -> Path:
    """
    Write a small word list (one word per line, with a blank line and a duplicate).
    """
    path = tmp_path / "words.txt"
    path.write_text("\n".join(SAMPLE_WORDS + ["", "the"]) + "\n", encoding="utf-8")
    return path


@pytest.fixture
def loaded_service(wordlist_path: Path) -> Generator:
    """
    Initialize the suggestion service singleton from the sample word list.
    Resets the singleton after the test.
    """
    assert initialize_suggestion_service(str(wordlist_path)) is True
    yield suggestion_module.get_suggestion_service()
    suggestion_module.reset_suggestion_service()


@pytest.fixture
def no_service() -> Generator[None, None, None]:
    """Make sure no word list is loaded."""
    suggestion_module.reset_suggestion_service()
    yield
    suggestion_module.reset_suggestion_service()


@pytest.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    """
    Create an async test client for the FastAPI application.
    The lifespan is not run; tests load the word list through fixtures.
    """
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as ac:
        yield ac
