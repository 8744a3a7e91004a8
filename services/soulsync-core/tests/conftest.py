"""
Shared pytest fixtures for the SoulSync core test suite.

The language model and the message store are always replaced by
doubles (see ``tests.doubles``); the HTTP client swaps them in through
``app.dependency_overrides``.
"""

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from api.routes import get_completer, get_joke_corpus
from jokes.corpus import JokeCorpus
from main import app
from storage.sink import get_message_store
from tests.doubles import TEST_JOKE, StubCompleter


@pytest.fixture
def completer() -> StubCompleter:
    return StubCompleter()


@pytest.fixture
def store() -> MagicMock:
    return MagicMock()


@pytest.fixture
def corpus() -> JokeCorpus:
    return JokeCorpus([TEST_JOKE])


@pytest.fixture
def client(completer, store, corpus):
    app.dependency_overrides[get_completer] = lambda: completer
    app.dependency_overrides[get_message_store] = lambda: store
    app.dependency_overrides[get_joke_corpus] = lambda: corpus
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
