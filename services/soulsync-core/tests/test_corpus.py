import json
import random

import pytest

from errors import ConfigurationError
from jokes.corpus import JokeCorpus, load_corpus


def test_empty_corpus_is_a_configuration_error():
    with pytest.raises(ConfigurationError):
        JokeCorpus([])


def test_blank_entries_do_not_count():
    with pytest.raises(ConfigurationError):
        JokeCorpus(["", "   "])


def test_random_joke_comes_from_corpus():
    jokes = ["a", "b", "c"]
    corpus = JokeCorpus(jokes, rng=random.Random(7))
    picks = {corpus.random_joke() for _ in range(200)}
    assert picks == set(jokes)


def test_bundled_corpus_loads():
    corpus = load_corpus()
    assert len(corpus) > 0
    assert corpus.random_joke().strip()


def test_load_corpus_from_custom_file(tmp_path):
    path = tmp_path / "jokes.json"
    path.write_text(json.dumps([{"id": "1", "body": "Knock knock."}]))
    assert load_corpus(path).random_joke() == "Knock knock."


def test_load_corpus_rejects_unreadable_file(tmp_path):
    path = tmp_path / "jokes.json"
    path.write_text("not json")
    with pytest.raises(ConfigurationError):
        load_corpus(path)


@pytest.mark.parametrize(
    "content",
    [
        ["just a string joke"],
        {"id": "1", "body": "an object, not a list"},
        [{"id": "1", "body": "fine"}, "not an object"],
    ],
)
def test_load_corpus_rejects_wrong_shape(tmp_path, content):
    path = tmp_path / "jokes.json"
    path.write_text(json.dumps(content))
    with pytest.raises(ConfigurationError):
        load_corpus(path)
