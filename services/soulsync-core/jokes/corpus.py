import json
import logging
import random
from functools import lru_cache
from pathlib import Path
from typing import Optional, Sequence

from errors import ConfigurationError

logger = logging.getLogger(__name__)

CORPUS_LANGUAGE = "English"
DEFAULT_CORPUS_PATH = Path(__file__).parent / "data" / "jokes.json"


class JokeCorpus:
    """Fixed, read-only list of jokes with uniform random selection."""

    def __init__(self, jokes: Sequence[str], rng: Optional[random.Random] = None):
        self._jokes = tuple(j for j in jokes if j and j.strip())
        if not self._jokes:
            raise ConfigurationError("joke corpus is empty")
        self._rng = rng or random.Random()

    def __len__(self) -> int:
        return len(self._jokes)

    def random_joke(self) -> str:
        return self._rng.choice(self._jokes)


def load_corpus(path: Optional[Path] = None) -> JokeCorpus:
    """Load jokes from a JSON list of ``{"id": ..., "body": ...}`` objects."""
    path = Path(path or DEFAULT_CORPUS_PATH)
    try:
        entries = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"could not read joke corpus {path}: {e}") from e

    if not isinstance(entries, list) or not all(isinstance(entry, dict) for entry in entries):
        raise ConfigurationError(f"joke corpus {path} must be a JSON list of objects with a 'body'")

    corpus = JokeCorpus([str(entry.get("body") or "") for entry in entries])
    logger.info(f"Loaded {len(corpus)} jokes from {path}")
    return corpus


@lru_cache(maxsize=1)
def get_corpus(path: Optional[str] = None) -> JokeCorpus:
    return load_corpus(Path(path) if path else None)
