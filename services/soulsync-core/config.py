import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()


def _int_env(name: str, default: int) -> int:
    value = os.getenv(name, "").strip()
    return int(value) if value else default


def _float_env(name: str, default: float) -> float:
    value = os.getenv(name, "").strip()
    return float(value) if value else default


@dataclass(frozen=True)
class Settings:
    """Runtime settings read from the environment (and .env, if present)."""

    llm_provider: str = "gemini"
    llm_temperature: float = 0.3
    llm_max_tokens: int = 1024
    model_timeout_seconds: float = 30.0
    supabase_url: str | None = None
    supabase_key: str | None = None
    messages_table: str = "messages"
    persist_max_attempts: int = 1
    joke_corpus_path: str | None = None
    log_level: str = "INFO"
    port: int = 8083

    @property
    def persistence_enabled(self) -> bool:
        return bool(self.supabase_url and self.supabase_key)

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            llm_provider=os.getenv("LLM_PROVIDER", "gemini").lower(),
            llm_temperature=_float_env("LLM_TEMPERATURE", 0.3),
            llm_max_tokens=_int_env("LLM_MAX_TOKENS", 1024),
            model_timeout_seconds=_float_env("MODEL_TIMEOUT_SECONDS", 30.0),
            supabase_url=os.getenv("SUPABASE_URL") or None,
            supabase_key=os.getenv("SUPABASE_KEY") or None,
            messages_table=os.getenv("SUPABASE_MESSAGES_TABLE", "messages"),
            persist_max_attempts=max(1, _int_env("PERSIST_MAX_ATTEMPTS", 1)),
            joke_corpus_path=os.getenv("JOKE_CORPUS_PATH") or None,
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            port=_int_env("PORT", 8083),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env()
