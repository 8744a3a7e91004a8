"""Best-effort write of each chat turn to the message store.

``persist_turn`` runs as a FastAPI background task after the response
has been sent. It never raises: a failed write is logged and dropped.
"""

import logging
from typing import Any, Optional, Protocol

from starlette.concurrency import run_in_threadpool

from config import Settings, get_settings
from errors import PersistenceError
from utils.retry import with_retry

logger = logging.getLogger(__name__)


class MessageStore(Protocol):
    def insert_messages(self, rows: list[dict]) -> None: ...


class SupabaseMessageStore:
    def __init__(self, client: Any, table: str = "messages"):
        self.client = client
        self.table = table

    def insert_messages(self, rows: list[dict]) -> None:
        try:
            self.client.table(self.table).insert(rows).execute()
        except Exception as e:
            raise PersistenceError(f"insert into '{self.table}' failed: {e}") from e


class NullMessageStore:
    """Used when no store is configured; writes are logged and dropped."""

    def insert_messages(self, rows: list[dict]) -> None:
        logger.debug(f"Message store not configured, dropping {len(rows)} rows")


def create_message_store(settings: Settings) -> MessageStore:
    if not settings.persistence_enabled:
        logger.warning("SUPABASE_URL/SUPABASE_KEY not set. Messages will not be stored.")
        return NullMessageStore()

    from supabase import create_client

    try:
        client = create_client(settings.supabase_url, settings.supabase_key)
    except Exception as e:
        logger.error(f"Could not create Supabase client, messages will not be stored: {e}")
        return NullMessageStore()
    return SupabaseMessageStore(client, table=settings.messages_table)


async def persist_turn(
    store: MessageStore,
    user_text: str,
    reply_text: str,
    *,
    max_attempts: int = 1,
    initial_delay: float = 0.5,
) -> None:
    rows = [
        {"content": user_text, "role": "user"},
        {"content": reply_text, "role": "assistant"},
    ]

    async def _insert() -> None:
        await run_in_threadpool(store.insert_messages, rows)

    try:
        await with_retry(_insert, max_attempts=max_attempts, initial_delay=initial_delay)
    except Exception as e:
        logger.error(f"Failed to store messages: {e}", exc_info=not isinstance(e, PersistenceError))


_store: Optional[MessageStore] = None


def get_message_store() -> MessageStore:
    """FastAPI dependency; the store is created on first use."""
    global _store
    if _store is None:
        _store = create_message_store(get_settings())
    return _store
