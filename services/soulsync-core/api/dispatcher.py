"""Routes a ``ChatRequest`` to the joke path or the chat path.

This is the last place a failure can be turned into a well-formed
answer: validation problems become ``ValidationError`` and everything
that escapes a component's own fallback becomes ``ServerError``.
"""

import logging
from typing import Union

from fastapi import BackgroundTasks

from chat.languages import resolve_language
from chat.normalizer import ParsedReply, to_chat_result
from chat.pipeline import run_chat
from errors import ServerError, UpstreamModelError, ValidationError
from jokes.corpus import JokeCorpus
from jokes.translator import translate_text
from llm.completion import Completer
from schemas.message import ChatRequest, ChatResult, JokeResponse
from storage.sink import MessageStore, persist_turn

logger = logging.getLogger(__name__)

EMPTY_TRANSCRIPT_MESSAGE = "Messages are required for a chat"


async def tell_joke(language: str, corpus: JokeCorpus, completer: Completer) -> JokeResponse:
    joke = corpus.random_joke()
    return JokeResponse(joke=await translate_text(joke, language, completer))


async def dispatch(
    request: ChatRequest,
    *,
    completer: Completer,
    store: MessageStore,
    corpus: JokeCorpus,
    background_tasks: BackgroundTasks,
    persist_max_attempts: int = 1,
) -> Union[ChatResult, JokeResponse]:
    language = resolve_language(request.language)

    if request.wants_joke:
        try:
            return await tell_joke(language, corpus, completer)
        except Exception as e:
            logger.error(f"Joke path failed: {e}", exc_info=True)
            raise ServerError() from e

    if not request.messages:
        logger.info("Rejected chat request with no messages")
        raise ValidationError(EMPTY_TRANSCRIPT_MESSAGE)

    try:
        reply = await run_chat(request.messages, language, completer)
    except UpstreamModelError as e:
        logger.error(f"Chat model unavailable: {e}")
        raise ServerError() from e
    except Exception as e:
        logger.error(f"Fatal error in chat path: {e}", exc_info=True)
        raise ServerError() from e

    result = to_chat_result(reply)
    if isinstance(reply, ParsedReply):
        background_tasks.add_task(
            persist_turn,
            store,
            request.messages[-1].content,
            result.reply_text,
            max_attempts=persist_max_attempts,
        )
    return result
