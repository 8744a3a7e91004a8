import logging
from typing import Sequence

from chat.normalizer import ModelReply, parse_model_reply
from chat.prompts import build_chat_prompt
from llm.completion import Completer
from schemas.message import Message

logger = logging.getLogger(__name__)


async def run_chat(
    messages: Sequence[Message],
    language: str,
    completer: Completer,
) -> ModelReply:
    """Compile the prompt, call the model once and classify its output."""
    prompt = build_chat_prompt(messages, language)
    logger.debug(f"Chat prompt built for {len(messages)} messages in {language}")
    raw = await completer(prompt)
    return parse_model_reply(raw)
