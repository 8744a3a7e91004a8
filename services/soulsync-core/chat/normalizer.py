"""Turn raw chat-model text into a ``ChatResult``.

The model is asked for ``{"responseText": ..., "detectedEmotion": ...}``
but frequently wraps it in a markdown fence, or ignores the format
entirely. ``parse_model_reply`` classifies the text as either a
``ParsedReply`` or an ``UnstructuredReply``; ``normalize_reply`` maps
both to a result the caller can always display.
"""

import json
import logging
import re
from dataclasses import dataclass
from typing import Union

from errors import MalformedModelOutput
from schemas.message import ChatResult

logger = logging.getLogger(__name__)

VALID_EMOTIONS = frozenset({"sad", "neutral"})
FALLBACK_EMOTION = "neutral"

_OPENING_FENCE = re.compile(r"^```[ \t]*(?:json)?[ \t]*\n?", re.IGNORECASE)
_CLOSING_FENCE = re.compile(r"\n?[ \t]*```$")


@dataclass(frozen=True)
class ParsedReply:
    reply_text: str
    emotion: str


@dataclass(frozen=True)
class UnstructuredReply:
    raw_text: str


ModelReply = Union[ParsedReply, UnstructuredReply]


def strip_code_fence(raw: str) -> str:
    text = raw.strip()
    text = _OPENING_FENCE.sub("", text, count=1)
    text = _CLOSING_FENCE.sub("", text, count=1)
    return text.strip()


def coerce_emotion(value) -> str:
    label = value.strip().lower() if isinstance(value, str) else ""
    if label not in VALID_EMOTIONS:
        logger.debug(f"Coercing unrecognised emotion {value!r} to {FALLBACK_EMOTION!r}")
        return FALLBACK_EMOTION
    return label


def _decode(raw: str) -> ParsedReply:
    try:
        payload = json.loads(strip_code_fence(raw))
    except json.JSONDecodeError as e:
        raise MalformedModelOutput(f"not valid JSON: {e}") from e

    if not isinstance(payload, dict):
        raise MalformedModelOutput(f"expected a JSON object, got {type(payload).__name__}")
    reply_text = payload.get("responseText")
    if not isinstance(reply_text, str):
        raise MalformedModelOutput("missing string field 'responseText'")

    return ParsedReply(
        reply_text=reply_text,
        emotion=coerce_emotion(payload.get("detectedEmotion")),
    )


def parse_model_reply(raw: str) -> ModelReply:
    try:
        return _decode(raw)
    except MalformedModelOutput as e:
        logger.warning(f"Failed to parse model JSON response: {e}. Raw response: {raw!r}")
        return UnstructuredReply(raw_text=raw)


def to_chat_result(reply: ModelReply) -> ChatResult:
    if isinstance(reply, ParsedReply):
        return ChatResult(reply_text=reply.reply_text, emotion=reply.emotion)
    return ChatResult(reply_text=reply.raw_text, emotion=FALLBACK_EMOTION)


def normalize_reply(raw: str) -> ChatResult:
    return to_chat_result(parse_model_reply(raw))
