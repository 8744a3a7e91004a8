"""Single-shot text completion on top of a LangChain chat model.

Everything above this module sees the model as ``await completer(prompt)``
returning plain text. Any failure, including the deadline expiring,
comes back as ``UpstreamModelError``.
"""

import asyncio
import logging
from typing import Callable, Optional, Protocol

from langchain_core.language_models import BaseChatModel
from langchain_core.messages import HumanMessage

from errors import UpstreamModelError

logger = logging.getLogger(__name__)


class Completer(Protocol):
    async def __call__(self, prompt: str) -> str: ...


def _content_to_text(content) -> str:
    # Some providers return a list of content blocks instead of a string.
    if isinstance(content, str):
        return content
    parts = []
    for block in content or []:
        if isinstance(block, str):
            parts.append(block)
        elif isinstance(block, dict) and block.get("type") == "text":
            parts.append(block.get("text", ""))
    return "".join(parts)


class LLMCompleter:
    """Wraps either a ready chat model or a factory that builds one on first use.

    A factory that raises (missing API key, missing provider package)
    surfaces as ``UpstreamModelError`` from the call, not at construction,
    so callers that never reach the model are unaffected.
    """

    def __init__(
        self,
        llm: Optional[BaseChatModel] = None,
        timeout_seconds: float = 30.0,
        *,
        llm_factory: Optional[Callable[[], BaseChatModel]] = None,
    ):
        if llm is None and llm_factory is None:
            raise ValueError("LLMCompleter needs an llm or an llm_factory")
        self._llm = llm
        self._llm_factory = llm_factory
        self.timeout_seconds = timeout_seconds

    @property
    def llm(self) -> BaseChatModel:
        if self._llm is None:
            try:
                self._llm = self._llm_factory()
            except Exception as e:
                logger.error(f"Could not initialise LLM provider: {e}")
                raise UpstreamModelError("model unavailable") from e
        return self._llm

    async def __call__(self, prompt: str) -> str:
        llm = self.llm
        try:
            result = await asyncio.wait_for(
                llm.ainvoke([HumanMessage(content=prompt)]),
                timeout=self.timeout_seconds,
            )
        except asyncio.TimeoutError as e:
            logger.error(f"Model call exceeded {self.timeout_seconds}s deadline")
            raise UpstreamModelError("model call timed out") from e
        except Exception as e:
            logger.error(f"Model call failed: {e}", exc_info=True)
            raise UpstreamModelError("model call failed") from e

        return _content_to_text(result.content)
