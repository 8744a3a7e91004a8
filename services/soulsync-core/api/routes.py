import logging
from datetime import datetime, timezone
from typing import Union

from fastapi import APIRouter, BackgroundTasks, Depends

from api.dispatcher import dispatch
from config import Settings, get_settings
from jokes.corpus import JokeCorpus, get_corpus
from llm.client import get_llm, model_name
from llm.completion import Completer, LLMCompleter
from schemas.message import ChatRequest, ChatResult, JokeResponse, LivenessResponse
from storage.sink import MessageStore, get_message_store

logger = logging.getLogger(__name__)

router = APIRouter()

_completer: LLMCompleter | None = None


def get_completer(settings: Settings = Depends(get_settings)) -> Completer:
    global _completer
    if _completer is None:

        def build_llm():
            llm = get_llm(settings)
            logger.info(f"Using {settings.llm_provider} model {model_name(llm)}")
            return llm

        _completer = LLMCompleter(
            timeout_seconds=settings.model_timeout_seconds,
            llm_factory=build_llm,
        )
    return _completer


def get_joke_corpus(settings: Settings = Depends(get_settings)) -> JokeCorpus:
    return get_corpus(settings.joke_corpus_path)


@router.get("/health")
async def health():
    return {"status": "ok"}


@router.get("/api/chat", response_model=LivenessResponse)
async def liveness():
    return LivenessResponse(
        message="SoulSync API is running perfectly!",
        status="healthy",
        timestamp=datetime.now(timezone.utc).isoformat(),
    )


@router.post("/api/chat", response_model=Union[ChatResult, JokeResponse])
async def chat(
    request: ChatRequest,
    background_tasks: BackgroundTasks,
    settings: Settings = Depends(get_settings),
    completer: Completer = Depends(get_completer),
    store: MessageStore = Depends(get_message_store),
    corpus: JokeCorpus = Depends(get_joke_corpus),
):
    return await dispatch(
        request,
        completer=completer,
        store=store,
        corpus=corpus,
        background_tasks=background_tasks,
        persist_max_attempts=settings.persist_max_attempts,
    )
