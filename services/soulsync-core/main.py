import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from api.routes import router
from config import get_settings
from chat.languages import supported_locales
from errors import ServerError, SoulSyncError
from jokes.corpus import get_corpus
from schemas.message import ErrorResponse

settings = get_settings()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s | %(levelname)-8s | %(name)-20s | %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # An empty or unreadable corpus is a deployment error; fail the boot.
    get_corpus(settings.joke_corpus_path)
    logger.info(
        f"SoulSync core ready (provider={settings.llm_provider}, "
        f"locales={', '.join(supported_locales())})"
    )
    yield


app = FastAPI(title="SoulSync - Companion Core", lifespan=lifespan)
app.include_router(router)


def _error_body(message: str) -> dict:
    return ErrorResponse(error=message).model_dump()


@app.exception_handler(SoulSyncError)
async def soulsync_error_handler(request: Request, exc: SoulSyncError):
    return JSONResponse(status_code=exc.status_code, content=_error_body(exc.public_message))


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    logger.info(f"Rejected malformed request body: {exc.errors()}")
    return JSONResponse(status_code=400, content=_error_body("Invalid request body"))


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled error on {request.url.path}: {exc}", exc_info=exc)
    return JSONResponse(status_code=500, content=_error_body(ServerError.public_message))


if __name__ == "__main__":
    uvicorn.run("main:app", host="0.0.0.0", port=settings.port, reload=False)
