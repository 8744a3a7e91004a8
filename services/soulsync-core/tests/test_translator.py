import asyncio

import pytest

from errors import UpstreamModelError
from jokes.translator import translate_text
from tests.doubles import TEST_JOKE, StubCompleter


@pytest.mark.asyncio
async def test_native_language_short_circuits():
    completer = StubCompleter(reply="should not be used")
    assert await translate_text(TEST_JOKE, "English", completer) == TEST_JOKE
    assert completer.call_count == 0


@pytest.mark.asyncio
async def test_translation_is_requested_once_and_trimmed():
    completer = StubCompleter(reply="  साइकिल क्यों गिर गई?  \n")
    result = await translate_text(TEST_JOKE, "Hindi", completer)

    assert result == "साइकिल क्यों गिर गई?"
    assert completer.call_count == 1
    assert "into Hindi" in completer.prompts[0]
    assert f'"{TEST_JOKE}"' in completer.prompts[0]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "error",
    [UpstreamModelError("boom"), asyncio.TimeoutError(), RuntimeError("unexpected")],
)
async def test_model_failure_returns_original(error):
    completer = StubCompleter(error=error)
    assert await translate_text(TEST_JOKE, "Telugu", completer) == TEST_JOKE


@pytest.mark.asyncio
async def test_blank_translation_returns_original():
    completer = StubCompleter(reply="   ")
    assert await translate_text(TEST_JOKE, "Marathi", completer) == TEST_JOKE
