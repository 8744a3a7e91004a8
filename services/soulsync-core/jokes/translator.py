import logging

from jokes.corpus import CORPUS_LANGUAGE
from llm.completion import Completer

logger = logging.getLogger(__name__)

TRANSLATION_PROMPT = (
    "Please translate this short text into {language}. "
    'Keep the translation natural and concise:\n\n"{text}"'
)


async def translate_text(text: str, target_language: str, completer: Completer) -> str:
    """Translate ``text`` into ``target_language``, or return it untouched.

    Translation is best-effort: no model call is made for the corpus'
    own language, and any failure returns the original text.
    """
    if target_language == CORPUS_LANGUAGE:
        return text

    prompt = TRANSLATION_PROMPT.format(language=target_language, text=text)
    try:
        translated = (await completer(prompt)).strip()
    except Exception as e:
        logger.warning(f"Joke translation to {target_language} failed: {e}")
        return text

    if not translated:
        logger.warning(f"Joke translation to {target_language} returned empty output")
        return text
    return translated
