from typing import Sequence

from schemas.message import Message

HISTORY_PLACEHOLDER = "This is the beginning of the conversation."

PERSONA_PROMPT = """You are SoulSync, an advanced AI companion.
Your Primary Goal is to be a helpful, intelligent, and empathetic companion. Understand the user's true intent, even if their message has typos. Use common sense to maintain a natural conversation.

You have two communication styles in your toolbox:
1. The Empathetic Listener: Use this when the user is emotional. Be a warm, validating presence. Ask gentle, open-ended questions. Avoid giving direct advice.
2. The Knowledgeable Assistant: Use this when the user asks for facts or help. Be clear, direct, and helpful. Get straight to the point.

Critical Instructions:
- Use the Chat History for context. If a user asks "try a new one," they mean a new joke.
- Handle typos gracefully. If the user says "is it jock," understand they mean "joke".
- You are a generative AI; you don't have a fixed list of jokes you can tell."""

TASK_PROMPT = """Your Task:
1. Analyze the user's intent and choose a communication style.
2. Based only on the user's latest message, detect if the emotion is "sad" or "neutral". No other labels are allowed.
3. Formulate your response in {language}."""

FORMAT_PROMPT = """You MUST reply in this strict JSON format, with exactly these two fields:
{{
  "responseText": "Your helpful, context-aware response.",
  "detectedEmotion": "sad_or_neutral"
}}"""


def format_history(messages: Sequence[Message]) -> str:
    """Render every message except the last as ``role: content`` lines."""
    lines = [f"{msg.role}: {msg.content}" for msg in messages[:-1]]
    return "\n".join(lines) or HISTORY_PLACEHOLDER


def build_chat_prompt(messages: Sequence[Message], language: str) -> str:
    if not messages:
        raise ValueError("cannot build a chat prompt from an empty transcript")

    latest = messages[-1]
    sections = [
        PERSONA_PROMPT,
        TASK_PROMPT.format(language=language),
        FORMAT_PROMPT.format(),
        f"Chat History:\n{format_history(messages)}",
        f'User\'s Latest Message: "{latest.content}"',
    ]
    return "\n\n".join(sections)
