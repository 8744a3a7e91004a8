import os
from typing import Optional

from langchain_core.language_models import BaseChatModel

from config import Settings, get_settings


def get_llm(settings: Optional[Settings] = None) -> BaseChatModel:
    """Factory function to get the LLM based on the LLM_PROVIDER setting."""
    settings = settings or get_settings()
    provider = settings.llm_provider

    if provider == "gemini":
        from langchain_google_genai import ChatGoogleGenerativeAI
        return ChatGoogleGenerativeAI(
            model=os.getenv("GEMINI_MODEL", "gemini-1.5-flash-latest"),
            google_api_key=os.getenv("GEMINI_API_KEY") or os.getenv("GOOGLE_API_KEY"),
            temperature=settings.llm_temperature,
            max_output_tokens=settings.llm_max_tokens,
        )
    elif provider == "anthropic":
        from langchain_anthropic import ChatAnthropic
        return ChatAnthropic(
            model=os.getenv("ANTHROPIC_MODEL", "claude-sonnet-4-20250514"),
            api_key=os.getenv("ANTHROPIC_API_KEY"),
            temperature=settings.llm_temperature,
            max_tokens=settings.llm_max_tokens,
        )
    elif provider == "openai":
        from langchain_openai import ChatOpenAI
        return ChatOpenAI(
            model=os.getenv("OPENAI_MODEL", "gpt-4o-mini"),
            api_key=os.getenv("OPENAI_API_KEY"),
            temperature=settings.llm_temperature,
            max_tokens=settings.llm_max_tokens,
        )
    elif provider == "openai-compatible":
        from langchain_openai import ChatOpenAI
        return ChatOpenAI(
            model=os.getenv("COMPAT_MODEL", "llama3.1"),
            base_url=os.getenv("COMPAT_BASE_URL", "http://localhost:11434/v1"),
            api_key=os.getenv("COMPAT_API_KEY", "dummy"),
            temperature=settings.llm_temperature,
            max_tokens=settings.llm_max_tokens,
        )
    else:
        raise ValueError(f"Unsupported LLM_PROVIDER: {provider}")


def model_name(llm: BaseChatModel) -> str:
    return str(getattr(llm, "model", None) or getattr(llm, "model_name", "unknown"))
