from langchain_google_genai import (
    ChatGoogleGenerativeAI,
    HarmBlockThreshold,
    HarmCategory,
)

from .config import settings

DEFAULT_SAFETY_SETTINGS = {
    HarmCategory.HARM_CATEGORY_HATE_SPEECH: HarmBlockThreshold.BLOCK_LOW_AND_ABOVE,
    HarmCategory.HARM_CATEGORY_DANGEROUS_CONTENT: HarmBlockThreshold.BLOCK_MEDIUM_AND_ABOVE,
}


def get_chat_model(model: str | None = None, **kwargs) -> ChatGoogleGenerativeAI:
    """Chat model for the yield flows, configured from settings unless overridden."""
    kwargs.setdefault("google_api_key", kwargs.pop("api_key", settings.GEMINI_API_KEY))
    kwargs.setdefault("safety_settings", DEFAULT_SAFETY_SETTINGS)
    kwargs.setdefault("temperature", settings.GEMINI_TEMPERATURE)
    return ChatGoogleGenerativeAI(model=model or settings.GEMINI_MODEL, **kwargs)
