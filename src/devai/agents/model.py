import logging

from langchain.chat_models import init_chat_model
from langchain_core.messages import HumanMessage, SystemMessage

from devai.config import Settings
from devai.errors import ConfigurationError, ModelRequestFailed

logger = logging.getLogger(__name__)


class ModelClient:
    """Single-shot text generation over a LangChain chat model."""

    def __init__(self, model) -> None:
        self.model = model

    def generate(self, prompt: str, system_instruction: str) -> str:
        messages = [
            SystemMessage(content=system_instruction),
            HumanMessage(content=prompt),
        ]
        logger.debug("Sending prompt (%d chars) to the chat model", len(prompt))
        try:
            response = self.model.invoke(messages)
        except Exception as exc:
            raise ModelRequestFailed(str(exc)) from exc
        return _content_text(response.content)


def _content_text(content) -> str:
    if isinstance(content, str):
        return content
    parts = []
    for part in content or []:
        if isinstance(part, str):
            parts.append(part)
        elif isinstance(part, dict) and isinstance(part.get("text"), str):
            parts.append(part["text"])
    return "".join(parts)


def make_client(settings: Settings) -> ModelClient:
    if not settings.api_key:
        raise ConfigurationError(
            "No API key configured. Set GEMINI_API_KEY (or DEVAI_API_KEY) in the environment or a .env file."
        )
    kwargs = {
        "model": settings.model,
        "temperature": settings.temperature,
        "api_key": settings.api_key,
        # failures surface to the caller as-is
        "max_retries": 0,
    }
    if settings.base_url:
        kwargs["base_url"] = settings.base_url
    logger.debug("Initialising chat model %s (base_url=%s)", settings.model, settings.base_url)
    return ModelClient(init_chat_model(**kwargs))
