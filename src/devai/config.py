import os

from pydantic import BaseModel, ValidationError

from devai.errors import ConfigurationError

DEFAULT_MODEL = "openai:gemini-2.5-flash"
DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com/v1beta/openai/"


class Settings(BaseModel):
    """
    Runtime settings, read from the environment (and a ``.env`` file
    loaded by the CLI).

    GEMINI_API_KEY / DEVAI_API_KEY : key for the chat model endpoint
    DEVAI_MODEL       : ``provider:model`` passed to ``init_chat_model``
    DEVAI_BASE_URL    : OpenAI-compatible endpoint, empty for the provider default
    DEVAI_TEMPERATURE : sampling temperature
    DEVAI_LOG_LEVEL   : logging level name
    """

    api_key: str | None = None
    model: str = DEFAULT_MODEL
    base_url: str | None = DEFAULT_BASE_URL
    temperature: float = 0
    log_level: str = "WARNING"

    @staticmethod
    def from_env(environ=None) -> "Settings":
        env = os.environ if environ is None else environ
        values = {
            "api_key": env.get("DEVAI_API_KEY") or env.get("GEMINI_API_KEY"),
            "model": env.get("DEVAI_MODEL"),
            "base_url": env.get("DEVAI_BASE_URL"),
            "temperature": env.get("DEVAI_TEMPERATURE"),
            "log_level": env.get("DEVAI_LOG_LEVEL"),
        }
        values = {k: v for k, v in values.items() if v is not None}
        if values.get("base_url") == "":
            values["base_url"] = None
        try:
            return Settings(**values)
        except ValidationError as exc:
            raise ConfigurationError(f"Invalid configuration: {exc}") from exc
