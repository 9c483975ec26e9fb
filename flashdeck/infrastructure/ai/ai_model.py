from pydantic_ai.models import Model
from pydantic_ai.models.anthropic import AnthropicModel
from pydantic_ai.models.google import GoogleModel
from pydantic_ai.models.openai import OpenAIChatModel
from pydantic_ai.providers.anthropic import AnthropicProvider
from pydantic_ai.providers.google import GoogleProvider
from pydantic_ai.providers.ollama import OllamaProvider
from pydantic_ai.providers.openai import OpenAIProvider

from flashdeck.config import Settings
from flashdeck.exceptions import AIDisabledError


def build_ai_model(settings: Settings) -> Model:
    """
    Build the Pydantic AI model for the configured provider.

    Raises:
        AIDisabledError: If no AI provider is configured
    """
    if settings.AI_PROVIDER is None:
        raise AIDisabledError

    # AI_MODEL_NAME and the provider credentials are guaranteed by the settings validator
    assert settings.AI_MODEL_NAME is not None

    if settings.AI_PROVIDER == "ollama":
        assert settings.OPENAI_BASE_URL is not None
        return OpenAIChatModel(
            model_name=settings.AI_MODEL_NAME,
            provider=OllamaProvider(base_url=settings.OPENAI_BASE_URL),
        )

    if settings.AI_PROVIDER == "openai":
        assert settings.OPENAI_API_KEY is not None
        return OpenAIChatModel(
            model_name=settings.AI_MODEL_NAME,
            provider=OpenAIProvider(api_key=settings.OPENAI_API_KEY),
        )

    if settings.AI_PROVIDER == "anthropic":
        assert settings.ANTHROPIC_API_KEY is not None
        return AnthropicModel(
            model_name=settings.AI_MODEL_NAME,
            provider=AnthropicProvider(api_key=settings.ANTHROPIC_API_KEY),
        )

    if settings.AI_PROVIDER == "google":
        assert settings.GEMINI_API_KEY is not None
        return GoogleModel(
            model_name=settings.AI_MODEL_NAME,
            provider=GoogleProvider(api_key=settings.GEMINI_API_KEY),
        )
    raise ValueError(f"No such AI model provider available: {settings.AI_PROVIDER}")
