from enum import Enum
from typing import Any, ClassVar

from hybrid_summarizer.backends.client_base import BaseChatClient
from hybrid_summarizer.backends.example_client_adapter import ExampleChatClient
from hybrid_summarizer.backends.openai_client_adapter import OpenAIChatClient
from hybrid_summarizer.config.settings import Settings


class BackendRole(str, Enum):
    LOCAL = "local"
    CLOUD = "cloud"


class ChatClientFactory:
    """Creates the configured text-completion backend for a role."""

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "openrouter": "https://openrouter.ai/api/v1",
        "groq": "https://api.groq.com/openai/v1",
        "together": "https://api.together.xyz/v1",
        "deepseek": "https://api.deepseek.com/v1",
        "ollama": "http://localhost:11434/v1",
    }

    @classmethod
    def create(cls, settings: Settings, role: BackendRole) -> BaseChatClient:
        """Create the backend configured under the ``<role>_*`` settings."""
        provider = cls._setting(settings, role, "provider").lower()
        if provider == "example":
            return ExampleChatClient()
        return OpenAIChatClient(
            api_key=cls._setting(settings, role, "api_key"),
            model=cls._setting(settings, role, "model_name"),
            timeout_seconds=cls._setting(settings, role, "timeout_seconds") or 30,
            temperature=cls._setting(settings, role, "temperature"),
            base_url=cls._resolve_base_url(provider, settings, role),
        )

    @classmethod
    def _resolve_base_url(
        cls, provider: str, settings: Settings, role: BackendRole
    ) -> str | None:
        custom_url = (cls._setting(settings, role, "base_url") or "").strip()
        if provider == "openai":
            return custom_url or None
        if provider == "openai_compatible":
            if not custom_url:
                raise ValueError(
                    f"{role.value}_base_url is required for "
                    f"{role.value}_provider=openai_compatible"
                )
            return custom_url
        default_base_url = cls.OPENAI_COMPATIBLE_BASE_URLS.get(provider)
        if default_base_url is not None:
            return custom_url or default_base_url
        supported = [
            "example",
            "openai",
            "openai_compatible",
            *sorted(cls.OPENAI_COMPATIBLE_BASE_URLS),
        ]
        raise ValueError(
            f"Unknown {role.value} provider '{provider}'. Choose from: {supported}"
        )

    @staticmethod
    def _setting(settings: Settings, role: BackendRole, name: str) -> Any:
        return getattr(settings, f"{role.value}_{name}")
