from typing import ClassVar

from visadocs.analysis.analyzer import DocumentAnalyzer
from visadocs.analysis.base import BaseAnalyzer
from visadocs.analysis.example_client_adapter import ExampleClientAdapter
from visadocs.analysis.openai_client_adapter import OpenAIClientAdapter
from visadocs.config.settings import Settings


class AnalyzerFactory:
    """Builds the document analyzer for ``settings.extraction_provider``.

    Every provider except ``example`` speaks the OpenAI chat API. Hosted
    providers have a fixed base URL; ``openai_compatible`` takes it from
    settings. Credentials and model names are read from
    ``extraction_<provider>_api_key`` / ``extraction_<provider>_model_name``.
    """

    HOSTED_BASE_URLS: ClassVar[dict[str, str]] = {
        "openrouter": "https://openrouter.ai/api/v1",
        "groq": "https://api.groq.com/openai/v1",
        "together": "https://api.together.xyz/v1",
        "ollama": "http://localhost:11434/v1",
    }

    @classmethod
    def supported_providers(cls) -> list[str]:
        return ["example", "openai", "openai_compatible", *sorted(cls.HOSTED_BASE_URLS)]

    @classmethod
    def create(cls, settings: Settings) -> BaseAnalyzer:
        provider = settings.extraction_provider.lower()
        if provider == "example":
            return DocumentAnalyzer(client=ExampleClientAdapter(), model="example")

        base_url = cls._base_url(provider, settings)
        client = OpenAIClientAdapter(
            api_key=getattr(settings, f"extraction_{provider}_api_key") or "",
            timeout_seconds=(
                settings.extraction_openai_compatible_timeout_seconds
                if provider == "openai_compatible"
                else settings.extraction_openai_timeout_seconds
            ),
            base_url=base_url,
        )
        return DocumentAnalyzer(
            client=client,
            model=getattr(settings, f"extraction_{provider}_model_name") or "",
            temperature=settings.extraction_temperature,
        )

    @classmethod
    def _base_url(cls, provider: str, settings: Settings) -> str | None:
        if provider == "openai":
            return None
        if provider == "openai_compatible":
            url = (settings.extraction_openai_compatible_base_url or "").strip()
            if not url:
                raise ValueError(
                    "extraction_openai_compatible_base_url is required for "
                    "extraction_provider=openai_compatible"
                )
            return url
        if provider in cls.HOSTED_BASE_URLS:
            return cls.HOSTED_BASE_URLS[provider]
        raise ValueError(
            f"Unknown extraction provider '{provider}'. "
            f"Choose from: {cls.supported_providers()}"
        )
