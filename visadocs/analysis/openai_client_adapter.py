from typing import Any

import httpx
import openai

from visadocs.analysis.client_base import BaseExtractionClient
from visadocs.analysis.exceptions import (
    ExtractionConfigError,
    ExtractionError,
    ExtractionNetworkError,
)


class OpenAIClientAdapter(BaseExtractionClient):
    """Extraction client adapter built on the OpenAI-compatible chat API."""

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
    ) -> None:
        self._api_key = api_key
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
        )

    def generate(
        self,
        *,
        model: str,
        temperature: float,
        prompt: str,
        file_base64: str,
        mime_type: str,
        file_name: str,
    ) -> str:
        if not self._api_key:
            raise ExtractionConfigError("Extraction API key not configured")
        if not model:
            raise ExtractionConfigError("Extraction model name not configured")
        try:
            response = self._client.chat.completions.create(
                model=model,
                temperature=temperature,
                messages=[
                    {
                        "role": "user",
                        "content": [
                            _file_part(file_base64, mime_type, file_name),
                            {"type": "text", "text": prompt},
                        ],
                    },
                ],
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise ExtractionNetworkError(
                f"AI provider network error: {exc}"
            ) from exc
        except openai.APIError as exc:
            raise ExtractionNetworkError(
                f"AI provider API error: {exc}"
            ) from exc

        if not response.choices:
            raise ExtractionError("AI returned no choices")
        return response.choices[0].message.content or ""


def _file_part(file_base64: str, mime_type: str, file_name: str) -> dict[str, Any]:
    data_url = f"data:{mime_type};base64,{file_base64}"
    if mime_type.startswith("image/"):
        return {"type": "image_url", "image_url": {"url": data_url}}
    return {"type": "file", "file": {"filename": file_name, "file_data": data_url}}
