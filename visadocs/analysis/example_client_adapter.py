"""Example extraction client adapter.

Use this module as a reference when implementing new provider adapters.
Implement BaseExtractionClient and register the provider in AnalyzerFactory.
"""

import json
from typing import ClassVar

from visadocs.analysis.client_base import BaseExtractionClient


class ExampleClientAdapter(BaseExtractionClient):
    """Example adapter that returns a fixed valid analysis JSON.

    No network calls. Useful for local development and tests.
    """

    DEFAULT_RESPONSE: ClassVar[dict[str, object]] = {
        "summary": "Example analysis. No AI provider was called.",
        "keyDates": [],
        "nextSteps": ["Configure an extraction provider"],
        "warnings": [],
        "details": {},
    }

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
        _ = model, temperature, prompt, file_base64, mime_type, file_name
        return json.dumps(self.DEFAULT_RESPONSE)
