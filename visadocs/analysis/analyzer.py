"""AI-powered immigration document analyzer."""

import base64

from visadocs.analysis.base import BaseAnalyzer
from visadocs.analysis.client_base import BaseExtractionClient
from visadocs.analysis.models import AnalysisResult
from visadocs.analysis.parser import parse_analysis_text
from visadocs.analysis.prompt_loader import load_prompt
from visadocs.analysis.validator import validate_and_build
from visadocs.logging.logger import Log


class DocumentAnalyzer(BaseAnalyzer):
    """Sends a stored document to an AI provider and parses the reply."""

    def __init__(
        self,
        *,
        client: BaseExtractionClient,
        model: str,
        temperature: float = 0.0,
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = max(0.0, min(0.2, temperature))

    def analyze(
        self,
        document_type: str,
        file_bytes: bytes,
        *,
        mime_type: str,
        file_name: str,
    ) -> AnalysisResult:
        prompt = load_prompt(document_type)
        Log.debug(f"Analysis prompt for {document_type}:\n{prompt}")

        raw_response = self._client.generate(
            model=self._model,
            temperature=self._temperature,
            prompt=prompt,
            file_base64=base64.b64encode(file_bytes).decode("ascii"),
            mime_type=mime_type,
            file_name=file_name,
        )
        Log.debug(f"AI raw response:\n{raw_response}")

        result = validate_and_build(parse_analysis_text(raw_response))
        Log.info(f"Analysis complete: {len(result.key_dates)} key dates extracted")
        return result
