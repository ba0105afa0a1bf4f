"""Gemini client for the optional prose summary of an analysis result.

Sends the serialized result inside a prompt to the generateContent REST
endpoint and returns the first candidate's text.
"""

from __future__ import annotations

import json
import os
from typing import Any, Optional

import httpx

from .config import AnalysisConfig
from .exceptions import LLMError
from .logging_config import get_logger
from .models import AnalysisResult

logger = get_logger(__name__)

API_KEY_ENV = "GEMINI_API_KEY"
GEMINI_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_MODEL = "gemini-3-flash-preview"
DEFAULT_TIMEOUT = 120

PROMPT_TEMPLATE = """You are an expert software architect. Analyze the following repository analysis results and provide professional insights, context, and best practice recommendations for each aspect.
The goal is to create a high-quality guideline for an AI coding agent working in this repository.

Analysis Results (JSON):
```json
{result_json}
```

Please provide the output in Markdown format with the following sections if applicable:
- Executive Summary
- Detailed Analysis Insights (Naming, DI, Testing, Config, Security, Error Handling, Design Patterns)
- Strategic Recommendations, with sample code snippets where they help.

Write the analysis and recommendations in {language}."""


class GeminiClient:
    """Client for the Gemini generateContent API."""

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_MODEL,
        timeout: float = DEFAULT_TIMEOUT,
        language: str = "English",
        base_url: str = GEMINI_BASE_URL,
        client: Optional[httpx.Client] = None,
    ):
        if not api_key:
            raise LLMError(f"{API_KEY_ENV} environment variable not set")
        self.api_key = api_key
        self.model = model
        self.language = language
        self.base_url = base_url.rstrip("/")
        self._client = client or httpx.Client(timeout=timeout)

    @classmethod
    def from_config(cls, config: AnalysisConfig) -> "GeminiClient":
        """Build a client from settings and the GEMINI_API_KEY variable.

        Raises:
            LLMError: If GEMINI_API_KEY is not set
        """
        return cls(
            api_key=os.environ.get(API_KEY_ENV, ""),
            model=config.llm_model,
            timeout=config.llm_timeout_seconds,
            language=config.llm_language,
        )

    def build_prompt(self, result: AnalysisResult) -> str:
        payload = result.to_dict()
        payload.pop("llm_summary", None)
        payload.pop("stats", None)
        return PROMPT_TEMPLATE.format(
            result_json=json.dumps(payload, indent=2),
            language=self.language,
        )

    def summarize(self, result: AnalysisResult) -> str:
        """Ask the model for a Markdown summary of the result.

        Raises:
            LLMError: On transport failure, a non-2xx status, or a response
                without candidate text
        """
        request = {"contents": [{"parts": [{"text": self.build_prompt(result)}]}]}
        url = f"{self.base_url}/models/{self.model}:generateContent"
        logger.debug(f"Requesting summary from {self.model}")

        try:
            resp = self._client.post(url, json=request, headers={"x-goog-api-key": self.api_key})
        except httpx.TimeoutException as e:
            raise LLMError(f"request timed out: {e}") from e
        except httpx.HTTPError as e:
            raise LLMError(f"request failed: {e}") from e

        if not resp.is_success:
            raise LLMError(f"Gemini API error: {resp.text[:200]}", status_code=resp.status_code)

        try:
            data = resp.json()
        except ValueError as e:
            raise LLMError(f"invalid JSON response: {e}") from e
        return _first_candidate_text(data)

    def close(self) -> None:
        self._client.close()


def _first_candidate_text(data: Any) -> str:
    try:
        text = data["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError) as e:
        raise LLMError("Failed to get response text from Gemini") from e
    if not isinstance(text, str):
        raise LLMError("Failed to get response text from Gemini")
    return text
