"""Tests for the Gemini summary client using httpx.MockTransport."""

import json

import httpx
import pytest

from repo_buddy.config import AnalysisConfig
from repo_buddy.exceptions import LLMError
from repo_buddy.llm import GeminiClient
from repo_buddy.models import AnalysisResult


def make_client(handler, **kwargs):
    http = httpx.Client(transport=httpx.MockTransport(handler))
    return GeminiClient(api_key="test-key", client=http, **kwargs)


def ok_response(text):
    return httpx.Response(200, json={"candidates": [{"content": {"parts": [{"text": text}]}}]})


class TestSummarize:
    def test_returns_first_candidate_text(self):
        client = make_client(lambda request: ok_response("## Executive Summary"))
        assert client.summarize(AnalysisResult()) == "## Executive Summary"

    def test_request_shape(self):
        seen = {}

        def handler(request):
            seen["url"] = str(request.url)
            seen["key"] = request.headers.get("x-goog-api-key")
            seen["body"] = json.loads(request.content)
            return ok_response("ok")

        result = AnalysisResult(language_counts={"Go": 2})
        make_client(handler, model="gemini-test").summarize(result)

        assert seen["url"].endswith("/models/gemini-test:generateContent")
        assert seen["key"] == "test-key"
        prompt = seen["body"]["contents"][0]["parts"][0]["text"]
        assert '"Go": 2' in prompt
        assert "Write the analysis and recommendations in English." in prompt

    def test_prompt_language(self):
        client = make_client(lambda r: ok_response("x"), language="Indonesian")
        assert "in Indonesian." in client.build_prompt(AnalysisResult())

    def test_http_error_status(self):
        client = make_client(lambda request: httpx.Response(429, text="quota exceeded"))
        with pytest.raises(LLMError) as excinfo:
            client.summarize(AnalysisResult())
        assert excinfo.value.status_code == 429

    def test_empty_candidates(self):
        client = make_client(lambda request: httpx.Response(200, json={"candidates": []}))
        with pytest.raises(LLMError):
            client.summarize(AnalysisResult())

    def test_invalid_json(self):
        client = make_client(lambda request: httpx.Response(200, text="<html>"))
        with pytest.raises(LLMError):
            client.summarize(AnalysisResult())

    def test_transport_error(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(LLMError):
            make_client(handler).summarize(AnalysisResult())


class TestFromConfig:
    def test_requires_api_key(self):
        with pytest.raises(LLMError, match="GEMINI_API_KEY"):
            GeminiClient.from_config(AnalysisConfig())

    def test_reads_settings(self, monkeypatch):
        monkeypatch.setenv("GEMINI_API_KEY", "abc")
        client = GeminiClient.from_config(AnalysisConfig(llm_model="gemini-x", llm_language="German"))
        assert client.model == "gemini-x"
        assert client.language == "German"
        client.close()
