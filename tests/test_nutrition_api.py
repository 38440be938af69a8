# -*- coding: utf-8 -*-

from __future__ import annotations

import json
import unittest
from typing import Callable, List, Optional

import httpx
from fastapi.testclient import TestClient

from alagapp.ai.api import get_gemini_client, get_openrouter_client
from alagapp.ai.errors import AIProviderError
from alagapp.ai.openrouter import OpenRouterClient

from .helpers import cleanup, make_app, register

_APPLE = {
    "description": "1 medium apple",
    "calories": 95,
    "protein_g": 0.5,
    "carbs_g": 25.1,
    "fat_g": 0.3,
    "fiber_g": 4.4,
    "sugar_g": 18.9,
    "sodium_mg": 2,
    "serving_size": "1 medium (182g)",
    "confidence": "high",
}


def _completion(content: str) -> dict:
    return {"choices": [{"message": {"role": "assistant", "content": content}}]}


class _FakeGemini:
    def __init__(self, reply: Optional[str] = None, error: Optional[Exception] = None, configured: bool = True) -> None:
        self.reply = reply
        self.error = error
        self.configured = configured
        self.prompts: List[str] = []

    def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.reply or ""


class TestNutritionEndpoints(unittest.TestCase):
    def setUp(self) -> None:
        self.app, self._tmp = make_app()
        self.client = TestClient(self.app)
        register(self.client)
        self.requests: List[httpx.Request] = []

    def tearDown(self) -> None:
        self.app.dependency_overrides.clear()
        self.client.close()
        cleanup(self._tmp)

    def _use_openrouter(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        def record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        client = OpenRouterClient(
            api_key="test-key",
            base_url="https://openrouter.test/api/v1",
            model="test/model",
            timeout=5,
            app_url="http://localhost:3000",
            transport=httpx.MockTransport(record),
        )
        self.app.dependency_overrides[get_openrouter_client] = lambda: client

    def test_openrouter_success(self) -> None:
        self._use_openrouter(lambda r: httpx.Response(200, json=_completion("```json\n" + json.dumps(_APPLE) + "\n```")))
        resp = self.client.post("/api/ai/nutrition", json={"foodName": "  apple "})
        self.assertEqual(resp.status_code, 200, resp.text)
        self.assertEqual(resp.json(), _APPLE)

        sent = json.loads(self.requests[0].content)
        self.assertEqual(sent["temperature"], 0.3)
        self.assertEqual(sent["model"], "test/model")
        self.assertIn('"apple"', sent["messages"][0]["content"])
        self.assertEqual(self.requests[0].headers["authorization"], "Bearer test-key")
        self.assertEqual(self.requests[0].headers["x-title"], "AlagApp Health Assistant")

    def test_food_name_validation(self) -> None:
        self._use_openrouter(lambda r: httpx.Response(200, json=_completion("{}")))
        for body in ({}, {"foodName": "a"}, {"foodName": "   "}, {"foodName": 42}):
            with self.subTest(body=body):
                resp = self.client.post("/api/ai/nutrition", json=body)
                self.assertEqual(resp.status_code, 400)
                self.assertEqual(resp.json(), {"error": "Valid food name is required"})
        for path in ("/api/ai/nutrition", "/api/nutrition"):
            with self.subTest(path=path):
                resp = self.client.post(path)
                self.assertEqual(resp.status_code, 400)
                self.assertEqual(resp.json(), {"error": "Valid food name is required"})
        self.assertEqual(self.requests, [])

    def test_openrouter_rate_limit_status(self) -> None:
        self._use_openrouter(lambda r: httpx.Response(429, headers={"Retry-After": "17"}, json={}))
        resp = self.client.post("/api/ai/nutrition", json={"foodName": "apple"})
        self.assertEqual(resp.status_code, 429)
        self.assertEqual(resp.json(), {"error": "Rate limit reached", "isRateLimit": True, "retryAfter": 17})

    def test_openrouter_rate_limit_in_error_body(self) -> None:
        body = {"error": {"message": "Quota exceeded, retry in 12.5 seconds", "code": 402}}
        self._use_openrouter(lambda r: httpx.Response(402, json=body))
        resp = self.client.post("/api/ai/nutrition", json={"foodName": "apple"})
        self.assertEqual(resp.status_code, 429)
        self.assertEqual(resp.json()["retryAfter"], 13)
        self.assertTrue(resp.json()["isRateLimit"])

    def test_openrouter_model_not_available(self) -> None:
        body = {"error": {"message": "No endpoints found for test/model.", "code": 404}}
        self._use_openrouter(lambda r: httpx.Response(404, json=body))
        resp = self.client.post("/api/ai/nutrition", json={"foodName": "apple"})
        self.assertEqual(resp.status_code, 500)
        self.assertEqual(
            resp.json(),
            {"error": "Model not available. Please check OpenRouter for available free models."},
        )

    def test_openrouter_empty_and_unparseable(self) -> None:
        self._use_openrouter(lambda r: httpx.Response(200, json=_completion("")))
        resp = self.client.post("/api/ai/nutrition", json={"foodName": "apple"})
        self.assertEqual(resp.status_code, 500)
        self.assertEqual(resp.json(), {"error": "Empty response from AI"})

        self._use_openrouter(lambda r: httpx.Response(200, json=_completion("Sorry, I cannot help with that.")))
        resp = self.client.post("/api/ai/nutrition", json={"foodName": "apple"})
        self.assertEqual(resp.status_code, 500)
        self.assertEqual(resp.json(), {"error": "Could not parse nutrition data"})

    def test_openrouter_transport_error(self) -> None:
        def boom(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        self._use_openrouter(boom)
        resp = self.client.post("/api/ai/nutrition", json={"foodName": "apple"})
        self.assertEqual(resp.status_code, 500)
        self.assertEqual(resp.json(), {"error": "connection refused"})

    def test_openrouter_without_key(self) -> None:
        resp = self.client.post("/api/ai/nutrition", json={"foodName": "apple"})
        self.assertEqual(resp.status_code, 500)
        self.assertEqual(resp.json(), {"error": "OpenRouter API key not configured"})

    def test_gemini_success(self) -> None:
        fake = _FakeGemini(reply="Here is the data: " + json.dumps({"calories": 52.6, "confidence": "bogus"}))
        self.app.dependency_overrides[get_gemini_client] = lambda: fake
        resp = self.client.post("/api/nutrition", json={"foodName": "apple"})
        self.assertEqual(resp.status_code, 200, resp.text)
        body = resp.json()
        self.assertEqual(body["calories"], 53)
        self.assertEqual(body["confidence"], "medium")
        self.assertEqual(body["description"], "apple - standard serving")
        self.assertIn('"apple"', fake.prompts[0])

    def test_gemini_without_key(self) -> None:
        resp = self.client.post("/api/nutrition", json={"foodName": "apple"})
        self.assertEqual(resp.status_code, 500)
        self.assertEqual(resp.json(), {"error": "API key not configured"})

    def test_gemini_rate_limit(self) -> None:
        error = AIProviderError.from_message("429 Resource has been exhausted. Please retry in 12.5 seconds.", 429)
        self.app.dependency_overrides[get_gemini_client] = lambda: _FakeGemini(error=error)
        resp = self.client.post("/api/nutrition", json={"foodName": "apple"})
        self.assertEqual(resp.status_code, 429)
        self.assertEqual(resp.json()["retryAfter"], 13)

    def test_gemini_other_failure(self) -> None:
        error = AIProviderError.from_message("Internal error encountered.", 500)
        self.app.dependency_overrides[get_gemini_client] = lambda: _FakeGemini(error=error)
        resp = self.client.post("/api/nutrition", json={"foodName": "apple"})
        self.assertEqual(resp.status_code, 500)
        self.assertEqual(resp.json(), {"error": "Internal error encountered."})


if __name__ == "__main__":
    unittest.main()
