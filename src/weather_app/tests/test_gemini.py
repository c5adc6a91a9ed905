"""Tests for the Gemini translation / outfit calls (LLM faked)."""
import asyncio
from types import SimpleNamespace

import pytest

from weather_app.core.errors import InvalidInputError, UpstreamError
from weather_app.llm import gemini


class FakeLLM:
    def __init__(self, reply=None, error=None):
        self.reply = reply
        self.error = error
        self.messages = None

    async def ainvoke(self, messages):
        self.messages = messages
        if self.error:
            raise self.error
        return SimpleNamespace(content=self.reply)


@pytest.fixture
def fake_llm(monkeypatch):
    llm = FakeLLM()
    calls = []

    def get_llm(temperature, max_output_tokens):
        calls.append((temperature, max_output_tokens))
        return llm

    monkeypatch.setattr(gemini, "get_llm", get_llm)
    llm.calls = calls
    return llm


def test_translate_trims_and_uses_deterministic_settings(fake_llm):
    fake_llm.reply = "  Seoul \n"
    assert asyncio.run(gemini.translate_city_name("서울")) == "Seoul"
    assert fake_llm.calls == [(0.0, 16)]
    prompt = fake_llm.messages[0].content
    assert "Input: 서울" in prompt
    assert "INVALID" in prompt


@pytest.mark.parametrize("reply", ["INVALID", "invalid", " Invalid "])
def test_translate_invalid_marker(fake_llm, reply):
    fake_llm.reply = reply
    with pytest.raises(InvalidInputError):
        asyncio.run(gemini.translate_city_name("욕설"))


def test_translate_empty_result(fake_llm):
    fake_llm.reply = "   "
    with pytest.raises(UpstreamError):
        asyncio.run(gemini.translate_city_name("서울"))


def test_translate_transport_error(fake_llm):
    fake_llm.error = ConnectionError("down")
    with pytest.raises(UpstreamError) as exc_info:
        asyncio.run(gemini.translate_city_name("서울"))
    assert exc_info.value.message == "Gemini 번역 API 오류"


def test_outfit_prompt_and_result(fake_llm):
    fake_llm.reply = "가벼운 셔츠에 면바지를 추천해요."
    text = asyncio.run(gemini.recommend_outfit(22, "맑음"))
    assert text == "가벼운 셔츠에 면바지를 추천해요."
    prompt = fake_llm.messages[0].content
    assert "22°C" in prompt
    assert "맑음" in prompt


def test_outfit_multipart_content(fake_llm):
    fake_llm.reply = [{"type": "text", "text": "반팔"}, {"type": "text", "text": " 추천"}]
    assert asyncio.run(gemini.recommend_outfit(28, "맑음")) == "반팔 추천"


def test_outfit_empty_result(fake_llm):
    fake_llm.reply = ""
    with pytest.raises(UpstreamError):
        asyncio.run(gemini.recommend_outfit(22, "맑음"))


def test_missing_api_key_is_upstream_error(monkeypatch):
    from weather_app import config

    monkeypatch.setattr(config, "GOOGLE_API_KEY", "")
    config.get_llm.cache_clear()
    with pytest.raises(UpstreamError):
        asyncio.run(gemini.translate_city_name("서울"))


def test_missing_api_key_returns_json_500(monkeypatch):
    from fastapi.testclient import TestClient

    from weather_app import config
    from weather_app.server import create_app

    monkeypatch.setattr(config, "GOOGLE_API_KEY", "")
    config.get_llm.cache_clear()
    res = TestClient(create_app()).post("/api/translate-city", json={"text": "서울"})
    assert res.status_code == 500
    assert res.json() == {"error": "Gemini API 키가 설정되지 않았습니다."}
