"""Tests for the client that talks to the proxy endpoints."""
import asyncio
import json

import httpx
import pytest

from weather_app.client.proxy import ProxyClient
from weather_app.core.errors import InvalidInputError, ParseError, ProviderError


def make_client(handler):
    return ProxyClient("http://proxy.test", transport=httpx.MockTransport(handler))


def test_fetch_forecast_by_city(forecast_payload):
    seen = []

    def handler(request):
        seen.append(request.url)
        return httpx.Response(200, json=forecast_payload)

    result = asyncio.run(make_client(handler).fetch_forecast("New York"))
    assert result.location_name == "Seoul"
    assert seen[0].path == "/api/weather"
    assert seen[0].params["city"] == "New York"


def test_fetch_forecast_by_coordinates(forecast_payload):
    seen = []

    def handler(request):
        seen.append(request.url.params)
        return httpx.Response(200, json=forecast_payload)

    asyncio.run(make_client(handler).fetch_forecast((37.5, 127.0)))
    assert seen[0]["lat"] == "37.5"
    assert seen[0]["lon"] == "127.0"


def test_fetch_forecast_error_status():
    client = make_client(lambda r: httpx.Response(500, json={"error": "WeatherAPI 호출 실패"}))
    with pytest.raises(ProviderError):
        asyncio.run(client.fetch_forecast("Seoul"))


def test_fetch_forecast_malformed_body():
    client = make_client(lambda r: httpx.Response(200, json={"location": {}}))
    with pytest.raises(ParseError):
        asyncio.run(client.fetch_forecast("Seoul"))


def test_fetch_forecast_connection_error():
    def handler(request):
        raise httpx.ConnectError("refused", request=request)

    with pytest.raises(ProviderError):
        asyncio.run(make_client(handler).fetch_forecast("Seoul"))


def test_translate_sends_text_and_trims_result():
    seen = []

    def handler(request):
        seen.append(json.loads(request.content))
        return httpx.Response(200, json={"translatedCity": " Seoul "})

    assert asyncio.run(make_client(handler).translate_city_name("서울")) == "Seoul"
    assert seen == [{"text": "서울"}]


def test_translate_rejected_input():
    client = make_client(lambda r: httpx.Response(400, json={"error": "유효하지 않은 도시명입니다."}))
    with pytest.raises(InvalidInputError) as exc_info:
        asyncio.run(client.translate_city_name("바보"))
    assert exc_info.value.message == "유효하지 않은 도시명입니다."


def test_translate_server_error():
    client = make_client(lambda r: httpx.Response(500, json={"error": "Gemini 번역 API 오류"}))
    with pytest.raises(ProviderError) as exc_info:
        asyncio.run(client.translate_city_name("서울"))
    assert not isinstance(exc_info.value, InvalidInputError)


@pytest.mark.parametrize("body", [{}, {"translatedCity": "  "}, {"translatedCity": None}])
def test_translate_empty_result(body):
    client = make_client(lambda r: httpx.Response(200, json=body))
    with pytest.raises(ParseError):
        asyncio.run(client.translate_city_name("서울"))


def test_recommend_outfit():
    seen = []

    def handler(request):
        seen.append(json.loads(request.content))
        return httpx.Response(200, json={"outfit": "가벼운 아우터 추천"})

    assert asyncio.run(make_client(handler).recommend_outfit(22, "맑음")) == "가벼운 아우터 추천"
    assert seen == [{"temp": 22, "conditionText": "맑음"}]


@pytest.mark.parametrize("response", [
    httpx.Response(500, json={"error": "Gemini 옷차림 API 오류"}),
    httpx.Response(200, json={"outfit": ""}),
    httpx.Response(200, text="not json"),
])
def test_recommend_outfit_failures(response):
    client = make_client(lambda r: response)
    with pytest.raises(ProviderError):
        asyncio.run(client.recommend_outfit(22, "맑음"))


def test_client_import_does_not_load_proxy_keys():
    # 클라이언트 쪽은 업스트림 키/LLM 설정을 들고 오지 않는다
    import subprocess
    import sys

    code = (
        "import sys, weather_app.client.proxy, weather_app.cli; "
        "print('weather_app.config' in sys.modules, 'langchain_google_genai' in sys.modules)"
    )
    out = subprocess.run([sys.executable, "-c", code], capture_output=True, text=True, check=True)
    assert out.stdout.split() == ["False", "False"]
