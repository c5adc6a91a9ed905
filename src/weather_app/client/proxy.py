# src/weather_app/client/proxy.py
from __future__ import annotations
import logging
from typing import Any, Dict, Optional

import httpx

from weather_app.core.errors import InvalidInputError, ParseError, ProviderError
from weather_app.core.settings import API_BASE_URL, HTTP_TIMEOUT_SEC
from weather_app.core.urls import PROXY_PATHS
from weather_app.weather.types import ForecastQuery, ForecastResult
from weather_app.weather.parse import parse_forecast

logger = logging.getLogger(__name__)


def _error_message(resp: httpx.Response, default: str) -> str:
    try:
        body = resp.json()
    except ValueError:
        return default
    if isinstance(body, dict) and isinstance(body.get("error"), str):
        return body["error"]
    return default


class ProxyClient:
    """
    /api/weather, /api/translate-city, /api/outfit 를 호출하는 클라이언트.
    업스트림 키는 프록시에만 있고 여기서는 다루지 않는다.
    """

    def __init__(
        self,
        base_url: str | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float | None = HTTP_TIMEOUT_SEC,
    ) -> None:
        self.base_url = (base_url or API_BASE_URL).rstrip("/")
        self._transport = transport
        self._timeout = timeout

    async def _request(self, method: str, path_key: str, **kwargs: Any) -> httpx.Response:
        try:
            async with httpx.AsyncClient(
                base_url=self.base_url, timeout=self._timeout, transport=self._transport
            ) as client:
                return await client.request(method, PROXY_PATHS[path_key], **kwargs)
        except httpx.HTTPError as e:
            logger.error("❌ 프록시(%s) 연결 실패: %s", path_key, e)
            raise ProviderError(f"{path_key} 프록시 연결 실패") from e

    @staticmethod
    def _json(resp: httpx.Response) -> Any:
        try:
            return resp.json()
        except ValueError as e:
            raise ParseError("응답을 JSON으로 읽을 수 없습니다.") from e

    # 1) WeatherAPI → /api/weather (도시명은 영어)
    async def fetch_forecast(self, query: ForecastQuery) -> ForecastResult:
        if isinstance(query, tuple):
            lat, lon = query
            params: Dict[str, Any] = {"lat": lat, "lon": lon}
        else:
            params = {"city": query}

        resp = await self._request("GET", "weather", params=params)
        if resp.is_error:
            logger.error("WeatherAPI proxy error: %s", resp.text[:500])
            raise ProviderError("날씨 정보를 가져오지 못했습니다.")

        return parse_forecast(self._json(resp))

    # 2) 번역 → /api/translate-city (한글 도시 → 영어 도시)
    async def translate_city_name(self, text: str) -> str:
        resp = await self._request("POST", "translate", json={"text": text})
        if resp.status_code == 400:
            raise InvalidInputError(
                _error_message(resp, "유효하지 않은 도시명입니다. 올바른 도시 이름을 입력해주세요.")
            )
        if resp.is_error:
            logger.error("Gemini translation proxy error: %s", resp.text[:500])
            raise ProviderError("번역 API 호출 실패")

        data = self._json(resp)
        english: Optional[str] = data.get("translatedCity") if isinstance(data, dict) else None
        english = english.strip() if isinstance(english, str) else ""
        if not english:
            raise ParseError("번역 결과를 읽을 수 없습니다.")
        return english

    # 3) 옷차림 추천 → /api/outfit
    async def recommend_outfit(self, temp: float, condition_text: str) -> str:
        resp = await self._request(
            "POST", "outfit", json={"temp": temp, "conditionText": condition_text}
        )
        if resp.is_error:
            logger.error("Gemini outfit proxy error: %s", resp.text[:500])
            raise ProviderError("옷차림 추천 API 호출 실패")

        data = self._json(resp)
        text = data.get("outfit") if isinstance(data, dict) else None
        text = text.strip() if isinstance(text, str) else ""
        if not text:
            raise ParseError("옷차림 추천 결과를 읽을 수 없습니다.")
        return text
