# src/weather_app/weather/weatherapi.py
from __future__ import annotations
import logging
from typing import Any, Dict

import httpx

from weather_app.config import WEATHER_API_KEY
from weather_app.core.errors import UpstreamError
from weather_app.core.settings import HTTP_TIMEOUT_SEC, WEATHER_FORECAST_DAYS, WEATHER_LANG
from weather_app.core.urls import weather_api_url
from weather_app.weather.types import ForecastQuery

logger = logging.getLogger(__name__)


def build_query(query: ForecastQuery) -> str:
    """WeatherAPI의 q 파라미터: 도시명 그대로, 좌표는 "lat,lon"."""
    if isinstance(query, tuple):
        lat, lon = query
        return f"{lat},{lon}"
    return query


class WeatherApiProvider:
    """
    WeatherAPI.com forecast.json 기반 Provider.
    3일치 일별 + 시간별 예보를 한국어 설명으로 받아 원본 JSON 그대로 돌려준다.
    """

    def __init__(
        self,
        api_key: str | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.api_key = api_key or WEATHER_API_KEY
        self._transport = transport

    async def fetch_forecast_raw(self, query: ForecastQuery) -> Dict[str, Any]:
        if not self.api_key:
            raise UpstreamError("WeatherAPI 키가 설정되지 않았습니다.")

        q = build_query(query)
        params = {
            "key": self.api_key,
            "q": q,
            "days": WEATHER_FORECAST_DAYS,
            "lang": WEATHER_LANG,
        }
        logger.info("🌤️ Weather API 요청: %s", q)

        try:
            async with httpx.AsyncClient(timeout=HTTP_TIMEOUT_SEC, transport=self._transport) as client:
                r = await client.get(weather_api_url("forecast"), params=params)
        except httpx.HTTPError as e:
            logger.error("❌ WeatherAPI 연결 실패: %s", e)
            raise UpstreamError("WeatherAPI 호출 실패", details=str(e)) from e

        if r.is_error:
            logger.error("❌ WeatherAPI error (%s): %s", r.status_code, r.text[:500])
            raise UpstreamError("WeatherAPI 호출 실패", details=r.text)

        try:
            return r.json()
        except ValueError as e:
            logger.error("❌ WeatherAPI 응답 JSON 파싱 실패: %s", r.text[:500])
            raise UpstreamError("WeatherAPI 응답을 읽을 수 없습니다.") from e
