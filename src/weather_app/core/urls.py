# src/weather_app/core/urls.py
from __future__ import annotations
import os
from typing import Final

# 베이스 도메인은 .env로 덮어쓸 수 있게
WEATHER_API_BASE: Final[str] = os.getenv("WEATHER_API_BASE", "https://api.weatherapi.com/v1")

# 경로 상수 (도메인과 분리)
WEATHER_API_PATHS = {
    # 일별 + 시간별 예보 (최대 14일, 여기선 3일만 사용)
    "forecast": "/forecast.json",
    # 현재 날씨만
    "current": "/current.json",
}

# 클라이언트가 호출하는 프록시 경로
PROXY_PATHS = {
    "weather": "/api/weather",
    "translate": "/api/translate-city",
    "outfit": "/api/outfit",
}


def weather_api_url(path_key: str) -> str:
    """
    WeatherAPI endpoint 빌더.
    ex) weather_api_url("forecast") -> "https://api.weatherapi.com/v1/forecast.json"
    """
    return f"{WEATHER_API_BASE}{WEATHER_API_PATHS[path_key]}"


def icon_url(icon: str | None) -> str | None:
    """WeatherAPI 아이콘은 "//cdn.weatherapi.com/..." 형태라 스킴을 붙여준다."""
    if not icon:
        return None
    return icon if icon.startswith("http") else f"https:{icon}"
