# src/weather_app/api/deps.py
# 라우터가 쓰는 업스트림 협력자. 테스트에서는 app.dependency_overrides로 교체한다.
from typing import Awaitable, Callable

from weather_app.llm import gemini
from weather_app.weather.types import ForecastProvider
from weather_app.weather.weatherapi import WeatherApiProvider

Translator = Callable[[str], Awaitable[str]]
OutfitAdvisor = Callable[[float, str], Awaitable[str]]


def get_weather_provider() -> ForecastProvider:
    return WeatherApiProvider()


def get_translator() -> Translator:
    return gemini.translate_city_name


def get_outfit_advisor() -> OutfitAdvisor:
    return gemini.recommend_outfit
