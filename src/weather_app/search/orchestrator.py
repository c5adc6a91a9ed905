"""
검색 흐름
---------

사용자 입력(한글 도시명) → 번역 → 예보 조회 → 렌더링 + 최근 검색 저장
→ 옷차림 추천(AI 우선, 실패 시 기본 규칙표)

상태: idle → loading → {success, error}, success/error → loading (다음 검색)
번역/예보 실패는 검색 전체 실패(error), 옷차림 실패는 기본 추천으로 대체될 뿐이다.
"""
from __future__ import annotations
import logging
import math
from enum import Enum
from typing import Optional, Protocol

from weather_app.core.errors import WeatherAppError
from weather_app.history.store import SearchHistory
from weather_app.outfit.recommender import OutfitRecommendation, recommend_with_fallback
from weather_app.search.view import DailyItem, HourlyItem, SearchView
from weather_app.utils.timewindow import HOURLY_OFFSETS, format_local_time, select_hourly, time_theme
from weather_app.weather.effects import classify_weather_effect
from weather_app.weather.types import ForecastQuery, ForecastResult

logger = logging.getLogger(__name__)

DAY_LABELS = ["오늘", "내일", "모레"]


class WeatherClient(Protocol):
    async def translate_city_name(self, text: str) -> str: ...
    async def fetch_forecast(self, query: ForecastQuery) -> ForecastResult: ...
    async def recommend_outfit(self, temp: float, condition_text: str) -> str: ...


class SearchState(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def format_temp(value: float) -> str:
    return f"{round_half_up(value)} °C"


class SearchOrchestrator:
    def __init__(self, client: WeatherClient, history: SearchHistory, view: SearchView) -> None:
        self.client = client
        self.history = history
        self.view = view
        self.state = SearchState.IDLE
        self.forecast: Optional[ForecastResult] = None
        self.outfit: Optional[OutfitRecommendation] = None
        self.last_error: Optional[Exception] = None
        # 검색마다 1씩 증가. 늦게 도착한 이전 검색 결과는 버린다.
        self._generation = 0

    def start(self) -> None:
        """시작 시 저장된 최근 검색 불러오기"""
        self.history.load()
        self.view.render_history(self.history.list())

    # ------------------------------------------------------------------
    # 검색
    # ------------------------------------------------------------------
    async def search(self, raw_input: Optional[str]) -> SearchState:
        user_input = (raw_input or "").strip()
        if not user_input:
            self.view.alert("도시 이름을 입력해 주세요!")
            return self.state

        self._generation += 1
        token = self._generation
        self._enter_loading()

        try:
            # 1) 한글 → 영어 도시명 번역
            english_city = await self.client.translate_city_name(user_input)
            if self._is_stale(token):
                return self.state
            logger.info("번역된 도시명: %s", english_city)
            self.view.set_translated_city(f"번역된 도시: {english_city}")

            # 2) 번역된 도시명으로 날씨 호출
            forecast = await self.client.fetch_forecast(english_city)
            if self._is_stale(token):
                return self.state

            # 3) 렌더링: 화면엔 "서울의 날씨"처럼 입력한 한글 도시 사용
            current_temp = self._render_forecast(forecast, user_input)
            self.view.set_local_time(f"현지 시간: {format_local_time(forecast.local_time)}")
            self.view.set_theme(time_theme(forecast.local_time))
        except (WeatherAppError, ValueError) as e:
            if self._is_stale(token):
                return self.state
            logger.error("❌ 검색 실패 (%s): %s", user_input, e)
            self._enter_error(e)
            return self.state

        self.forecast = forecast
        self.state = SearchState.SUCCESS
        self.history.add(user_input)
        self.view.render_history(self.history.list())

        # 4) 옷차림 추천: 1순위 AI, 실패하면 기본 규칙표
        outfit = await recommend_with_fallback(
            self.client.recommend_outfit, current_temp, forecast.condition_text
        )
        if self._is_stale(token):
            return self.state
        self.outfit = outfit
        self.view.set_outfit_text(outfit.text)
        self.view.set_outfit_mode(outfit.source)
        return self.state

    async def search_history_entry(self, index: int) -> SearchState:
        if not 0 <= index < len(self.history):
            return self.state
        return await self.search(self.history[index])

    def remove_history_entry(self, index: int) -> None:
        self.history.remove(index)
        self.view.render_history(self.history.list())

    def clear_history(self) -> None:
        self.history.clear()
        self.view.render_history(self.history.list())

    # ------------------------------------------------------------------
    # 상태 전이
    # ------------------------------------------------------------------
    def _is_stale(self, token: int) -> bool:
        if token != self._generation:
            logger.debug("이전 검색(%s) 결과 폐기 (현재 %s)", token, self._generation)
            return True
        return False

    def _enter_loading(self) -> None:
        self.state = SearchState.LOADING
        self.forecast = None
        self.outfit = None
        self.last_error = None

        v = self.view
        v.set_city_title("번역 + 날씨 정보를 불러오는 중...")
        v.set_current_temp("-- °C")
        v.set_condition("불러오는 중...")
        v.set_daily([])
        v.set_hourly([])
        v.set_outfit_text("옷차림 추천을 준비 중입니다...")
        v.set_outfit_mode(None)  # 응답 전에는 둘 다 꺼진 상태
        v.set_translated_city("번역된 도시: (번역 중...)")

    def _enter_error(self, error: Exception) -> None:
        self.state = SearchState.ERROR
        self.forecast = None
        self.outfit = None
        self.last_error = error

        v = self.view
        v.set_city_title("날씨 정보를 가져오지 못했습니다 😢")
        v.set_current_temp("-- °C")
        v.set_condition("오류 발생")
        v.set_daily([])
        v.set_hourly([])
        v.set_weather_effect(None, 0)
        v.set_outfit_text("옷차림 추천을 불러오지 못했습니다.")
        v.set_outfit_mode(None)
        v.set_translated_city("번역된 도시: (불러오기 실패)")

    # ------------------------------------------------------------------
    # 렌더링
    # ------------------------------------------------------------------
    def _render_forecast(self, forecast: ForecastResult, display_city: str) -> int:
        """화면에 예보를 그리고 옷차림 추천에 쓸 (반올림된) 현재 기온을 돌려준다."""
        v = self.view
        city = display_city.strip() or forecast.location_name
        v.set_city_title(f"{city}의 날씨")

        current_temp = round_half_up(forecast.current_temp_c)
        v.set_current_temp(f"{current_temp} °C")
        v.set_condition(forecast.condition_text, forecast.condition_icon)

        v.set_daily([
            DailyItem(
                label=DAY_LABELS[i] if i < len(DAY_LABELS) else day.date,
                temp=format_temp(day.avg_temp_c),
            )
            for i, day in enumerate(forecast.daily)
        ])

        picked = select_hourly(forecast.hourly, forecast.current_epoch, HOURLY_OFFSETS)
        v.set_hourly([
            HourlyItem(
                label=f"{offset}시간 후",
                icon=sample.condition_icon,
                condition_text=sample.condition_text,
                temp=format_temp(sample.temp_c),
            )
            for offset, sample in zip(HOURLY_OFFSETS, picked)
        ])

        effect, particles = classify_weather_effect(forecast.condition_code)
        v.set_weather_effect(effect, particles)
        return current_temp
