# src/weather_app/weather/types.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Protocol, List, Dict, Any, Tuple, Union

# 도시명(영문) 또는 (lat, lon)
ForecastQuery = Union[str, Tuple[float, float]]


@dataclass
class DailyForecast:
    date: str
    avg_temp_c: float
    condition_icon: str | None
    condition_text: str


@dataclass
class HourlySample:
    epoch: int
    temp_c: float
    condition_icon: str | None
    condition_text: str


@dataclass
class ForecastResult:
    location_name: str
    current_temp_c: float
    condition_text: str
    condition_code: int
    condition_icon: str | None
    local_time: str  # "YYYY-MM-DD HH:MM"
    current_epoch: int
    daily: List[DailyForecast] = field(default_factory=list)
    hourly: List[HourlySample] = field(default_factory=list)  # 전체 일자를 시간순으로 펼친 것


class ForecastProvider(Protocol):
    async def fetch_forecast_raw(self, query: ForecastQuery) -> Dict[str, Any]: ...
