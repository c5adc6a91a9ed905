# src/weather_app/weather/parse.py
from __future__ import annotations
import math
from typing import Any, Dict, List

from weather_app.core.errors import ParseError
from weather_app.core.urls import icon_url
from weather_app.weather.types import DailyForecast, ForecastResult, HourlySample


def _condition(block: Dict[str, Any]) -> Dict[str, Any]:
    cond = block.get("condition")
    if not isinstance(cond, dict):
        raise ParseError("condition 필드가 없습니다.")
    return cond


def _temp(value: Any) -> float:
    # json은 Infinity/NaN도 숫자로 읽으므로 여기서 거른다
    temp = float(value)
    if not math.isfinite(temp):
        raise ParseError(f"기온 값이 올바르지 않습니다: {value!r}")
    return temp


def parse_forecast(payload: Any) -> ForecastResult:
    """
    WeatherAPI forecast 응답 → ForecastResult.
    호출 성공 여부와 별개로, 화면에 쓸 수 있는 형태인지 여기서 검증한다.
    업스트림 키/LLM 설정과 무관해서 클라이언트 쪽에서도 그대로 쓴다.
    """
    if not isinstance(payload, dict):
        raise ParseError("예보 응답이 객체가 아닙니다.")

    try:
        location = payload["location"]
        current = payload["current"]
        forecast_days = payload["forecast"]["forecastday"]

        cur_cond = _condition(current)
        current_epoch = current.get("last_updated_epoch") or location.get("localtime_epoch")
        if current_epoch is None:
            raise ParseError("현재 시각(epoch) 정보가 없습니다.")

        daily: List[DailyForecast] = []
        hourly: List[HourlySample] = []
        for day in forecast_days:
            day_cond = _condition(day["day"])
            daily.append(DailyForecast(
                date=day["date"],
                avg_temp_c=_temp(day["day"]["avgtemp_c"]),
                condition_icon=icon_url(day_cond.get("icon")),
                condition_text=day_cond.get("text", ""),
            ))
            for h in day.get("hour", []):
                h_cond = _condition(h)
                hourly.append(HourlySample(
                    epoch=int(h["time_epoch"]),
                    temp_c=_temp(h["temp_c"]),
                    condition_icon=icon_url(h_cond.get("icon")),
                    condition_text=h_cond.get("text", ""),
                ))

        return ForecastResult(
            location_name=location["name"],
            current_temp_c=_temp(current["temp_c"]),
            condition_text=cur_cond.get("text", ""),
            condition_code=int(cur_cond.get("code", 0)),
            condition_icon=icon_url(cur_cond.get("icon")),
            local_time=location["localtime"],
            current_epoch=int(current_epoch),
            daily=daily,
            hourly=hourly,
        )
    except ParseError:
        raise
    except (KeyError, TypeError, ValueError, AttributeError, OverflowError) as e:
        raise ParseError(f"예보 응답 형식이 올바르지 않습니다: {e}") from e
