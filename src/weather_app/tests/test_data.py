# test_data.py
# WeatherAPI forecast.json 응답 더미

from typing import Any, Dict, List

from weather_app.weather.parse import parse_forecast

# 2024-01-14 00:00 (도시 현지 시각 기준 자정으로 취급)
DAY0_EPOCH = 1705190400
HOUR = 3600

ICON_SUNNY = "//cdn.weatherapi.com/weather/64x64/day/113.png"
ICON_RAIN = "//cdn.weatherapi.com/weather/64x64/day/302.png"


def dummy_hours(day_index: int) -> List[Dict[str, Any]]:
    hours = []
    for h in range(24):
        hours.append({
            "time_epoch": DAY0_EPOCH + (day_index * 24 + h) * HOUR,
            "time": f"2024-01-{14 + day_index:02d} {h:02d}:00",
            "temp_c": 10 + h * 0.5,
            "condition": {"text": "맑음", "icon": ICON_SUNNY, "code": 1000},
        })
    return hours


def dummy_forecast_payload(
    *,
    temp_c: float = 22.4,
    condition_text: str = "맑음",
    condition_code: int = 1000,
    localtime: str = "2024-01-14 14:30",
) -> Dict[str, Any]:
    return {
        "location": {
            "name": "Seoul",
            "country": "South Korea",
            "localtime_epoch": DAY0_EPOCH + 14 * HOUR + 1800,
            "localtime": localtime,
        },
        "current": {
            "last_updated_epoch": DAY0_EPOCH + 14 * HOUR + 1800,
            "temp_c": temp_c,
            "condition": {"text": condition_text, "icon": ICON_SUNNY, "code": condition_code},
        },
        "forecast": {
            "forecastday": [
                {
                    "date": f"2024-01-{14 + d:02d}",
                    "day": {
                        "avgtemp_c": 12.5 + d,
                        "condition": {"text": "맑음", "icon": ICON_SUNNY, "code": 1000},
                    },
                    "hour": dummy_hours(d),
                }
                for d in range(3)
            ]
        },
    }


# 프록시 대신 쓰는 더미 클라이언트 (값 대신 예외를 넣으면 그 단계가 실패)
class FakeClient:
    def __init__(self, forecast=None, translation="Seoul", outfit="얇은 긴팔에 가디건 추천"):
        self.forecast = forecast or parse_forecast(dummy_forecast_payload())
        self.translation = translation
        self.outfit = outfit
        self.calls = []

    async def translate_city_name(self, text):
        self.calls.append(("translate", text))
        if isinstance(self.translation, Exception):
            raise self.translation
        return self.translation

    async def fetch_forecast(self, query):
        self.calls.append(("forecast", query))
        if isinstance(self.forecast, Exception):
            raise self.forecast
        return self.forecast

    async def recommend_outfit(self, temp, condition_text):
        self.calls.append(("outfit", temp, condition_text))
        if isinstance(self.outfit, Exception):
            raise self.outfit
        return self.outfit
