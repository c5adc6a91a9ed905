# src/weather_app/api/weather.py
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends

from weather_app.api.cors import preflight_response
from weather_app.api.deps import get_weather_provider
from weather_app.core.errors import ValidationError
from weather_app.weather.types import ForecastProvider, ForecastQuery

router = APIRouter()

MISSING_QUERY = "city 또는 lat/lon 쿼리 파라미터가 필요합니다."


def _resolve_query(city: Optional[str], lat: Optional[str], lon: Optional[str]) -> ForecastQuery:
    # city 또는 좌표(lat, lon) 중 하나가 필요
    if city and city.strip():
        return city.strip()
    if lat and lon:
        try:
            return float(lat), float(lon)
        except ValueError:
            raise ValidationError("lat/lon은 숫자여야 합니다.")
    raise ValidationError(MISSING_QUERY)


@router.options("/weather")
async def weather_preflight():
    return preflight_response("GET, OPTIONS")


@router.get("/weather")
async def get_weather(
    city: Optional[str] = None,
    lat: Optional[str] = None,
    lon: Optional[str] = None,
    provider: ForecastProvider = Depends(get_weather_provider),
) -> Dict[str, Any]:
    """
    WeatherAPI 3일 예보 프록시
    - Query: city=<영문 도시명> 또는 lat=<위도>&lon=<경도>
    - 성공 시 WeatherAPI JSON을 그대로 반환
    """
    query = _resolve_query(city, lat, lon)
    return await provider.fetch_forecast_raw(query)
