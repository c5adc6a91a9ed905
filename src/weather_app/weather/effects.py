# src/weather_app/weather/effects.py
# WeatherAPI condition code → 장식용 날씨 효과(비/눈/진눈깨비)
from __future__ import annotations
from typing import Optional, Tuple

RAIN_CODES = {
    1063, 1150, 1153, 1180, 1183, 1186, 1189, 1192, 1195,
    1240, 1243, 1246, 1273, 1276,
}
SNOW_CODES = {
    1066, 1114, 1117, 1210, 1213, 1216, 1219, 1222, 1225,
    1255, 1258, 1279, 1282,
}
SLEET_CODES = {
    1069, 1072, 1168, 1171, 1198, 1201, 1204, 1207,
    1237, 1249, 1252,
}

assert not (RAIN_CODES & SNOW_CODES or RAIN_CODES & SLEET_CODES or SNOW_CODES & SLEET_CODES)

PARTICLE_COUNT = {
    "rain": 80,
    "snow": 60,
    "sleet": 50,
}


def classify_weather_effect(condition_code: int) -> Tuple[Optional[str], int]:
    """(효과 종류, 파티클 수). 해당 없으면 (None, 0)."""
    if condition_code in RAIN_CODES:
        effect = "rain"
    elif condition_code in SNOW_CODES:
        effect = "snow"
    elif condition_code in SLEET_CODES:
        effect = "sleet"
    else:
        return None, 0
    return effect, PARTICLE_COUNT[effect]
