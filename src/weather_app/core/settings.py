# src/weather_app/core/settings.py
from __future__ import annotations
import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

WEATHER_FORECAST_DAYS = int(os.getenv("WEATHER_FORECAST_DAYS", "3"))
WEATHER_LANG = os.getenv("WEATHER_LANG", "ko")

# 비워두면 타임아웃 없이 업스트림 응답을 기다린다
_timeout = os.getenv("HTTP_TIMEOUT_SEC", "").strip()
HTTP_TIMEOUT_SEC: float | None = float(_timeout) if _timeout else None

CORS_ALLOW_ORIGINS = [
    o.strip() for o in os.getenv("CORS_ALLOW_ORIGINS", "*").split(",") if o.strip()
]

# 클라이언트(CLI) 쪽 설정
API_BASE_URL = os.getenv("WEATHER_APP_API_BASE", "http://127.0.0.1:8000")
HISTORY_FILE = Path(
    os.getenv("WEATHER_APP_HISTORY_FILE", str(Path.home() / ".weather_app" / "history.json"))
).expanduser()
HISTORY_KEY = "weatherSearchHistory"
HISTORY_LIMIT = 5

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
