# src/weather_app/core/log.py
import logging

from weather_app.core.settings import LOG_LEVEL

FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | None = None) -> None:
    """서버/CLI 진입점에서 한 번 호출"""
    logging.basicConfig(level=(level or LOG_LEVEL).upper(), format=FORMAT)
