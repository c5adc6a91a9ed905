# src/weather_app/core/errors.py
from __future__ import annotations
from typing import Any, Dict


class WeatherAppError(Exception):
    """모든 도메인 오류의 기반. status_code는 프록시 응답 코드로 그대로 쓰인다."""

    status_code = 500

    def __init__(self, message: str, *, details: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details

    def to_body(self) -> Dict[str, Any]:
        body: Dict[str, Any] = {"error": self.message}
        if self.details:
            body["details"] = self.details
        return body


class ValidationError(WeatherAppError):
    """요청 파라미터 누락/타입 오류"""

    status_code = 400


class InvalidInputError(WeatherAppError):
    """번역 단계에서 도시명이 아니거나 부적절한 입력으로 판정됨"""

    status_code = 400


class UpstreamError(WeatherAppError):
    """WeatherAPI / Gemini 호출 실패 또는 응답을 읽을 수 없음"""

    status_code = 500


class ProviderError(WeatherAppError):
    """클라이언트 쪽: 프록시 호출 실패"""

    status_code = 502


class ParseError(ProviderError):
    """응답은 왔지만 형태가 기대와 다름"""
