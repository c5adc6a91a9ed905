# src/weather_app/utils/timewindow.py
from __future__ import annotations
from typing import List, Sequence

from weather_app.weather.types import HourlySample

HOURLY_OFFSETS = (1, 2, 3)

# (시작 시, 끝 시, 테마), [start, end)
TIME_THEMES = [
    (5, 7, "dawn"),      # 새벽
    (7, 11, "morning"),  # 아침
    (11, 17, "day"),     # 낮
    (17, 19, "sunset"),  # 일몰
    (19, 21, "evening"), # 저녁
]
NIGHT_THEME = "night"    # 21~5시


def parse_local_time(local_time: str) -> tuple[str, str, str, int, str]:
    """"2024-01-15 14:30" -> ("2024", "01", "15", 14, "30")"""
    date_part, time_part = local_time.strip().split(" ")
    year, month, day = date_part.split("-")
    hour, minute = time_part.split(":")
    return year, month, day, int(hour), minute


def time_theme(local_time: str) -> str:
    _, _, _, hour, _ = parse_local_time(local_time)
    for start, end, theme in TIME_THEMES:
        if start <= hour < end:
            return theme
    return NIGHT_THEME


def format_local_time(local_time: str) -> str:
    """"2024-01-15 14:30" -> "01월 15일 오후 2:30\""""
    _, month, day, hour, minute = parse_local_time(local_time)
    ampm = "오후" if hour >= 12 else "오전"
    hour12 = hour % 12 or 12
    return f"{month}월 {day}일 {ampm} {hour12}:{minute}"


def select_hourly(
    samples: Sequence[HourlySample],
    current_epoch: int,
    offsets: Sequence[int] = HOURLY_OFFSETS,
) -> List[HourlySample]:
    """
    offset(시간)마다 target = current_epoch + offset*3600 이후의
    첫 샘플을 고른다. 없으면 마지막 샘플로 대체.
    """
    if not samples:
        return []

    picked: List[HourlySample] = []
    for offset in offsets:
        target = current_epoch + offset * 3600
        candidate = next((s for s in samples if s.epoch >= target), samples[-1])
        picked.append(candidate)
    return picked
