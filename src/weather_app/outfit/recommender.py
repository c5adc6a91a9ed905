# src/weather_app/outfit/recommender.py
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Awaitable, Callable, Literal

from weather_app.outfit.rules import basic_outfit_suggestion

logger = logging.getLogger(__name__)

OutfitSource = Literal["ai", "basic"]


@dataclass(frozen=True)
class OutfitRecommendation:
    text: str
    source: OutfitSource


async def recommend_with_fallback(
    ai_recommend: Callable[[float, str], Awaitable[str]],
    temp_c: float,
    condition_text: str,
) -> OutfitRecommendation:
    """1순위 AI, 실패하면 기본 규칙표. 결과는 항상 존재한다."""
    try:
        text = await ai_recommend(temp_c, condition_text)
        if text and text.strip():
            return OutfitRecommendation(text=text.strip(), source="ai")
        logger.warning("⚠️ 옷차림 AI 응답이 비어 있음 → 기본 추천으로 대체")
    except Exception as e:
        logger.warning("⚠️ 옷차림 AI 추천 실패, 기본 추천으로 대체: %s", e)
    return OutfitRecommendation(text=basic_outfit_suggestion(temp_c), source="basic")
