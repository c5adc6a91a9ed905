"""
Gemini 호출부
-------------

- `translate_city_name()`: 한글 도시명 → 영문 도시명 (부적절한 입력은 INVALID)
- `recommend_outfit()`: 기온/날씨 설명 → 한 문장 옷차림 추천

두 함수 모두 재시도 없이 한 번만 호출하고, 실패는 UpstreamError로 올린다.
"""
from __future__ import annotations
import logging
from typing import Any

from weather_app.config import (
    OUTFIT_MAX_TOKENS,
    OUTFIT_TEMPERATURE,
    TRANSLATE_MAX_TOKENS,
    TRANSLATE_TEMPERATURE,
    get_llm,
)
from weather_app.core.errors import InvalidInputError, UpstreamError
from weather_app.llm.prompts import INVALID_MARKER, OUTFIT_PROMPT, TRANSLATE_PROMPT

logger = logging.getLogger(__name__)


def _response_text(llm_raw_result: Any) -> str:
    if hasattr(llm_raw_result, "content"):
        content = llm_raw_result.content or ""
    else:
        content = str(llm_raw_result)
    # 멀티파트 응답이면 텍스트 파트만 이어붙임
    if isinstance(content, list):
        content = "".join(
            p.get("text", "") if isinstance(p, dict) else str(p) for p in content
        )
    return content.strip()


async def _invoke(llm, messages, label: str) -> str:
    try:
        llm_raw_result = await llm.ainvoke(messages)
    except Exception as e:
        logger.error("⛔️ Gemini %s error: %s", label, e)
        raise UpstreamError(f"Gemini {label} API 오류") from e
    return _response_text(llm_raw_result)


async def translate_city_name(text: str) -> str:
    llm = get_llm(TRANSLATE_TEMPERATURE, TRANSLATE_MAX_TOKENS)
    messages = TRANSLATE_PROMPT.format_messages(text=text)

    translated = await _invoke(llm, messages, "번역")
    logger.info("📝 번역 결과: %r → %r", text, translated)

    if not translated:
        raise UpstreamError("번역 결과를 읽을 수 없습니다.")

    # 비속어/부적절한 입력 필터링
    if translated.upper() == INVALID_MARKER:
        raise InvalidInputError("유효하지 않은 도시명입니다. 올바른 도시 이름을 입력해주세요.")

    return translated


async def recommend_outfit(temp: float, condition_text: str) -> str:
    llm = get_llm(OUTFIT_TEMPERATURE, OUTFIT_MAX_TOKENS)
    messages = OUTFIT_PROMPT.format_messages(temp=temp, condition_text=condition_text)

    outfit = await _invoke(llm, messages, "옷차림")
    if not outfit:
        raise UpstreamError("옷차림 결과를 읽을 수 없습니다.")
    return outfit
