# src/weather_app/api/translate.py
from typing import Any, Dict, Optional

import pydantic
from fastapi import APIRouter, Body, Depends

from weather_app.api.cors import preflight_response
from weather_app.api.deps import Translator, get_translator
from weather_app.core.errors import ValidationError
from weather_app.models.schemas import TranslateRequest, TranslateResponse

router = APIRouter()


@router.options("/translate-city")
async def translate_preflight():
    return preflight_response("POST, OPTIONS")


@router.post("/translate-city", response_model=TranslateResponse)
async def translate_city(
    body: Optional[Dict[str, Any]] = Body(default=None),
    translate: Translator = Depends(get_translator),
):
    """
    한글 도시명 → 영문 도시명
    - Body: {"text": "서울"}
    - 부적절하거나 도시명이 아니면 400
    """
    try:
        req = TranslateRequest.model_validate(body or {})
    except pydantic.ValidationError:
        raise ValidationError("text(번역할 도시명)가 없습니다.")

    translated = await translate(req.text)
    return TranslateResponse(translatedCity=translated)
