# src/weather_app/api/outfit.py
from typing import Any, Dict, Optional

import pydantic
from fastapi import APIRouter, Body, Depends

from weather_app.api.cors import preflight_response
from weather_app.api.deps import OutfitAdvisor, get_outfit_advisor
from weather_app.core.errors import ValidationError
from weather_app.models.schemas import OutfitRequest, OutfitResponse

router = APIRouter()


@router.options("/outfit")
async def outfit_preflight():
    return preflight_response("POST, OPTIONS")


@router.post("/outfit", response_model=OutfitResponse)
async def outfit(
    body: Optional[Dict[str, Any]] = Body(default=None),
    advise: OutfitAdvisor = Depends(get_outfit_advisor),
):
    """
    옷차림 한 문장 추천
    - Body: {"temp": 22, "conditionText": "맑음"}
    """
    try:
        req = OutfitRequest.model_validate(body or {})
    except pydantic.ValidationError:
        raise ValidationError("temp(숫자), conditionText(문자)가 필요합니다.")

    text = await advise(req.temp, req.conditionText)
    return OutfitResponse(outfit=text)
