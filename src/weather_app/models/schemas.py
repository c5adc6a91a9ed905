# src/weather_app/models/schemas.py
from typing import Union
from pydantic import BaseModel, Field, StrictFloat, StrictInt, field_validator

# ===== Request =====
class TranslateRequest(BaseModel):
    text: str = Field(..., description="번역할 도시명 (한글)")

    @field_validator("text")
    @classmethod
    def _not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("text is blank")
        return v


class OutfitRequest(BaseModel):
    # bool은 숫자로 취급하지 않음 (StrictInt/StrictFloat)
    temp: Union[StrictInt, StrictFloat] = Field(..., description="현재 기온(°C)")
    conditionText: str = Field(..., min_length=1, description="날씨 설명")


# ===== Response =====
class TranslateResponse(BaseModel):
    translatedCity: str


class OutfitResponse(BaseModel):
    outfit: str
