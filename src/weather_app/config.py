import os
from functools import lru_cache

from dotenv import load_dotenv
from langchain_google_genai import ChatGoogleGenerativeAI

from weather_app.core.errors import UpstreamError

# .env 파일에서 환경 변수 로드
load_dotenv()

# 프록시 레이어 전용 키 (클라이언트에는 절대 노출하지 않음)
WEATHER_API_KEY = os.getenv("WEATHER_API_KEY", "")
GOOGLE_API_KEY = os.getenv("GOOGLE_API_KEY", "")

GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-2.0-flash-lite")

# 번역은 결정적으로, 옷차림은 자유롭게
TRANSLATE_TEMPERATURE = 0.0
TRANSLATE_MAX_TOKENS = int(os.getenv("TRANSLATE_MAX_TOKENS", "16"))
OUTFIT_TEMPERATURE = float(os.getenv("OUTFIT_TEMPERATURE", "1.0"))
OUTFIT_MAX_TOKENS = int(os.getenv("OUTFIT_MAX_TOKENS", "64"))


@lru_cache(maxsize=None)
def get_llm(temperature: float, max_output_tokens: int) -> ChatGoogleGenerativeAI:
    """용도별(번역/옷차림) Gemini 클라이언트를 한 번만 만든다."""
    if not GOOGLE_API_KEY:
        raise UpstreamError("Gemini API 키가 설정되지 않았습니다.")
    return ChatGoogleGenerativeAI(
        model=GEMINI_MODEL,
        temperature=temperature,
        max_output_tokens=max_output_tokens,
        google_api_key=GOOGLE_API_KEY,
    )
