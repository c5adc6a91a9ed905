# src/weather_app/llm/prompts.py
from langchain_core.prompts import ChatPromptTemplate

TRANSLATE_PROMPT = ChatPromptTemplate.from_messages([
    (
        "human",
        "You are a city name translator with content filtering.\n\n"
        "RULES:\n"
        "1. If the input contains profanity, slurs, offensive language, inappropriate content, "
        "or is NOT a valid city/location name, respond with exactly: INVALID\n"
        "2. If the input is a valid Korean city/location name, translate it to English.\n"
        "3. Answer with English city name only. No extra words, quotes, or explanations.\n\n"
        "Input: {text}",
    ),
])

OUTFIT_PROMPT = ChatPromptTemplate.from_messages([
    (
        "human",
        "Current temperature: {temp}°C.\n"
        "Weather condition: {condition_text}.\n\n"
        "Recommend an outfit in ONE short sentence.\n"
        "Reply in Korean only.",
    ),
])

# 번역 모델이 부적절/비지명 입력에 대해 내놓는 신호
INVALID_MARKER = "INVALID"
