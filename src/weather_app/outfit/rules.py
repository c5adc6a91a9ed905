# src/weather_app/outfit/rules.py
# AI 추천 실패 시 쓰는 기온 구간별 기본 옷차림 (상한 포함)
from __future__ import annotations
import math
from typing import List, Tuple

OUTFIT_RULES: List[Tuple[float, str]] = [
    (0, "매우 추워요! 두꺼운 패딩, 목도리, 장갑을 꼭 준비하세요."),
    (5, "추운 편이에요. 코트나 패딩, 니트와 목도리를 추천해요."),
    (10, "쌀쌀해요. 자켓이나 얇은 코트, 니트와 긴 바지를 입는 게 좋아요."),
    (17, "선선한 날씨예요. 가벼운 가디건이나 맨투맨, 긴 바지를 추천해요."),
    (23, "딱 활동하기 좋은 날씨! 얇은 긴팔 또는 반팔에 가벼운 아우터 정도면 충분해요."),
    (27, "약간 더운 편이에요. 반팔과 얇은 바지, 시원한 소재의 옷을 추천해요."),
    (math.inf, "많이 더워요! 민소매, 반팔, 반바지 등 최대한 시원한 옷차림과 수분 보충을 잊지 마세요."),
]


def basic_outfit_suggestion(temp_c: float) -> str:
    for upper, sentence in OUTFIT_RULES:
        if temp_c <= upper:
            return sentence
    # NaN은 어떤 비교도 통과하지 못하므로 마지막 구간으로
    return OUTFIT_RULES[-1][1]
