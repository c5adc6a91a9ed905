# src/weather_app/search/view.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional, Protocol, Sequence

from weather_app.outfit.recommender import OutfitSource


@dataclass
class DailyItem:
    label: str       # "오늘" / "내일" / "모레" / 날짜
    temp: str        # "12 °C"


@dataclass
class HourlyItem:
    label: str       # "1시간 후"
    icon: Optional[str]
    condition_text: str
    temp: str


class SearchView(Protocol):
    """검색 결과가 그려지는 화면 영역들"""

    def alert(self, message: str) -> None: ...
    def set_city_title(self, text: str) -> None: ...
    def set_current_temp(self, text: str) -> None: ...
    def set_condition(self, text: str, icon: Optional[str] = None) -> None: ...
    def set_daily(self, items: Sequence[DailyItem]) -> None: ...
    def set_hourly(self, items: Sequence[HourlyItem]) -> None: ...
    def set_translated_city(self, text: str) -> None: ...
    def set_local_time(self, text: str) -> None: ...
    def set_theme(self, theme: str) -> None: ...
    def set_weather_effect(self, effect: Optional[str], particles: int) -> None: ...
    def set_outfit_text(self, text: str) -> None: ...
    def set_outfit_mode(self, mode: Optional[OutfitSource]) -> None: ...
    def render_history(self, items: Sequence[str]) -> None: ...


@dataclass
class MemoryView:
    """마지막으로 그려진 값을 들고 있는 화면. 콘솔 출력과 테스트에서 쓴다."""

    city_title: str = ""
    current_temp: str = "-- °C"
    condition_text: str = ""
    condition_icon: Optional[str] = None
    daily: List[DailyItem] = field(default_factory=list)
    hourly: List[HourlyItem] = field(default_factory=list)
    translated_city: str = ""
    local_time: str = ""
    theme: Optional[str] = None
    weather_effect: Optional[str] = None
    particles: int = 0
    outfit_text: str = ""
    outfit_mode: Optional[OutfitSource] = None
    history: List[str] = field(default_factory=list)
    alerts: List[str] = field(default_factory=list)

    def alert(self, message: str) -> None:
        self.alerts.append(message)

    def set_city_title(self, text: str) -> None:
        self.city_title = text

    def set_current_temp(self, text: str) -> None:
        self.current_temp = text

    def set_condition(self, text: str, icon: Optional[str] = None) -> None:
        self.condition_text = text
        self.condition_icon = icon

    def set_daily(self, items: Sequence[DailyItem]) -> None:
        self.daily = list(items)

    def set_hourly(self, items: Sequence[HourlyItem]) -> None:
        self.hourly = list(items)

    def set_translated_city(self, text: str) -> None:
        self.translated_city = text

    def set_local_time(self, text: str) -> None:
        self.local_time = text

    def set_theme(self, theme: str) -> None:
        self.theme = theme

    def set_weather_effect(self, effect: Optional[str], particles: int) -> None:
        self.weather_effect = effect
        self.particles = particles

    def set_outfit_text(self, text: str) -> None:
        self.outfit_text = text

    def set_outfit_mode(self, mode: Optional[OutfitSource]) -> None:
        self.outfit_mode = mode

    def render_history(self, items: Sequence[str]) -> None:
        self.history = list(items)


MODE_LABELS = {"ai": "AI", "basic": "기본"}


class ConsoleView(MemoryView):
    def alert(self, message: str) -> None:
        super().alert(message)
        print(f"⚠️ {message}")

    def render(self) -> str:
        lines = [self.city_title]
        if self.translated_city:
            lines.append(self.translated_city)
        if self.local_time:
            lines.append(self.local_time)
        lines.append(f"현재 기온: {self.current_temp}  {self.condition_text}".rstrip())
        if self.daily:
            lines.append("  ".join(f"{d.label} {d.temp}" for d in self.daily))
        if self.hourly:
            lines.append("  ".join(f"{h.label} {h.temp} {h.condition_text}".rstrip() for h in self.hourly))
        if self.outfit_text:
            mode = MODE_LABELS.get(self.outfit_mode or "", "-")
            lines.append(f"👕 [{mode}] {self.outfit_text}")
        text = "\n".join(lines)
        print(text)
        return text

    def render_history_block(self) -> str:
        if not self.history:
            text = "최근 검색 기록이 없습니다."
        else:
            text = "\n".join(f"{i}. {term}" for i, term in enumerate(self.history))
        print(text)
        return text
