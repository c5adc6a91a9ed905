# src/weather_app/history/store.py
from __future__ import annotations
import json
import logging
from typing import List

from weather_app.core.settings import HISTORY_KEY, HISTORY_LIMIT
from weather_app.history.storage import HistoryStorage

logger = logging.getLogger(__name__)


class SearchHistory:
    """
    최근 검색어 목록
    - 최신순, 중복 없음, 최대 limit개
    - 변경할 때마다 저장소에 전체 목록을 저장
    """

    def __init__(self, storage: HistoryStorage, *, key: str = HISTORY_KEY, limit: int = HISTORY_LIMIT) -> None:
        self.storage = storage
        self.key = key
        self.limit = limit
        self._items: List[str] = []

    def list(self) -> List[str]:
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> str:
        return self._items[index]

    def load(self) -> List[str]:
        """손상되었거나 없는 데이터는 빈 목록으로 취급"""
        self._items = []
        try:
            raw = self.storage.get_item(self.key)
            if raw:
                parsed = json.loads(raw)
                if isinstance(parsed, list):
                    items: List[str] = []
                    for t in parsed:
                        if isinstance(t, str) and t.strip() and t.strip() not in items:
                            items.append(t.strip())
                    self._items = items[: self.limit]
        except (OSError, ValueError) as e:
            logger.error("히스토리 로드 실패: %s", e)
        return self.list()

    def save(self) -> None:
        try:
            self.storage.set_item(self.key, json.dumps(self._items, ensure_ascii=False))
        except OSError as e:
            logger.error("히스토리 저장 실패: %s", e)

    def add(self, term: str) -> None:
        value = term.strip()
        if not value:
            return

        # 중복 제거 후 맨 앞에 추가, 최대 limit개 유지
        self._items = [value] + [t for t in self._items if t != value]
        del self._items[self.limit:]
        self.save()

    def remove(self, index: int) -> None:
        if not 0 <= index < len(self._items):
            return
        del self._items[index]
        self.save()

    def clear(self) -> None:
        self._items = []
        self.save()
