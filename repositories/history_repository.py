# repositories/history_repository.py
from __future__ import annotations

import logging
from typing import List

from models.history import HistoryEntry
from repositories.json_file import JsonFileStore
from utils.exceptions import StorageError

logger = logging.getLogger(__name__)

DEFAULT_HISTORY_LIMIT = 100


def _user_items(all_history: dict, user_id: str) -> list:
    items = all_history.get(user_id)
    if items is None:
        return []
    if not isinstance(items, list) or not all(isinstance(item, dict) for item in items):
        logger.error("malformed history for user_id=%s", user_id)
        raise StorageError("Corrupt data file history.json")
    return items


class HistoryRepository:
    """每个用户一份翻译历史，最新在前，超过 limit 的旧记录被丢弃。"""

    def __init__(self, store: JsonFileStore, limit: int = DEFAULT_HISTORY_LIMIT):
        self.store = store
        self.limit = limit

    def append(self, user_id: str, entry: HistoryEntry) -> None:
        def _apply(all_history: dict):
            items = _user_items(all_history, user_id)
            items.insert(0, entry.to_dict())
            all_history[user_id] = items[:self.limit]

        self.store.update(_apply)

    def get(self, user_id: str) -> List[HistoryEntry]:
        items = _user_items(self.store.read(), user_id)
        return [HistoryEntry.from_dict(item) for item in items]
