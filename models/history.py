# -*- coding: utf-8 -*-
"""
history.py
--------------------------------------------------------------------
翻译历史条目。按用户 id 归集在 history.json 中，最新的排在最前。
"""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class HistoryEntry:
    original_text: str
    translated_text: str
    target_lang: str
    created_at: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "originalText": self.original_text,
            "translatedText": self.translated_text,
            "targetLang": str(self.target_lang).upper(),
            "createdAt": self.created_at,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "HistoryEntry":
        return cls(
            original_text=data.get("originalText", ""),
            translated_text=data.get("translatedText", ""),
            target_lang=str(data.get("targetLang", "")).upper(),
            created_at=data.get("createdAt", ""),
        )
