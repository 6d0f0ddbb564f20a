# -*- coding: utf-8 -*-
"""
translation.py
--------------------------------------------------------------------
翻译服务商响应的显式建模：成功 / 失败二选一，取代可选链式取值。
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Union


@dataclass(frozen=True)
class ProviderSuccess:
    payload: Any


@dataclass(frozen=True)
class ProviderFailure:
    status: int
    body: str


ProviderResult = Union[ProviderSuccess, ProviderFailure]


@dataclass(frozen=True)
class TranslateResult:
    translations: List[Dict[str, Any]] = field(default_factory=list)
    raw: Dict[str, Any] = field(default_factory=dict)

    @property
    def translated_text(self) -> str:
        if not self.translations:
            return ""
        return self.translations[0].get("text") or ""

    @property
    def detected_source_language(self):
        if not self.translations:
            return None
        return self.translations[0].get("detected_source_language")


@dataclass(frozen=True)
class Language:
    code: str
    display_name: str

    def to_dict(self) -> Dict[str, Any]:
        return {"code": self.code, "displayName": self.display_name}
