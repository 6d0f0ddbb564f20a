# -*- coding: utf-8 -*-
"""
__init__.py
--------------------------------------------------------------------
汇总导入所有模型，外部模块可简化引用：from models import User, HistoryEntry
"""

from .user import User
from .history import HistoryEntry
from .translation import (
    Language,
    ProviderFailure,
    ProviderResult,
    ProviderSuccess,
    TranslateResult,
)

__all__ = [
    "User", "HistoryEntry",
    "Language", "ProviderFailure", "ProviderResult", "ProviderSuccess", "TranslateResult",
]
