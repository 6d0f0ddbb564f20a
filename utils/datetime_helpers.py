# -*- coding: utf-8 -*-
"""Datetime helpers.

所有落盘的时间统一为 UTC，格式为以 ``Z`` 结尾的 ISO 8601 字符串，
与浏览器端 ``new Date().toISOString()`` 的输出保持一致。
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional


def _ensure_utc(dt: datetime) -> datetime:
    """将给定 ``datetime`` 统一转换为带 UTC 时区的对象。"""

    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def datetime_to_utc_iso(dt: Optional[datetime]) -> Optional[str]:
    """将 ``datetime`` 格式化为毫秒精度、``Z`` 结尾的 UTC ISO 字符串。

    :param dt: 需要转换的时间; ``None`` 时直接返回 ``None``。
    """

    if dt is None:
        return None
    return _ensure_utc(dt).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def utc_now_iso() -> str:
    return datetime_to_utc_iso(utc_now())
