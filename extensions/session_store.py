"""Server-side session stores: session id -> user id, with expiry.

The Flask cookie only carries the session id; the mapping lives here so that
logout and expiry are enforced server-side.
"""
from __future__ import annotations

import logging
import secrets
import threading
import time
from typing import Dict, Optional, Tuple

from extensions.redis_client import get_redis

logger = logging.getLogger(__name__)

SESSION_PREFIX = "sess:"


def _new_session_id() -> str:
    return secrets.token_urlsafe(32)


class SessionStore:
    """Interface shared by the session backends."""

    def __init__(self, ttl_seconds: int):
        self.ttl_seconds = ttl_seconds

    def create(self, user_id: str) -> str:
        raise NotImplementedError

    def get(self, session_id: str) -> Optional[str]:
        raise NotImplementedError

    def destroy(self, session_id: str) -> None:
        raise NotImplementedError


class MemorySessionStore(SessionStore):
    """Process-local store; sessions are lost on restart."""

    def __init__(self, ttl_seconds: int, clock=time.monotonic):
        super().__init__(ttl_seconds)
        self._clock = clock
        self._lock = threading.Lock()
        self._sessions: Dict[str, Tuple[str, float]] = {}

    def _purge_expired(self, now: float) -> None:
        expired = [sid for sid, (_, expires_at) in self._sessions.items() if expires_at <= now]
        for sid in expired:
            del self._sessions[sid]

    def create(self, user_id: str) -> str:
        sid = _new_session_id()
        with self._lock:
            now = self._clock()
            # 被丢弃的 cookie 不会再被查询，在此顺带清理过期会话
            self._purge_expired(now)
            self._sessions[sid] = (user_id, now + self.ttl_seconds)
        return sid

    def get(self, session_id: str) -> Optional[str]:
        if not session_id:
            return None
        with self._lock:
            entry = self._sessions.get(session_id)
            if entry is None:
                return None
            user_id, expires_at = entry
            if expires_at <= self._clock():
                # 过期后移除并表现为不存在
                self._sessions.pop(session_id, None)
                return None
            return user_id

    def destroy(self, session_id: str) -> None:
        if not session_id:
            return
        with self._lock:
            self._sessions.pop(session_id, None)


class RedisSessionStore(SessionStore):
    """Sessions shared across worker processes; expiry is delegated to redis TTLs."""

    def __init__(self, ttl_seconds: int, redis_url: str, client=None):
        super().__init__(ttl_seconds)
        self._client = client if client is not None else get_redis(redis_url)

    def create(self, user_id: str) -> str:
        sid = _new_session_id()
        self._client.setex(SESSION_PREFIX + sid, self.ttl_seconds, user_id)
        return sid

    def get(self, session_id: str) -> Optional[str]:
        if not session_id:
            return None
        value = self._client.get(SESSION_PREFIX + session_id)
        if value is None:
            return None
        return value.decode() if isinstance(value, bytes) else str(value)

    def destroy(self, session_id: str) -> None:
        if not session_id:
            return
        self._client.delete(SESSION_PREFIX + session_id)


def init_session_store(app) -> SessionStore:
    cfg = app.config
    backend = cfg.get("SESSION_BACKEND", "memory")
    ttl = cfg["SESSION_TTL_SECONDS"]
    if backend == "redis":
        store = RedisSessionStore(ttl, cfg["REDIS_URL"])
    elif backend == "memory":
        store = MemorySessionStore(ttl)
    else:
        raise ValueError(f"unknown SESSION_BACKEND: {backend}")
    app.extensions["session_store"] = store
    logger.info("session store initialized backend=%s ttl=%ss", backend, ttl)
    return store
