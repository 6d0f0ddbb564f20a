# controllers/auth_helpers.py
from __future__ import annotations

from functools import wraps
from typing import Optional

from flask import current_app, g, session

from extensions.session_store import SessionStore
from utils.exceptions import AuthError

SESSION_ID_KEY = "sid"


def _session_store() -> SessionStore:
    return current_app.extensions["session_store"]


def current_user_id() -> Optional[str]:
    """
    从 cookie 中的会话 id 解析当前用户 id。
    未登录、会话过期或已注销时返回 None；结果缓存在 g 上。
    """
    if "current_user_id" in g:
        return g.current_user_id
    sid = session.get(SESSION_ID_KEY)
    user_id = _session_store().get(sid) if sid else None
    g.current_user_id = user_id
    return user_id


def start_session(user_id: str) -> None:
    end_session()
    session[SESSION_ID_KEY] = _session_store().create(user_id)
    session.permanent = True
    g.current_user_id = user_id


def end_session() -> None:
    sid = session.pop(SESSION_ID_KEY, None)
    if sid:
        _session_store().destroy(sid)
    session.clear()
    g.current_user_id = None


def login_required(fn):
    """鉴权装饰器：无有效会话时抛出 AuthError(401)，并注入 g.current_user_id。"""
    @wraps(fn)
    def wrapper(*args, **kwargs):
        if not current_user_id():
            raise AuthError("Not authenticated")
        return fn(*args, **kwargs)
    return wrapper
