# services/auth_service.py
import logging

from flask import current_app

from models.user import User
from repositories.user_repository import UserRepository
from utils.exceptions import AuthError, ConflictError, ValidationError
from utils.validators import validate_email

logger = logging.getLogger(__name__)


def _users() -> UserRepository:
    return current_app.extensions["user_repository"]


class AuthService:

    @staticmethod
    def register(email, password, name=None) -> User:
        email = (email or "").strip() if isinstance(email, str) else ""
        password = password if isinstance(password, str) else ""
        if not email or not password:
            raise ValidationError("Email and password required")
        if not validate_email(email):
            raise ValidationError("Invalid email address")
        if name is not None and not isinstance(name, str):
            raise ValidationError("Name must be a string")

        users = _users()
        # 查重与写入放在同一把锁内，避免同进程并发注册相同邮箱
        with users.locked():
            if users.find_by_email(email):
                logger.info("register rejected: email already registered")
                raise ConflictError("Email already registered")
            return users.create(email, password, name)

    @staticmethod
    def authenticate(email, password) -> User:
        email = (email or "").strip() if isinstance(email, str) else ""
        password = password if isinstance(password, str) else ""
        if not email or not password:
            raise ValidationError("Email and password required")
        users = _users()
        user = users.find_by_email(email)
        # 用户不存在与密码错误返回相同提示
        if not user or not users.verify(user, password):
            logger.info("login failed")
            raise AuthError("Invalid credentials")
        logger.info("login ok user_id=%s", user.id)
        return user

    @staticmethod
    def get_user(user_id):
        if not user_id:
            return None
        return _users().find_by_id(user_id)
