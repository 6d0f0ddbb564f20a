# repositories/user_repository.py
from __future__ import annotations

import logging
import uuid
from typing import List, Optional

from models.user import User
from repositories.json_file import JsonFileStore
from utils.datetime_helpers import utc_now_iso
from utils.exceptions import StorageError
from utils.password import hash_password, verify_password
from utils.validators import default_display_name, normalize_email

logger = logging.getLogger(__name__)


class UserRepository:
    """
    用户的仓储（数据访问）层，数据存放在 users.json。
    说明：
    - 不做业务规则判断，仅做持久化读写与密码哈希。
    - create 不重复检查邮箱唯一性，需要原子性的调用方在 locked() 内先 find_by_email。
    """

    def __init__(self, store: JsonFileStore, hash_method: str = "scrypt"):
        self.store = store
        self.hash_method = hash_method

    def locked(self):
        return self.store.locked()

    def _records(self) -> List[dict]:
        records = self.store.read()
        for record in records:
            if not isinstance(record, dict) or not isinstance(record.get("id"), str) \
                    or not isinstance(record.get("email"), str):
                logger.error("malformed user record in %s", self.store.path)
                raise StorageError("Corrupt data file users.json")
        return records

    def find_by_email(self, email: str) -> Optional[User]:
        key = normalize_email(email)
        if not key:
            return None
        for record in self._records():
            if normalize_email(record["email"]) == key:
                return User.from_record(record)
        return None

    def find_by_id(self, user_id: str) -> Optional[User]:
        if not user_id:
            return None
        for record in self._records():
            if record["id"] == user_id:
                return User.from_record(record)
        return None

    def create(self, email: str, password: str, name: Optional[str] = None) -> User:
        email = email.strip()
        user = User(
            id=str(uuid.uuid4()),
            email=email,
            name=(name or "").strip() or default_display_name(email),
            password_hash=hash_password(str(password), method=self.hash_method),
            created_at=utc_now_iso(),
        )
        self.store.update(lambda users: users.append(user.to_record()))
        logger.info("user created id=%s", user.id)
        return user

    @staticmethod
    def verify(user: User, password: str) -> bool:
        return verify_password(user.password_hash, str(password or ""))
