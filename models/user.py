# -*- coding: utf-8 -*-
"""
user.py
--------------------------------------------------------------------
用户实体。
说明：
- 以 JSON 数组形式存放在 users.json，字段名沿用 camelCase 以兼容已有数据文件。
- email 大小写不敏感唯一，唯一性由调用方在创建前检查。
- 创建后不再修改，也不删除。
"""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class User:
    id: str
    email: str
    name: str
    password_hash: str
    created_at: str

    def __repr__(self):
        return f"<User id={self.id} email={self.email}>"

    def to_public_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "email": self.email, "name": self.name}

    def to_record(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "email": self.email,
            "name": self.name,
            "passwordHash": self.password_hash,
            "createdAt": self.created_at,
        }

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "User":
        return cls(
            id=record["id"],
            email=record["email"],
            name=record.get("name") or record["email"],
            password_hash=record.get("passwordHash", ""),
            created_at=record.get("createdAt", ""),
        )
