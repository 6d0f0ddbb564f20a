# utils/exceptions.py
from typing import Any, Optional
from werkzeug.exceptions import HTTPException


class BizError(HTTPException):
    code: int  # HTTP 状态码
    message: str  # 业务提示
    data: Optional[Any]  # 附加数据
    category: str = "BizError"  # 机器可读分类

    def __init__(self, message: str = "业务异常", code: int = 400, data: Any = None):
        self.code = code
        self.message = message
        self.data = data
        super().__init__(description=message)


class ValidationError(BizError):
    category = "ValidationError"

    def __init__(self, message: str = "invalid input", data: Any = None):
        super().__init__(message=message, code=400, data=data)


class AuthError(BizError):
    category = "AuthError"

    def __init__(self, message: str = "Not authenticated", data: Any = None):
        super().__init__(message=message, code=401, data=data)


class ConflictError(BizError):
    category = "ConflictError"

    def __init__(self, message: str = "conflict", data: Any = None):
        super().__init__(message=message, code=409, data=data)


class ProviderError(BizError):
    """The provider answered with a non-success status; status and body are passed through."""
    category = "ProviderError"

    def __init__(self, status: int, body: str, message: str = "Translation provider request failed"):
        self.status = status
        self.body = body
        # 上游返回非错误码时仍按 502 处理
        code = status if 400 <= status <= 599 else 502
        super().__init__(message=message, code=code, data=body)


class TransportError(BizError):
    category = "TransportError"

    def __init__(self, message: str = "Translation provider unreachable", data: Any = None):
        super().__init__(message=message, code=502, data=data)


class ProviderConfigError(BizError):
    category = "ProviderConfigError"

    def __init__(self, message: str = "Translation provider not configured"):
        super().__init__(message=message, code=500)


class StorageError(BizError):
    category = "StorageError"

    def __init__(self, message: str = "Storage failure", data: Any = None):
        super().__init__(message=message, code=500, data=data)
