import re

EMAIL_RE = re.compile(r"^[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}$")


def validate_email(email: str) -> bool:
    return bool(EMAIL_RE.match(email))


def normalize_email(email) -> str:
    """去首尾空格并转小写，仅用于比较，不用于存储。"""
    if email is None:
        return ""
    return str(email).strip().lower()


def default_display_name(email: str) -> str:
    """邮箱 @ 之前的部分作为默认昵称。"""
    return email.split("@", 1)[0]
