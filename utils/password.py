# utils/password.py
from werkzeug.security import generate_password_hash, check_password_hash


def hash_password(plain: str, method: str = "scrypt") -> str:
    return generate_password_hash(plain, method=method)


def verify_password(hashed: str, plain: str) -> bool:
    if not hashed or not plain:
        return False
    return check_password_hash(hashed, plain)
