# config/settings.py
import os
from dotenv import load_dotenv

BASE_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
load_dotenv(os.path.join(BASE_DIR, ".env"))  # 自动加载环境变量


def _as_bool(val, default=False):
    if val is None:
        return default
    return str(val).lower() in ("1", "true", "yes", "on")


class BaseConfig:
    SECRET_KEY = os.getenv("SESSION_SECRET", os.getenv("SECRET_KEY", "dev-secret-change-me"))
    HOST = os.getenv("HOST", "127.0.0.1")
    PORT = int(os.getenv("PORT", 3000))

    # 数据文件（users.json / history.json）
    DATA_DIR = os.getenv("DATA_DIR", os.path.join(BASE_DIR, "data"))
    HISTORY_LIMIT = int(os.getenv("HISTORY_LIMIT", 100))

    # DeepL 配置
    DEEPL_ENDPOINT = os.getenv("DEEPL_ENDPOINT", "https://api-free.deepl.com").rstrip("/")
    DEEPL_API_KEY = os.getenv("DEEPL_API_KEY", "")
    PROVIDER_TIMEOUT = float(os.getenv("PROVIDER_TIMEOUT", 10))

    # 会话
    SESSION_BACKEND = os.getenv("SESSION_BACKEND", "memory")  # memory | redis
    REDIS_URL = os.getenv("REDIS_URL", "redis://127.0.0.1:6379/0")
    SESSION_TTL_SECONDS = int(os.getenv("SESSION_TTL_SECONDS", 7 * 24 * 3600))
    PERMANENT_SESSION_LIFETIME = SESSION_TTL_SECONDS
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SECURE = _as_bool(os.getenv("SESSION_COOKIE_SECURE"), False)

    # 密码哈希算法（werkzeug 格式，如 scrypt / pbkdf2:sha256:600000）
    PASSWORD_HASH_METHOD = os.getenv("PASSWORD_HASH_METHOD", "scrypt")

    # 日志相关
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_DIR = os.getenv("LOG_DIR", "./logs")
    LOG_JSON = os.getenv("LOG_JSON", "1") == "1"  # 是否 JSON 格式
    LOG_TO_FILE = _as_bool(os.getenv("LOG_TO_FILE", "1"), True)
    LOG_MAX_BYTES = int(os.getenv("LOG_MAX_BYTES", 5 * 1024 * 1024))
    LOG_BACKUP_COUNT = int(os.getenv("LOG_BACKUP_COUNT", 5))
    APP_NAME = os.getenv("APP_NAME", "translation-proxy")


class DevelopmentConfig(BaseConfig):
    DEBUG = True
    LOG_JSON = os.getenv("LOG_JSON", "0") == "1"


class ProductionConfig(BaseConfig):
    DEBUG = False
    SESSION_COOKIE_SECURE = _as_bool(os.getenv("SESSION_COOKIE_SECURE"), True)


class TestingConfig(BaseConfig):
    TESTING = True
    DEEPL_API_KEY = "test-key"
    SESSION_BACKEND = "memory"
    PASSWORD_HASH_METHOD = "pbkdf2:sha256:1000"
    LOG_TO_FILE = False
    LOG_JSON = False


config_map = {
    "development": DevelopmentConfig,
    "production": ProductionConfig,
    "testing": TestingConfig,
}


def get_config(config_name):
    return config_map.get(config_name, DevelopmentConfig)
