# extensions/logger.py
import os, sys, logging, json, uuid, time
from logging.handlers import RotatingFileHandler
from flask import g, request

_REQUEST_ID_KEY = "request_id"


class JsonFormatter(logging.Formatter):
    def format(self, record):
        data = {
            "ts": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        if hasattr(record, "request_id"):
            data["request_id"] = record.request_id
        if hasattr(record, "user_id"):
            data["user_id"] = record.user_id
        if record.exc_info:
            data["exc"] = self.formatException(record.exc_info)
        return json.dumps(data, ensure_ascii=False)


class RequestContextFilter(logging.Filter):
    """为日志记录附加 request_id 与已解析的会话用户 id。"""

    def filter(self, record):
        from flask import has_request_context
        if has_request_context():
            record.request_id = getattr(g, _REQUEST_ID_KEY, "-")
            record.user_id = g.get("current_user_id") or "-"
        else:
            record.request_id = "-"
            record.user_id = "-"
        return True


def _ensure_request_id():
    if not hasattr(g, _REQUEST_ID_KEY):
        setattr(g, _REQUEST_ID_KEY, uuid.uuid4().hex)
    return getattr(g, _REQUEST_ID_KEY)


def _install_handlers(cfg, level):
    root = logging.getLogger()
    # 避免重复添加
    if any(getattr(h, "_app_handler", False) for h in root.handlers):
        return
    root.setLevel(level)

    text_fmt = logging.Formatter(
        "%(asctime)s | %(levelname)s | %(request_id)s | %(user_id)s | %(name)s | %(message)s",
        "%Y-%m-%d %H:%M:%S"
    )
    fmt = JsonFormatter() if cfg["LOG_JSON"] else text_fmt

    def tag(h, lvl=None):
        h.setLevel(lvl or level)
        h.setFormatter(fmt)
        h.addFilter(RequestContextFilter())
        h._app_handler = True
        root.addHandler(h)

    tag(logging.StreamHandler(sys.stdout))

    if cfg["LOG_TO_FILE"]:
        log_dir = cfg["LOG_DIR"]
        os.makedirs(log_dir, exist_ok=True)

        def make_handler(filename):
            return RotatingFileHandler(
                os.path.join(log_dir, filename),
                maxBytes=cfg["LOG_MAX_BYTES"],
                backupCount=cfg["LOG_BACKUP_COUNT"],
                encoding="utf-8"
            )

        tag(make_handler("app.log"))
        tag(make_handler("error.log"), logging.ERROR)

    # 降低 noisy 包
    logging.getLogger("urllib3").setLevel(logging.WARNING)
    logging.getLogger("werkzeug").setLevel(logging.INFO)


def init_logger(app):
    cfg = app.config
    level = getattr(logging, cfg["LOG_LEVEL"].upper(), logging.INFO)
    _install_handlers(cfg, level)

    app.logger.info("Logger initialized")

    # 注册请求钩子
    @app.before_request
    def _before():
        g._req_start = time.time()
        _ensure_request_id()
        app.logger.info(f"REQ {request.method} {request.path} from {request.remote_addr}")

    @app.after_request
    def _after(resp):
        duration = (time.time() - getattr(g, "_req_start", time.time())) * 1000
        app.logger.info(f"RESP {request.method} {request.path} {resp.status_code} {duration:.1f}ms")
        resp.headers.setdefault("X-Request-Id", getattr(g, _REQUEST_ID_KEY, "-"))
        return resp
