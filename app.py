# app.py
from flask import Flask
from werkzeug.exceptions import HTTPException

from config.settings import get_config
from extensions.logger import init_logger
from extensions.session_store import init_session_store
from extensions.storage import init_storage
from services.translation_gateway import init_gateway
from controllers.auth_controller import auth_bp
from controllers.history_controller import history_bp
from controllers.translate_controller import translate_bp
from utils.response import json_response, error_response
from utils.exceptions import BizError


def create_app(config_name="development", **overrides):
    app = Flask(__name__)
    app.config.from_object(get_config(config_name))
    app.config.update(overrides)

    # 初始化扩展
    init_logger(app)
    init_storage(app)
    init_session_store(app)
    init_gateway(app)

    @app.get("/api/health")
    def health():
        return json_response(data={"ok": True})

    # 登录 / 注册 / 会话
    app.register_blueprint(auth_bp, url_prefix="/api/auth")
    # 翻译与语言列表
    app.register_blueprint(translate_bp)
    # 翻译历史
    app.register_blueprint(history_bp)

    # 错误处理
    @app.errorhandler(BizError)
    def _biz_err(e: BizError):
        if e.code >= 500:
            app.logger.error(f"{e.category}: {e.message}")
        return error_response(e.category, e.message, code=e.code, details=e.data)

    @app.errorhandler(HTTPException)
    def _http_err(e: HTTPException):
        return error_response(e.name.replace(" ", ""), e.description, code=e.code)

    @app.errorhandler(Exception)
    def _err(e):
        app.logger.exception("UNHANDLED EXCEPTION")
        return error_response("InternalError", "Internal server error", code=500)

    return app


if __name__ == "__main__":
    app = create_app()
    app.run(host=app.config["HOST"], port=app.config["PORT"], debug=app.config.get("DEBUG", False))
