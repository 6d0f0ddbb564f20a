# controllers/auth_controller.py
from flask import Blueprint

from controllers.auth_helpers import current_user_id, end_session, start_session
from services.auth_service import AuthService
from utils.payload import json_object
from utils.response import json_response


auth_bp = Blueprint("auth", __name__)


@auth_bp.post("/register")
def register():
    data = json_object()
    user = AuthService.register(
        email=data.get("email"),
        password=data.get("password"),
        name=data.get("name"),
    )
    start_session(user.id)
    return json_response(data=user.to_public_dict())


@auth_bp.post("/login")
def login():
    data = json_object()
    user = AuthService.authenticate(data.get("email"), data.get("password"))
    start_session(user.id)
    return json_response(data=user.to_public_dict())


@auth_bp.post("/logout")
def logout():
    end_session()
    return json_response(data={"ok": True})


@auth_bp.get("/me")
def me():
    user = AuthService.get_user(current_user_id())
    if not user:
        return json_response(data=None)
    return json_response(data=user.to_public_dict())
