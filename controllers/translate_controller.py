from flask import Blueprint

from controllers.auth_helpers import current_user_id
from services.translation_service import TranslationService
from utils.payload import json_object
from utils.response import json_response


translate_bp = Blueprint("translate", __name__, url_prefix="/api")


@translate_bp.get("/languages")
def languages():
    return json_response(data=TranslationService.languages())


@translate_bp.post("/translate")
def translate():
    data = json_object()
    result = TranslationService.translate(
        text=data.get("text"),
        to=data.get("to"),
        user_id=current_user_id(),
    )
    return json_response(data=result)
