from flask import Blueprint, g

from controllers.auth_helpers import login_required
from services.translation_service import HistoryService
from utils.response import json_response


history_bp = Blueprint("history", __name__, url_prefix="/api/history")


@history_bp.get("")
@login_required
def list_history():
    return json_response(data=HistoryService.list_for_user(g.current_user_id))
