# services/translation_service.py
import logging
from typing import Optional

from flask import current_app

from models.history import HistoryEntry
from services.translation_gateway import TranslationGateway
from utils.datetime_helpers import utc_now_iso
from utils.exceptions import ValidationError

logger = logging.getLogger(__name__)


def _gateway() -> TranslationGateway:
    return current_app.extensions["translation_gateway"]


def _is_blank(value) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


class TranslationService:

    @staticmethod
    def translate(text, to, user_id: Optional[str] = None) -> dict:
        if _is_blank(text) or _is_blank(to):
            raise ValidationError("Missing required fields: text and to")
        if not isinstance(text, str) or not isinstance(to, str):
            raise ValidationError("Fields text and to must be strings")

        target_lang = to.strip().upper()
        result = _gateway().translate(text, target_lang)
        translated_text = result.translated_text

        if user_id:
            HistoryService.record(user_id, HistoryEntry(
                original_text=text,
                translated_text=translated_text,
                target_lang=target_lang,
                created_at=utc_now_iso(),
            ))
        return {"translatedText": translated_text, "raw": result.raw}

    @staticmethod
    def languages() -> list:
        return [lang.to_dict() for lang in _gateway().list_target_languages()]


class HistoryService:

    @staticmethod
    def record(user_id: str, entry: HistoryEntry) -> None:
        current_app.extensions["history_repository"].append(user_id, entry)
        logger.info("history appended user_id=%s target=%s", user_id, entry.target_lang)

    @staticmethod
    def list_for_user(user_id: str) -> list:
        entries = current_app.extensions["history_repository"].get(user_id)
        return [entry.to_dict() for entry in entries]
