from flask import request

from utils.exceptions import ValidationError


def json_object() -> dict:
    """请求体须为 JSON 对象；缺省或无法解析时视为空对象。"""
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data
