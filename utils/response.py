from flask import jsonify


def json_response(data=None, code=200):
    resp = jsonify(data)
    resp.status_code = code
    return resp


def error_response(category: str, message: str, code: int = 400, details=None):
    resp = jsonify({"error": category, "message": message, "details": details})
    resp.status_code = code
    return resp
