from flask import jsonify
from .errors import BookingError

def jerror(status: int, code: str, message: str, details=None):
    payload = {"code": code, "message": message}
    if details:
        payload["details"] = details
    return jsonify(payload), status

def jrejection(err: BookingError):
    return jerror(err.status, err.code, err.message)
