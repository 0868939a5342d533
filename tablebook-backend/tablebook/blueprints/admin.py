from flask import Blueprint, jsonify, current_app

bp = Blueprint("admin", __name__)


@bp.get("/reservations")
def list_reservations():
    """Every current reservation in the order it was accepted. No filters, no paging."""
    service = current_app.extensions["booking_service"]
    return jsonify([r.to_json() for r in service.list_all()])
