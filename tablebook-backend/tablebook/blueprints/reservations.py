import logging
from flask import Blueprint, request, jsonify, current_app
from pydantic import ValidationError
from ..errors import BookingError
from ..http import jerror, jrejection
from ..schemas import ReserveRequest

logger = logging.getLogger(__name__)

bp = Blueprint("reservations", __name__)


@bp.post("/reserve")
def create_reservation():
    # A missing or unparsable body is an empty request: it fails the required-fields check.
    payload = request.get_json(silent=True)
    if payload is None:
        payload = {}
    if not isinstance(payload, dict):
        return jerror(400, "INVALID_PAYLOAD", "Missing or invalid JSON payload.")

    try:
        data = ReserveRequest.model_validate(payload)
    except ValidationError as e:
        return jerror(422, "VALIDATION_ERROR", "Invalid input.",
                      details=e.errors(include_url=False, include_context=False))

    service = current_app.extensions["booking_service"]
    try:
        record = service.reserve(data)
    except BookingError as e:
        logger.info("Reservation rejected (%s) for date=%s time=%s", e.code, data.date, data.time)
        return jrejection(e)

    return jsonify(
        message=f"Reservation confirmed for {record.slot}. Please arrive on time.",
        reservationId=record.id,
        slot=record.slot,
    ), 200
