from datetime import datetime

from .errors import BookingValidationError, CapacityError, ConflictError
from .schemas import ReservationRecord, ReserveRequest
from .utils.time import compute_slot, new_reservation_id

TOTAL_TABLES = 25
ACCEPTED_PAYMENT_METHOD = "cash"


def _same_guest(record: ReservationRecord, contact: str, name_key: str) -> bool:
    return record.contact == contact or record.name.strip().lower() == name_key


def evaluate(
    request: ReserveRequest,
    existing: list[ReservationRecord],
    *,
    capacity: int = TOTAL_TABLES,
    slot_minutes: int = 90,
    now: datetime | None = None,
) -> ReservationRecord:
    """Returns the record to store, or raises a BookingError saying why not."""
    required = (request.name, request.contact, request.date, request.time, request.guests)
    if any(not value for value in required):
        raise BookingValidationError("All fields are required.", code="MISSING_FIELDS")

    if request.payment_method != ACCEPTED_PAYMENT_METHOD:
        raise BookingValidationError("Only cash payment is accepted.", code="PAYMENT_METHOD")

    try:
        slot = compute_slot(request.time, slot_minutes)
    except ValueError:
        raise BookingValidationError("Time must be given as HH:MM.", code="BAD_TIME")

    name_key = request.name.strip().lower()
    same_day = [r for r in existing if r.date == request.date]
    same_slot = [r for r in same_day if r.slot == slot]

    if any(_same_guest(r, request.contact, name_key) for r in same_slot):
        raise ConflictError(
            "You already have a reservation for this time slot.",
            code="DUPLICATE_SLOT",
        )

    if any(_same_guest(r, request.contact, name_key) for r in same_day):
        raise ConflictError(
            "You already have an active reservation today. "
            "Please wait until it resets before booking another.",
            code="DUPLICATE_DAY",
        )

    if len(same_slot) >= capacity:
        raise CapacityError(f"Sorry, all {capacity} tables are booked for the {slot} slot.")

    return ReservationRecord(
        id=new_reservation_id((r.id for r in existing), now=now),
        name=request.name,
        contact=request.contact,
        date=request.date,
        time=request.time,
        slot=slot,
        guests=request.guests,
        payment_method=request.payment_method,
    )
