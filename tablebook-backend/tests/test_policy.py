import pytest

from tablebook.errors import BookingValidationError, CapacityError, ConflictError
from tablebook.policy import evaluate
from tablebook.schemas import ReserveRequest


def _request(i: int = 1, **overrides) -> ReserveRequest:
    payload = {
        "name": f"Guest {i}",
        "contact": f"555-01{i:02d}",
        "date": "2030-05-17",
        "time": "14:00",
        "guests": 2,
        "paymentMethod": "cash",
    }
    payload.update(overrides)
    return ReserveRequest.model_validate(payload)


def _book(existing, request):
    record = evaluate(request, existing)
    existing.append(record)
    return record


def test_accept_builds_record_with_slot():
    record = evaluate(_request(name="Ada Lovelace", time="19:45", guests=4), [])
    assert record.slot == "19:00-20:30"
    assert record.time == "19:45"
    assert record.name == "Ada Lovelace"
    assert record.guests == 4
    assert record.payment_method == "cash"
    assert record.to_json()["paymentMethod"] == "cash"


@pytest.mark.parametrize("field", ["name", "contact", "date", "time", "guests"])
def test_missing_field_rejected(field):
    with pytest.raises(BookingValidationError) as exc:
        evaluate(_request(**{field: None}), [])
    assert exc.value.message == "All fields are required."
    assert exc.value.code == "MISSING_FIELDS"


def test_blank_string_and_zero_guests_count_as_missing():
    for overrides in ({"name": ""}, {"contact": ""}, {"guests": 0}):
        with pytest.raises(BookingValidationError, match="All fields are required."):
            evaluate(_request(**overrides), [])


def test_missing_field_checked_before_payment():
    with pytest.raises(BookingValidationError, match="All fields are required."):
        evaluate(_request(contact=None, paymentMethod="card"), [])


@pytest.mark.parametrize("method", ["card", "Cash", None, "cash "])
def test_only_cash_accepted(method):
    with pytest.raises(BookingValidationError) as exc:
        evaluate(_request(paymentMethod=method), [])
    assert exc.value.message == "Only cash payment is accepted."


def test_payment_checked_before_duplicates():
    existing = []
    _book(existing, _request(1))
    with pytest.raises(BookingValidationError, match="Only cash"):
        evaluate(_request(1, paymentMethod="card"), existing)


def test_unreadable_time_rejected():
    with pytest.raises(BookingValidationError) as exc:
        evaluate(_request(time="teatime"), [])
    assert exc.value.code == "BAD_TIME"


def test_same_slot_duplicate_by_contact():
    existing = []
    _book(existing, _request(1))
    with pytest.raises(ConflictError) as exc:
        evaluate(_request(2, contact="555-0101", time="14:45"), existing)
    assert exc.value.message == "You already have a reservation for this time slot."
    assert exc.value.code == "DUPLICATE_SLOT"


def test_same_slot_duplicate_by_name_ignores_case_and_whitespace():
    existing = []
    _book(existing, _request(1, name="Grace Hopper"))
    with pytest.raises(ConflictError, match="this time slot"):
        evaluate(_request(2, name="  grace HOPPER "), existing)


def test_same_day_duplicate_in_other_slot():
    existing = []
    _book(existing, _request(1, time="12:00"))
    with pytest.raises(ConflictError) as exc:
        evaluate(_request(1, time="19:00"), existing)
    assert exc.value.message == (
        "You already have an active reservation today. "
        "Please wait until it resets before booking another."
    )
    assert exc.value.code == "DUPLICATE_DAY"


def test_same_guest_on_another_date_accepted():
    existing = []
    _book(existing, _request(1, date="2030-05-17"))
    record = evaluate(_request(1, date="2030-05-18"), existing)
    assert record.date == "2030-05-18"


def test_capacity_ceiling():
    existing = []
    for i in range(1, 26):
        _book(existing, _request(i))
    assert len(existing) == 25

    with pytest.raises(CapacityError) as exc:
        evaluate(_request(26), existing)
    assert exc.value.message == "Sorry, all 25 tables are booked for the 13:00-14:30 slot."
    assert exc.value.code == "FULLY_BOOKED"


def test_capacity_is_per_slot_and_date():
    existing = []
    for i in range(1, 26):
        _book(existing, _request(i))
    assert evaluate(_request(26, time="16:00"), existing).slot == "15:00-16:30"
    assert evaluate(_request(27, date="2030-05-18"), existing).date == "2030-05-18"


def test_duplicate_reported_before_capacity():
    existing = []
    for i in range(1, 26):
        _book(existing, _request(i))
    with pytest.raises(ConflictError, match="this time slot"):
        evaluate(_request(3), existing)


def test_custom_capacity():
    existing = []
    _book(existing, _request(1))
    with pytest.raises(CapacityError, match="all 1 tables"):
        evaluate(_request(2), existing, capacity=1)


def test_new_id_is_greater_than_existing():
    existing = []
    first = _book(existing, _request(1))
    second = _book(existing, _request(2))
    assert second.id > first.id
