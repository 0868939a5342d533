
class BookingError(Exception):
    status = 400
    code = "BOOKING_REJECTED"

    def __init__(self, message: str, code: str | None = None):
        super().__init__(message)
        self.message = message
        if code:
            self.code = code


class BookingValidationError(BookingError):
    code = "VALIDATION_ERROR"


class ConflictError(BookingError):
    code = "DUPLICATE_BOOKING"


class CapacityError(BookingError):
    code = "FULLY_BOOKED"


class StorageError(Exception):
    status = 500
    code = "STORAGE_ERROR"
