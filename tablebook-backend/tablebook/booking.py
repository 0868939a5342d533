import logging
import threading

from .policy import TOTAL_TABLES, evaluate
from .schemas import ReservationRecord, ReserveRequest

logger = logging.getLogger(__name__)


class BookingService:
    """
    Single writer in front of the reservation store.

    Every read-validate-write runs under one lock, and the scheduled reset
    takes the same lock, so two concurrent requests can never both claim
    the last table or both pass the duplicate checks.
    """

    def __init__(self, store, capacity: int = TOTAL_TABLES, slot_minutes: int = 90):
        self.store = store
        self.capacity = capacity
        self.slot_minutes = slot_minutes
        self._lock = threading.Lock()

    def reserve(self, request: ReserveRequest) -> ReservationRecord:
        with self._lock:
            reservations = self.store.load_all()
            record = evaluate(
                request,
                reservations,
                capacity=self.capacity,
                slot_minutes=self.slot_minutes,
            )
            self.store.save_all([*reservations, record])

        logger.info("Reservation %s confirmed for %s %s", record.id, record.date, record.slot)
        return record

    def list_all(self) -> list[ReservationRecord]:
        with self._lock:
            return self.store.load_all()

    def reset(self) -> None:
        with self._lock:
            self.store.save_all([])
