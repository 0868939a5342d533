import json
import logging
import os
from pathlib import Path

from pydantic import ValidationError
from sqlalchemy import select, delete
from sqlalchemy.exc import SQLAlchemyError

from .errors import StorageError
from .extensions import db
from .models import Reservation
from .schemas import ReservationRecord

logger = logging.getLogger(__name__)


class SqlReservationStore:
    """
    Stores the collection in the `reservations` table. Needs an app context.

    Rows are read and cleared through the table, not the ORM, so no loaded
    instances sit in the session when the same ids are inserted again.
    """

    def load_all(self) -> list[ReservationRecord]:
        t = Reservation.__table__
        try:
            rows = db.session.execute(select(t).order_by(t.c.id.asc())).mappings().all()
        except SQLAlchemyError as e:
            db.session.rollback()
            raise StorageError("Failed to load reservations") from e

        return [
            ReservationRecord(
                id=r["id"],
                name=r["name"],
                contact=r["contact"],
                date=r["date"],
                time=r["time"],
                slot=r["slot"],
                guests=r["guests"],
                payment_method=r["payment_method"],
            )
            for r in rows
        ]

    def save_all(self, records) -> None:
        try:
            db.session.execute(delete(Reservation.__table__))
            db.session.add_all([
                Reservation(
                    id=rec.id,
                    name=rec.name,
                    contact=rec.contact,
                    date=rec.date,
                    time=rec.time,
                    slot=rec.slot,
                    guests=rec.guests,
                    payment_method=rec.payment_method,
                )
                for rec in records
            ])
            db.session.commit()
        except SQLAlchemyError as e:
            db.session.rollback()
            raise StorageError("Failed to save reservations") from e


class JsonFileReservationStore:
    """Stores the collection as a pretty-printed JSON array in a single file."""

    def __init__(self, path):
        self.path = Path(path)

    def load_all(self) -> list[ReservationRecord]:
        if not self.path.exists():
            return []
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
            if not isinstance(raw, list):
                raise TypeError(f"expected a JSON array, got {type(raw).__name__}")
            return [ReservationRecord.model_validate(item) for item in raw]
        except (OSError, ValueError, TypeError, ValidationError) as e:
            raise StorageError(f"Failed to load reservations from {self.path}") from e

    def save_all(self, records) -> None:
        payload = json.dumps([rec.to_json() for rec in records], indent=2)
        tmp = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(payload, encoding="utf-8")
            os.replace(tmp, self.path)
        except OSError as e:
            raise StorageError(f"Failed to save reservations to {self.path}") from e


def build_store(config):
    kind = config["RESERVATION_STORE"]
    if kind == "sql":
        return SqlReservationStore()
    if kind == "json":
        logger.info("Using JSON reservation store at %s", config["RESERVATIONS_FILE"])
        return JsonFileReservationStore(config["RESERVATIONS_FILE"])
    raise ValueError(f"Unknown RESERVATION_STORE: {kind!r}")
