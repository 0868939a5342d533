
from sqlalchemy import func
from .extensions import db

class Reservation(db.Model):
    __tablename__ = "reservations"
    id = db.Column(db.BigInteger, primary_key=True, autoincrement=False)
    name = db.Column(db.String(255), nullable=False)
    contact = db.Column(db.String(255), nullable=False, index=True)
    date = db.Column(db.String(32), nullable=False, index=True)
    time = db.Column(db.String(16), nullable=False)
    slot = db.Column(db.String(32), nullable=False)
    guests = db.Column(db.Integer, nullable=False)
    payment_method = db.Column(db.String(16), nullable=False)

    created_at = db.Column(db.DateTime(timezone=True), nullable=False, server_default=func.now())
