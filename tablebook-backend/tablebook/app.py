import logging
import random
from datetime import date, timedelta
import click
from flask import Flask, jsonify
from flask.cli import with_appcontext
from flask_cors import CORS
from .extensions import db, migrate
from .config import Config
from .errors import BookingError, StorageError
from .http import jerror
from .booking import BookingService
from .scheduler import ResetScheduler
from .schemas import ReserveRequest
from .store import build_store
from .blueprints.reservations import bp as reservations_bp
from .blueprints.admin import bp as admin_bp

logger = logging.getLogger(__name__)

def create_app(config_object=Config, instance_path=None):
    app = Flask(__name__, instance_path=instance_path)
    app.config.from_object(config_object)

    logging.basicConfig(
        level=app.config["LOG_LEVEL"],
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    CORS(app)

    db.init_app(app)
    migrate.init_app(app, db)

    with app.app_context():
        from . import models
        if app.config["AUTO_CREATE_SCHEMA"]:
            db.create_all()

    service = BookingService(
        build_store(app.config),
        capacity=app.config["TOTAL_TABLES"],
        slot_minutes=app.config["SLOT_MINUTES"],
    )
    app.extensions["booking_service"] = service

    app.register_blueprint(reservations_bp)
    app.register_blueprint(admin_bp, url_prefix="/admin")

    @app.errorhandler(StorageError)
    def storage_failed(e):
        logger.exception("Reservation storage failed")
        return jerror(500, e.code, "Reservation storage is unavailable.")

    @app.get("/health")
    def health():
        return jsonify(status="ok")

    @click.command("reset-reservations")
    @with_appcontext
    def reset_command():
        """Clears every reservation now."""
        service.reset()
        click.echo("Reservations cleared.")

    @click.command("seed")
    @click.option("--count", default=60, show_default=True, help="Number of sample requests to submit.")
    @with_appcontext
    def seed_command(count):
        """Fills the book with sample reservations."""
        service.reset()
        click.echo("Cleared existing data.")

        today = date.today()
        accepted = 0
        for i in range(count):
            res_date = today + timedelta(days=random.randint(0, 2))
            request = ReserveRequest(
                name=f"Guest {i+1}",
                contact=f"guest{i+1}@example.com",
                date=res_date.isoformat(),
                time=f"{random.randint(17, 22):02d}:{random.choice([0, 30]):02d}",
                guests=random.randint(1, 8),
                payment_method="cash",
            )
            try:
                service.reserve(request)
            except BookingError as e:
                click.echo(f"Skipped {request.name}: {e.message}")
                continue
            accepted += 1

        click.echo(f"Created {accepted} reservations.")

    app.cli.add_command(reset_command)
    app.cli.add_command(seed_command)

    if app.config["RESET_SCHEDULER_ENABLED"]:
        scheduler = ResetScheduler(app, service, app.config["RESET_INTERVAL_SECONDS"])
        scheduler.start()
        app.extensions["reset_scheduler"] = scheduler

    return app
