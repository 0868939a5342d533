import logging
import threading

from .errors import StorageError

logger = logging.getLogger(__name__)

RESET_INTERVAL_SECONDS = 60 * 60


class ResetScheduler:
    def __init__(self, app, service, interval_seconds: float = RESET_INTERVAL_SECONDS):
        self.app = app
        self.service = service
        self.interval_seconds = interval_seconds
        self._stopped = threading.Event()
        self._thread: threading.Thread | None = None

    def start(self) -> None:
        if self._thread is not None:
            return
        self._thread = threading.Thread(
            target=self._run, name="reservation-reset", daemon=True
        )
        self._thread.start()
        logger.info("Reset scheduler started, every %ss", self.interval_seconds)

    def stop(self, timeout: float | None = None) -> None:
        self._stopped.set()
        if self._thread is not None:
            self._thread.join(timeout)

    def _run(self) -> None:
        while not self._stopped.wait(self.interval_seconds):
            self.tick()

    def tick(self) -> None:
        logger.info("Resetting reservations...")
        try:
            with self.app.app_context():
                self.service.reset()
        except StorageError:
            logger.exception("Scheduled reservation reset failed: storage unavailable")
        except Exception:
            logger.exception("Scheduled reservation reset failed")
