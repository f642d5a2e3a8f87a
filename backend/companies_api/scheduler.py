# backend/companies_api/scheduler.py
import logging

from apscheduler.schedulers.background import BackgroundScheduler
from fastapi import FastAPI

from companies_api.crud.companies import CompanyRegistry

logger = logging.getLogger(__name__)

RESET_JOB_ID = "reset-companies"


class ResetScheduler:
    """Periodically restores a registry to its seed data."""

    def __init__(self, registry: CompanyRegistry, interval_ms: int = 3_600_000):
        if interval_ms <= 0:
            raise ValueError("interval_ms must be positive")
        self.registry = registry
        self.interval_ms = interval_ms
        self.scheduler = BackgroundScheduler(timezone="UTC")
        # first run one interval after start; coalesce to run once if missed
        self.scheduler.add_job(
            self._reset_job,
            "interval",
            seconds=interval_ms / 1000,
            id=RESET_JOB_ID,
            max_instances=1,
            coalesce=True,
        )

    @property
    def running(self) -> bool:
        return self.scheduler.running

    def _reset_job(self) -> None:
        self.registry.reset()

    def start(self) -> None:
        if self.scheduler.running:
            return
        self.scheduler.start()
        logger.info("[scheduler] companies reset scheduled every %d ms", self.interval_ms)

    def shutdown(self) -> None:
        if not self.scheduler.running:
            return
        self.scheduler.shutdown(wait=False)
        logger.info("[scheduler] companies reset stopped")


def init_scheduler(app: FastAPI, reset_scheduler: ResetScheduler) -> None:
    """Attach scheduler start/stop to FastAPI lifecycle."""
    @app.on_event("startup")
    def _start_scheduler():
        reset_scheduler.start()

    @app.on_event("shutdown")
    def _stop_scheduler():
        reset_scheduler.shutdown()
