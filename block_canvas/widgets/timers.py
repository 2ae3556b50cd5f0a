"""
Timers des widgets — jobs APScheduler appariés au cycle mount/unmount.

Un IntervalTimer porte au plus un job : `start()` remplace le précédent,
`cancel()` le retire sans condition. Le scheduler partagé est créé et démarré
à la première demande ; les tests injectent un BackgroundScheduler non démarré
(les jobs restent en attente et se déclenchent à la main).
"""
import datetime as dt
import logging
import uuid
from typing import Callable, Optional

from apscheduler.jobstores.base import JobLookupError
from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.date import DateTrigger
from apscheduler.triggers.interval import IntervalTrigger

log = logging.getLogger(__name__)

_scheduler: Optional[BackgroundScheduler] = None


def get_scheduler() -> BackgroundScheduler:
    """Scheduler partagé, démarré une fois. Idempotent."""
    global _scheduler
    if _scheduler is None or not _scheduler.running:
        _scheduler = BackgroundScheduler(timezone="UTC")
        _scheduler.start()
        log.info("Scheduler des widgets démarré")
    return _scheduler


def stop_scheduler() -> None:
    """Arrête le scheduler partagé (shutdown de l'application)."""
    global _scheduler
    if _scheduler and _scheduler.running:
        _scheduler.shutdown(wait=False)
        log.info("Scheduler des widgets arrêté")
    _scheduler = None


class IntervalTimer:
    def __init__(self, name: str, scheduler: Optional[BackgroundScheduler] = None):
        self.name = name
        self._scheduler = scheduler
        self._job_id: Optional[str] = None

    @property
    def scheduler(self) -> BackgroundScheduler:
        if self._scheduler is None:
            self._scheduler = get_scheduler()
        return self._scheduler

    @property
    def job_id(self) -> Optional[str]:
        return self._job_id

    @property
    def active(self) -> bool:
        return self._job_id is not None and self.scheduler.get_job(self._job_id) is not None

    def start(self, seconds: float, callback: Callable[[], None]) -> str:
        """(Ré)arme un job périodique ; le premier tir a lieu après `seconds`."""
        return self._add(callback, IntervalTrigger(seconds=seconds, timezone="UTC"))

    def start_once(self, seconds: float, callback: Callable[[], None]) -> str:
        """(Ré)arme un tir unique dans `seconds`."""
        run_at = dt.datetime.now(dt.timezone.utc) + dt.timedelta(seconds=seconds)
        return self._add(callback, DateTrigger(run_date=run_at, timezone="UTC"))

    def _add(self, callback: Callable[[], None], trigger) -> str:
        self.cancel()
        job_id = f"{self.name}-{uuid.uuid4().hex[:8]}"
        self.scheduler.add_job(callback, trigger=trigger, id=job_id, replace_existing=True)
        self._job_id = job_id
        log.debug("Timer %s armé (%s)", job_id, trigger)
        return job_id

    def cancel(self) -> None:
        if self._job_id is None:
            return
        try:
            self.scheduler.remove_job(self._job_id)
        except JobLookupError:
            # job à tir unique déjà consommé
            log.debug("Timer %s déjà terminé", self._job_id)
        self._job_id = None
