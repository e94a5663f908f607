from apscheduler.schedulers.asyncio import AsyncIOScheduler

from app.core.config import settings


class SchedulerService:
    _instance: "SchedulerService" = None

    def __init__(self):
        if SchedulerService._instance is not None:
            raise Exception("This class is a singleton!")
        self.scheduler: AsyncIOScheduler | None = None
        self._started = False

    @classmethod
    def get_instance(cls) -> "SchedulerService":
        if SchedulerService._instance is None:
            SchedulerService._instance = cls()
        return SchedulerService._instance

    @property
    def running(self) -> bool:
        return self._started and self.scheduler is not None and self.scheduler.running

    def start(self) -> None:
        if not self._started:
            self.scheduler = AsyncIOScheduler(
                timezone=settings.SCHEDULER_TIMEZONE,
                job_defaults={
                    "misfire_grace_time": None,
                    "coalesce": False,
                    "max_instances": 1,
                },
            )
            self.scheduler.start()
            self._started = True

    def shutdown(self) -> None:
        # Armed timers live in memory only and are dropped here
        if self._started and self.scheduler:
            self.scheduler.shutdown(wait=False)
            self._started = False

    def get_scheduler(self) -> AsyncIOScheduler:
        if self.scheduler is None or not self._started:
            raise ValueError("Scheduler not started")
        return self.scheduler


scheduler_service = SchedulerService.get_instance()
