import logging
from datetime import UTC, datetime
from uuid import uuid4

from apscheduler.job import Job
from apscheduler.jobstores.base import ConflictingIdError

from app.core.config import settings
from app.core.exceptions import (
    DeliveryError,
    DuplicateScheduleError,
    ScheduledNotificationNotFoundError,
    SchedulerCapacityError,
    ScheduleValidationError,
)
from app.models.notification_outcome import notification_outcome_model
from app.schemas.notification import (
    NotificationRequest,
    ScheduledNotification,
    ScheduledNotificationStatus,
    ScheduleNotificationRequest,
)
from app.services.notification import notification_service
from app.services.scheduler import scheduler_service

logger = logging.getLogger(__name__)


def _get_notification_job_key() -> str:
    return f"notification-{uuid4().hex}"


def _ensure_timezone_aware(dt: datetime) -> datetime:
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt


def _scheduled_notification_from_job(job: Job) -> ScheduledNotification:
    notification: NotificationRequest = job.kwargs["notification"]
    return ScheduledNotification(
        id=job.id,
        token=notification.token,
        title=notification.title,
        body=notification.body,
        data=notification.data,
        scheduled_at=job.kwargs["scheduled_at"],
    )


async def schedule_notification(
    schedule_request: ScheduleNotificationRequest,
) -> ScheduledNotification:
    scheduler = scheduler_service.get_scheduler()
    scheduled_at = _ensure_timezone_aware(schedule_request.schedule_time)
    now = datetime.now(UTC)

    if scheduled_at <= now:
        logger.warning(f"Rejected notification scheduled in the past: {scheduled_at.isoformat()}")
        raise ScheduleValidationError("Scheduled time must be in the future.")

    if (
        settings.SCHEDULER_MAX_ARMED is not None
        and len(scheduler.get_jobs()) >= settings.SCHEDULER_MAX_ARMED
    ):
        logger.warning(f"Scheduler is full ({settings.SCHEDULER_MAX_ARMED} armed notifications)")
        raise SchedulerCapacityError("Too many notifications are already scheduled.")

    notification = NotificationRequest(
        token=schedule_request.token,
        title=schedule_request.title,
        body=schedule_request.body,
        data=schedule_request.data,
    )
    job_id = schedule_request.idempotency_key or _get_notification_job_key()

    try:
        job = scheduler.add_job(
            id=job_id,
            name=notification.title,
            func=_send_scheduled_notification,
            trigger="date",
            run_date=scheduled_at,
            kwargs={"job_id": job_id, "notification": notification, "scheduled_at": scheduled_at},
        )
    except ConflictingIdError as err:
        logger.warning(f"Notification {job_id} is already scheduled")
        raise DuplicateScheduleError(f"Notification {job_id} is already scheduled.") from err

    logger.info(
        f"Scheduled notification {job_id} for {scheduled_at.isoformat()} "
        f"(in {scheduled_at - now})"
    )
    return _scheduled_notification_from_job(job)


async def _send_scheduled_notification(
    job_id: str, notification: NotificationRequest, scheduled_at: datetime
) -> None:
    fired_at = datetime.now(UTC)
    outcome = ScheduledNotification(
        id=job_id,
        token=notification.token,
        title=notification.title,
        body=notification.body,
        data=notification.data,
        scheduled_at=scheduled_at,
        fired_at=fired_at,
        status=ScheduledNotificationStatus.FIRING,
    )
    await notification_outcome_model.record_outcome(outcome.model_copy())

    try:
        outcome.response = await notification_service.send_notification(notification)
        outcome.status = ScheduledNotificationStatus.SENT
        logger.info(f"Scheduled notification {job_id} sent: {outcome.response}")
    except DeliveryError as err:
        outcome.error = err.message
        outcome.status = ScheduledNotificationStatus.FAILED
        logger.error(f"Scheduled notification {job_id} failed: {err.message}")

    await notification_outcome_model.record_outcome(outcome)


async def get_scheduled_notifications() -> list[ScheduledNotification]:
    scheduler = scheduler_service.get_scheduler()
    jobs = sorted(scheduler.get_jobs(), key=lambda job: job.kwargs["scheduled_at"])
    return [_scheduled_notification_from_job(job) for job in jobs]


async def get_scheduled_notification(notification_id: str) -> ScheduledNotification:
    job = scheduler_service.get_scheduler().get_job(notification_id)
    if job:
        return _scheduled_notification_from_job(job)

    outcome = await notification_outcome_model.get_outcome(notification_id)
    if outcome is None:
        raise ScheduledNotificationNotFoundError(
            f"Scheduled notification {notification_id} not found."
        )
    return outcome


async def cancel_scheduled_notification(notification_id: str) -> None:
    scheduler = scheduler_service.get_scheduler()

    if not scheduler.get_job(notification_id):
        if await notification_outcome_model.get_outcome(notification_id):
            raise ScheduledNotificationNotFoundError(
                f"Scheduled notification {notification_id} has already fired."
            )
        raise ScheduledNotificationNotFoundError(
            f"Scheduled notification {notification_id} not found."
        )

    scheduler.remove_job(notification_id)
    logger.info(f"Cancelled scheduled notification {notification_id}")
