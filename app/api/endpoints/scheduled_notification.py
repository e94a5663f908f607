from fastapi import APIRouter, status

from app.jobs import notification as notification_jobs
from app.schemas.notification import (
    CancelScheduledNotificationResponse,
    ErrorResponse,
    ScheduledNotification,
)

router = APIRouter()


@router.get("", response_model=list[ScheduledNotification])
async def get_scheduled_notifications() -> list[ScheduledNotification]:
    return await notification_jobs.get_scheduled_notifications()


@router.get(
    "/{notification_id}",
    response_model=ScheduledNotification,
    responses={status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}},
)
async def get_scheduled_notification(notification_id: str) -> ScheduledNotification:
    return await notification_jobs.get_scheduled_notification(notification_id)


@router.delete(
    "/{notification_id}",
    response_model=CancelScheduledNotificationResponse,
    responses={status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}},
)
async def cancel_scheduled_notification(
    notification_id: str,
) -> CancelScheduledNotificationResponse:
    await notification_jobs.cancel_scheduled_notification(notification_id)
    return CancelScheduledNotificationResponse(
        message="Scheduled notification cancelled", id=notification_id
    )
