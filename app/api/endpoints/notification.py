from typing import Annotated

from fastapi import APIRouter, Body, status

from app.jobs import notification as notification_jobs
from app.schemas.notification import (
    ErrorResponse,
    NotificationRequest,
    ScheduleNotificationRequest,
    ScheduleNotificationResponse,
    SendNotificationResponse,
)
from app.services.notification import notification_service

router = APIRouter()


@router.post(
    "/send-notification",
    response_model=SendNotificationResponse,
    responses={status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse}},
)
async def send_notification(
    notification_request: Annotated[NotificationRequest, Body(...)],
) -> SendNotificationResponse:
    receipt = await notification_service.send_notification(notification_request)
    return SendNotificationResponse(message="Notification sent", response=receipt)


@router.post(
    "/schedule-notification",
    response_model=ScheduleNotificationResponse,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_409_CONFLICT: {"model": ErrorResponse},
        status.HTTP_503_SERVICE_UNAVAILABLE: {"model": ErrorResponse},
    },
)
async def schedule_notification(
    schedule_request: Annotated[ScheduleNotificationRequest, Body(...)],
) -> ScheduleNotificationResponse:
    scheduled = await notification_jobs.schedule_notification(schedule_request)
    return ScheduleNotificationResponse(
        message="Notification scheduled successfully",
        id=scheduled.id,
        scheduled_at=scheduled.scheduled_at,
    )
