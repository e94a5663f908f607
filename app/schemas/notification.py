from datetime import datetime
from enum import Enum

from pydantic import AliasChoices, BaseModel, Field


class NotificationRequest(BaseModel):
    token: str = Field(
        min_length=1, validation_alias=AliasChoices("token", "destination", "device_token")
    )
    title: str
    body: str
    data: dict[str, str] | None = None


class ScheduleNotificationRequest(NotificationRequest):
    schedule_time: datetime = Field(
        validation_alias=AliasChoices("scheduleTime", "scheduledAt", "schedule_time")
    )
    idempotency_key: str | None = Field(
        default=None,
        min_length=1,
        validation_alias=AliasChoices("idempotencyKey", "idempotency_key"),
    )


class ScheduledNotificationStatus(str, Enum):
    ARMED = "armed"
    FIRING = "firing"
    SENT = "sent"
    FAILED = "failed"


class ScheduledNotification(BaseModel):
    id: str
    token: str
    title: str
    body: str
    data: dict[str, str] | None = None
    scheduled_at: datetime
    status: ScheduledNotificationStatus = ScheduledNotificationStatus.ARMED
    fired_at: datetime | None = None
    response: str | None = None
    error: str | None = None


class SendNotificationResponse(BaseModel):
    message: str
    response: str


class ScheduleNotificationResponse(BaseModel):
    message: str
    id: str
    scheduled_at: datetime


class CancelScheduledNotificationResponse(BaseModel):
    message: str
    id: str


class ErrorResponse(BaseModel):
    error: str
