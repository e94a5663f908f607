import logging

from firebase_admin import messaging
from starlette.concurrency import run_in_threadpool

from app.core.config import settings
from app.core.exceptions import DeliveryError
from app.schemas.notification import NotificationRequest

logger = logging.getLogger(__name__)


class NotificationService:
    _instance: "NotificationService" = None

    def __init__(self, dry_run: bool = settings.FCM_DRY_RUN):
        if NotificationService._instance is not None:
            raise Exception("This class is a singleton!")
        self.dry_run = dry_run

    @classmethod
    def get_instance(cls) -> "NotificationService":
        if NotificationService._instance is None:
            NotificationService._instance = cls()
        return NotificationService._instance

    def _build_message(self, notification_request: NotificationRequest) -> messaging.Message:
        return messaging.Message(
            notification=messaging.Notification(
                title=notification_request.title,
                body=notification_request.body,
            ),
            data=notification_request.data,
            token=notification_request.token,
        )

    async def _send_to_fcm(self, message: messaging.Message) -> str:
        # The Admin SDK is blocking, keep it off the event loop
        try:
            return await run_in_threadpool(messaging.send, message, dry_run=self.dry_run)
        except Exception as e:
            logger.error(f"Error sending notification to FCM: {e}")
            raise DeliveryError(str(e)) from e

    async def send_notification(self, notification_request: NotificationRequest) -> str:
        message = self._build_message(notification_request)
        receipt = await self._send_to_fcm(message)
        logger.info(f"Notification '{notification_request.title}' sent: {receipt}")
        return receipt


notification_service = NotificationService.get_instance()
