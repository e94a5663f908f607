import logging

import firebase_admin
from firebase_admin import credentials

from app.core.config import settings

logger = logging.getLogger(__name__)


def initialize_firebase() -> firebase_admin.App | None:
    """Initialise the default Firebase Admin app used by ``messaging.send``.

    Uses the service-account file from ``FIREBASE_CREDENTIALS_PATH`` when set,
    application-default credentials otherwise. Returns ``None`` when Firebase
    is disabled, in which case every send fails with a ``DeliveryError``.
    """
    if not settings.FIREBASE_ENABLED:
        logger.warning("Firebase is disabled, notifications will not be delivered")
        return None

    try:
        return firebase_admin.get_app()
    except ValueError:
        logger.info("Initializing Firebase Admin SDK")

    if settings.FIREBASE_CREDENTIALS_PATH:
        credential = credentials.Certificate(settings.FIREBASE_CREDENTIALS_PATH)
    else:
        credential = credentials.ApplicationDefault()

    options = {"projectId": settings.FIREBASE_PROJECT_ID} if settings.FIREBASE_PROJECT_ID else None
    return firebase_admin.initialize_app(credential, options)
