from fastapi import status


class RelayError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class DeliveryError(RelayError):
    """The delivery platform rejected or failed to accept a message."""


class ScheduleValidationError(RelayError):
    status_code = status.HTTP_400_BAD_REQUEST


class DuplicateScheduleError(RelayError):
    status_code = status.HTTP_409_CONFLICT


class SchedulerCapacityError(RelayError):
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE


class ScheduledNotificationNotFoundError(RelayError):
    status_code = status.HTTP_404_NOT_FOUND
