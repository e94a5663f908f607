from collections import OrderedDict

from app.core.config import settings
from app.schemas.notification import ScheduledNotification


class NotificationOutcomeModel:
    """Bounded in-memory record of fired scheduled notifications, oldest evicted first."""

    _instance: "NotificationOutcomeModel" = None

    def __init__(self, max_entries: int = settings.SCHEDULE_OUTCOME_HISTORY):
        if NotificationOutcomeModel._instance is not None:
            raise Exception("This class is a singleton!")
        self.max_entries = max_entries
        self.outcomes: OrderedDict[str, ScheduledNotification] = OrderedDict()

    @classmethod
    def get_instance(cls) -> "NotificationOutcomeModel":
        if NotificationOutcomeModel._instance is None:
            NotificationOutcomeModel._instance = cls()
        return NotificationOutcomeModel._instance

    async def record_outcome(self, outcome: ScheduledNotification) -> ScheduledNotification:
        self.outcomes.pop(outcome.id, None)
        self.outcomes[outcome.id] = outcome
        while len(self.outcomes) > self.max_entries:
            self.outcomes.popitem(last=False)
        return outcome

    async def get_outcome(self, notification_id: str) -> ScheduledNotification | None:
        return self.outcomes.get(notification_id)


notification_outcome_model = NotificationOutcomeModel.get_instance()
