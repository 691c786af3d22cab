# depositos/services/notifications.py
import asyncio
import logging
from collections import deque
from datetime import datetime, timedelta, timezone

from depositos.core.config import settings
from depositos.schemas.notification import CapturedNotification, NotificationData

logger = logging.getLogger(__name__)

YAPE_RAW_SAMPLE = """\
android.title=Yape
android.text=Has recibido S/ 100.00 de Juan Pérez
android.subText=null
android.template=android.app.Notification$BigTextStyle
android.showWhen=true
android.deleteIntent.pkg=com.bcp.innovacxion.yapeapp"""


class NotificationQueue:
    """
    Bounded store of captured system notifications with explicit subscribers.

    When full, the oldest notification is dropped. Subscribers get their own
    bounded asyncio.Queue; a slow subscriber loses its oldest pending item
    instead of blocking publish().
    """

    def __init__(self, capacity: int = settings.NOTIFICATIONS_CAPACITY, subscriber_capacity: int | None = None):
        if capacity < 1:
            raise ValueError("capacity must be >= 1")
        self.capacity = capacity
        self.subscriber_capacity = subscriber_capacity or capacity
        self._items: deque[CapturedNotification] = deque(maxlen=capacity)
        self._subscribers: set[asyncio.Queue] = set()

    def __len__(self) -> int:
        return len(self._items)

    def publish(self, notification: CapturedNotification):
        self._items.append(notification)
        for q in list(self._subscribers):
            if q.full():
                q.get_nowait()
                logger.warning("Notification subscriber is lagging, dropped oldest pending item")
            q.put_nowait(notification)

    def snapshot(self) -> list[CapturedNotification]:
        """Newest first."""
        return list(reversed(self._items))

    def subscribe(self) -> asyncio.Queue:
        q: asyncio.Queue = asyncio.Queue(maxsize=self.subscriber_capacity)
        self._subscribers.add(q)
        return q

    def unsubscribe(self, q: asyncio.Queue):
        self._subscribers.discard(q)

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)


def sample_notifications() -> list[CapturedNotification]:
    """Demo payloads shown by the notifications screen before a real feed exists."""
    now = datetime.now(timezone.utc)
    return [
        CapturedNotification(
            title="Notificación de Yape",
            timestamp=now,
            data=NotificationData(
                title="Yape",
                body="Has recibido S/ 100.00 de Juan Pérez",
                raw=YAPE_RAW_SAMPLE,
                package_name="com.bcp.innovacxion.yapeapp",
            ),
        ),
        CapturedNotification(
            title="Notificación de BCP",
            timestamp=now - timedelta(hours=1),
            data=NotificationData(
                title="BCP",
                body="Transferencia recibida: S/ 50.00",
                raw="Datos completos de la notificación",
            ),
        ),
    ]
