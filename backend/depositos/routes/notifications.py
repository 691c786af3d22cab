from fastapi import APIRouter, Depends, Request, WebSocket, WebSocketDisconnect

from depositos.deps import get_notification_queue
from depositos.schemas.notification import CapturedNotification, NotificationData
from depositos.services.classification import get_app_color
from depositos.services.notifications import NotificationQueue
import asyncio
import json
import logging

router = APIRouter(prefix="/notifications", tags=["Notifications"])
logger = logging.getLogger(__name__)


# =========================
# SAFE JSON PARSER
# =========================
def safe_json_load(body: bytes):
    """
    Handles cases where forwarder sends extra characters.
    Extracts first valid JSON object only.
    """
    text = body.decode("utf-8", errors="ignore").strip()

    # Find first { and last }
    start = text.find("{")
    end = text.rfind("}") + 1

    if start == -1 or end == 0:
        return None

    try:
        data = json.loads(text[start:end])
    except ValueError:
        return None
    return data if isinstance(data, dict) else None


TEXT_FIELDS = ("title", "text", "body", "packageName", "package_name")


def has_text_fields(data: dict) -> bool:
    """Every text field the forwarder sent is a string (null counts as missing)."""
    return all(isinstance(data[k], str) for k in TEXT_FIELDS if data.get(k) is not None)


def to_notification(data: dict, raw: str) -> CapturedNotification | None:
    body = data.get("text") or data.get("body") or ""
    if not body:
        return None
    title = data.get("title") or ""
    package_name = data.get("packageName") or data.get("package_name")
    return CapturedNotification(
        title=f"Notificación de {title}" if title else "Notificación",
        data=NotificationData(title=title, body=body, raw=raw, package_name=package_name),
    )


def _serialize(n: CapturedNotification) -> dict:
    payload = n.model_dump(mode="json")
    payload["color"] = get_app_color(n.data.package_name)
    return payload


# =========================
# WEBHOOK
# =========================
@router.post("/webhook")
async def notification_webhook(req: Request, queue: NotificationQueue = Depends(get_notification_queue)):
    body = await req.body()

    data = safe_json_load(body)
    if not data:
        return {"status": "invalid_json"}

    if not has_text_fields(data):
        return {"status": "invalid_payload"}

    notification = to_notification(data, body.decode("utf-8", errors="ignore").strip())
    if not notification:
        return {"status": "no_text"}

    queue.publish(notification)
    logger.info("Captured notification from %s", notification.data.package_name or "unknown app")
    return {"status": "captured"}


@router.get("")
def list_notifications(queue: NotificationQueue = Depends(get_notification_queue)):
    return [_serialize(n) for n in queue.snapshot()]


# =========================
# LIVE FEED
# =========================
@router.websocket("/ws")
async def notifications_ws(websocket: WebSocket):
    queue: NotificationQueue = websocket.app.state.notifications
    inbox = queue.subscribe()
    receiving = None
    try:
        await websocket.accept()
        # watch the socket too, so a client that goes away is unsubscribed right away
        receiving = asyncio.ensure_future(websocket.receive())
        while True:
            pending = asyncio.ensure_future(inbox.get())
            done, _ = await asyncio.wait({pending, receiving}, return_when=asyncio.FIRST_COMPLETED)

            if receiving in done and receiving.result()["type"] == "websocket.disconnect":
                pending.cancel()
                break

            if pending in done:
                await websocket.send_json(_serialize(pending.result()))
            else:
                pending.cancel()

            if receiving in done:
                receiving = asyncio.ensure_future(websocket.receive())
    except WebSocketDisconnect:
        pass
    finally:
        if receiving is not None:
            receiving.cancel()
        queue.unsubscribe(inbox)
