from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field


class NotificationData(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: str = ""
    body: str = ""
    raw: str = ""
    package_name: str | None = Field(default=None, alias="packageName")


class CapturedNotification(BaseModel):
    title: str
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    data: NotificationData
