"""Pydantic schema for notifications written as a side effect of wishlist changes."""

from pydantic import BaseModel, ConfigDict, Field


class Notification(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    notification_id: str = Field(..., alias="notificationId")
    owner_identity: str = Field(..., alias="ownerIdentity")
    message: str
    is_read: bool = Field(False, alias="isRead")
    created_at: str = Field(..., alias="createdAt")
