from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class SendStatus(str, Enum):
    SENT = "sent"
    QUEUED = "queued"
    SCHEDULED = "scheduled"
    REJECTED = "rejected"
    INVALID = "invalid"


class SendResult(BaseModel):
    """Per-recipient outcome returned by the send endpoints."""
    model_config = ConfigDict(populate_by_name=True)

    email: str
    status: SendStatus
    rejection_reason: Optional[str] = Field(default=None, alias="reject_reason")
    id: Optional[str] = Field(default=None, alias="_id")

    @property
    def accepted(self) -> bool:
        return self.status in (SendStatus.SENT, SendStatus.QUEUED, SendStatus.SCHEDULED)
