from datetime import datetime, timedelta, timezone
from typing import Optional

from beanie import Document
from pydantic import BaseModel, ConfigDict, Field, field_serializer


def utc_now() -> datetime:
    """Current naive UTC time, rounded up to the millisecond BSON keeps.

    Rounding up means the stored value reads back unchanged and is never
    earlier than the moment it was taken.
    """
    now = datetime.now(timezone.utc).replace(tzinfo=None)
    return now + timedelta(microseconds=-now.microsecond % 1000)


class Attendance(Document):
    """A single attendance mark. Written once by the server, never updated."""
    student_id: str
    class_id: Optional[str] = None
    time: datetime = Field(default_factory=utc_now)
    present: bool = True

    class Settings:
        name = "attendance"
        indexes = ["student_id", "class_id"]


class AttendanceCreate(BaseModel):
    """Mark payload. Client-supplied id and time are ignored."""
    model_config = ConfigDict(extra="ignore")
    student_id: str
    class_id: Optional[str] = None
    present: bool = True


class AttendanceOut(BaseModel):
    id: str
    student_id: str
    class_id: Optional[str] = None
    time: datetime
    present: bool

    @field_serializer("time")
    def serialize_time(self, value: datetime) -> datetime:
        # Stored naive; always UTC, so say so on the wire.
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value
