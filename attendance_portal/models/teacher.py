from typing import Optional

from beanie import Document, Indexed
from pydantic import BaseModel, ConfigDict, EmailStr, field_validator


class Teacher(Document):
    """Teacher with an optional assigned class."""
    name: str
    email: Indexed(EmailStr, unique=True)
    class_id: Optional[str] = None  # SchoolClass id

    class Settings:
        name = "teachers"

class TeacherCreate(BaseModel):
    model_config = ConfigDict(extra="ignore")
    name: str
    email: EmailStr
    class_id: Optional[str] = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Name cannot be empty")
        return value

class TeacherOut(BaseModel):
    id: str
    name: str
    email: str
    class_id: Optional[str] = None
