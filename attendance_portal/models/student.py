"""Registered students. Never mutated after registration."""
from typing import Union

from beanie import Document, Indexed
from pydantic import BaseModel, ConfigDict, EmailStr, StrictInt, StrictStr, field_validator


class Student(Document):
    name: str
    email: Indexed(EmailStr, unique=True)
    roll_number: str  # positive integer kept as text

    class Settings:
        name = "students"

class StudentCreate(BaseModel):
    """Registration payload. Any client-supplied id is dropped."""
    model_config = ConfigDict(extra="ignore")
    name: str
    email: EmailStr
    roll_number: Union[StrictInt, StrictStr]  # JSON booleans and floats are rejected

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Name cannot be empty")
        return value

class StudentOut(BaseModel):
    id: str
    name: str
    email: str
    roll_number: str
