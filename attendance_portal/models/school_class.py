from beanie import Document, Indexed
from pydantic import BaseModel, ConfigDict


class SchoolClass(Document):
    """Class (subject group) that teachers are assigned to and attendance is taken for."""
    name: Indexed(str, unique=True)

    class Settings:
        name = "classes"


class SchoolClassCreate(BaseModel):
    model_config = ConfigDict(extra="ignore")
    name: str


class SchoolClassOut(BaseModel):
    id: str
    name: str
