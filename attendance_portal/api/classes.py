"""Classes: listing, creation and lookup."""
import logging
from typing import List

from fastapi import APIRouter
from pymongo.errors import DuplicateKeyError

from attendance_portal.api.deps import parse_object_id
from attendance_portal.errors import ConflictError, NotFoundError, ValidationError
from attendance_portal.models.school_class import SchoolClass, SchoolClassCreate, SchoolClassOut

logger = logging.getLogger(__name__)

router = APIRouter()


async def find_class(class_id: str) -> SchoolClass | None:
    oid = parse_object_id(class_id)
    if oid is None:
        return None
    return await SchoolClass.get(oid)


@router.get("", response_model=List[SchoolClassOut])
async def list_classes():
    classes = await SchoolClass.find_all().to_list()
    return [{"id": str(c.id), "name": c.name} for c in classes]


@router.post("/add", status_code=201, response_model=SchoolClassOut)
async def add_class(data: SchoolClassCreate):
    name = data.name.strip()
    if not name:
        logger.warning("Rejected class with empty name")
        raise ValidationError("Class name cannot be empty")

    if await SchoolClass.find_one(SchoolClass.name == name):
        logger.warning("Class already exists: %s", name)
        raise ConflictError("The class already exists")

    school_class = SchoolClass(name=name)
    try:
        await school_class.insert()
    except DuplicateKeyError:
        logger.warning("Class already exists: %s", name)
        raise ConflictError("The class already exists")
    logger.info("Created class %s (%s)", school_class.id, name)
    return {"id": str(school_class.id), "name": school_class.name}


@router.get("/{class_id}", response_model=SchoolClassOut)
async def get_class(class_id: str):
    school_class = await find_class(class_id)
    if not school_class:
        logger.warning("Class not found: %s", class_id)
        raise NotFoundError("Class not found")
    return {"id": str(school_class.id), "name": school_class.name}
