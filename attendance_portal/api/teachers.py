"""Teacher registration and lookup."""
import logging

from fastapi import APIRouter
from pymongo.errors import DuplicateKeyError

from attendance_portal.api.classes import find_class
from attendance_portal.api.deps import parse_object_id
from attendance_portal.errors import ConflictError, NotFoundError, ValidationError
from attendance_portal.models.teacher import Teacher, TeacherCreate, TeacherOut

logger = logging.getLogger(__name__)

router = APIRouter()

EMAIL_TAKEN = "Teacher with email already exists"


@router.post("/add", status_code=201, response_model=TeacherOut)
async def register_teacher(data: TeacherCreate):
    if await Teacher.find_one(Teacher.email == data.email):
        logger.warning("Email already exists: %s", data.email)
        raise ConflictError(EMAIL_TAKEN)

    class_id = None
    if data.class_id is not None:
        school_class = await find_class(data.class_id)
        if not school_class:
            logger.warning("Teacher %s assigned to unknown class %s", data.email, data.class_id)
            raise ValidationError("Class does not exist")
        class_id = str(school_class.id)

    teacher = Teacher(name=data.name, email=data.email, class_id=class_id)
    try:
        await teacher.insert()
    except DuplicateKeyError:
        logger.warning("Email already exists: %s", data.email)
        raise ConflictError(EMAIL_TAKEN)
    logger.info("Registered teacher %s", teacher.id)
    return {**teacher.model_dump(), "id": str(teacher.id)}


@router.get("/{teacher_id}", response_model=TeacherOut)
async def get_teacher(teacher_id: str):
    oid = parse_object_id(teacher_id)
    teacher = await Teacher.get(oid) if oid else None
    if not teacher:
        logger.warning("Teacher not found: %s", teacher_id)
        raise NotFoundError("Teacher not found")
    return {**teacher.model_dump(), "id": str(teacher.id)}
