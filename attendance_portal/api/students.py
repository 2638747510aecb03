"""Student registration and lookup."""
import logging
import re
from typing import Union

from beanie import PydanticObjectId
from fastapi import APIRouter
from pymongo.errors import DuplicateKeyError

from attendance_portal.api.deps import parse_object_id
from attendance_portal.errors import ConflictError, NotFoundError, ValidationError
from attendance_portal.models.student import Student, StudentCreate, StudentOut

logger = logging.getLogger(__name__)

router = APIRouter()

EMAIL_TAKEN = "Student with email already exists"
ROLL_NUMBER_RE = re.compile(r"[+-]?[0-9]+", re.ASCII)


def parse_roll_number(value: Union[int, str]) -> int:
    """Roll numbers arrive as text or number and must be a positive integer.

    Only plain ASCII digits count: ``int()`` alone would also take "1_0" or
    non-Latin digits and quietly rewrite them.
    """
    text = str(value).strip()
    roll_number = 0
    if not isinstance(value, bool) and ROLL_NUMBER_RE.fullmatch(text):
        try:
            roll_number = int(text)
        except ValueError:
            # Past the interpreter's digit limit.
            roll_number = 0
    if roll_number <= 0:
        logger.warning("Rejected roll number %r", value)
        raise ValidationError("Roll number must be a positive integer")
    return roll_number


@router.post("/add", status_code=201, response_model=StudentOut)
async def register_student(data: StudentCreate):
    roll_number = parse_roll_number(data.roll_number)

    existing = await Student.find_one(Student.email == data.email)
    if existing:
        logger.warning("Email already exists: %s", data.email)
        raise ConflictError(EMAIL_TAKEN)

    student = Student(name=data.name, email=data.email, roll_number=str(roll_number))
    try:
        await student.insert()
    except DuplicateKeyError:
        # Lost a race with a concurrent registration; the unique index caught it.
        logger.warning("Email already exists: %s", data.email)
        raise ConflictError(EMAIL_TAKEN)
    logger.info("Registered student %s", student.id)
    return {**student.model_dump(), "id": str(student.id)}


async def find_student(student_id: str) -> Student | None:
    oid: PydanticObjectId | None = parse_object_id(student_id)
    if oid is None:
        return None
    return await Student.get(oid)


@router.get("/{student_id}", response_model=StudentOut)
async def get_student(student_id: str):
    student = await find_student(student_id)
    if not student:
        logger.warning("Student not found: %s", student_id)
        raise NotFoundError("Student not found")
    return {**student.model_dump(), "id": str(student.id)}
