"""Attendance marking and per-student / per-class history."""
import logging
from typing import List

from fastapi import APIRouter

from attendance_portal.api.classes import find_class
from attendance_portal.api.deps import parse_object_id
from attendance_portal.api.students import find_student
from attendance_portal.errors import NotFoundError
from attendance_portal.models.attendance import Attendance, AttendanceCreate, AttendanceOut, utc_now

logger = logging.getLogger(__name__)

router = APIRouter()


def _to_out(record: Attendance) -> dict:
    return {**record.model_dump(), "id": str(record.id)}


@router.post("/mark", status_code=201, response_model=AttendanceOut)
async def mark_attendance(data: AttendanceCreate):
    """Record one attendance mark. The timestamp is always taken here, never from the client."""
    marked_at = utc_now()

    student = await find_student(data.student_id)
    if not student:
        logger.warning("Attendance for unknown student %s", data.student_id)
        raise NotFoundError("Student does not exist")

    class_id = None
    if data.class_id is not None:
        school_class = await find_class(data.class_id)
        if not school_class:
            logger.warning("Attendance for unknown class %s", data.class_id)
            raise NotFoundError("Class does not exist")
        class_id = str(school_class.id)

    record = Attendance(
        student_id=str(student.id),
        class_id=class_id,
        time=marked_at,
        present=data.present,
    )
    await record.insert()
    logger.info("Marked student %s %s", record.student_id, "present" if record.present else "absent")
    return _to_out(record)


@router.get("/students/{student_id}", response_model=List[AttendanceOut])
async def list_by_student(student_id: str):
    oid = parse_object_id(student_id)
    if oid is None:
        return []
    records = await Attendance.find(Attendance.student_id == str(oid)).to_list()
    return [_to_out(r) for r in records]


@router.get("/classes/{class_id}", response_model=List[AttendanceOut])
async def list_by_class(class_id: str):
    oid = parse_object_id(class_id)
    if oid is None:
        return []
    records = await Attendance.find(Attendance.class_id == str(oid)).to_list()
    return [_to_out(r) for r in records]
