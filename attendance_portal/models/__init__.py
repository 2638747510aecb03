"""Beanie document models and Pydantic schemas."""
from attendance_portal.models.student import Student, StudentCreate, StudentOut
from attendance_portal.models.teacher import Teacher, TeacherCreate, TeacherOut
from attendance_portal.models.school_class import SchoolClass, SchoolClassCreate, SchoolClassOut
from attendance_portal.models.attendance import Attendance, AttendanceCreate, AttendanceOut

__all__ = [
    "Student",
    "StudentCreate",
    "StudentOut",
    "Teacher",
    "TeacherCreate",
    "TeacherOut",
    "SchoolClass",
    "SchoolClassCreate",
    "SchoolClassOut",
    "Attendance",
    "AttendanceCreate",
    "AttendanceOut",
]
