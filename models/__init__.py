from models.course import (
    Course,
    CourseValueError,
    InvalidCreditError,
    InvalidGradeError,
)
from models.semester import Semester, SemesterClosedError
from models.student import Student

__all__ = [
    "Course",
    "CourseValueError",
    "InvalidGradeError",
    "InvalidCreditError",
    "Semester",
    "SemesterClosedError",
    "Student",
]
