"""Datenmodell für einen einzelnen Kurs (Pydantic v2)."""

from pydantic import BaseModel, ConfigDict, Field

from config.defaults import GRADE_MAX, GRADE_MIN


class CourseValueError(ValueError):
    """Note oder Credits eines Kurses liegen außerhalb des gültigen Bereichs."""


class InvalidGradeError(CourseValueError):
    """Note nicht im Bereich [0, 10]."""


class InvalidCreditError(CourseValueError):
    """Credits nicht größer als 0."""


class Course(BaseModel):
    """Ein Kurs: Note und Credits. Unveränderlich nach dem Anlegen."""

    model_config = ConfigDict(frozen=True)

    grade: float = Field(ge=GRADE_MIN, le=GRADE_MAX, allow_inf_nan=False)
    credit: float = Field(gt=0, allow_inf_nan=False)

    @property
    def points(self) -> float:
        """Notenpunkte (Note × Credits)."""
        return self.grade * self.credit


def check_course_values(grade: float, credit: float) -> None:
    """Prüft Note und Credits, bevor daraus ein Course entsteht."""
    # NaN fällt bei jedem Vergleich durch
    if not GRADE_MIN <= grade <= GRADE_MAX:
        raise InvalidGradeError(
            f"Note {grade} liegt nicht im Bereich [{GRADE_MIN:g}, {GRADE_MAX:g}]")
    if not 0 < credit < float("inf"):
        raise InvalidCreditError(f"Credits müssen > 0 sein (erhalten: {credit})")
