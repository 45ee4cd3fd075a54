"""Datenmodell für ein Semester mit GPA-Berechnung (Pydantic v2)."""

from typing import Optional

from pydantic import BaseModel, PrivateAttr
from rich.console import Console

from models.course import Course, check_course_values


class SemesterClosedError(RuntimeError):
    """Das Semester gehört bereits einem Studenten und ist abgeschlossen."""


class Semester(BaseModel):
    """Geordnete Folge von Kursen (Reihenfolge = Eingabereihenfolge).

    Ein Semester ist offen, solange es aufgebaut wird. Mit
    Student.add_semester() geht es in den Besitz des Studenten über und
    wird geschlossen; danach sind keine Kurse mehr hinzuzufügen.
    """

    _courses: tuple[Course, ...] = PrivateAttr(default=())
    _closed: bool = PrivateAttr(default=False)

    @property
    def courses(self) -> tuple[Course, ...]:
        return self._courses

    @property
    def is_closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        """Schließt das Semester. Nur von Student.add_semester() aufgerufen."""
        if self._closed:
            raise SemesterClosedError("Semester wurde bereits übergeben.")
        self._closed = True

    def add_course(self, grade: float, credit: float) -> None:
        """Hängt einen Kurs an.

        Raises:
            InvalidGradeError: Note nicht in [0, 10].
            InvalidCreditError: Credits nicht > 0.
            SemesterClosedError: Semester ist bereits abgeschlossen.
        """
        if self._closed:
            raise SemesterClosedError(
                "Kurse können nur zu einem offenen Semester hinzugefügt werden.")
        check_course_values(grade, credit)
        self._courses = self._courses + (Course(grade=grade, credit=credit),)

    def get_courses(self) -> tuple[Course, ...]:
        return self._courses

    @property
    def total_credits(self) -> float:
        return sum(c.credit for c in self.courses)

    def calculate_gpa(self) -> float:
        """Credit-gewichteter Notendurchschnitt; 0.0 ohne Credits."""
        total_credits = 0.0
        total_points = 0.0
        for c in self.courses:
            total_credits += c.credit
            total_points += c.points
        return 0.0 if total_credits == 0.0 else total_points / total_credits

    def display_courses(self, console: Optional[Console] = None,
                        decimals: int = 2) -> None:
        """Gibt jeden Kurs als eigene Zeile aus (1-basiert)."""
        console = console or Console()
        for i, c in enumerate(self.courses, start=1):
            console.print(
                f"Kurs {i} | Note: {c.grade:.{decimals}f} "
                f"| Credits: {c.credit:.{decimals}f}",
                highlight=False,
            )
