"""Textformat der Datendatei: Lesen und Schreiben von Semestern.

Format (zeilenbasiert, Leerzeilen werden ignoriert):

    <Kursanzahl Semester 1>
    <Note> <Credits>
    ...
    <Kursanzahl Semester 2>
    ...
"""

import math
from typing import Iterable, TextIO

from models.course import CourseValueError
from models.semester import Semester


class DataFormatError(Exception):
    """Fehlerhafte Datendatei."""


def format_number(value: float) -> str:
    """Verlustfreie Textdarstellung; ganze Zahlen ohne '.0' (8.0 → '8')."""
    text = repr(float(value))
    return text[:-2] if text.endswith(".0") else text


def dump_semesters(semesters: Iterable[Semester], fh: TextIO) -> None:
    """Schreibt alle Semester im Textformat in ein geöffnetes Dateiobjekt."""
    for sem in semesters:
        courses = sem.get_courses()
        fh.write(f"{len(courses)}\n")
        for c in courses:
            fh.write(f"{format_number(c.grade)} {format_number(c.credit)}\n")


def _parse_count(fields: list[str], line_no: int) -> int:
    if len(fields) != 1:
        raise DataFormatError(
            f"Zeile {line_no}: Kursanzahl erwartet, gefunden: '{' '.join(fields)}'")
    try:
        count = int(fields[0])
    except ValueError:
        raise DataFormatError(
            f"Zeile {line_no}: Kursanzahl ist keine ganze Zahl: '{fields[0]}'") from None
    if count < 0:
        raise DataFormatError(f"Zeile {line_no}: negative Kursanzahl {count}")
    return count


def _parse_course(fields: list[str], line_no: int) -> tuple[float, float]:
    if len(fields) != 2:
        raise DataFormatError(
            f"Zeile {line_no}: 'Note Credits' erwartet, gefunden: '{' '.join(fields)}'")
    try:
        grade, credit = float(fields[0]), float(fields[1])
    except ValueError:
        raise DataFormatError(
            f"Zeile {line_no}: Note/Credits nicht numerisch: '{' '.join(fields)}'") from None
    if not (math.isfinite(grade) and math.isfinite(credit)):
        raise DataFormatError(f"Zeile {line_no}: Note/Credits nicht endlich")
    return grade, credit


def parse_semesters(lines: Iterable[str]) -> list[Semester]:
    """Parst das Textformat zu einer Liste offener Semester.

    Raises:
        DataFormatError: fehlende oder nicht-numerische Felder, Werte
            außerhalb des gültigen Bereichs oder weniger Kurszeilen als
            angekündigt.
    """
    rows = [(no, line.split()) for no, line in enumerate(lines, start=1)
            if line.strip()]

    semesters: list[Semester] = []
    pos = 0
    while pos < len(rows):
        line_no, fields = rows[pos]
        pos += 1
        count = _parse_count(fields, line_no)

        sem = Semester()
        for read in range(count):
            if pos >= len(rows):
                raise DataFormatError(
                    f"Semester {len(semesters) + 1}: {count} Kurse angekündigt, "
                    f"aber nur {read} Kurszeilen vorhanden")
            line_no, fields = rows[pos]
            pos += 1
            grade, credit = _parse_course(fields, line_no)
            try:
                sem.add_course(grade, credit)
            except CourseValueError as e:
                raise DataFormatError(f"Zeile {line_no}: {e}") from e
        semesters.append(sem)

    return semesters
