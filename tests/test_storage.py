"""Tests für das Textformat der Datendatei und Speichern/Laden."""

import io
from pathlib import Path

import pytest
from rich.console import Console

from data.text_store import (
    DataFormatError,
    dump_semesters,
    format_number,
    parse_semesters,
)
from models.semester import Semester
from models.student import Student


def _console() -> Console:
    return Console(file=io.StringIO(), width=200)


def _semester(*courses: tuple[float, float]) -> Semester:
    sem = Semester()
    for grade, credit in courses:
        sem.add_course(grade, credit)
    return sem


def _student(*semesters: Semester) -> Student:
    student = Student()
    for sem in semesters:
        student.add_semester(sem)
    return student


def _as_tuples(student: Student) -> list[list[tuple[float, float]]]:
    return [[(c.grade, c.credit) for c in sem.get_courses()]
            for sem in student.semesters]


# ─── TEXTFORMAT ───────────────────────────────────────────────────────────────

class TestTextFormat:
    def test_format_number(self):
        assert format_number(8.0) == "8"
        assert format_number(7.25) == "7.25"
        assert format_number(0.1) == "0.1"

    def test_dump_layout(self):
        """Kursanzahl pro Semester, danach 'Note Credits' je Kurs."""
        buf = io.StringIO()
        dump_semesters([_semester((8, 3), (6, 2)), _semester((9, 4))], buf)
        assert buf.getvalue() == "2\n8 3\n6 2\n1\n9 4\n"

    def test_parse_layout(self):
        sems = parse_semesters(["2\n", "8 3\n", "6 2\n", "1\n", "9 4\n"])
        assert len(sems) == 2
        assert [(c.grade, c.credit) for c in sems[0].get_courses()] == [(8, 3), (6, 2)]
        assert sems[1].calculate_gpa() == pytest.approx(9.0)

    def test_parse_ignores_blank_lines_and_extra_whitespace(self):
        sems = parse_semesters(["\n", "  1 \n", "\t7.5   2\n", "\n"])
        assert [(c.grade, c.credit) for c in sems[0].get_courses()] == [(7.5, 2)]

    def test_parse_empty_input(self):
        assert parse_semesters([]) == []

    def test_parse_zero_course_semester(self):
        sems = parse_semesters(["0\n", "1\n", "5 5\n"])
        assert len(sems) == 2
        assert sems[0].get_courses() == ()

    def test_parse_semesters_are_open(self):
        """Geparste Semester sind noch nicht an einen Studenten übergeben."""
        sems = parse_semesters(["1\n", "5 5\n"])
        assert not sems[0].is_closed

    @pytest.mark.parametrize("lines", [
        ["3\n", "8 3\n", "6 2\n"],              # zu wenige Kurszeilen
        ["2\n", "8 3\n", "1\n", "9 4\n"],       # Kursanzahl als Kurszeile
        ["1\n", "abc 3\n"],                     # Note nicht numerisch
        ["1\n", "8 x\n"],                       # Credits nicht numerisch
        ["1\n", "8\n"],                         # Credits fehlen
        ["1\n", "8 3 1\n"],                     # zu viele Felder
        ["zwei\n", "8 3\n"],                    # Kursanzahl nicht numerisch
        ["1.5\n", "8 3\n"],                     # Kursanzahl keine ganze Zahl
        ["-1\n"],                               # negative Kursanzahl
        ["1\n", "11 3\n"],                      # Note außerhalb [0, 10]
        ["1\n", "8 0\n"],                       # Credits nicht > 0
        ["1\n", "nan 3\n"],                     # NaN
        ["1\n", "8 inf\n"],                     # unendlich
    ])
    def test_parse_corrupt_raises(self, lines):
        with pytest.raises(DataFormatError):
            parse_semesters(lines)

    def test_parse_error_names_line(self):
        with pytest.raises(DataFormatError, match="Zeile 3"):
            parse_semesters(["2\n", "8 3\n", "8 y\n"])


# ─── SPEICHERN / LADEN ────────────────────────────────────────────────────────

class TestStudentPersistence:
    def test_save_and_load_roundtrip(self, tmp_path: Path):
        """Speichern und in einen frischen Studenten laden — identische Daten."""
        path = tmp_path / "cgpa_data.txt"
        original = _student(
            _semester((8, 3), (6, 2)),
            _semester((9, 4)),
            _semester((7.123456789, 0.3), (0, 1.5), (10, 100)),
        )
        assert original.save_to_file(path, console=_console()) is True

        loaded = Student()
        assert loaded.load_from_file(path, console=_console()) is True
        assert _as_tuples(loaded) == _as_tuples(original)
        assert loaded.calculate_cgpa() == pytest.approx(original.calculate_cgpa())

    def test_loaded_semesters_are_closed(self, tmp_path: Path):
        path = tmp_path / "data.txt"
        path.write_text("1\n8 3\n", encoding="utf-8")
        student = Student()
        student.load_from_file(path, console=_console())
        assert student.semesters[0].is_closed

    def test_save_empty_student(self, tmp_path: Path):
        path = tmp_path / "data.txt"
        assert Student().save_to_file(path, console=_console())
        assert path.read_text(encoding="utf-8") == ""

        student = _student(_semester((5, 5)))
        assert student.load_from_file(path, console=_console()) is True
        assert student.semesters == []

    def test_save_creates_parent_directory(self, tmp_path: Path):
        path = tmp_path / "sub" / "dir" / "data.txt"
        assert _student(_semester((8, 3))).save_to_file(path, console=_console())
        assert path.read_text(encoding="utf-8") == "1\n8 3\n"

    def test_save_io_error_reported(self, tmp_path: Path):
        """Ein Verzeichnis als Ziel → Fehlermeldung, Daten unverändert."""
        con = _console()
        student = _student(_semester((8, 3)))
        assert student.save_to_file(tmp_path, console=con) is False
        assert "Fehler beim Speichern" in con.file.getvalue()
        assert _as_tuples(student) == [[(8, 3)]]

    def test_load_missing_file_keeps_state(self, tmp_path: Path):
        """Fehlende Datei → Hinweis, vorhandene Semester bleiben erhalten."""
        con = _console()
        student = _student(_semester((8, 3), (6, 2)))
        assert student.load_from_file(tmp_path / "fehlt.txt", console=con) is False
        assert _as_tuples(student) == [[(8, 3), (6, 2)]]
        assert "Keine gespeicherten Daten" in con.file.getvalue()

    def test_load_corrupt_file_clears_state(self, tmp_path: Path):
        """Mehr Kurse angekündigt als vorhanden → Student wird komplett geleert."""
        path = tmp_path / "data.txt"
        path.write_text("1\n9 4\n3\n8 3\n6 2\n", encoding="utf-8")
        con = _console()
        student = _student(_semester((5, 5)), _semester((7, 1)))
        assert student.load_from_file(path, console=con) is False
        assert student.semesters == []
        assert "Fehler beim Laden" in con.file.getvalue()

    def test_load_non_numeric_clears_state(self, tmp_path: Path):
        path = tmp_path / "data.txt"
        path.write_text("1\nacht drei\n", encoding="utf-8")
        student = _student(_semester((5, 5)))
        assert student.load_from_file(path, console=_console()) is False
        assert student.semesters == []

    def test_load_replaces_existing_semesters(self, tmp_path: Path):
        path = tmp_path / "data.txt"
        path.write_text("1\n9 4\n", encoding="utf-8")
        student = _student(_semester((5, 5)), _semester((7, 1)))
        assert student.load_from_file(path, console=_console()) is True
        assert _as_tuples(student) == [[(9, 4)]]

    def test_load_reads_original_format(self, tmp_path: Path):
        """Dateien mit ganzzahligen und dezimalen Werten werden gelesen."""
        path = tmp_path / "cgpa_data.txt"
        path.write_text("2\n8 3\n6 2\n1\n9.5 4.25\n", encoding="utf-8")
        student = Student()
        assert student.load_from_file(path, console=_console())
        assert _as_tuples(student) == [[(8, 3), (6, 2)], [(9.5, 4.25)]]

    def test_save_unknown_encoding_reported(self, tmp_path: Path):
        """Unbekannte Kodierung → Fehlermeldung, vorhandene Datei bleibt erhalten."""
        path = tmp_path / "data.txt"
        path.write_text("1\n9 4\n", encoding="utf-8")
        con = _console()
        student = _student(_semester((8, 3)))
        assert student.save_to_file(path, encoding="keine-kodierung", console=con) is False
        assert "Fehler beim Speichern" in con.file.getvalue()
        assert path.read_text(encoding="utf-8") == "1\n9 4\n"
        assert _as_tuples(student) == [[(8, 3)]]

    def test_load_unknown_encoding_reported(self, tmp_path: Path):
        path = tmp_path / "data.txt"
        path.write_text("1\n9 4\n", encoding="utf-8")
        con = _console()
        student = _student(_semester((5, 5)))
        assert student.load_from_file(path, encoding="keine-kodierung", console=con) is False
        assert student.semesters == []
        assert "Fehler beim Laden" in con.file.getvalue()
