"""Datendatei: Textformat für Semester und Kurse."""
