"""Student: alle Semester, CGPA-Berechnung und Persistenz (Pydantic v2)."""

import codecs
import logging
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field
from rich.console import Console
from rich.markup import escape

from models.semester import Semester

logger = logging.getLogger(__name__)


class Student(BaseModel):
    """Geordnete Folge von Semestern, die exklusiv dem Studenten gehören."""

    semesters: list[Semester] = Field(default_factory=list)

    def add_semester(self, semester: Semester) -> None:
        """Übernimmt ein fertig aufgebautes Semester.

        Das Semester wird dabei geschlossen; der Aufrufer kann keine
        weiteren Kurse mehr hinzufügen.
        """
        semester.close()
        self.semesters.append(semester)

    def clear(self) -> None:
        self.semesters.clear()

    @property
    def total_credits(self) -> float:
        return sum(sem.total_credits for sem in self.semesters)

    def calculate_cgpa(self) -> float:
        """Credit-gewichteter Durchschnitt über alle Kurse aller Semester."""
        total_credits = 0.0
        total_points = 0.0
        for sem in self.semesters:
            for c in sem.get_courses():
                total_credits += c.credit
                total_points += c.points
        return 0.0 if total_credits == 0.0 else total_points / total_credits

    # ─── Persistenz ────────────────────────────────────────────────────────

    def save_to_file(self, path: Path, encoding: str = "utf-8",
                     console: Optional[Console] = None) -> bool:
        """Speichert alle Semester im Textformat.

        I/O-Fehler werden gemeldet und nicht weitergereicht; der
        Speicherinhalt bleibt unverändert.
        """
        from data.text_store import dump_semesters

        console = console or Console()
        path = Path(path)
        try:
            # Unbekannte Kodierung vor dem Öffnen erkennen, sonst ist die Datei schon geleert
            codecs.lookup(encoding)
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, "w", encoding=encoding) as f:
                dump_semesters(self.semesters, f)
        except (OSError, LookupError) as e:
            logger.error(f"Speichern nach {path} fehlgeschlagen: {e}")
            console.print(f"[red]Fehler beim Speichern:[/red] {escape(str(e))}")
            return False

        logger.info(f"{len(self.semesters)} Semester gespeichert: {path}")
        console.print(f"[green]✓[/green] Daten gespeichert: {escape(str(path))}")
        return True

    def load_from_file(self, path: Path, encoding: str = "utf-8",
                       console: Optional[Console] = None) -> bool:
        """Lädt alle Semester aus der Datendatei.

        - Datei fehlt: Hinweis, vorhandene Semester bleiben erhalten.
        - Datei vorhanden: Semester werden zuerst geleert; bei fehlerhaften
          Daten bleibt der Student leer.
        """
        from data.text_store import DataFormatError, parse_semesters

        console = console or Console()
        path = Path(path)
        if not path.exists():
            logger.info(f"Keine Datendatei unter {path}")
            console.print(f"[yellow]Keine gespeicherten Daten gefunden:[/yellow] {escape(str(path))}")
            return False

        self.clear()
        try:
            with open(path, "r", encoding=encoding) as f:
                semesters = parse_semesters(f)
        except (DataFormatError, OSError, UnicodeDecodeError, LookupError) as e:
            logger.error(f"Laden aus {path} fehlgeschlagen: {e}")
            console.print(f"[red]Fehler beim Laden:[/red] {escape(str(e))}")
            return False

        for sem in semesters:
            self.add_semester(sem)
        logger.info(f"{len(semesters)} Semester geladen: {path}")
        console.print(f"[green]✓[/green] Daten geladen: {escape(str(path))}")
        return True

    # ─── Anzeige ───────────────────────────────────────────────────────────

    def display_all(self, console: Optional[Console] = None,
                    decimals: int = 2) -> None:
        """Zeigt alle Semester mit Kursen und GPA, danach den CGPA."""
        console = console or Console()
        if not self.semesters:
            console.print("[dim]Noch keine Semester erfasst.[/dim]")
        for i, sem in enumerate(self.semesters, start=1):
            console.print(f"\n[bold]Semester {i}:[/bold]")
            sem.display_courses(console, decimals)
            console.print(f"GPA: {sem.calculate_gpa():.{decimals}f}", highlight=False)
        console.print(
            f"\n[bold]Gesamt-CGPA: {self.calculate_cgpa():.{decimals}f}[/bold]",
            highlight=False,
        )
