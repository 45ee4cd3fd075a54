"""CGPA-Rechner — Haupt-CLI.

Verwendung:
  python main.py      Interaktives Menü starten

Menü:
  1. Semester hinzufügen   Kursanzahl, dann Note (0–10) und Credits je Kurs
  2. Ergebnis anzeigen     Kurse, GPA je Semester und Gesamt-CGPA
  3. In Datei speichern    Datendatei schreiben (Standard: cgpa_data.txt)
  4. Aus Datei laden       Datendatei lesen (ersetzt den aktuellen Stand)
  5. Beenden
"""

import logging
import sys
from typing import Optional, TextIO

import click
from rich.console import Console
from rich.markup import escape
from rich.logging import RichHandler
from rich.panel import Panel

from config.defaults import GRADE_MAX, GRADE_MIN, MENU_EXIT, MENU_OPTIONS, default_app_config
from config.schema import AppConfig
from models.semester import Semester
from models.student import Student
from ui.prompts import get_validated_input

logger = logging.getLogger(__name__)

console = Console()


def configure_logging(config: AppConfig) -> None:
    """Log-Ausgabe über rich auf stderr, optional zusätzlich in eine Datei."""
    handlers: list[logging.Handler] = [
        RichHandler(console=Console(stderr=True), show_path=False),
    ]
    file_error: Optional[OSError] = None
    if config.logging.file is not None:
        try:
            config.logging.file.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(config.logging.file, encoding="utf-8")
        except OSError as e:
            file_error = e
        else:
            file_handler.setFormatter(logging.Formatter(
                "%(asctime)s %(levelname)s %(name)s: %(message)s"))
            handlers.append(file_handler)
    logging.basicConfig(
        level=config.logging.level,
        format="%(message)s",
        handlers=handlers,
        force=True,
    )
    if file_error is not None:
        logger.warning(
            f"Log-Datei {config.logging.file} nicht nutzbar, nur Konsolen-Log: {file_error}")


def _load_config(out: Console) -> AppConfig:
    """Lädt die Konfiguration; bei Fehlern gelten die Standardwerte."""
    from config.manager import ConfigManager

    mgr = ConfigManager()
    if mgr.first_run_check():
        # Erstaufruf: kommentierte Standard-Config als Vorlage anlegen
        config = default_app_config()
        try:
            mgr.save(config)
        except OSError as e:
            out.print(f"[yellow]Konfiguration nicht gespeichert:[/yellow] {escape(str(e))}")
        return config

    try:
        return mgr.load()
    except (ValueError, OSError) as e:
        out.print(f"[red]{escape(str(e))}[/red]\n[yellow]Standardwerte werden verwendet.[/yellow]")
        return default_app_config()


# ─── MENÜ-AKTIONEN ────────────────────────────────────────────────────────────

def _add_semester(student: Student, config: AppConfig, out: Console,
                  stream: Optional[TextIO]) -> None:
    limits = config.input
    sem = Semester()
    n = get_validated_input("Anzahl Kurse:", 1, limits.max_courses,
                            console=out, stream=stream)
    for i in range(1, n + 1):
        out.print(f"[cyan]Kurs {i}:[/cyan]")
        grade = get_validated_input(
            f"  Note ({GRADE_MIN:g}–{GRADE_MAX:g}):", GRADE_MIN, GRADE_MAX,
            console=out, stream=stream)
        credit = get_validated_input(
            "  Credits (>0):", float(limits.min_credit), float(limits.max_credit),
            console=out, stream=stream)
        sem.add_course(grade, credit)
    student.add_semester(sem)
    logger.info(f"Semester {len(student.semesters)} mit {n} Kursen hinzugefügt")
    out.print(f"[green]✓[/green] Semester {len(student.semesters)} hinzugefügt.")


def _show_menu(out: Console) -> None:
    out.print()
    out.print(Panel(
        "\n".join(f"[bold]{num}.[/bold] {label}" for num, label in MENU_OPTIONS.items()),
        title="[bold cyan]CGPA-Rechner[/bold cyan]",
        border_style="cyan",
        expand=False,
    ))


def run_menu(student: Student, config: AppConfig,
             out: Optional[Console] = None,
             stream: Optional[TextIO] = None) -> int:
    """Menüschleife bis 'Beenden'. Gibt immer den Exit-Code 0 zurück.

    Ein erschöpfter Eingabestrom beendet die Schleife wie Option 5.
    """
    out = out or console
    storage = config.storage
    decimals = config.display.decimals

    while True:
        _show_menu(out)
        try:
            choice = get_validated_input("Auswahl:", 1, len(MENU_OPTIONS),
                                         console=out, stream=stream)
            if choice == 1:
                _add_semester(student, config, out, stream)
            elif choice == 2:
                student.display_all(out, decimals)
            elif choice == 3:
                student.save_to_file(storage.data_file, storage.encoding, out)
            elif choice == 4:
                student.load_from_file(storage.data_file, storage.encoding, out)
        except EOFError:
            logger.debug("Eingabe beendet, Menü wird verlassen")
            choice = MENU_EXIT

        if choice == MENU_EXIT:
            out.print("Programm wird beendet.")
            return 0


# ─── HAUPT-CLI ────────────────────────────────────────────────────────────────

@click.command()
def cli():
    """CGPA-Rechner: Noten und Credits erfassen, GPA und CGPA berechnen."""
    config = _load_config(console)
    configure_logging(config)
    exit_code = run_menu(Student(), config, console)
    sys.exit(exit_code)


def main():
    """Einstiegspunkt."""
    cli()


if __name__ == "__main__":
    main()
