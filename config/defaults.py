"""Standardwerte für den CGPA-Rechner."""

from config.schema import AppConfig

# Notenskala (fest, unabhängig von der Konfiguration)
GRADE_MIN = 0.0
GRADE_MAX = 10.0

# Menüeinträge in Anzeigereihenfolge; die Nummer ist die Eingabe des Nutzers
MENU_OPTIONS = {
    1: "Semester hinzufügen",
    2: "Ergebnis anzeigen",
    3: "In Datei speichern",
    4: "Aus Datei laden",
    5: "Beenden",
}
MENU_EXIT = 5


def default_app_config() -> AppConfig:
    """Konfiguration mit allen Standardwerten."""
    return AppConfig()
