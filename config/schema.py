import codecs
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator


# ─── DATENDATEI ───

class StorageConfig(BaseModel):
    """Ablage der Noten-Datendatei."""
    # Pfad der Textdatei mit allen Semestern und Kursen
    data_file: Path = Field(Path("cgpa_data.txt"),
        description="Pfad der Datendatei")
    # Zeichenkodierung beim Lesen und Schreiben
    encoding: str = Field("utf-8",
        description="Zeichenkodierung der Datendatei")

    @field_validator("encoding")
    @classmethod
    def check_encoding(cls, v: str) -> str:
        try:
            info = codecs.lookup(v)
        except LookupError:
            raise ValueError(f"Unbekannte Zeichenkodierung: {v}") from None
        # base64, rot13 usw. sind Codecs, aber keine Textkodierungen
        if not getattr(info, "_is_text_encoding", True):
            raise ValueError(f"Keine Textkodierung: {v}")
        return v


# ─── EINGABE-GRENZEN ───

class InputConfig(BaseModel):
    """Grenzen für die interaktiven Eingaben.

    Der Notenbereich ist fest [0, 10] und nicht konfigurierbar.
    """
    # Maximale Anzahl Kurse pro Semester
    max_courses: int = Field(100, ge=1, le=1000,
        description="Maximale Kurse pro Semester")
    # Kleinste zulässige Credit-Zahl (muss > 0 sein)
    min_credit: float = Field(0.01, gt=0,
        description="Minimale Credits pro Kurs")
    # Größte zulässige Credit-Zahl
    max_credit: float = Field(100.0, gt=0,
        description="Maximale Credits pro Kurs")

    @model_validator(mode='after')
    def validate_credit_range(self):
        if self.min_credit > self.max_credit:
            raise ValueError(
                f"min_credit ({self.min_credit}) > max_credit ({self.max_credit})")
        return self


# ─── ANZEIGE ───

class DisplayConfig(BaseModel):
    """Formatierung der Ergebnisanzeige."""
    # Nachkommastellen für Noten, Credits, GPA und CGPA
    decimals: int = Field(2, ge=0, le=6,
        description="Nachkommastellen in der Anzeige")


# ─── LOGGING ───

class LoggingConfig(BaseModel):
    """Logging-Konfiguration."""
    # Log-Level (DEBUG, INFO, WARNING, ERROR)
    level: str = Field("WARNING",
        description="Log-Level")
    # Optionale Log-Datei zusätzlich zur Konsole
    file: Optional[Path] = None

    @field_validator("level")
    @classmethod
    def normalize_level(cls, v: str) -> str:
        v = v.upper()
        if v not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unbekanntes Log-Level: {v}")
        return v


# ─── GESAMT-CONFIG ───

class AppConfig(BaseModel):
    """Gesamtkonfiguration des CGPA-Rechners."""
    storage: StorageConfig = Field(default_factory=StorageConfig)
    input: InputConfig = Field(default_factory=InputConfig)
    display: DisplayConfig = Field(default_factory=DisplayConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
