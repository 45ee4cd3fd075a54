"""Konfigurationsmanager: Laden, Speichern und Validieren.

Nutzt ruamel.yaml für YAML-Serialisierung mit Kommentaren.
"""

import json
import logging
from datetime import date
from pathlib import Path
from typing import Optional

from rich.console import Console
from ruamel.yaml import YAML
from ruamel.yaml.comments import CommentedMap
from ruamel.yaml.error import YAMLError

from config.defaults import default_app_config
from config.schema import AppConfig

logger = logging.getLogger(__name__)

console = Console()
yaml = YAML()
yaml.default_flow_style = False
yaml.width = 120


# ─── YAML-KOMMENTAR-AUFBAU ───

_YAML_HEADER = f"""\
# ============================================
# CGPA-Rechner — Konfiguration
# Erstellt: {date.today().isoformat()}
# ============================================
"""

_SECTION_COMMENTS = {
    "storage": (
        "Datendatei",
        "Textdatei mit Kursanzahl je Semester und 'Note Credits' je Kurs.",
    ),
    "input": (
        "Eingabe-Grenzen",
        "Der Notenbereich ist fest auf 0–10 eingestellt.",
    ),
    "display": (
        "Anzeige",
        None,
    ),
    "logging": (
        "Logging",
        "Level: DEBUG, INFO, WARNING, ERROR.",
    ),
}


class ConfigManager:
    CONFIG_DIR = Path("config")
    DEFAULT_CONFIG = CONFIG_DIR / "cgpa_config.yaml"

    def first_run_check(self) -> bool:
        """Gibt True zurück wenn noch keine Config existiert (Erstaufruf)."""
        return not self.DEFAULT_CONFIG.exists()

    # ─── Laden ───

    def load(self, path: Optional[Path] = None) -> AppConfig:
        """Lade Config aus YAML. Fehlt die Datei, gelten die Standardwerte."""
        target = path or self.DEFAULT_CONFIG
        if not target.exists():
            logger.debug(f"Keine Konfigurationsdatei unter {target}, nutze Standardwerte")
            return default_app_config()
        with open(target, "r", encoding="utf-8") as f:
            try:
                raw = yaml.load(f)
            except YAMLError as e:
                raise ValueError(
                    f"Konfigurationsdatei ist kein gültiges YAML: {target}\n{e}"
                ) from e
        try:
            return AppConfig.model_validate(dict(raw or {}))
        except Exception as e:
            raise ValueError(
                f"Konfigurationsdatei ungültig: {target}\n"
                f"Pydantic-Fehler: {e}"
            ) from e

    # ─── Speichern ───

    def save(self, config: AppConfig, path: Optional[Path] = None) -> None:
        """Speichere Config als YAML mit deutschen Kommentaren."""
        target = path or self.DEFAULT_CONFIG
        target.parent.mkdir(parents=True, exist_ok=True)

        data = self._build_commented_yaml(config)

        with open(target, "w", encoding="utf-8") as f:
            f.write(_YAML_HEADER + "\n")
            yaml.dump(data, f)

        console.print(f"[green]✓[/green] Konfiguration gespeichert: {target}")

    def _build_commented_yaml(self, config: AppConfig) -> CommentedMap:
        """Baut die YAML-Struktur mit Kommentaren auf."""
        raw = json.loads(config.model_dump_json())
        cm = CommentedMap(raw)

        for field, (label, comment) in _SECTION_COMMENTS.items():
            cm.yaml_set_comment_before_after_key(
                field,
                before=f"\n─── {label} ───" + (f"\n{comment}" if comment else ""),
            )

        # Inline-Kommentar für die Nachkommastellen
        display_map = CommentedMap(cm["display"])
        display_map.yaml_add_eol_comment("0–6", "decimals")
        cm["display"] = display_map

        return cm
