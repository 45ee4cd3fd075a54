"""Konsolen-Eingabe für den CGPA-Rechner (rich.prompt)."""

from ui.prompts import RangePrompt, get_validated_input

__all__ = ["RangePrompt", "get_validated_input"]
