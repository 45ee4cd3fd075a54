"""Konfiguration: Schema, Standardwerte und YAML-Manager."""
