"""Operational entry points (installed as console scripts)."""
