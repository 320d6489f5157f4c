"""Serenemind tracker app (Flet UI)."""
