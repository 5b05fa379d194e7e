"""Hybrid diesel/electric propulsion advisor for a Ro-Ro vessel."""

__version__ = "1.0.0"
