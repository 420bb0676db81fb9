"""Rofi front end for Taskwarrior."""

__version__ = "0.1.0"
