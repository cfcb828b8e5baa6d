"""Emblem artwork references."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Emblem:
    """An emblem and the paths to its images."""

    id: str = ""
    name: str = ""
    icon: str = ""
    secondary_icon: str = ""
    secondary_special: str = ""
    secondary_overlay: str = ""