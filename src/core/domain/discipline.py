"""Discipline utilities for irating-fetch.

This module centralizes the racing disciplines a license can belong to.
Keeping it in the domain layer allows both CLI and service layers to share
a single source of truth without creating circular imports with adapters.
"""

from __future__ import annotations

from enum import Enum


class Discipline(str, Enum):
    """Supported license categories, valued with the API's category tag."""

    ROAD = "road"
    OVAL = "oval"
    DIRT_ROAD = "dirt_road"
    DIRT_OVAL = "dirt_oval"

    def matches(self, category: str) -> bool:
        """Return whether an API `category` tag belongs to this discipline."""

        return category == self.value

    def label(self) -> str:
        """Human readable label for tables and logging."""

        return self.value.replace("_", " ").title()
