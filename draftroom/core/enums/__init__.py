"""Draft enumerations."""

from draftroom.core.enums.positions import Position, PositionGroup

__all__ = [
    "Position",
    "PositionGroup",
]
