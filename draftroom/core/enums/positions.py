"""Position definitions for baseball players."""

from enum import Enum, auto


class PositionGroup(Enum):
    """High-level position groupings."""

    HITTER = auto()
    PITCHER = auto()


class Position(Enum):
    """Individual roster positions. Values are the wire strings."""

    # Infield
    C = "C"  # Catcher
    FIRST_BASE = "1B"
    SECOND_BASE = "2B"
    THIRD_BASE = "3B"
    SS = "SS"  # Shortstop

    # Outfield / utility
    OF = "OF"
    UT = "UT"  # Utility

    # Pitching
    SP = "SP"  # Starting Pitcher
    RP = "RP"  # Relief Pitcher

    @property
    def group(self) -> PositionGroup:
        """Get the position group for this position."""
        if self.is_pitcher:
            return PositionGroup.PITCHER
        return PositionGroup.HITTER

    @property
    def is_pitcher(self) -> bool:
        """Check if this is a pitching position."""
        return self in {Position.SP, Position.RP}

    @classmethod
    def parse(cls, value: "str | Position") -> "Position":
        """Parse a wire string ("1B", "of", ...) into a Position."""
        if isinstance(value, Position):
            return value
        try:
            return cls(str(value).strip().upper())
        except ValueError:
            raise ValueError(f"Unknown position: {value!r}") from None
