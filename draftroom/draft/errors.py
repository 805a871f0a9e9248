"""
Draft errors.

Every failure here is recoverable and terminal for the single operation
that raised it: state is left exactly as it was before the call.
"""


class DraftError(Exception):
    """Base exception for draft rule violations."""
    pass


class TurnViolationError(DraftError):
    """Raised when a user acts while not on the clock."""

    def __init__(self, user_id: str, on_the_clock: "str | None"):
        super().__init__("Not your turn")
        self.user_id = user_id
        self.on_the_clock = on_the_clock


class AlreadyDraftedError(DraftError):
    """Raised when the target player is already in the draft registry."""

    def __init__(self, player_id: str):
        super().__init__("Player already drafted")
        self.player_id = player_id


class DuplicatePickError(DraftError):
    """Raised when a team tries to draft a player it already owns."""

    def __init__(self, user_id: str, player_id: str):
        super().__init__("Cannot draft same player twice")
        self.user_id = user_id
        self.player_id = player_id


class RosterLimitError(DraftError):
    """Raised when a pick would exceed a configured position cap."""

    def __init__(self, message: str, position: str, cap: int):
        super().__init__(message)
        self.position = position
        self.cap = cap


class RemovalNotAllowedError(DraftError):
    """Raised when removals are restricted to the owner's turn."""

    def __init__(self, user_id: str):
        super().__init__("Removal allowed only on your turn")
        self.user_id = user_id


class NotFoundError(DraftError):
    """Base for lookups that found nothing."""
    pass


class TeamNotFoundError(NotFoundError):
    def __init__(self, user_id: str):
        super().__init__("Team not found")
        self.user_id = user_id


class PlayerNotFoundError(NotFoundError):
    def __init__(self, player_id: str):
        super().__init__("Player not found")
        self.player_id = player_id


class PlayerNotOnTeamError(DraftError):
    """Raised when removing a player the team does not hold."""

    def __init__(self, user_id: str, player_id: str):
        super().__init__("Player not on team")
        self.user_id = user_id
        self.player_id = player_id


class InvalidDraftInputError(DraftError, ValueError):
    """Raised for out-of-range or malformed operation arguments."""
    pass
