from __future__ import annotations

class DiceError(Exception):
    """Base class for every error raised by the dice engine."""

class RollParseError(DiceError, ValueError):
    def __init__(self, token: str) -> None:
        super().__init__(f"Invalid command: {token}.")
        self.token = token

class RandomnessUnavailable(DiceError):
    """The operating system randomness source could not be acquired."""

class InvalidDie(DiceError, ValueError):
    pass

class SettingsError(DiceError):
    pass
