"""Exceptions raised by dicepass."""
from typing import Optional


class DicepassError(Exception):
    """Base class for every error raised by this package."""


class WordListNotFoundError(DicepassError, FileNotFoundError):
    """The word list file is missing, is a directory, or cannot be read."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path

    def __str__(self) -> str:
        return self.args[0]


class InvalidWordListError(DicepassError, ValueError):
    """A word list failed validation.

    The structured fields are filled in where the failure has them, so
    callers can match on them instead of parsing the message.
    """

    def __init__(
        self,
        message: str,
        line_number: Optional[int] = None,
        dice_roll: Optional[str] = None,
        count: Optional[int] = None,
        expected: Optional[int] = None,
    ):
        super().__init__(message)
        self.line_number = line_number
        self.dice_roll = dice_roll
        self.count = count
        self.expected = expected


class InvalidWordCountError(DicepassError, ValueError):
    """A passphrase was requested with fewer than one word."""

    def __init__(self, message: str, word_count=None):
        super().__init__(message)
        self.word_count = word_count


class KeyNotFoundError(DicepassError, KeyError):
    """A dice roll has no entry in the word list."""

    def __init__(self, message: str, dice_roll=None):
        super().__init__(message)
        self.dice_roll = dice_roll

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return self.args[0]


class RandomnessError(DicepassError, RuntimeError):
    """The operating system could not supply secure random bytes."""
