"""Diceware passphrase generation with validated word lists."""
from .dice import SecureDiceRoller
from .errors import (
    DicepassError,
    InvalidWordCountError,
    InvalidWordListError,
    KeyNotFoundError,
    RandomnessError,
    WordListNotFoundError,
)
from .factory import (
    create_with_custom_dependencies,
    create_with_default_word_list,
    create_with_file_word_list,
    create_with_word_list,
    quick,
    quick_from_file,
    quick_string,
    quick_string_from_file,
)
from .generator import PassphraseGenerator
from .wordlist import EXPECTED_WORD_COUNT, FileWordList, InMemoryWordList, WordList

__version__ = "0.1.0"

__all__ = [
    "DicepassError",
    "EXPECTED_WORD_COUNT",
    "FileWordList",
    "InMemoryWordList",
    "InvalidWordCountError",
    "InvalidWordListError",
    "KeyNotFoundError",
    "PassphraseGenerator",
    "RandomnessError",
    "SecureDiceRoller",
    "WordList",
    "WordListNotFoundError",
    "create_with_custom_dependencies",
    "create_with_default_word_list",
    "create_with_file_word_list",
    "create_with_word_list",
    "quick",
    "quick_from_file",
    "quick_string",
    "quick_string_from_file",
]
