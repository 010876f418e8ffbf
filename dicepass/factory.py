"""Convenience constructors and one-shot helpers.

These only wire a word list and a :class:`SecureDiceRoller` into a
:class:`PassphraseGenerator`; all validation lives in the components.
"""
from typing import List, Mapping, Optional

from .dice import SecureDiceRoller
from .generator import DEFAULT_SEPARATOR, DEFAULT_WORD_COUNT, PassphraseGenerator
from .wordlist import FileWordList, InMemoryWordList, PathLike, WordList


def create_with_default_word_list() -> PassphraseGenerator:
    """Generator backed by the built-in English word list."""
    return PassphraseGenerator(InMemoryWordList(), SecureDiceRoller())


def create_with_word_list(words: Mapping[str, str]) -> PassphraseGenerator:
    """Generator backed by a caller-supplied dice roll to word mapping."""
    return PassphraseGenerator(InMemoryWordList(words), SecureDiceRoller())


def create_with_file_word_list(path: PathLike) -> PassphraseGenerator:
    """Generator backed by a Diceware word list file."""
    return PassphraseGenerator(FileWordList(path), SecureDiceRoller())


def create_with_custom_dependencies(
    word_list: WordList, dice_roller: Optional[SecureDiceRoller] = None
) -> PassphraseGenerator:
    """Generator from an existing word list, with a secure roller unless one is given."""
    return PassphraseGenerator(word_list, dice_roller or SecureDiceRoller())


def quick(word_count: int = DEFAULT_WORD_COUNT) -> List[str]:
    """One passphrase as a word list, from the built-in English list."""
    return create_with_default_word_list().generate(word_count)


def quick_string(word_count: int = DEFAULT_WORD_COUNT, separator: str = DEFAULT_SEPARATOR) -> str:
    """One passphrase as a string, from the built-in English list."""
    return create_with_default_word_list().generate_string(word_count, separator)


def quick_from_file(path: PathLike, word_count: int = DEFAULT_WORD_COUNT) -> List[str]:
    """One passphrase as a word list, from a word list file."""
    return create_with_file_word_list(path).generate(word_count)


def quick_string_from_file(
    path: PathLike, word_count: int = DEFAULT_WORD_COUNT, separator: str = DEFAULT_SEPARATOR
) -> str:
    """One passphrase as a string, from a word list file."""
    return create_with_file_word_list(path).generate_string(word_count, separator)
