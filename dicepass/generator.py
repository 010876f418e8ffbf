import logging
from typing import List

from .dice import SecureDiceRoller
from .errors import InvalidWordCountError
from .wordlist import WordList

logger = logging.getLogger(__name__)

DEFAULT_WORD_COUNT = 6
DEFAULT_SEPARATOR = " "


class PassphraseGenerator:
    """Generates Diceware passphrases.

    Each word is chosen by rolling five dice with ``dice_roller`` and
    looking the result up in ``word_list``. The generator keeps no other
    state, so a single instance can serve concurrent callers.
    """

    def __init__(self, word_list: WordList, dice_roller: SecureDiceRoller):
        self.word_list = word_list
        self.dice_roller = dice_roller

    def generate(self, word_count: int = DEFAULT_WORD_COUNT) -> List[str]:
        """Generate a passphrase as a list of words, in draw order.

        Raises InvalidWordCountError if ``word_count`` is less than 1.
        RandomnessError and KeyNotFoundError propagate unchanged; nothing
        is returned for a partially drawn passphrase.
        """
        if isinstance(word_count, bool) or not isinstance(word_count, int) or word_count < 1:
            raise InvalidWordCountError(
                f"Word count must be at least 1, got: {word_count}", word_count=word_count
            )

        words = [self.word_list.get_word(self.dice_roller.roll_dice()) for _ in range(word_count)]
        logger.debug(f"Generated passphrase of {word_count} words")
        return words

    def generate_string(self, word_count: int = DEFAULT_WORD_COUNT, separator: str = DEFAULT_SEPARATOR) -> str:
        """Generate a passphrase joined with ``separator`` (used verbatim)."""
        return separator.join(self.generate(word_count))

    def entropy_bits(self, word_count: int = DEFAULT_WORD_COUNT) -> float:
        """Entropy of a ``word_count`` word passphrase from this generator's list."""
        return word_count * self.word_list.entropy_per_word
