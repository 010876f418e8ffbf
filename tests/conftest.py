import itertools

import pytest

DICE_ROLLS = ["".join(d) for d in itertools.product("123456", repeat=5)]


def canonical_lines():
    return [f"{roll} word{roll}" for roll in DICE_ROLLS]


def canonical_content(newline="\n"):
    return newline.join(canonical_lines()) + newline


class ScriptedDiceRoller:
    """Returns a fixed sequence of rolls, for deterministic generator tests."""

    def __init__(self, rolls):
        self._rolls = iter(rolls)

    def roll_dice(self):
        return next(self._rolls)


@pytest.fixture
def canonical_words():
    return {roll: f"word{roll}" for roll in DICE_ROLLS}


@pytest.fixture
def write_word_list(tmp_path):
    """Write word list content to a file and return its path."""

    def _write(content, name="wordlist.txt"):
        path = tmp_path / name
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_bytes(content.encode("utf-8"))
        return path

    return _write
