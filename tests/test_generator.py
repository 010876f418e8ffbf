import math
from concurrent.futures import ThreadPoolExecutor, as_completed
from unittest import mock

import pytest

from dicepass import (
    InMemoryWordList,
    InvalidWordCountError,
    KeyNotFoundError,
    PassphraseGenerator,
    RandomnessError,
    SecureDiceRoller,
)
from conftest import ScriptedDiceRoller


@pytest.fixture
def word_list(canonical_words):
    return InMemoryWordList(canonical_words)


@pytest.fixture
def generator(word_list):
    return PassphraseGenerator(word_list, SecureDiceRoller())


def test_roll_dice_format():
    roller = SecureDiceRoller()

    for _ in range(200):
        roll = roller.roll_dice()
        assert len(roll) == 5
        assert set(roll) <= set("123456")


def test_roll_dice_covers_every_face():
    roller = SecureDiceRoller()
    faces = set("".join(roller.roll_dice() for _ in range(200)))

    assert faces == set("123456")


def test_roll_dice_randomness_failure():
    with mock.patch("dicepass.dice.secrets.randbelow", side_effect=OSError("no entropy")):
        with pytest.raises(RandomnessError, match="no entropy") as exc_info:
            SecureDiceRoller().roll_dice()
    assert isinstance(exc_info.value.__cause__, OSError)


@pytest.mark.parametrize("count", [1, 3, 6, 10])
def test_generate_returns_requested_count(generator, count):
    words = generator.generate(count)

    assert len(words) == count
    assert all(word.startswith("word") for word in words)


def test_generate_default_count(generator):
    assert len(generator.generate()) == 6


@pytest.mark.parametrize("count", [0, -5])
def test_generate_rejects_non_positive_count(generator, count):
    with pytest.raises(InvalidWordCountError, match=f"Word count must be at least 1, got: {count}") as exc_info:
        generator.generate(count)
    assert exc_info.value.word_count == count


@pytest.mark.parametrize("count", [1.5, "3", None, True])
def test_generate_rejects_non_integer_count(generator, count):
    with pytest.raises(InvalidWordCountError):
        generator.generate(count)


def test_generate_keeps_draw_order(word_list):
    generator = PassphraseGenerator(word_list, ScriptedDiceRoller(["66666", "11111", "34521", "11111"]))

    assert generator.generate(4) == ["word66666", "word11111", "word34521", "word11111"]


def test_generate_string_joins_with_separator(word_list):
    rolls = ["11111", "11112", "11113"]

    assert PassphraseGenerator(word_list, ScriptedDiceRoller(rolls)).generate_string(3, "-") == \
        "word11111-word11112-word11113"
    assert PassphraseGenerator(word_list, ScriptedDiceRoller(rolls)).generate_string(2, "") == \
        "word11111word11112"
    assert PassphraseGenerator(word_list, ScriptedDiceRoller(rolls)).generate_string(3, " :: ") == \
        "word11111 :: word11112 :: word11113"
    assert PassphraseGenerator(word_list, ScriptedDiceRoller(rolls)).generate_string(3) == \
        "word11111 word11112 word11113"


def test_generate_string_rejects_zero(generator):
    with pytest.raises(InvalidWordCountError, match="got: 0"):
        generator.generate_string(0)


def test_failure_mid_generation_returns_nothing(word_list):
    class FailingRoller:
        def __init__(self):
            self.calls = 0

        def roll_dice(self):
            self.calls += 1
            if self.calls == 3:
                raise RandomnessError("entropy source closed")
            return "12345"

    generator = PassphraseGenerator(word_list, FailingRoller())

    with pytest.raises(RandomnessError):
        generator.generate(5)


def test_unknown_roll_propagates(word_list):
    generator = PassphraseGenerator(word_list, ScriptedDiceRoller(["11111", "70000"]))

    with pytest.raises(KeyNotFoundError, match="70000"):
        generator.generate(2)


def test_single_words_are_well_distributed():
    generator = PassphraseGenerator(InMemoryWordList(), SecureDiceRoller())
    words = [generator.generate(1)[0] for _ in range(1000)]

    # Expected number of distinct words is about 938 for 1000 draws from 7776
    assert len(set(words)) > 850


def test_entropy_bits(generator):
    assert generator.entropy_bits(6) == pytest.approx(6 * math.log2(7776))


def test_shared_generator_across_threads(generator):
    with ThreadPoolExecutor(max_workers=8) as executor:
        futures = [executor.submit(generator.generate, 4) for _ in range(200)]
        results = [future.result() for future in as_completed(futures)]

    assert len(results) == 200
    assert all(len(words) == 4 for words in results)
    assert len({" ".join(words) for words in results}) == 200
