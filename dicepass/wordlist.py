"""Word lists mapping five-dice rolls to words.

A word list must cover every roll from ``11111`` to ``66666`` exactly once
(6^5 = 7776 entries). Both implementations validate eagerly in the
constructor and freeze their table, so an instance that exists is complete
and can be shared between threads without locking.

File format, one entry per line::

    # comment (also "//" and ";")
    11111   abacus
    11112   abdomen

Blank lines are ignored and ``\\n``, ``\\r\\n`` and ``\\r`` line endings
are all accepted.
"""
import os
import re
import math
import logging
import itertools
from abc import ABC, abstractmethod
from functools import lru_cache
from importlib import resources
from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Optional, Union

from .dice import DICE_PER_WORD, DIE_SIDES
from .errors import InvalidWordListError, KeyNotFoundError, WordListNotFoundError

logger = logging.getLogger(__name__)

EXPECTED_WORD_COUNT = DIE_SIDES ** DICE_PER_WORD

DICE_ROLL_PATTERN = re.compile(r"[1-6]{5}")
LINE_PATTERN = re.compile(r"([1-6]{5})\s+(.*)", re.ASCII)
CONTROL_CHARACTERS = re.compile(r"[\x00-\x08\x0B\x0C\x0E-\x1F\x7F]")

# Only these are trimmed; any other control character in a word is an error
TRIM_CHARACTERS = " \t\n\r"
COMMENT_PREFIXES = ("#", "//", ";")
BYTE_ORDER_MARKS = (b"\xef\xbb\xbf", b"\xfe\xff", b"\xff\xfe")
MAX_DISPLAY_LENGTH = 100

DEFAULT_WORD_LIST = "default_en.txt"

PathLike = Union[str, "os.PathLike[str]"]


def all_dice_rolls() -> Iterator[str]:
    """Every possible roll in lexicographic order, 11111 through 66666."""
    faces = "".join(str(face) for face in range(1, DIE_SIDES + 1))
    for digits in itertools.product(faces, repeat=DICE_PER_WORD):
        yield "".join(digits)


def is_dice_roll(value) -> bool:
    """True if value is a five-character string of digits 1-6."""
    return isinstance(value, str) and DICE_ROLL_PATTERN.fullmatch(value) is not None


def contains_control_characters(word: str) -> bool:
    """True if word holds an ASCII control character other than tab, LF or CR."""
    return CONTROL_CHARACTERS.search(word) is not None


def sanitize_for_display(text: str) -> str:
    """Make text safe to embed in an error message."""
    sanitized = CONTROL_CHARACTERS.sub("?", text)
    if len(sanitized) > MAX_DISPLAY_LENGTH:
        sanitized = sanitized[:MAX_DISPLAY_LENGTH - 3] + "..."
    return sanitized


def strip_bom(content: bytes) -> bytes:
    """Drop a leading UTF-8, UTF-16BE or UTF-16LE byte-order mark."""
    for bom in BYTE_ORDER_MARKS:
        if content.startswith(bom):
            return content[len(bom):]
    return content


def normalize_line_endings(text: str) -> str:
    """Convert Windows and old Mac line endings to \\n."""
    return text.replace("\r\n", "\n").replace("\r", "\n")


def is_comment(line: str) -> bool:
    """True for a trimmed line starting with #, // or ;."""
    return line.startswith(COMMENT_PREFIXES)


def check_count(words: Mapping[str, str], label: str = "Word list") -> None:
    """Require exactly 7776 entries."""
    count = len(words)
    if count != EXPECTED_WORD_COUNT:
        raise InvalidWordListError(
            f"{label} must contain exactly {EXPECTED_WORD_COUNT} entries, found: {count}",
            count=count,
            expected=EXPECTED_WORD_COUNT,
        )


def check_coverage(words: Mapping[str, str]) -> None:
    """Report the first roll, in lexicographic order, that has no entry."""
    for dice_roll in all_dice_rolls():
        if dice_roll not in words:
            raise InvalidWordListError(
                f"Missing entry for dice roll: {dice_roll}", dice_roll=dice_roll
            )


def parse_line(line: str, line_number: int):
    """Split one significant line into ``(dice_roll, word)``."""
    match = LINE_PATTERN.fullmatch(line.lstrip(TRIM_CHARACTERS))
    if match is None:
        raise InvalidWordListError(
            f"Invalid word list format at line {line_number}: expected 'NNNNN word' "
            f"where N is digit 1-6, got: {sanitize_for_display(line)}",
            line_number=line_number,
        )

    dice_roll = match.group(1)
    word = match.group(2).strip(TRIM_CHARACTERS)
    if not word:
        raise InvalidWordListError(
            f"Empty word at line {line_number} for dice roll: {dice_roll}",
            line_number=line_number,
            dice_roll=dice_roll,
        )
    if contains_control_characters(word):
        raise InvalidWordListError(
            f"Word contains invalid characters at line {line_number} for dice roll "
            f"{dice_roll}: {sanitize_for_display(word)}",
            line_number=line_number,
            dice_roll=dice_roll,
        )
    return dice_roll, word


def parse_word_list(text: str) -> Dict[str, str]:
    """Parse word list text into a dict.

    Only the per-line rules and duplicate detection are applied here;
    callers run :func:`check_count` and :func:`check_coverage` on the result.
    """
    words: Dict[str, str] = {}
    for line_number, line in enumerate(normalize_line_endings(text).split("\n"), start=1):
        trimmed = line.strip(TRIM_CHARACTERS)
        if not trimmed or is_comment(trimmed):
            continue

        dice_roll, word = parse_line(line, line_number)
        if dice_roll in words:
            raise InvalidWordListError(
                f"Duplicate dice roll '{dice_roll}' found at line {line_number}",
                line_number=line_number,
                dice_roll=dice_roll,
            )
        words[dice_roll] = word
    return words


def decode_word_list(content: bytes, source: str) -> str:
    """Strip any byte-order mark and decode the rest as UTF-8."""
    try:
        return strip_bom(content).decode("utf-8")
    except UnicodeDecodeError as e:
        raise InvalidWordListError(f"Word list {source} is not valid UTF-8: {e}") from e


@lru_cache(maxsize=None)
def default_words() -> Mapping[str, str]:
    """The built-in English table, parsed once per process and shared read-only."""
    content = resources.files(__package__).joinpath("data").joinpath(DEFAULT_WORD_LIST).read_bytes()
    words = parse_word_list(decode_word_list(content, DEFAULT_WORD_LIST))
    check_count(words, "Default word list")
    check_coverage(words)
    logger.debug(f"Loaded {len(words)} words from built-in {DEFAULT_WORD_LIST}")
    return MappingProxyType(words)


class WordList(ABC):
    """Read-only mapping from a five-dice roll to a word."""

    @abstractmethod
    def get_word(self, dice_roll: str) -> str:
        """Return the word for ``dice_roll`` or raise :class:`KeyNotFoundError`."""

    @abstractmethod
    def is_valid(self) -> bool:
        """True if the list passed validation when it was built."""

    @abstractmethod
    def word_count(self) -> int:
        """Number of entries, 7776 for any constructed list."""

    @property
    def entropy_per_word(self) -> float:
        return math.log2(self.word_count())

    def __len__(self) -> int:
        return self.word_count()

    def __getitem__(self, dice_roll: str) -> str:
        return self.get_word(dice_roll)

    def __iter__(self) -> Iterator[str]:
        return all_dice_rolls()

    def __contains__(self, dice_roll) -> bool:
        try:
            self.get_word(dice_roll)
        except KeyNotFoundError:
            return False
        return True


class _FrozenWordList(WordList):
    """Shared storage for the table-backed word lists."""

    _valid = False

    def _freeze(self, words: Mapping[str, str]) -> None:
        self._words = MappingProxyType(words) if isinstance(words, dict) else words
        self._valid = True

    def get_word(self, dice_roll: str) -> str:
        if not is_dice_roll(dice_roll) or dice_roll not in self._words:
            raise KeyNotFoundError(f"Word not found for dice roll: {dice_roll}", dice_roll=dice_roll)
        return self._words[dice_roll]

    def is_valid(self) -> bool:
        return self._valid

    def word_count(self) -> int:
        return len(self._words)

    def words(self) -> Mapping[str, str]:
        """The validated table as a read-only mapping."""
        return self._words


class InMemoryWordList(_FrozenWordList):
    """Word list built from a mapping, or the built-in English list when none is given."""

    def __init__(self, words: Optional[Mapping[str, str]] = None):
        if words is None:
            self._freeze(default_words())
            return

        table = dict(words)
        self._validate(table)
        self._freeze(table)
        logger.debug(f"Validated in-memory word list with {len(table)} entries")

    @staticmethod
    def _validate(table: Dict[str, str]) -> None:
        check_count(table, "In-memory word list")

        for dice_roll, word in table.items():
            if not is_dice_roll(dice_roll):
                raise InvalidWordListError(
                    f"Invalid dice roll key in in-memory word list: {dice_roll!s}",
                    dice_roll=str(dice_roll),
                )
            if not isinstance(word, str) or not word.strip(TRIM_CHARACTERS):
                raise InvalidWordListError(
                    f"Invalid word for dice roll {dice_roll}: word must be a non-empty string",
                    dice_roll=dice_roll,
                )
            if contains_control_characters(word):
                raise InvalidWordListError(
                    f"Word for dice roll {dice_roll} contains invalid characters",
                    dice_roll=dice_roll,
                )

        check_coverage(table)


class FileWordList(_FrozenWordList):
    """Word list loaded from a Diceware-format text file."""

    def __init__(self, path: PathLike):
        self.path = self._normalize_path(path)
        words = parse_word_list(decode_word_list(self._read(self.path), str(self.path)))
        check_count(words)
        check_coverage(words)
        self._freeze(words)
        logger.info(f"Loaded {len(words)} words from {self.path}")

    @staticmethod
    def _normalize_path(path: PathLike) -> Path:
        return Path(path).expanduser().resolve()

    @staticmethod
    def _read(path: Path) -> bytes:
        try:
            exists = path.exists()
            is_dir = exists and path.is_dir()
        except OSError as e:
            # stat() fails when a parent directory cannot be searched
            raise WordListNotFoundError(
                f"Word list file is not readable: {path} ({e.strerror or e})", path=str(path)
            ) from e

        if not exists:
            raise WordListNotFoundError(f"Word list file not found: {path}", path=str(path))
        if is_dir:
            raise WordListNotFoundError(
                f"Word list path is a directory, not a file: {path}", path=str(path)
            )
        if not os.access(path, os.R_OK):
            raise WordListNotFoundError(f"Word list file is not readable: {path}", path=str(path))

        try:
            with open(path, "rb") as f:
                return f.read()
        except OSError as e:
            raise WordListNotFoundError(
                f"Failed to read word list file '{path}': {e.strerror or e}", path=str(path)
            ) from e
