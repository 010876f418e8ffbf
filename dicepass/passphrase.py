"""Command-line front end: ``dicepass [LENGTH] [options]``."""
import sys
import json
import logging
import argparse
from typing import List, Optional

from pygments import highlight
from pygments.lexers import JsonLexer
from pygments.formatters import Terminal256Formatter

from .config import LOG_LEVELS, load_config, setup_logging
from .errors import DicepassError
from .factory import create_with_default_word_list, create_with_file_word_list
from .generator import PassphraseGenerator


def generate_passphrases(generator: PassphraseGenerator, length: int, count: int = 5, separator: str = " ") -> List[str]:
    """Generate multiple passphrases."""
    if count < 1:
        raise ValueError(f"Count must be a positive integer, got: {count}")
    return [generator.generate_string(length, separator) for _ in range(count)]


def build_report(generator: PassphraseGenerator, passphrases: List[str], length: int) -> dict:
    return {
        'passphrases': passphrases,
        'word_count': length,
        'word_list_size': generator.word_list.word_count(),
        'entropy_per_word': round(generator.word_list.entropy_per_word, 2),
        'entropy_bits': round(generator.entropy_bits(length), 1),
    }


def print_json(report: dict, color: bool) -> None:
    json_str = json.dumps(report, indent=2)
    if color:
        print(highlight(json_str, JsonLexer(), Terminal256Formatter(style="one-dark")), end='')
    else:
        print(json_str)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate secure Diceware passphrases")
    parser.add_argument("length", type=int, nargs="?",
                        help="Number of words in each passphrase (default from config: 6)")
    parser.add_argument("-c", "--count", type=int,
                        help="Number of passphrases to generate (default from config: 5)")
    parser.add_argument("-s", "--separator", type=str,
                        help="Separator between words (default: space)")
    parser.add_argument("-w", "--wordlist", type=str,
                        help="Path to a Diceware word list file (default: built-in English list)")
    parser.add_argument("--config", help="Path to YAML configuration file")
    parser.add_argument("--log-level", choices=LOG_LEVELS,
                        help="Set the logging level (overrides config file)")
    parser.add_argument("--json", action="store_true",
                        help="Print passphrases and entropy as JSON")
    parser.add_argument("--no-color", action="store_true",
                        help="Never colorize JSON output")
    parser.add_argument("--entropy", action="store_true",
                        help="Print the entropy of each passphrase after the list")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Handle command-line arguments and generate passphrases."""
    args = parse_args(argv)

    try:
        config = load_config(args.config)
    except DicepassError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    settings = config['passphrase']
    setup_logging(args.log_level or config['logging']['level'])

    length = args.length if args.length is not None else settings['word_count']
    count = args.count if args.count is not None else settings['count']
    separator = args.separator if args.separator is not None else settings['separator']
    wordlist = args.wordlist or settings['wordlist']

    try:
        if wordlist:
            logging.info(f"Using word list file: {wordlist}")
            generator = create_with_file_word_list(wordlist)
        else:
            generator = create_with_default_word_list()

        passphrases = generate_passphrases(generator, length, count, separator)
    except (DicepassError, ValueError) as e:
        logging.debug("Passphrase generation failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.json:
        report = build_report(generator, passphrases, length)
        print_json(report, color=sys.stdout.isatty() and not args.no_color)
        return 0

    for passphrase in passphrases:
        print(passphrase)
    if args.entropy:
        print(f"Entropy: {generator.entropy_bits(length):.1f} bits "
              f"({generator.word_list.entropy_per_word:.2f} bits per word)", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
