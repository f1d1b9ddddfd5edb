import sys
from argparse import ArgumentParser, ArgumentTypeError

import xerox
from tabulate import tabulate

from time import sleep
from .generator import Configuration, PassphraseGenerator, RandomProvider
from .wordlist import WordSource, WordListException

def print_err(*args, **kwargs):
    kwargs.update(file=sys.stderr, flush=True)
    print(*args, **kwargs)

def count(value):
    try:
        n = int(value)
    except ValueError:
        raise ArgumentTypeError("invalid count value: {!r}".format(value))
    if n < 0:
        raise ArgumentTypeError("count must be non-negative, got {!r}".format(value))
    return n

class PassphraseActions:
    CLIP_DELAY = 10

    @staticmethod
    def print(passphrase):
        print(passphrase)

    @staticmethod
    def clip(passphrase):
        print(passphrase)
        delay = PassphraseActions.CLIP_DELAY
        try:
            xerox.copy(passphrase, xsel=True)
        except xerox.ToolNotFound:
            print_err("Could not copy passphrase: no clipboard tool found.")
            return
        try:
            print_err("Passphrase copied to clipboard; clearing in {} seconds.".format(delay))
            sleep(delay)
        finally:
            xerox.copy("", xsel=True)
            print_err("Clipboard cleared.")

def print_config(config):
    rows = [("words", config.words), ("caps", config.caps),
            ("numbers", config.numbers), ("symbols", config.symbols)]
    print_err(tabulate(rows, headers=("Option", "Value"), tablefmt="rst"))

def add_count_arg(parser, short, name, default, help):
    parser.add_argument(short, "--" + name, type=count, default=default,
                        help=help + " (default: %(default)s)")

def make_parser():
    parser = ArgumentParser(prog="xkcdpwgen", add_help=False, allow_abbrev=False,
                            description="Generate a secure, memorable password using the XKCD method.")
    parser.add_argument("-h", "--help", action="store_true",
                        help="show this help message and exit")
    parser.add_argument("-d", "--debug", action="store_true",
                        help="include debug info in the output")
    add_count_arg(parser, "-w", "words", 4, "include WORDS words in the password")
    add_count_arg(parser, "-c", "caps", 0, "capitalize the first letter of CAPS random words")
    add_count_arg(parser, "-n", "numbers", 0, "insert NUMBERS random numbers in the password")
    add_count_arg(parser, "-s", "symbols", 0, "insert SYMBOLS random symbols in the password")
    parser.add_argument("--wordlist", default="words.txt",
                        help="one word per line (default: %(default)s)")
    parser.add_argument("--clip", action="store_true",
                        help="also copy the password to the clipboard, clearing it after {} seconds"
                        .format(PassphraseActions.CLIP_DELAY))
    return parser

def parse_config(parser, argv=None):
    return Configuration.resolve(**vars(parser.parse_args(argv)))

def run(argv=None, rng=None):
    parser = make_parser()
    config = parse_config(parser, argv)
    if config.help:
        parser.print_help()
        return 0

    if config.debug:
        print_config(config)

    rng = rng or RandomProvider()
    try:
        words = WordSource.from_file(config.wordlist, rng)
        passphrase = PassphraseGenerator.passphrase(config, words, rng)
    except WordListException as e:
        print_err("Problem reading {}: {}".format(e.source, e.cause))
        return 1

    action = PassphraseActions.clip if config.clip else PassphraseActions.print
    action(passphrase)
    return 0
