import random
import string
from typing import *

# Any object with randrange(n) -> [0, n) and randint(a, b) -> [a, b] will do.
RandomProvider = random.SystemRandom

DIGITS = string.digits
SYMBOLS = "~!@#$%^&*.:;"

class Configuration(NamedTuple):
    words: int = 4
    caps: int = 0
    numbers: int = 0
    symbols: int = 0
    help: bool = False
    debug: bool = False
    wordlist: str = "words.txt"
    clip: bool = False

    @classmethod
    def resolve(cls, words=4, caps=0, numbers=0, symbols=0, **kwargs):
        """Build a configuration, clamping CAPS to WORDS."""
        for name, value in (("words", words), ("caps", caps), ("numbers", numbers), ("symbols", symbols)):
            if value < 0:
                raise ValueError("{} must be non-negative, got {}".format(name, value))
        return cls(words, min(caps, words), numbers, symbols, **kwargs)

class PassphraseGenerator:
    @staticmethod
    def capitalize(token):
        return token[:1].upper() + token[1:]

    @staticmethod
    def distinct_positions(count, size, rng):
        """Pick COUNT distinct indices in [0, SIZE).
        Each draw is uniform over the whole range; a position that was
        already picked is drawn again."""
        if count > size:
            raise ValueError("Cannot pick {} distinct positions out of {}".format(count, size))
        picked, seen = [], set()
        while len(picked) < count:
            position = rng.randrange(size)
            if position not in seen:
                seen.add(position)
                picked.append(position)
        return picked

    @staticmethod
    def insert_random(tokens, count, alphabet, rng):
        """Insert COUNT characters from ALPHABET at random places in TOKENS.
        Insertion points range over [0, len(TOKENS)], including the end."""
        for _ in range(count):
            token = alphabet[rng.randrange(len(alphabet))]
            tokens.insert(rng.randint(0, len(tokens)), token)
        return tokens

    @staticmethod
    def assemble(config, words, rng) -> List[str]:
        """Build the token sequence of a passphrase.
        Draws CONFIG.words words from WORDS, capitalizes CONFIG.caps of them,
        then sprinkles CONFIG.numbers digits and CONFIG.symbols symbols."""
        tokens = [words.draw() for _ in range(config.words)]
        for position in PassphraseGenerator.distinct_positions(config.caps, config.words, rng):
            tokens[position] = PassphraseGenerator.capitalize(tokens[position])
        PassphraseGenerator.insert_random(tokens, config.numbers, DIGITS, rng)
        PassphraseGenerator.insert_random(tokens, config.symbols, SYMBOLS, rng)
        return tokens

    @staticmethod
    def passphrase(config, words, rng):
        return "".join(PassphraseGenerator.assemble(config, words, rng))
