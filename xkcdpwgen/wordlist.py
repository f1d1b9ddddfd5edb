class WordListException(Exception):
    def __init__(self, source, cause):
        super().__init__("{}: {}".format(source, cause))
        self.source = source
        self.cause = cause

class EmptyDictionaryException(WordListException):
    def __init__(self, source):
        super().__init__(source, "word list has no entries")

class SourceUnavailableException(WordListException):
    pass

class WordSource:
    """A read-only dictionary from which words are drawn uniformly, with replacement.

    The word list is read once and held in memory, so each draw indexes it
    directly. This gives every line the same 1/N chance that reservoir
    sampling over the line stream would, without rereading the file.
    """

    def __init__(self, words, rng, source="<memory>"):
        self.words = tuple(words)
        self.rng = rng
        self.source = source
        if not self.words:
            raise EmptyDictionaryException(source)

    def __len__(self):
        return len(self.words)

    def draw(self):
        return self.words[self.rng.randrange(len(self.words))]

    @staticmethod
    def read_lines(f):
        return [word for word in (line.strip() for line in f) if word]

    @classmethod
    def from_file(cls, path, rng):
        try:
            with open(path, encoding="utf-8") as f:
                words = cls.read_lines(f)
        except (OSError, UnicodeDecodeError) as e:
            raise SourceUnavailableException(path, e) from e
        return cls(words, rng, source=path)
