"""Error taxonomy of the game core."""


class RootWordsError(Exception):
    """Base class for all errors raised by the package."""


class WordRejected(RootWordsError):
    """A committed word was refused. Recoverable; no state has changed."""

    def __init__(self, word: str, message: str) -> None:
        super().__init__(message)
        self.word = word


class InvalidWord(WordRejected):
    def __init__(self, word: str, message: str | None = None) -> None:
        super().__init__(word, message or f"'{word}' is not a valid word.")


class DictionaryUnavailable(InvalidWord):
    """The word list is not loaded yet, so every word is treated as unknown."""

    def __init__(self, word: str) -> None:
        super().__init__(word, f"'{word}' cannot be checked yet, the dictionary is still loading.")


class DuplicateWord(WordRejected):
    def __init__(self, word: str) -> None:
        super().__init__(word, f"You've already used the word '{word}'.")


class InvalidParent(RootWordsError):
    """Insertion or selection attempted against a node that is not in the tree."""
