"""Engine exceptions."""


class GridCorruption(AssertionError):
    """
    Raised when a solved word cannot be located in the active zone.

    The grid always holds exactly the letters of the round's words, so this
    means that invariant was broken somewhere else. Not recoverable.
    """

    def __init__(self, word: str, letters: list, prefix_length: int):
        self.word = word
        self.letters = list(letters)
        self.prefix_length = prefix_length
        super().__init__(
            f"Cannot pin '{word}': letters {''.join(letters[prefix_length:])!r} "
            f"in the active zone do not contain it"
        )
