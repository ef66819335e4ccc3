class FlashcardsError(Exception):
    """Base class for errors raised by the flashcards app itself."""


class MissingDeckError(FlashcardsError):
    """A deck-bound menu option reached its handler without a deck id."""

    def __init__(self, option):
        super().__init__(f"{option!r} needs a deck id but none was threaded into it")
        self.option = option


class AuthError(FlashcardsError):
    """Registration or login could not be completed."""
