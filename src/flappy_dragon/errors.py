"""
errors.py: Exceptions raised by the game and its console.
"""


class FlappyDragonError(Exception):
    """Base class for every error this package raises."""


class TerminalError(FlappyDragonError):
    """The window, font or display could not be created."""


class SpriteSheetError(TerminalError):
    """A sprite sheet could not be loaded or sliced."""


class UnknownEditionError(FlappyDragonError, ValueError):
    def __init__(self, name):
        super().__init__(f"Unknown edition: {name!r}")
        self.name = name
