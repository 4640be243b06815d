"""Ralph - run verification checks in a loop until they all pass."""

__version__ = "0.1.0"
