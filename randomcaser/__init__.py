"""rAnDoMcAsEr: randomize the letter case of text."""

__version__ = "1.2.0"
