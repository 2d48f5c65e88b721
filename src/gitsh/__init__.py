"""gitsh - an interactive shell for git."""

__version__ = '0.1.0'
