"""Segmented double-ended queue with array and linked-list sequences and a command interpreter."""

__version__ = "0.1.0"