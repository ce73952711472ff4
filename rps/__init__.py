"""Terminal Rock-Paper-Scissors against a random opponent."""

__version__ = "0.1.0"
