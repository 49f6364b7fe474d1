"""Single-deck patience: a fixed-capacity deck and a command-driven game."""

__version__ = "0.1.0"
