"""predoracle - Reality.eth answer codec and market lifecycle engine."""

__version__ = "0.1.0"
