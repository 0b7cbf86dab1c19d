"""Terminal stat panel for the active player, read from a game's local live client data API."""

__version__ = "0.1.0"
__all__ = ["__version__"]