"""Chat client core: a Discord adaptor, a stored login list and login and chat page state."""

__version__ = "0.1.0"