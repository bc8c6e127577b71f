"""bookstore: command-driven in-memory bookstore simulator."""

__version__ = "0.1.0"
