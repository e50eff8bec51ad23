"""Todo list manager with a cache-aside task repository."""

__version__ = "0.1.0"
