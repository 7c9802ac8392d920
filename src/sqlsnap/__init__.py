"""sqlsnap — stateless query proxy for SQL databases and Redis."""

__version__ = "0.1.0"
