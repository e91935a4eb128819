"""Drop chess: pieces push instead of capture, and tiles collapse underfoot."""

__version__ = "0.1.0"
