"""pocketsh: a small interactive command shell."""

__version__ = "0.1.0"
