"""A side-scrolling runner game: collect coins and reach the store in time."""

__version__ = "0.1.0"