"""HowTo - videos, articles and AI guides for how-to questions."""

__version__ = "0.1.0"
