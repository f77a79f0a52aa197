"""coach - terminal front-end for the running coach dashboard."""

__version__ = "0.1.0"
