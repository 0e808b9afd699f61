"""Storyloom - local deterministic simulation engine for text adventures"""

__version__ = "0.1.0"
