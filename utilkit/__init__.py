"""utilkit: a grab bag of small, independent helpers built around a fuzzy matcher."""

__version__ = "0.1.0"
