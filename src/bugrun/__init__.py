"""Bug Run: a small pygame arcade board where the player dodges bugs."""

__version__ = "0.1.0"
