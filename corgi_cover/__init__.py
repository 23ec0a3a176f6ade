"""Corgi Cover eligibility screening and application partitioning."""

__version__ = "1.0.0"
