"""Perpetual futures funding/price divergence radar."""

__version__ = "0.1.0"
