"""Literate tutorial documentation builder."""

__version__ = "0.1.0"
