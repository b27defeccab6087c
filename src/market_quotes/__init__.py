"""Normalized Yahoo Finance charts, quotes and profiles."""

__version__ = "0.1.0"
