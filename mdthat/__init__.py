"""Percent-encoding, lenient URL parsing, rule ordering, source maps, type keys and text helpers for Markdown tools."""

__version__ = "0.7.1"