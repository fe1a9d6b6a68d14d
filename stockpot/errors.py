"""Exceptions raised by stockpot."""

from __future__ import annotations


class InvalidArgument(ValueError):
    """Input rejected while building a product or parsing a selector."""
